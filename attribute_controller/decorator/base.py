"""
Base class for attribute controller decorators.

Forwards every attribute controller operation to the wrapped controller so
concrete decorators only override the methods they add behavior to.
"""

import copy
import functools
import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from attribute_controller.core.interfaces import IAttributeController
from attribute_controller.core.models import DEFAULT_DOMAINS, SearchResult
from attribute_controller.core.type_check import check_class

logger = logging.getLogger(__name__)


class BaseAttributeDecorator:
    """
    Pass-through decorator for attribute controllers.

    Implements IControllerDecorator. Filter methods return the decorator
    itself, so chained calls stay on the outermost layer of the stack.

    Every other public attribute resolves to a forwarding callable, so
    getattr() and hasattr() succeed for any public name. Contract checks
    must inspect attributes statically, as check_class() does.
    """

    def __init__(self, controller: IAttributeController, context: Optional[Any] = None):
        """
        Initialize the controller decorator.

        Args:
            controller: Attribute controller or another decorator to wrap
            context: Request context shared by all layers of the stack

        Raises:
            TypeMismatchError: If controller does not implement IAttributeController
        """
        self._controller = check_class(IAttributeController, controller)
        self._context = context

    def __getattr__(self, name: str) -> Any:
        # Only invoked for names not found on the decorator itself
        if name.startswith("_"):
            raise AttributeError(name)
        return functools.partial(self.call, name)

    def __copy__(self) -> "BaseAttributeDecorator":
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone._controller = copy.deepcopy(self._controller, {id(self._context): self._context})
        return clone

    def __deepcopy__(self, memo: Dict[int, Any]) -> "BaseAttributeDecorator":
        memo.setdefault(id(self._context), self._context)
        clone = self.__class__.__new__(self.__class__)
        memo[id(self)] = clone
        for key, value in self.__dict__.items():
            clone.__dict__[key] = copy.deepcopy(value, memo)
        return clone

    def clone(self) -> "BaseAttributeDecorator":
        """Return a copy owning an independent duplicate of the wrapped controller."""
        return copy.copy(self)

    @property
    def controller(self) -> IAttributeController:
        """Wrapped attribute controller."""
        return self._controller

    @property
    def context(self) -> Optional[Any]:
        """Request context passed at construction."""
        return self._context

    def call(self, name: str, /, *args: Any, **kwargs: Any) -> Any:
        """
        Pass a method unknown to the decorator to the wrapped controller.

        Args:
            name: Method name
            *args: Positional arguments for the method
            **kwargs: Keyword arguments for the method

        Returns:
            Result of the wrapped method, None if the wrapped controller has no such method
        """
        method = getattr(self._controller, name, None)
        if not callable(method):
            logger.debug(
                "Method %s not available in %s", name, type(self._controller).__name__
            )
            return None
        return method(*args, **kwargs)

    def attribute(self, attr_ids: Union[str, List[str]]) -> "BaseAttributeDecorator":
        """
        Add attribute IDs for filtering.

        Args:
            attr_ids: Attribute ID or list of IDs

        Returns:
            Decorator for fluent interface
        """
        self._controller.attribute(attr_ids)
        return self

    def compare(
        self, operator: str, key: str, value: Union[Any, List[Any]]
    ) -> "BaseAttributeDecorator":
        """
        Add a generic condition for filtering attributes.

        Args:
            operator: Comparison operator, e.g. "==", "!=", "<", "<=", ">=", ">", "=~", "~="
            key: Search key, e.g. "attribute.status"
            value: Value or list of values to compare to

        Returns:
            Decorator for fluent interface
        """
        self._controller.compare(operator, key, value)
        return self

    def domain(self, domain: str) -> "BaseAttributeDecorator":
        """Add the domain of the attributes for filtering."""
        self._controller.domain(domain)
        return self

    def get(self, id: str, domains: Sequence[str] = DEFAULT_DOMAINS) -> Any:
        """
        Return the attribute for the given ID.

        Args:
            id: Unique attribute ID
            domains: Domains of associated items that should be fetched too

        Returns:
            Attribute item including the associated items
        """
        return self._controller.get(id, domains)

    def find(
        self, code: str, domains: Sequence[str] = DEFAULT_DOMAINS, type: str = "product"
    ) -> Any:
        """
        Return the attribute for the given code and type.

        Args:
            code: Unique attribute code within its type
            domains: Domains of associated items that should be fetched too
            type: Type assigned to the attribute

        Returns:
            Attribute item including the associated items
        """
        return self._controller.find(code, domains, type)

    def parse(self, conditions: Dict[str, Any]) -> "BaseAttributeDecorator":
        """Parse a condition tree and add it to the list of conditions."""
        self._controller.parse(conditions)
        return self

    def search(self, domains: Sequence[str] = DEFAULT_DOMAINS) -> SearchResult:
        """
        Return the attributes matching the accumulated conditions.

        Args:
            domains: Domains of associated items that should be fetched too

        Returns:
            Ordered attribute items and the total number of matches
        """
        return self._controller.search(domains)

    def slice(self, start: int, limit: int) -> "BaseAttributeDecorator":
        """Set the offset of the first returned attribute and the number of attributes."""
        self._controller.slice(start, limit)
        return self

    def sort(self, key: Optional[str] = None) -> "BaseAttributeDecorator":
        """Set the sorting of the result list, None for no sorting."""
        self._controller.sort(key)
        return self

    def type(self, codes: Union[str, List[str]]) -> "BaseAttributeDecorator":
        """Add attribute types for filtering."""
        self._controller.type(codes)
        return self
