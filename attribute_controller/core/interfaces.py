"""
Abstract interfaces for attribute controllers.

These protocols define the contract that every attribute controller and
every controller decorator must implement. Decorators consume the same
contract they expose, so any number of them can be stacked.
"""

from typing import Any, Dict, List, Optional, Protocol, Sequence, Union, runtime_checkable

from attribute_controller.core.models import DEFAULT_DOMAINS, SearchResult


@runtime_checkable
class IAttributeController(Protocol):
    """
    Fluent query builder for product attributes.

    Filter methods accumulate state and return the controller itself.
    get(), find() and search() execute against the underlying storage.
    """

    def attribute(self, attr_ids: Union[str, List[str]]) -> "IAttributeController":
        """
        Add attribute IDs for filtering.

        Args:
            attr_ids: Attribute ID or list of IDs
        """
        ...

    def compare(
        self, operator: str, key: str, value: Union[Any, List[Any]]
    ) -> "IAttributeController":
        """
        Add a generic condition for filtering attributes.

        Args:
            operator: Comparison operator, e.g. "==", "!=", "<", "<=", ">=", ">", "=~", "~="
            key: Search key, e.g. "attribute.status"
            value: Value or list of values to compare to
        """
        ...

    def domain(self, domain: str) -> "IAttributeController":
        """
        Add the domain of the attributes for filtering.

        Args:
            domain: Domain of the attributes, e.g. "product"
        """
        ...

    def get(self, id: str, domains: Sequence[str] = DEFAULT_DOMAINS) -> Any:
        """
        Return the attribute for the given ID.

        Args:
            id: Unique attribute ID
            domains: Domains of associated items that should be fetched too

        Raises:
            NotFoundError: If no attribute has this ID
        """
        ...

    def find(
        self, code: str, domains: Sequence[str] = DEFAULT_DOMAINS, type: str = "product"
    ) -> Any:
        """
        Return the attribute for the given code and type.

        Args:
            code: Unique attribute code within its type
            domains: Domains of associated items that should be fetched too
            type: Type assigned to the attribute

        Raises:
            NotFoundError: If no attribute matches
        """
        ...

    def parse(self, conditions: Dict[str, Any]) -> "IAttributeController":
        """
        Parse a condition tree and add it to the list of conditions.

        Args:
            conditions: Condition tree, e.g.
                {"&&": [{">": {"attribute.status": 0}}, {"==": {"attribute.type": "color"}}]}

        Raises:
            InvalidQueryError: If the tree is malformed
        """
        ...

    def search(self, domains: Sequence[str] = DEFAULT_DOMAINS) -> SearchResult:
        """
        Return the attributes matching the accumulated conditions.

        Args:
            domains: Domains of associated items that should be fetched too

        Returns:
            Ordered attribute items and the total number of matches
        """
        ...

    def slice(self, start: int, limit: int) -> "IAttributeController":
        """
        Set the offset of the first returned attribute and the number of attributes.

        Args:
            start: Offset of the first attribute in the list
            limit: Number of returned attributes
        """
        ...

    def sort(self, key: Optional[str] = None) -> "IAttributeController":
        """
        Set the sorting of the result list.

        Args:
            key: Sort key like "position", None for no sorting
        """
        ...

    def type(self, codes: Union[str, List[str]]) -> "IAttributeController":
        """
        Add attribute types for filtering.

        Args:
            codes: Attribute type code or list of codes
        """
        ...


@runtime_checkable
class IControllerDecorator(IAttributeController, Protocol):
    """
    Attribute controller wrapping another attribute controller.

    Adds the explicit escape hatch for operations outside the declared contract.
    """

    def call(self, name: str, /, *args: Any, **kwargs: Any) -> Any:
        """
        Forward an arbitrary method call to the wrapped controller.

        Args:
            name: Method name
            *args: Positional arguments for the method
            **kwargs: Keyword arguments for the method

        Returns:
            Result of the wrapped method, None if it does not exist
        """
        ...
