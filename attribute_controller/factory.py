"""
Decorator factory - builds decorator stacks around attribute controllers.

Reads configuration from environment variables by default:
- ATTRIBUTE_DECORATORS_DEFAULT: Decorators applied to every controller
- ATTRIBUTE_DECORATORS_EXCLUDES: Default decorators to skip
- ATTRIBUTE_DECORATORS_GLOBAL: Additional decorators for attribute controllers
- ATTRIBUTE_DECORATORS_LOCAL: Decorators applied last (outermost)
"""

import logging
import os
from typing import Any, Dict, List, Optional

from dotenv import find_dotenv, load_dotenv

from attribute_controller.core.exceptions import ControllerError, TypeMismatchError
from attribute_controller.core.interfaces import IAttributeController, IControllerDecorator
from attribute_controller.core.models import DecoratorConfig
from attribute_controller.core.type_check import check_class
from attribute_controller.decorator.base import BaseAttributeDecorator

logger = logging.getLogger(__name__)

ENV_PREFIX = "ATTRIBUTE_DECORATORS_"


class ControllerFactory:
    """
    Wraps attribute controllers with the configured decorators.

    Decorator classes are registered by name; the configuration only refers
    to these names. Decorators listed first end up innermost.
    """

    def __init__(
        self,
        decorators: Optional[Dict[str, type]] = None,
        config: Optional[DecoratorConfig] = None,
    ):
        """
        Initialize decorator factory.

        Args:
            decorators: Decorator classes by name
            config: Names of the decorators to apply

        Raises:
            TypeMismatchError: If a decorator class is no BaseAttributeDecorator
        """
        self.config = config or DecoratorConfig()
        self._decorators: Dict[str, type] = {}

        for name, decorator_class in (decorators or {}).items():
            self.register(name, decorator_class)

    @classmethod
    def from_env(cls, decorators: Optional[Dict[str, type]] = None) -> "ControllerFactory":
        """
        Create factory configured from environment variables and a .env file.

        Args:
            decorators: Decorator classes by name

        Returns:
            Configured ControllerFactory
        """
        load_dotenv(find_dotenv(usecwd=True))

        config = DecoratorConfig(
            default=os.getenv(f"{ENV_PREFIX}DEFAULT"),
            excludes=os.getenv(f"{ENV_PREFIX}EXCLUDES"),
            global_=os.getenv(f"{ENV_PREFIX}GLOBAL"),
            local=os.getenv(f"{ENV_PREFIX}LOCAL"),
        )
        return cls(decorators=decorators, config=config)

    def register(self, name: str, decorator_class: type) -> None:
        """
        Register a decorator class under a name.

        Args:
            name: Alphanumeric name used in the configuration
            decorator_class: Subclass of BaseAttributeDecorator

        Raises:
            ValueError: If the name is not alphanumeric
            TypeMismatchError: If the class is no BaseAttributeDecorator
        """
        if not isinstance(name, str) or not name.isalnum():
            raise ValueError(f"Invalid decorator name: {name!r}")

        if not isinstance(decorator_class, type) or not issubclass(
            decorator_class, BaseAttributeDecorator
        ):
            raise TypeMismatchError(
                f"Decorator {name!r} must be a subclass of {BaseAttributeDecorator.__name__}"
            )

        self._decorators[name] = decorator_class

    @property
    def decorators(self) -> Dict[str, type]:
        """Registered decorator classes by name."""
        return dict(self._decorators)

    def create(
        self,
        controller: IAttributeController,
        context: Optional[Any] = None,
        local: Optional[List[str]] = None,
    ) -> IAttributeController:
        """
        Wrap a controller with all configured decorators.

        Args:
            controller: Freshly created attribute controller
            context: Request context handed to every decorator
            local: Additional decorator names applied outermost

        Returns:
            Outermost decorator, or the controller itself if none are configured

        Raises:
            TypeMismatchError: If controller or a decorator breaks the contract
            ControllerError: If a decorator name is not registered
            ValueError: If a local decorator name is not alphanumeric
        """
        controller = check_class(IAttributeController, controller)

        for name in self.config.decorator_names(local):
            controller = self._add_decorator(controller, name, context)

        return controller

    def _add_decorator(
        self, controller: IAttributeController, name: str, context: Optional[Any]
    ) -> IAttributeController:
        """Wrap controller with the decorator registered under name."""
        if not isinstance(name, str) or not name.isalnum():
            raise ValueError(f"Invalid decorator name: {name!r}")

        decorator_class = self._decorators.get(name)
        if decorator_class is None:
            raise ControllerError(f"Decorator {name!r} is not available")

        decorator = check_class(IControllerDecorator, decorator_class(controller, context))
        logger.debug("Added decorator %s (%s)", name, decorator_class.__name__)
        return decorator
