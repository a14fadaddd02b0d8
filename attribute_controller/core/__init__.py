"""Core interfaces, models and exceptions for attribute controllers."""

from attribute_controller.core.exceptions import (
    ControllerError,
    TypeMismatchError,
    NotFoundError,
    InvalidQueryError,
)
from attribute_controller.core.interfaces import (
    IAttributeController,
    IControllerDecorator,
)
from attribute_controller.core.models import (
    DEFAULT_DOMAINS,
    AttributeItem,
    SearchResult,
    DecoratorConfig,
)
from attribute_controller.core.type_check import check_class, interface_methods

__all__ = [
    "ControllerError",
    "TypeMismatchError",
    "NotFoundError",
    "InvalidQueryError",
    "IAttributeController",
    "IControllerDecorator",
    "DEFAULT_DOMAINS",
    "AttributeItem",
    "SearchResult",
    "DecoratorConfig",
    "check_class",
    "interface_methods",
]
