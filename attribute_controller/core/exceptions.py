"""
Exceptions raised by attribute controllers and their decorators.
"""


class ControllerError(Exception):
    """Base class for all attribute controller errors."""


class TypeMismatchError(ControllerError, TypeError):
    """An object does not satisfy the interface it is supposed to implement."""


class NotFoundError(ControllerError, LookupError):
    """No attribute matches the requested ID or code."""


class InvalidQueryError(ControllerError, ValueError):
    """A condition or condition tree cannot be parsed."""
