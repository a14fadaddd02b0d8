"""
Structural interface checks.

Protocols only describe a contract; this module verifies that a concrete
object actually exposes every method of it before the object gets wrapped.
"""

import inspect
from typing import Any, List

from attribute_controller.core.exceptions import TypeMismatchError


def interface_methods(interface: type) -> List[str]:
    """
    Collect the public method names declared by an interface.

    Args:
        interface: Protocol class, including its protocol base classes

    Returns:
        Sorted list of method names
    """
    names = set()
    for klass in interface.__mro__:
        if klass is object or klass.__module__ == "typing":
            continue
        for name, member in vars(klass).items():
            if callable(member) and not name.startswith("_"):
                names.add(name)
    return sorted(names)


def check_class(interface: type, obj: Any) -> Any:
    """
    Ensure an object implements all methods of the given interface.

    Methods are looked up statically, so objects answering every attribute
    through __getattr__ do not pass by accident.

    Args:
        interface: Protocol class the object must satisfy
        obj: Object instance to check

    Returns:
        The checked object, unchanged

    Raises:
        TypeMismatchError: If obj is None, a class, or lacks any method
    """
    if obj is None or isinstance(obj, type):
        raise TypeMismatchError(
            f"Expected an instance implementing {interface.__name__}, got {obj!r}"
        )

    missing = [
        name for name in interface_methods(interface)
        if not callable(inspect.getattr_static(obj, name, None))
    ]
    if missing:
        raise TypeMismatchError(
            f"Class {type(obj).__name__} does not implement {interface.__name__} "
            f"(missing: {', '.join(missing)})"
        )
    return obj
