from __future__ import annotations

import inspect
import types
from typing import Any, TypeGuard


def is_runtime_class(candidate: object) -> TypeGuard[type[Any]]:
    """Return true when candidate is a runtime class safe for class-only operations.

    Args:
        candidate: Value being checked for eligibility or runtime type constraints.

    """
    return isinstance(candidate, type) and not isinstance(candidate, types.GenericAlias)


def is_protocol(candidate: type[Any]) -> bool:
    return bool(candidate.__dict__.get("_is_protocol", False))


def is_concrete_class(candidate: type[Any]) -> bool:
    """Return true when candidate can be instantiated (not abstract, not a protocol)."""
    return not inspect.isabstract(candidate) and not is_protocol(candidate)


def is_assignable(value: object, declared_type: Any) -> bool:
    """Return true when ``value`` can be stored under ``declared_type``.

    Non-runtime-checkable protocols cannot be used with ``isinstance``; for them
    only nominal subclassing (the protocol appears in the value's MRO) counts.
    """
    if declared_type is Any or declared_type is object:
        return True
    if not is_runtime_class(declared_type):
        return False
    try:
        return isinstance(value, declared_type)
    except TypeError:
        return declared_type in type(value).__mro__


__all__ = ["is_assignable", "is_concrete_class", "is_protocol", "is_runtime_class"]
