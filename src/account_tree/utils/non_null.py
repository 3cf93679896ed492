"""Helpers that turn unexpected ``None`` values into domain errors."""

from typing import Any, TypeVar

from ..core.exceptions import MissingPropertyError

T = TypeVar("T")


def non_null_prop(source: Any, name: str) -> Any:
    """Return ``source.<name>``, raising when it is missing or ``None``."""
    value = getattr(source, name, None)
    if value is None:
        raise MissingPropertyError(name)
    return value


def non_null_value(value: T | None, name: str) -> T:
    """Return ``value`` unchanged, raising when it is ``None``."""
    if value is None:
        raise MissingPropertyError(name)
    return value
