"""Precondition checks run by every client method before building a path.

Each guard either returns silently or raises an ``ArgumentError`` subclass
naming the offending parameter. Call them in the operation's parameter order.
"""

from collections.abc import Iterable, Sized

from .errors import (
    EmptyArgumentError,
    EmptyOrWhitespaceArgumentError,
    InvalidIdentifierError,
    NullArgumentError,
)


def not_none(value, name: str) -> None:
    if value is None:
        raise NullArgumentError(name)


def not_none_or_empty_string(value: str | None, name: str) -> None:
    not_none(value, name)
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, not {type(value).__name__}")
    if not value.strip():
        raise EmptyOrWhitespaceArgumentError(name)


def greater_than_zero(value: int | None, name: str) -> None:
    not_none(value, name)
    if value <= 0:
        raise InvalidIdentifierError(name)


def not_none_or_empty_collection(
    value: Iterable | None,
    name: str,
    required: tuple[str, ...] | None = None,
) -> None:
    """Reject a missing or empty collection.

    With ``required``, every element must also have at least one of the named
    attributes (or keys, for dicts) set to something other than None.
    """
    not_none(value, name)
    items = list(value) if not isinstance(value, Sized) else value
    if len(items) == 0:
        raise EmptyArgumentError(name)
    if not required:
        return
    for item in items:
        if all(_member(item, attr) is None for attr in required):
            raise EmptyArgumentError(name, f"Each item needs one of: {', '.join(required)}")


def _member(item, attr: str):
    if isinstance(item, dict):
        return item.get(attr)
    return getattr(item, attr, None)
