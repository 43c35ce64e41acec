"""Compose query-string parameters from typed request objects."""

from dataclasses import asdict, dataclass, field, fields, is_dataclass
from datetime import date, datetime, timezone
from enum import Enum


def param(key: str | None = None, *, default=None):
    """Declare a request field, optionally sent under a different query key."""
    return field(default=default, metadata={"key": key})


def format_value(value) -> str:
    """Render one field value using the fixed wire vocabulary."""
    if isinstance(value, Enum):
        if not isinstance(value.value, str):
            raise TypeError(f"{type(value).__name__}.{value.name} has no wire value")
        return value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.strftime("%Y-%m-%dT%H:%M:%SZ")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (int, str)):
        return str(value)
    if isinstance(value, (list, tuple)):
        return ",".join(format_value(item) for item in value)
    raise TypeError(f"Cannot render {type(value).__name__} as a query parameter")


@dataclass
class RequestParameters:
    """Base for filter/sort request objects sent as query parameters.

    Fields left at None (or set to an empty collection) are omitted.
    """

    def to_parameters(self) -> dict[str, str]:
        parameters = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None or (isinstance(value, (list, tuple)) and not value):
                continue
            parameters[f.metadata.get("key") or f.name] = format_value(value)
        return parameters


@dataclass
class BodyModel:
    """Base for request bodies; None members are dropped when serialised."""

    def to_payload(self) -> dict:
        return to_payload(self)


def to_payload(value):
    """Convert a request body into JSON-ready data."""
    if is_dataclass(value) and not isinstance(value, type):
        value = asdict(value)
    if isinstance(value, dict):
        return {key: to_payload(item) for key, item in value.items() if item is not None}
    if isinstance(value, (list, tuple)):
        return [to_payload(item) for item in value]
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return format_value(value)
    return value
