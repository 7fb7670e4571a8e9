"""
Registry Hooks - Event Fields
===============================
The vocabulary of field keys an event may carry, and the
immutable (name, value) pair attached to an event.

Codes are append-only: a member's value is its persisted name
and must never be renamed or reused.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from registry.hook.errors import EventConstructionError


class EventFieldName(Enum):
    """Semantic meaning of a field attached to an event."""
    BUCKET_ID = "BUCKET_ID"
    FLOW_ID = "FLOW_ID"
    EXTENSION_BUNDLE_ID = "EXTENSION_BUNDLE_ID"
    VERSION = "VERSION"
    USER = "USER"
    COMMENT = "COMMENT"
    USER_ID = "USER_ID"
    USER_IDENTITY = "USER_IDENTITY"
    USER_GROUP_ID = "USER_GROUP_ID"
    USER_GROUP_IDENTITY = "USER_GROUP_IDENTITY"


# Declaration order, used wherever fields are rendered in sequence.
FIELD_ORDER: dict[EventFieldName, int] = {
    name: index for index, name in enumerate(EventFieldName)
}


def coerce_field_name(name: Any) -> EventFieldName:
    """
    Accept an EventFieldName or its string code.
    Anything else is a construction error.
    """
    if isinstance(name, EventFieldName):
        return name
    if isinstance(name, str):
        try:
            return EventFieldName(name)
        except ValueError:
            raise EventConstructionError(
                f"Unknown event field name '{name}'."
            ) from None
    raise EventConstructionError(
        f"Event field name must be an EventFieldName, got {name!r}."
    )


@dataclass(frozen=True)
class EventField:
    """
    One metadata pair attached to an event.

    The value is opaque: it is never parsed or format-checked here.
    """

    name: EventFieldName
    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", coerce_field_name(self.name))
        if not isinstance(self.value, str):
            raise EventConstructionError(
                f"Value of field '{self.name.value}' must be a string, "
                f"got {self.value!r}."
            )

    def __str__(self) -> str:
        return f"{self.name.value}={self.value}"
