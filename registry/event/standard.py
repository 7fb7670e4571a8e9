"""
Registry Events - Standard Event
==================================
Concrete event implementation and its builder.

Lifecycle:
    1. Create a StandardEvent.Builder (one per recorded action)
    2. Set the event type and add fields (last write wins per name)
    3. build() -> immutable StandardEvent snapshot (not validated)
    4. validate() -> raises InvalidEventError if a required field is missing

The builder is a single-writer accumulator and is not thread-safe.
Built events are frozen and safe to share.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable, Optional

from registry.hook.errors import EventConstructionError, InvalidEventError
from registry.hook.event_field import (
    FIELD_ORDER,
    EventField,
    EventFieldName,
    coerce_field_name,
)
from registry.hook.event_type import EventType, coerce_event_type
from registry.timestamps import now_utc


@dataclass(frozen=True)
class StandardEvent:
    """
    Immutable record of a single registry action.

    Equality covers event_type and fields only: two events recording
    the same action with the same fields are equal whenever they were built.
    """

    event_type: Optional[EventType]
    fields: frozenset[EventField] = frozenset()
    timestamp: datetime = field(default_factory=now_utc, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "event_type", coerce_event_type(self.event_type))
        if not isinstance(self.timestamp, datetime) or self.timestamp.tzinfo is None:
            raise EventConstructionError(
                f"Event timestamp must be a timezone-aware datetime, got {self.timestamp!r}."
            )

        fields = frozenset(self.fields)
        for item in fields:
            if not isinstance(item, EventField):
                raise EventConstructionError(
                    f"Event fields must be EventField instances, got {item!r}."
                )
        names = [item.name for item in fields]
        if len(names) != len(set(names)):
            duplicated = sorted(
                {n.value for n in names if names.count(n) > 1}
            )
            raise EventConstructionError(
                f"Event fields must be unique by name, duplicated: "
                f"{', '.join(duplicated)}."
            )
        object.__setattr__(self, "fields", fields)

    def get_field(self, name: EventFieldName) -> Optional[EventField]:
        """Return the field with the given name, or None when absent."""
        name = coerce_field_name(name)
        for item in self.fields:
            if item.name is name:
                return item
        return None

    def ordered_fields(self) -> tuple[EventField, ...]:
        """Fields in vocabulary declaration order."""
        return tuple(sorted(self.fields, key=lambda f: FIELD_ORDER[f.name]))

    def validate(self) -> None:
        """
        Check the event carries every field its type requires.

        Raises:
            InvalidEventError: no event type, or a required field is absent.
                missing_fields lists every absent name in declaration order.
        """
        if self.event_type is None:
            raise InvalidEventError(None)

        missing = [
            name for name in self.event_type.required_fields
            if self.get_field(name) is None
        ]
        if missing:
            raise InvalidEventError(self.event_type, missing)

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the stable enum codes."""
        return {
            "event_type": self.event_type.value if self.event_type else None,
            "fields": {f.name.value: f.value for f in self.ordered_fields()},
            "timestamp": self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        event_type = self.event_type.value if self.event_type else None
        fields = ", ".join(str(f) for f in self.ordered_fields())
        return f"Event Type: {event_type}, Fields: [{fields}]"

    class Builder:
        """
        Mutable accumulator for a StandardEvent.

        Usage:
            event = (
                StandardEvent.Builder()
                .event_type(EventType.CREATE_BUCKET)
                .field(EventFieldName.BUCKET_ID, bucket.identifier)
                .field(EventFieldName.USER, "alice")
                .build()
            )
            event.validate()
        """

        def __init__(self) -> None:
            self._event_type: Optional[EventType] = None
            self._fields: dict[EventFieldName, EventField] = {}

        def event_type(self, event_type: EventType | str | None) -> StandardEvent.Builder:
            self._event_type = coerce_event_type(event_type)
            return self

        def field(self, name: EventFieldName | str, value: str) -> StandardEvent.Builder:
            return self.event_field(EventField(name, value))

        def event_field(self, event_field: EventField) -> StandardEvent.Builder:
            if not isinstance(event_field, EventField):
                raise EventConstructionError(
                    f"Expected an EventField, got {event_field!r}."
                )
            self._fields[event_field.name] = event_field
            return self

        def fields(self, event_fields: Iterable[EventField]) -> StandardEvent.Builder:
            for event_field in event_fields:
                self.event_field(event_field)
            return self

        def build(self) -> StandardEvent:
            return StandardEvent(
                event_type=self._event_type,
                fields=frozenset(self._fields.values()),
            )
