"""
Registry Hooks - Event Protocol
=================================
The contract every event handed to a hook provider satisfies.
Providers depend on this protocol, not on a concrete event class.

Rules:
- Events are read-only once built
- get_field() returns None for an absent field, never raises
- validate() raises InvalidEventError, it never returns a verdict
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol

from registry.hook.event_field import EventField, EventFieldName
from registry.hook.event_type import EventType


class Event(Protocol):
    """
    Structural protocol for a recorded registry action.
    No inheritance required.
    """

    @property
    def event_type(self) -> Optional[EventType]:
        """Kind of action recorded, or None if never set."""
        ...

    @property
    def fields(self) -> frozenset[EventField]:
        """All fields carried by the event, unique by name."""
        ...

    @property
    def timestamp(self) -> datetime:
        """UTC time the event was built."""
        ...

    def get_field(self, name: EventFieldName) -> Optional[EventField]:
        """Return the field with the given name, or None."""
        ...

    def validate(self) -> None:
        """Raise InvalidEventError unless every required field is present."""
        ...
