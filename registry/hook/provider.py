"""
Registry Hooks - Event Hook Provider
======================================
Base class for every sink that receives validated registry events.

Providers are called from the event service worker thread, one event
at a time. A provider that raises is logged and skipped for that event;
the remaining providers still receive it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from registry.hook.errors import EventConstructionError
from registry.hook.event import Event
from registry.hook.event_type import EventType, coerce_event_type


class EventHookProvider(ABC):
    """
    Receives registry events after they have been validated.

    An empty whitelist means every event type is handled.
    """

    def __init__(
        self,
        whitelisted_event_types: Optional[Iterable[EventType | str]] = None,
    ) -> None:
        whitelist = {coerce_event_type(t) for t in (whitelisted_event_types or ())}
        if None in whitelist:
            raise EventConstructionError("Whitelisted event types cannot be None.")
        self._whitelist: frozenset[EventType] = frozenset(whitelist)

    @property
    def whitelisted_event_types(self) -> frozenset[EventType]:
        return self._whitelist

    def should_handle(self, event_type: EventType) -> bool:
        """True when this provider wants events of the given type."""
        return not self._whitelist or event_type in self._whitelist

    @abstractmethod
    def handle(self, event: Event) -> None:
        """Process one validated event."""
        ...

    def close(self) -> None:
        """Release resources held by the provider."""
        return None

    def __repr__(self) -> str:
        if not self._whitelist:
            return f"{type(self).__name__}()"
        types = ", ".join(sorted(t.value for t in self._whitelist))
        return f"{type(self).__name__}(whitelist=[{types}])"
