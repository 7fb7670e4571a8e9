"""
Registry Hooks - Logging Provider
===================================
Writes one line per event to the `registry.hook.events` logger.
Route that logger to its own handler in LOGGING to keep a
dedicated event log.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from registry.hook.event import Event
from registry.hook.event_field import FIELD_ORDER
from registry.hook.event_type import EventType
from registry.hook.provider import EventHookProvider

EVENT_LOGGER_NAME = "registry.hook.events"


class LoggingEventHookProvider(EventHookProvider):
    """
    Logs events as:
        Event Type: CREATE_BUCKET, Fields: [BUCKET_ID=b1, USER=alice]
    """

    def __init__(
        self,
        whitelisted_event_types: Optional[Iterable[EventType | str]] = None,
        logger_name: str = EVENT_LOGGER_NAME,
    ) -> None:
        super().__init__(whitelisted_event_types)
        self._logger = logging.getLogger(logger_name)

    def handle(self, event: Event) -> None:
        fields = sorted(event.fields, key=lambda f: FIELD_ORDER[f.name])
        self._logger.info(
            "Event Type: %s, Fields: [%s]",
            event.event_type.value,
            ", ".join(f"{f.name.value}={f.value}" for f in fields),
        )
