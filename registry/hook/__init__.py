"""
Registry Hooks - Public API
=============================
Vocabulary, event contract and hook providers for recording
actions performed against the registry.
"""

from registry.hook.errors import (
    EventConstructionError,
    EventHookError,
    InvalidEventError,
    ProviderCreationError,
    ScriptExecutionError,
)
from registry.hook.event import Event
from registry.hook.event_field import EventField, EventFieldName
from registry.hook.event_type import (
    EMPTY_REQUIRED_FIELDS_ALLOWED,
    REQUIRED_FIELDS,
    EventType,
)
from registry.hook.logging_provider import LoggingEventHookProvider
from registry.hook.provider import EventHookProvider
from registry.hook.script_provider import ScriptEventHookProvider

__all__ = [
    "Event",
    "EventField",
    "EventFieldName",
    "EventType",
    "REQUIRED_FIELDS",
    "EMPTY_REQUIRED_FIELDS_ALLOWED",
    "EventHookProvider",
    "LoggingEventHookProvider",
    "ScriptEventHookProvider",
    "EventHookError",
    "EventConstructionError",
    "InvalidEventError",
    "ProviderCreationError",
    "ScriptExecutionError",
]
