"""
Registry Events - Public API
==============================
Standard event implementation, the per-action event factory,
and the service that hands validated events to hook providers.
"""

from registry.event import factory
from registry.event.dispatcher import dispatch
from registry.event.errors import EventServiceError
from registry.event.service import (
    EventService,
    configure_event_service,
    get_event_service,
)
from registry.event.standard import StandardEvent

__all__ = [
    "StandardEvent",
    "factory",
    "dispatch",
    "EventServiceError",
    "EventService",
    "configure_event_service",
    "get_event_service",
]
