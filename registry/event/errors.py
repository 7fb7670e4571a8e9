"""
Registry Events - Errors
==========================
Error types raised by the event service.
"""

from __future__ import annotations

from registry.hook.errors import EventHookError


class EventServiceError(EventHookError):
    """Event service is not in a state that accepts the request."""
    pass
