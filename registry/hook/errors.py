"""
Registry Hooks - Errors
=========================
Error types for the event model and the hook providers.

Construction errors surface at the point of misuse.
Validation errors surface when validate() is called.
Neither is retryable: both mean the caller built the event wrong.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from registry.hook.event_type import EventType
    from registry.hook.event_field import EventFieldName


class EventHookError(Exception):
    """Base error for the registry hook framework."""
    pass


class EventConstructionError(EventHookError, ValueError):
    """Malformed input handed to an event, field or builder."""
    pass


class InvalidEventError(EventHookError, RuntimeError):
    """A built event is not well-formed for its declared type."""

    def __init__(
        self,
        event_type: EventType | None,
        missing_fields: Iterable[EventFieldName] = (),
    ):
        self.event_type = event_type
        self.missing_fields = tuple(missing_fields)
        if event_type is None:
            message = "No event type was provided."
        else:
            names = ", ".join(name.value for name in self.missing_fields)
            message = (
                f"Missing required field(s) {names} "
                f"for event type '{event_type.value}'."
            )
        super().__init__(message)


class ProviderCreationError(EventHookError):
    """An event hook provider could not be created from its configuration."""

    def __init__(self, provider: str, reason: str):
        self.provider = provider
        self.reason = reason
        super().__init__(f"Unable to create {provider}: {reason}")


class ScriptExecutionError(EventHookError):
    """Hook script exited with a non-zero status."""

    def __init__(self, script_path: str, returncode: int, stderr: str = ""):
        self.script_path = script_path
        self.returncode = returncode
        self.stderr = stderr
        detail = f": {stderr.strip()}" if stderr and stderr.strip() else ""
        super().__init__(
            f"Hook script '{script_path}' exited with status {returncode}{detail}"
        )
