"""
Registry Hooks - Event Types
==============================
Controls which actions can be recorded, and which fields
each of them must carry to be well-formed.

Rules:
- Every EventType has an explicitly declared required-field set
- The table is total: a missing entry fails at import time
- An empty required set is allowed only for allow-listed types
- The table is read-only at runtime
- Codes are append-only (member value == persisted name)
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from registry.hook.errors import EventConstructionError
from registry.hook.event_field import EventFieldName


class EventType(Enum):
    """Kind of registry action an event records."""
    CREATE_BUCKET = "CREATE_BUCKET"
    UPDATE_BUCKET = "UPDATE_BUCKET"
    DELETE_BUCKET = "DELETE_BUCKET"
    CREATE_FLOW = "CREATE_FLOW"
    UPDATE_FLOW = "UPDATE_FLOW"
    DELETE_FLOW = "DELETE_FLOW"
    CREATE_FLOW_VERSION = "CREATE_FLOW_VERSION"
    CREATE_EXTENSION_BUNDLE = "CREATE_EXTENSION_BUNDLE"
    DELETE_EXTENSION_BUNDLE = "DELETE_EXTENSION_BUNDLE"
    CREATE_EXTENSION_BUNDLE_VERSION = "CREATE_EXTENSION_BUNDLE_VERSION"
    DELETE_EXTENSION_BUNDLE_VERSION = "DELETE_EXTENSION_BUNDLE_VERSION"
    CREATE_USER = "CREATE_USER"
    UPDATE_USER = "UPDATE_USER"
    DELETE_USER = "DELETE_USER"
    CREATE_USER_GROUP = "CREATE_USER_GROUP"
    UPDATE_USER_GROUP = "UPDATE_USER_GROUP"
    DELETE_USER_GROUP = "DELETE_USER_GROUP"
    REGISTRY_START = "REGISTRY_START"

    @property
    def required_fields(self) -> tuple[EventFieldName, ...]:
        """Fields an event of this type must carry, in declaration order."""
        return REQUIRED_FIELDS[self]


# ══════════════════════════════════════════════════════════════
# REQUIRED FIELDS (exhaustive, reviewed per type)
# ══════════════════════════════════════════════════════════════

_F = EventFieldName

_BUCKET = (_F.BUCKET_ID, _F.USER)
_FLOW = (_F.BUCKET_ID, _F.FLOW_ID, _F.USER)
_BUNDLE = (_F.BUCKET_ID, _F.EXTENSION_BUNDLE_ID, _F.USER)
_BUNDLE_VERSION = (_F.BUCKET_ID, _F.EXTENSION_BUNDLE_ID, _F.VERSION, _F.USER)
_USER = (_F.USER_ID, _F.USER_IDENTITY, _F.USER)
_USER_GROUP = (_F.USER_GROUP_ID, _F.USER_GROUP_IDENTITY, _F.USER)

REQUIRED_FIELDS: Mapping[EventType, tuple[EventFieldName, ...]] = MappingProxyType({
    EventType.CREATE_BUCKET: _BUCKET,
    EventType.UPDATE_BUCKET: _BUCKET,
    EventType.DELETE_BUCKET: _BUCKET,
    EventType.CREATE_FLOW: _FLOW,
    EventType.UPDATE_FLOW: _FLOW,
    EventType.DELETE_FLOW: _FLOW,
    EventType.CREATE_FLOW_VERSION: (
        _F.BUCKET_ID, _F.FLOW_ID, _F.VERSION, _F.USER, _F.COMMENT,
    ),
    EventType.CREATE_EXTENSION_BUNDLE: _BUNDLE,
    EventType.DELETE_EXTENSION_BUNDLE: _BUNDLE,
    EventType.CREATE_EXTENSION_BUNDLE_VERSION: _BUNDLE_VERSION,
    EventType.DELETE_EXTENSION_BUNDLE_VERSION: _BUNDLE_VERSION,
    EventType.CREATE_USER: _USER,
    EventType.UPDATE_USER: _USER,
    EventType.DELETE_USER: _USER,
    EventType.CREATE_USER_GROUP: _USER_GROUP,
    EventType.UPDATE_USER_GROUP: _USER_GROUP,
    EventType.DELETE_USER_GROUP: _USER_GROUP,
    EventType.REGISTRY_START: (),
})

# Types that legitimately describe an action with no subject resource.
EMPTY_REQUIRED_FIELDS_ALLOWED: frozenset[EventType] = frozenset({
    EventType.REGISTRY_START,
})


def _check_required_fields_table() -> None:
    undeclared = [t.value for t in EventType if t not in REQUIRED_FIELDS]
    if undeclared:
        raise RuntimeError(
            f"Event types without a required-field declaration: "
            f"{', '.join(undeclared)}."
        )

    unexpected_empty = [
        t.value for t, names in REQUIRED_FIELDS.items()
        if not names and t not in EMPTY_REQUIRED_FIELDS_ALLOWED
    ]
    if unexpected_empty:
        raise RuntimeError(
            f"Event types declared with no required fields but not "
            f"allow-listed: {', '.join(unexpected_empty)}."
        )

    for t, names in REQUIRED_FIELDS.items():
        if len(set(names)) != len(names):
            raise RuntimeError(
                f"Event type {t.value} declares a required field twice."
            )


_check_required_fields_table()


def coerce_event_type(event_type: Any) -> EventType | None:
    """
    Accept an EventType, its string code, or None (no type yet).
    Unknown codes are a construction error.
    """
    if event_type is None or isinstance(event_type, EventType):
        return event_type
    if isinstance(event_type, str):
        try:
            return EventType(event_type)
        except ValueError:
            raise EventConstructionError(
                f"Unknown event type '{event_type}'."
            ) from None
    raise EventConstructionError(
        f"Event type must be an EventType, got {event_type!r}."
    )
