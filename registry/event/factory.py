"""
Registry Events - Event Factory
=================================
Payload builders: one function per recorded action.

Each builder returns a built, NOT yet validated, StandardEvent.
The event service validates on publish.

`user` is the identity of the caller who performed the action.
"""

from __future__ import annotations

from registry.event.standard import StandardEvent
from registry.hook.event_field import EventFieldName
from registry.hook.event_type import EventType
from registry.resources import (
    Bucket,
    ExtensionBundle,
    ExtensionBundleVersionMetadata,
    User,
    UserGroup,
    VersionedFlow,
    VersionedFlowSnapshotMetadata,
)


# ══════════════════════════════════════════════════════════════
# BUCKETS
# ══════════════════════════════════════════════════════════════

def _bucket_event(event_type: EventType, bucket: Bucket, user: str) -> StandardEvent:
    return (
        StandardEvent.Builder()
        .event_type(event_type)
        .field(EventFieldName.BUCKET_ID, bucket.identifier)
        .field(EventFieldName.USER, user)
        .build()
    )


def bucket_created(bucket: Bucket, user: str) -> StandardEvent:
    return _bucket_event(EventType.CREATE_BUCKET, bucket, user)


def bucket_updated(bucket: Bucket, user: str) -> StandardEvent:
    return _bucket_event(EventType.UPDATE_BUCKET, bucket, user)


def bucket_deleted(bucket: Bucket, user: str) -> StandardEvent:
    return _bucket_event(EventType.DELETE_BUCKET, bucket, user)


# ══════════════════════════════════════════════════════════════
# FLOWS
# ══════════════════════════════════════════════════════════════

def _flow_event(event_type: EventType, flow: VersionedFlow, user: str) -> StandardEvent:
    return (
        StandardEvent.Builder()
        .event_type(event_type)
        .field(EventFieldName.BUCKET_ID, flow.bucket_identifier)
        .field(EventFieldName.FLOW_ID, flow.identifier)
        .field(EventFieldName.USER, user)
        .build()
    )


def flow_created(flow: VersionedFlow, user: str) -> StandardEvent:
    return _flow_event(EventType.CREATE_FLOW, flow, user)


def flow_updated(flow: VersionedFlow, user: str) -> StandardEvent:
    return _flow_event(EventType.UPDATE_FLOW, flow, user)


def flow_deleted(flow: VersionedFlow, user: str) -> StandardEvent:
    return _flow_event(EventType.DELETE_FLOW, flow, user)


def flow_version_created(metadata: VersionedFlowSnapshotMetadata) -> StandardEvent:
    """The snapshot author is the acting user. Missing comments become ""."""
    return (
        StandardEvent.Builder()
        .event_type(EventType.CREATE_FLOW_VERSION)
        .field(EventFieldName.BUCKET_ID, metadata.bucket_identifier)
        .field(EventFieldName.FLOW_ID, metadata.flow_identifier)
        .field(EventFieldName.VERSION, str(metadata.version))
        .field(EventFieldName.USER, metadata.author)
        .field(EventFieldName.COMMENT, metadata.comments or "")
        .build()
    )


# ══════════════════════════════════════════════════════════════
# EXTENSION BUNDLES
# ══════════════════════════════════════════════════════════════

def _bundle_event(event_type: EventType, bundle: ExtensionBundle, user: str) -> StandardEvent:
    return (
        StandardEvent.Builder()
        .event_type(event_type)
        .field(EventFieldName.BUCKET_ID, bundle.bucket_identifier)
        .field(EventFieldName.EXTENSION_BUNDLE_ID, bundle.identifier)
        .field(EventFieldName.USER, user)
        .build()
    )


def extension_bundle_created(bundle: ExtensionBundle, user: str) -> StandardEvent:
    return _bundle_event(EventType.CREATE_EXTENSION_BUNDLE, bundle, user)


def extension_bundle_deleted(bundle: ExtensionBundle, user: str) -> StandardEvent:
    return _bundle_event(EventType.DELETE_EXTENSION_BUNDLE, bundle, user)


def _bundle_version_event(
    event_type: EventType,
    metadata: ExtensionBundleVersionMetadata,
    user: str,
) -> StandardEvent:
    return (
        StandardEvent.Builder()
        .event_type(event_type)
        .field(EventFieldName.BUCKET_ID, metadata.bucket_identifier)
        .field(EventFieldName.EXTENSION_BUNDLE_ID, metadata.bundle_identifier)
        .field(EventFieldName.VERSION, metadata.version)
        .field(EventFieldName.USER, user)
        .build()
    )


def extension_bundle_version_created(
    metadata: ExtensionBundleVersionMetadata, user: str
) -> StandardEvent:
    return _bundle_version_event(EventType.CREATE_EXTENSION_BUNDLE_VERSION, metadata, user)


def extension_bundle_version_deleted(
    metadata: ExtensionBundleVersionMetadata, user: str
) -> StandardEvent:
    return _bundle_version_event(EventType.DELETE_EXTENSION_BUNDLE_VERSION, metadata, user)


# ══════════════════════════════════════════════════════════════
# USERS & GROUPS
# ══════════════════════════════════════════════════════════════

def _user_event(event_type: EventType, subject: User, user: str) -> StandardEvent:
    return (
        StandardEvent.Builder()
        .event_type(event_type)
        .field(EventFieldName.USER_ID, subject.identifier)
        .field(EventFieldName.USER_IDENTITY, subject.identity)
        .field(EventFieldName.USER, user)
        .build()
    )


def user_created(subject: User, user: str) -> StandardEvent:
    return _user_event(EventType.CREATE_USER, subject, user)


def user_updated(subject: User, user: str) -> StandardEvent:
    return _user_event(EventType.UPDATE_USER, subject, user)


def user_deleted(subject: User, user: str) -> StandardEvent:
    return _user_event(EventType.DELETE_USER, subject, user)


def _user_group_event(event_type: EventType, group: UserGroup, user: str) -> StandardEvent:
    return (
        StandardEvent.Builder()
        .event_type(event_type)
        .field(EventFieldName.USER_GROUP_ID, group.identifier)
        .field(EventFieldName.USER_GROUP_IDENTITY, group.identity)
        .field(EventFieldName.USER, user)
        .build()
    )


def user_group_created(group: UserGroup, user: str) -> StandardEvent:
    return _user_group_event(EventType.CREATE_USER_GROUP, group, user)


def user_group_updated(group: UserGroup, user: str) -> StandardEvent:
    return _user_group_event(EventType.UPDATE_USER_GROUP, group, user)


def user_group_deleted(group: UserGroup, user: str) -> StandardEvent:
    return _user_group_event(EventType.DELETE_USER_GROUP, group, user)


# ══════════════════════════════════════════════════════════════
# LIFECYCLE
# ══════════════════════════════════════════════════════════════

def registry_started() -> StandardEvent:
    return StandardEvent.Builder().event_type(EventType.REGISTRY_START).build()
