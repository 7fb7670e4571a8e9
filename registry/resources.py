"""
Registry - Resource Snapshots
===============================
The registry objects that actions are performed on, reduced to
the identifiers the event factory needs.

Persistence, links and authorization of these resources live
outside this package. These are read-only snapshots handed in by
the service layer after the action succeeded.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Bucket:
    """A named container for versioned items."""

    identifier: str
    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class VersionedFlow:
    """A flow stored in a bucket."""

    identifier: str
    name: str
    bucket_identifier: str


@dataclass(frozen=True)
class VersionedFlowSnapshotMetadata:
    """Metadata of one saved flow version."""

    bucket_identifier: str
    flow_identifier: str
    version: int
    author: str
    comments: Optional[str] = None

    def __post_init__(self) -> None:
        if self.version < 1:
            raise ValueError(f"Flow version must be >= 1, got {self.version}.")


@dataclass(frozen=True)
class ExtensionBundle:
    """An extension bundle stored in a bucket."""

    identifier: str
    bucket_identifier: str
    group_id: str
    artifact_id: str


@dataclass(frozen=True)
class ExtensionBundleVersionMetadata:
    """Metadata of one uploaded extension bundle version."""

    bundle_identifier: str
    bucket_identifier: str
    version: str
    author: str


@dataclass(frozen=True)
class User:
    identifier: str
    identity: str


@dataclass(frozen=True)
class UserGroup:
    identifier: str
    identity: str
