"""Result records returned by PinataApi operations."""

from __future__ import annotations

from dataclasses import dataclass, field

from pinata_sdk.models.requests import JobStatus, MetadataValue, PinPolicy


@dataclass(frozen=True)
class PinnedObject:
    """Content the service has pinned."""

    ipfs_hash: str
    pin_size: int  # bytes
    timestamp: str  # ISO 8601
    is_duplicate: bool = False


@dataclass(frozen=True)
class PinByHashResult:
    """A queued pin-by-hash job."""

    id: str
    ipfs_hash: str
    status: JobStatus
    name: str | None = None


@dataclass(frozen=True)
class PinJob:
    id: str
    ipfs_pin_hash: str
    date_queued: str  # ISO 8601
    status: JobStatus
    name: str | None = None
    keyvalues: dict[str, MetadataValue] | None = None
    host_nodes: list[str] | None = None
    pin_policy: PinPolicy | None = None


@dataclass(frozen=True)
class PinJobs:
    count: int
    rows: list[PinJob] = field(default_factory=list)


@dataclass(frozen=True)
class TotalPinnedData:
    """Account-wide totals. Sizes are decimal strings as sent by the service."""

    pin_count: int
    pin_size_total: str
    pin_size_with_replications_total: str


@dataclass(frozen=True)
class PinListItem:
    id: str
    ipfs_pin_hash: str
    size: int
    user_id: str
    date_pinned: str
    date_unpinned: str | None = None
    name: str | None = None
    keyvalues: dict[str, MetadataValue] | None = None


@dataclass(frozen=True)
class PinList:
    count: int
    rows: list[PinListItem] = field(default_factory=list)
