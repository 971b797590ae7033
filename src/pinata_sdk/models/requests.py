"""Request values passed by callers to PinataApi operations."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any, Union

# A JSON value: null, bool, number, string, mapping or sequence of JSON values.
JsonValue = Any
MetadataValue = Union[str, int, float, None]


class Region(str, Enum):
    """Regions currently supported by the pin policy API."""

    FRA1 = "FRA1"  # Frankfurt, max 2 replications
    NYC1 = "NYC1"  # New York City, max 2 replications


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


class JobStatus(str, Enum):
    """Status of a queued pin-by-hash job."""

    PRECHECKING = "prechecking"
    SEARCHING = "searching"
    RETRIEVING = "retrieving"
    EXPIRED = "expired"
    OVER_FREE_LIMIT = "over_free_limit"
    OVER_MAX_SIZE = "over_max_size"
    INVALID_OBJECT = "invalid_object"
    BAD_HOST_NODE = "bad_host_node"


@dataclass(frozen=True)
class RegionPolicy:
    id: Region
    desired_replication_count: int

    def to_json(self) -> dict:
        return {"id": self.id.value, "desiredReplicationCount": self.desired_replication_count}


@dataclass(frozen=True)
class PinPolicy:
    regions: list[RegionPolicy] = field(default_factory=list)

    def to_json(self) -> dict:
        return {"regions": [r.to_json() for r in self.regions]}


@dataclass(frozen=True)
class PinMetadata:
    """Display name and searchable key-values attached to a pin.

    A ``None`` key-value deletes that key when sent through
    ``change_hash_metadata``.
    """

    name: str | None = None
    keyvalues: dict[str, MetadataValue] = field(default_factory=dict)

    def to_json(self) -> dict:
        out: dict[str, Any] = {"keyvalues": dict(self.keyvalues)}
        if self.name is not None:
            out["name"] = self.name
        return out


@dataclass(frozen=True)
class PinOptions:
    """IPFS pinning options.

    host_nodes: multiaddrs of nodes already holding the content.
    custom_pin_policy: per-region replication for this pin.
    cid_version: CID version (0 or 1) used when hashing the content.
    """

    host_nodes: list[str] | None = None
    custom_pin_policy: PinPolicy | None = None
    cid_version: int | None = None

    def to_json(self) -> dict:
        out: dict[str, Any] = {}
        if self.host_nodes is not None:
            out["hostNodes"] = list(self.host_nodes)
        if self.custom_pin_policy is not None:
            out["customPinPolicy"] = self.custom_pin_policy.to_json()
        if self.cid_version is not None:
            out["cidVersion"] = self.cid_version
        return out


class _Envelope:
    """Chainable metadata/options setters shared by every pin request."""

    def with_metadata(
        self,
        keyvalues: dict[str, MetadataValue] | None = None,
        name: str | None = None,
    ):
        return replace(self, metadata=PinMetadata(name=name, keyvalues=dict(keyvalues or {})))

    def with_options(self, options: PinOptions):
        return replace(self, options=options)


@dataclass(frozen=True)
class PinByFile(_Envelope):
    """Pin a file, or every regular file under a directory."""

    path: str | Path
    metadata: PinMetadata | None = None
    options: PinOptions | None = None


@dataclass(frozen=True)
class PinByJson(_Envelope):
    """Pin any JSON-serializable value."""

    content: JsonValue
    metadata: PinMetadata | None = None
    options: PinOptions | None = None


@dataclass(frozen=True)
class PinByHash(_Envelope):
    """Pin content that already exists on the IPFS network."""

    hash_to_pin: str
    metadata: PinMetadata | None = None
    options: PinOptions | None = None


@dataclass(frozen=True)
class HashPinPolicy:
    ipfs_pin_hash: str
    new_pin_policy: PinPolicy

    def to_json(self) -> dict:
        return {
            "ipfsPinHash": self.ipfs_pin_hash,
            "newPinPolicy": self.new_pin_policy.to_json(),
        }


@dataclass(frozen=True)
class ChangePinMetadata:
    ipfs_pin_hash: str
    metadata: PinMetadata

    def to_json(self) -> dict:
        return {"ipfsPinHash": self.ipfs_pin_hash, **self.metadata.to_json()}


@dataclass(frozen=True)
class PinJobsFilter:
    sort: SortDirection | None = None
    status: JobStatus | None = None
    ipfs_pin_hash: str | None = None
    limit: int | None = None
    offset: int | None = None

    def to_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.sort is not None:
            params["sort"] = self.sort.value
        if self.status is not None:
            params["status"] = self.status.value
        if self.ipfs_pin_hash is not None:
            params["ipfs_pin_hash"] = self.ipfs_pin_hash
        if self.limit is not None:
            params["limit"] = str(self.limit)
        if self.offset is not None:
            params["offset"] = str(self.offset)
        return params


@dataclass(frozen=True)
class PinListFilter:
    hash_contains: str | None = None
    status: str | None = None  # "all", "pinned" or "unpinned"
    metadata_name: str | None = None
    page_limit: int | None = None
    page_offset: int | None = None

    def to_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        if self.hash_contains is not None:
            params["hashContains"] = self.hash_contains
        if self.status is not None:
            params["status"] = self.status
        if self.metadata_name is not None:
            params["metadata[name]"] = self.metadata_name
        if self.page_limit is not None:
            params["pageLimit"] = str(self.page_limit)
        if self.page_offset is not None:
            params["pageOffset"] = str(self.page_offset)
        return params
