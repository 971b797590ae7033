"""Data models for pinata_sdk requests, results and configuration."""

from pinata_sdk.models.config import ClientConfig, DEFAULT_BASE_URL
from pinata_sdk.models.records import (
    PinByHashResult,
    PinJob,
    PinJobs,
    PinList,
    PinListItem,
    PinnedObject,
    TotalPinnedData,
)
from pinata_sdk.models.requests import (
    ChangePinMetadata,
    HashPinPolicy,
    JobStatus,
    JsonValue,
    MetadataValue,
    PinByFile,
    PinByHash,
    PinByJson,
    PinJobsFilter,
    PinListFilter,
    PinMetadata,
    PinOptions,
    PinPolicy,
    Region,
    RegionPolicy,
    SortDirection,
)

__all__ = [
    "ClientConfig", "DEFAULT_BASE_URL",
    "PinByHashResult", "PinJob", "PinJobs", "PinList", "PinListItem",
    "PinnedObject", "TotalPinnedData",
    "ChangePinMetadata", "HashPinPolicy", "JobStatus", "JsonValue", "MetadataValue",
    "PinByFile", "PinByHash", "PinByJson", "PinJobsFilter", "PinListFilter",
    "PinMetadata", "PinOptions", "PinPolicy", "Region", "RegionPolicy",
    "SortDirection",
]
