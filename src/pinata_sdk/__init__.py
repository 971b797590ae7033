"""pinata_sdk - async client for the Pinata IPFS pinning service."""

from pinata_sdk.api.client import PinataApi
from pinata_sdk.credentials import Credentials
from pinata_sdk.errors import (
    ApiError,
    IoError,
    MalformedResponseError,
    SerializationError,
    ServiceError,
    TransportError,
    ValidationError,
)
from pinata_sdk.models import (
    ChangePinMetadata,
    ClientConfig,
    HashPinPolicy,
    JobStatus,
    PinByFile,
    PinByHash,
    PinByHashResult,
    PinByJson,
    PinJob,
    PinJobs,
    PinJobsFilter,
    PinList,
    PinListFilter,
    PinListItem,
    PinMetadata,
    PinnedObject,
    PinOptions,
    PinPolicy,
    Region,
    RegionPolicy,
    SortDirection,
    TotalPinnedData,
)

__all__ = [
    "PinataApi", "Credentials",
    "ApiError", "IoError", "MalformedResponseError", "SerializationError",
    "ServiceError", "TransportError", "ValidationError",
    "ChangePinMetadata", "ClientConfig", "HashPinPolicy", "JobStatus",
    "PinByFile", "PinByHash", "PinByHashResult", "PinByJson", "PinJob", "PinJobs",
    "PinJobsFilter", "PinList", "PinListFilter", "PinListItem", "PinMetadata",
    "PinnedObject", "PinOptions", "PinPolicy", "Region", "RegionPolicy",
    "SortDirection", "TotalPinnedData",
]
