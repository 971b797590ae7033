"""Response normalizer - maps raw service responses to records or errors.

Success statuses are parsed into records; a body that does not match the
expected shape raises MalformedResponseError. Non-success statuses always
raise ServiceError, carrying the service's message when it can be found.
"""

from __future__ import annotations

import json
from typing import Any, Callable, TypeVar

from pinata_sdk.errors import MalformedResponseError, ServiceError
from pinata_sdk.interfaces.transport import RawResponse
from pinata_sdk.models.records import (
    PinByHashResult,
    PinJob,
    PinJobs,
    PinList,
    PinListItem,
    PinnedObject,
    TotalPinnedData,
)
from pinata_sdk.models.requests import JobStatus, PinPolicy, Region, RegionPolicy

T = TypeVar("T")

_MISSING = object()


def service_error(response: RawResponse) -> ServiceError:
    """Build a ServiceError from a non-success response."""
    text = response.text
    try:
        data = json.loads(text)
    except ValueError:
        return ServiceError(response.status, None, text)
    message = _error_message(data)
    return ServiceError(response.status, message, text)


def _error_message(data: Any) -> str | None:
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if isinstance(error, dict):
        for key in ("details", "reason", "message"):
            if isinstance(error.get(key), str) and error[key]:
                return error[key]
        return None
    if isinstance(error, str) and error:
        return error
    message = data.get("message")
    if isinstance(message, str) and message:
        return message
    return None


def check_ok(response: RawResponse) -> None:
    """Accept any success status; the body is ignored."""
    if not response.is_success:
        raise service_error(response)


def parse(response: RawResponse, parser: Callable[[dict], T]) -> T:
    """Decode a success body as a JSON object and hand it to ``parser``."""
    if not response.is_success:
        raise service_error(response)
    try:
        data = json.loads(response.text)
    except ValueError as exc:
        raise MalformedResponseError(f"response is not JSON: {exc}", response.text) from exc
    if not isinstance(data, dict):
        raise MalformedResponseError("response is not a JSON object", response.text)
    try:
        return parser(data)
    except MalformedResponseError as exc:
        raise MalformedResponseError(exc.message, response.text) from None


def parse_pinned_object(response: RawResponse) -> PinnedObject:
    return parse(response, pinned_object_from_json)


# ── Field helpers ─────────────────────────────────────────


def _field(data: dict, key: str, kind: type | tuple[type, ...], default: Any = _MISSING) -> Any:
    value = data.get(key, _MISSING)
    if value is _MISSING or (value is None and default is not _MISSING):
        if default is _MISSING:
            raise MalformedResponseError(f"missing field {key!r}")
        return default
    # bool is an int subclass; never accept it where a number is expected
    if isinstance(value, bool) and bool not in _as_tuple(kind):
        raise MalformedResponseError(f"field {key!r} has type bool")
    if not isinstance(value, kind):
        raise MalformedResponseError(f"field {key!r} has type {type(value).__name__}")
    return value


def _as_tuple(kind: type | tuple[type, ...]) -> tuple[type, ...]:
    return kind if isinstance(kind, tuple) else (kind,)


def _job_status(value: str) -> JobStatus:
    try:
        return JobStatus(value)
    except ValueError:
        raise MalformedResponseError(f"unknown job status {value!r}") from None


def _pin_policy(data: dict | None) -> PinPolicy | None:
    if data is None:
        return None
    regions = []
    for raw in _field(data, "regions", list):
        if not isinstance(raw, dict):
            raise MalformedResponseError("region policy is not an object")
        try:
            region = Region(_field(raw, "id", str))
        except ValueError:
            raise MalformedResponseError(f"unknown region {raw.get('id')!r}") from None
        regions.append(RegionPolicy(region, _field(raw, "desiredReplicationCount", int)))
    return PinPolicy(regions)


def _rows(data: dict, parser: Callable[[dict], T]) -> list[T]:
    rows = []
    for raw in _field(data, "rows", list):
        if not isinstance(raw, dict):
            raise MalformedResponseError("row is not an object")
        rows.append(parser(raw))
    return rows


# ── Record parsers ────────────────────────────────────────


def pinned_object_from_json(data: dict) -> PinnedObject:
    return PinnedObject(
        ipfs_hash=_field(data, "IpfsHash", str),
        pin_size=_field(data, "PinSize", int),
        timestamp=_field(data, "Timestamp", str),
        is_duplicate=_field(data, "isDuplicate", bool, False),
    )


def pin_by_hash_result_from_json(data: dict) -> PinByHashResult:
    return PinByHashResult(
        id=_field(data, "id", str),
        ipfs_hash=_field(data, "ipfsHash", str),
        status=_job_status(_field(data, "status", str)),
        name=_field(data, "name", str, None),
    )


def pin_job_from_json(data: dict) -> PinJob:
    return PinJob(
        id=_field(data, "id", str),
        ipfs_pin_hash=_field(data, "ipfs_pin_hash", str),
        date_queued=_field(data, "date_queued", str),
        status=_job_status(_field(data, "status", str)),
        name=_field(data, "name", str, None),
        keyvalues=_field(data, "keyvalues", dict, None),
        host_nodes=_field(data, "host_nodes", list, None),
        pin_policy=_pin_policy(_field(data, "pin_policy", dict, None)),
    )


def pin_jobs_from_json(data: dict) -> PinJobs:
    return PinJobs(count=_field(data, "count", int), rows=_rows(data, pin_job_from_json))


def total_pinned_data_from_json(data: dict) -> TotalPinnedData:
    return TotalPinnedData(
        pin_count=_field(data, "pin_count", int),
        pin_size_total=str(_field(data, "pin_size_total", (str, int))),
        pin_size_with_replications_total=str(
            _field(data, "pin_size_with_replications_total", (str, int))
        ),
    )


def pin_list_item_from_json(data: dict) -> PinListItem:
    metadata = _field(data, "metadata", dict, {})
    return PinListItem(
        id=_field(data, "id", str),
        ipfs_pin_hash=_field(data, "ipfs_pin_hash", str),
        size=_field(data, "size", int),
        user_id=_field(data, "user_id", str),
        date_pinned=_field(data, "date_pinned", str),
        date_unpinned=_field(data, "date_unpinned", str, None),
        name=_field(metadata, "name", str, None),
        keyvalues=_field(metadata, "keyvalues", dict, None),
    )


def pin_list_from_json(data: dict) -> PinList:
    return PinList(count=_field(data, "count", int), rows=_rows(data, pin_list_item_from_json))
