"""PinataApi - public async client for the Pinata pinning service."""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from pinata_sdk.api import normalizer
from pinata_sdk.api.transport import HttpTransport
from pinata_sdk.credentials import Credentials
from pinata_sdk.errors import ValidationError
from pinata_sdk.interfaces.transport import Transport
from pinata_sdk.models.config import DEFAULT_BASE_URL, ClientConfig
from pinata_sdk.models.records import (
    PinByHashResult,
    PinJobs,
    PinList,
    PinnedObject,
    TotalPinnedData,
)
from pinata_sdk.models.requests import (
    ChangePinMetadata,
    HashPinPolicy,
    PinByFile,
    PinByHash,
    PinByJson,
    PinJobsFilter,
    PinListFilter,
)
from pinata_sdk.upload.packager import (
    dumps,
    package_file_request,
    package_hash_request,
    package_json_request,
)

log = logging.getLogger(__name__)


class PinataApi:
    """Async client for the Pinata API.

    Every operation is a single request/response cycle. Errors are raised
    as ``ApiError`` subclasses and are never retried.

    Example::

        api = PinataApi("api_key", "secret_api_key")
        await api.test_authentication()
        pinned = await api.pin_file(PinByFile("path/to/dir"))
        print(pinned.ipfs_hash)
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 60.0,
        transport: Transport | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._credentials = Credentials(api_key, api_secret)
        self._transport: Transport = transport or HttpTransport(
            self._credentials, base_url, timeout, http_transport,
        )

    @classmethod
    def from_config(cls, cfg: ClientConfig) -> PinataApi:
        return cls(cfg.api_key, cfg.api_secret, base_url=cfg.base_url, timeout=cfg.timeout)

    async def test_authentication(self) -> None:
        """Raise ServiceError if the credentials are rejected."""
        resp = await self._transport.request("GET", "/data/testAuthentication")
        normalizer.check_ok(resp)

    async def pin_file(self, pin_data: PinByFile) -> PinnedObject:
        """Pin a file, or every file under a directory.

        For a directory the returned hash is that of the directory itself.
        The body is built before anything is sent, so IoError means no
        request was made.
        """
        body = await package_file_request(pin_data)
        resp = await self._transport.request(
            "POST", "/pinning/pinFileToIPFS", files=body.to_httpx_files(),
        )
        pinned = normalizer.parse_pinned_object(resp)
        log.info("Pinned %s as %s (%d bytes)", pin_data.path, pinned.ipfs_hash, pinned.pin_size)
        return pinned

    async def pin_json(self, pin_data: PinByJson) -> PinnedObject:
        """Pin any JSON-serializable value."""
        body = package_json_request(pin_data)
        resp = await self._transport.request(
            "POST", "/pinning/pinJSONToIPFS", json_body=body.encode(),
        )
        pinned = normalizer.parse_pinned_object(resp)
        log.info("Pinned JSON as %s (%d bytes)", pinned.ipfs_hash, pinned.pin_size)
        return pinned

    async def unpin(self, cid: str) -> None:
        """Unpin content previously pinned through this account."""
        if not cid or not cid.strip():
            raise ValidationError("cid must not be empty")
        resp = await self._transport.request("DELETE", f"/pinning/unpin/{quote(cid, safe='')}")
        normalizer.check_ok(resp)
        log.info("Unpinned %s", cid)

    async def pin_by_hash(self, pin_data: PinByHash) -> PinByHashResult:
        """Queue a CID that already exists on IPFS for background pinning."""
        body = package_hash_request(pin_data)
        resp = await self._transport.request(
            "POST", "/pinning/pinByHash", json_body=body.encode(),
        )
        return normalizer.parse(resp, normalizer.pin_by_hash_result_from_json)

    async def get_pin_jobs(self, filters: PinJobsFilter | None = None) -> PinJobs:
        """List pin-by-hash jobs still in the queue."""
        params = (filters or PinJobsFilter()).to_params()
        resp = await self._transport.request("GET", "/pinning/pinJobs", params=params)
        return normalizer.parse(resp, normalizer.pin_jobs_from_json)

    async def set_hash_pin_policy(self, policy: HashPinPolicy) -> None:
        """Change the region policy of one pin. Account-level policy is unchanged."""
        resp = await self._transport.request(
            "PUT", "/pinning/hashPinPolicy", json_body=dumps(policy.to_json()).encode("utf-8"),
        )
        normalizer.check_ok(resp)

    async def change_hash_metadata(self, change: ChangePinMetadata) -> None:
        """Change the name and key-values of one pin."""
        resp = await self._transport.request(
            "PUT", "/pinning/hashMetadata", json_body=dumps(change.to_json()).encode("utf-8"),
        )
        normalizer.check_ok(resp)

    async def get_total_user_pinned_data(self) -> TotalPinnedData:
        resp = await self._transport.request("GET", "/data/userPinnedDataTotal")
        return normalizer.parse(resp, normalizer.total_pinned_data_from_json)

    async def get_pin_list(self, filters: PinListFilter | None = None) -> PinList:
        """List pinned content, optionally filtered."""
        params = (filters or PinListFilter()).to_params()
        resp = await self._transport.request("GET", "/data/pinList", params=params)
        return normalizer.parse(resp, normalizer.pin_list_from_json)
