"""httpx transport - sends authenticated requests to the Pinata HTTP API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from pinata_sdk.credentials import Credentials
from pinata_sdk.errors import TransportError
from pinata_sdk.interfaces.transport import RawResponse
from pinata_sdk.models.config import DEFAULT_BASE_URL

log = logging.getLogger(__name__)


class HttpTransport:
    """Implements the Transport protocol on top of ``httpx.AsyncClient``.

    A fresh client is opened for every request, so one instance can serve
    any number of concurrent calls. ``transport`` lets tests substitute an
    ``httpx.MockTransport``.
    """

    def __init__(
        self,
        credentials: Credentials,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._credentials = credentials
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json_body: bytes | None = None,
        files: list[tuple[str, Any]] | None = None,
    ) -> RawResponse:
        headers = self._credentials.headers()
        if json_body is not None:
            headers["Content-Type"] = "application/json"

        log.debug("%s %s", method, path)
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout, connect=10),
                transport=self._transport,
            ) as client:
                resp = await client.request(
                    method,
                    self._url(path),
                    headers=headers,
                    params=params,
                    content=json_body,
                    files=files,
                )
        except httpx.TransportError as exc:
            raise TransportError(f"{method} {path} failed: {exc!r}") from exc

        log.debug("%s %s -> %d", method, path, resp.status_code)
        return RawResponse(status=resp.status_code, body=resp.content)
