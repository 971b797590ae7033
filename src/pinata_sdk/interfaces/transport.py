"""Transport protocol - sends one HTTP request to the pinning service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class RawResponse:
    """Status code and undecoded body of a service response."""

    status: int
    body: bytes

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class Transport(Protocol):
    """Issues requests against the service's fixed endpoints."""

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json_body: bytes | None = None,
        files: list[tuple[str, Any]] | None = None,
    ) -> RawResponse:
        """Send a request and return the raw response.

        Raises TransportError if no response was received.
        """
        ...
