"""Error taxonomy for every failure the client can report."""

from __future__ import annotations


class ApiError(Exception):
    """Base class for all errors raised by pinata_sdk."""

    retryable: bool = False

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    """Malformed local input: empty credentials, empty path, empty CID."""


class IoError(ApiError):
    """Local filesystem failure while walking or reading content."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class SerializationError(ApiError):
    """A value could not be serialized to JSON."""


class TransportError(ApiError):
    """Network, TLS or connection failure before any HTTP response arrived."""

    retryable = True


class ServiceError(ApiError):
    """The service answered with a non-success status.

    ``message`` holds the service's own error text when the body could be
    parsed, otherwise ``None`` and ``raw_body`` holds the body as received.
    """

    def __init__(
        self,
        status: int,
        message: str | None = None,
        raw_body: str = "",
    ) -> None:
        super().__init__(f"HTTP {status}: {message if message is not None else raw_body}")
        self.status = status
        self.message = message
        self.raw_body = raw_body

    @property
    def retryable(self) -> bool:  # type: ignore[override]
        return self.status == 429 or self.status >= 500


class MalformedResponseError(ApiError):
    """A success status with a body that does not match the expected shape."""

    def __init__(self, message: str, raw_body: str = "") -> None:
        super().__init__(message)
        self.raw_body = raw_body
