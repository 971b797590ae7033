"""API key / secret holder."""

from __future__ import annotations

from dataclasses import dataclass, field

from pinata_sdk.errors import ValidationError

API_KEY_HEADER = "pinata_api_key"
SECRET_API_KEY_HEADER = "pinata_secret_api_key"


@dataclass(frozen=True)
class Credentials:
    """Immutable API key / secret pair attached to every request."""

    api_key: str
    api_secret: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.api_key or not self.api_key.strip():
            raise ValidationError("api_key must not be empty")
        if not self.api_secret or not self.api_secret.strip():
            raise ValidationError("api_secret must not be empty")

    def headers(self) -> dict[str, str]:
        return {
            API_KEY_HEADER: self.api_key,
            SECRET_API_KEY_HEADER: self.api_secret,
        }
