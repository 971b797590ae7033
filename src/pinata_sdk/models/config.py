"""Client configuration model."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_BASE_URL = "https://api.pinata.cloud"


@dataclass
class ClientConfig:
    """Settings used to build a PinataApi instance."""

    # Auth
    api_key: str = ""
    api_secret: str = field(default="", repr=False)  # loaded from env var PINATA_API_SECRET

    # HTTP
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 60.0  # seconds

    # Logging
    log_level: str = "info"
