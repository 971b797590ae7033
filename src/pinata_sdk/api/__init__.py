"""API components - public client, httpx transport and response normalizer."""

from pinata_sdk.api.client import PinataApi
from pinata_sdk.api.transport import HttpTransport

__all__ = ["PinataApi", "HttpTransport"]
