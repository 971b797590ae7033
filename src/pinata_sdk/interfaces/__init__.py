"""Protocol interfaces for pinata_sdk collaborators."""

from pinata_sdk.interfaces.transport import RawResponse, Transport

__all__ = ["RawResponse", "Transport"]
