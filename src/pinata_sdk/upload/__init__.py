"""Upload pipeline - directory walking and request body packaging."""

from pinata_sdk.upload.packager import (
    FilePart,
    JsonBody,
    MultipartBody,
    TextPart,
    package_file_request,
    package_hash_request,
    package_json_request,
)
from pinata_sdk.upload.walker import FileEntry, walk_directory

__all__ = [
    "FilePart", "JsonBody", "MultipartBody", "TextPart",
    "package_file_request", "package_hash_request", "package_json_request",
    "FileEntry", "walk_directory",
]
