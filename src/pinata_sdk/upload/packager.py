"""Content packager - turns pin requests into request bodies.

File pins become multipart bodies: one ``file`` part per uploaded file,
followed by ``pinataMetadata`` / ``pinataOptions`` JSON text parts.
JSON and hash pins become a single JSON object using the same envelope keys.
Bodies are fully built before anything is sent.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import stat
from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import Any

from pinata_sdk.errors import IoError, SerializationError, ValidationError
from pinata_sdk.models.requests import PinByFile, PinByHash, PinByJson, PinMetadata, PinOptions
from pinata_sdk.upload.walker import walk_directory

log = logging.getLogger(__name__)

FILE_FIELD = "file"
CONTENT_KEY = "pinataContent"
METADATA_KEY = "pinataMetadata"
OPTIONS_KEY = "pinataOptions"
JSON_CONTENT_TYPE = "application/json"
OCTET_STREAM = "application/octet-stream"


@dataclass(frozen=True)
class FilePart:
    filename: str
    content: bytes
    name: str = FILE_FIELD


@dataclass(frozen=True)
class TextPart:
    name: str
    value: str


@dataclass
class MultipartBody:
    files: list[FilePart] = field(default_factory=list)
    fields: list[TextPart] = field(default_factory=list)

    def to_httpx_files(self) -> list[tuple[str, tuple[str | None, Any, str]]]:
        """Render as the ``files=`` argument of httpx, keeping part order."""
        parts: list[tuple[str, tuple[str | None, Any, str]]] = [
            (p.name, (p.filename, p.content, OCTET_STREAM)) for p in self.files
        ]
        parts.extend((t.name, (None, t.value, JSON_CONTENT_TYPE)) for t in self.fields)
        return parts


@dataclass(frozen=True)
class JsonBody:
    payload: dict[str, Any]
    text: str

    def encode(self) -> bytes:
        return self.text.encode("utf-8")


def dumps(value: Any) -> str:
    """Serialize to compact JSON text; NaN and Infinity are rejected."""
    try:
        return json.dumps(value, allow_nan=False, separators=(",", ":"))
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationError(f"value is not JSON serializable: {exc}") from exc


def envelope(
    metadata: PinMetadata | None, options: PinOptions | None,
) -> dict[str, dict]:
    """Return the ``pinataMetadata`` / ``pinataOptions`` entries that are set."""
    out: dict[str, dict] = {}
    if metadata is not None:
        out[METADATA_KEY] = metadata.to_json()
    if options is not None:
        out[OPTIONS_KEY] = options.to_json()
    return out


async def package_file_request(request: PinByFile) -> MultipartBody:
    """Build the multipart body for a file or directory pin.

    An empty path is rejected. ``Path("")`` normalizes to ``Path(".")``, so
    any Path object equal to it is rejected too; pass the string ``"."`` or
    an absolute path to pin the working directory.
    """
    raw = request.path
    if os.fspath(raw) == "" or (isinstance(raw, PurePath) and raw == Path("")):
        raise ValidationError("path must not be empty")
    path = Path(raw)

    try:
        st = path.stat()
    except OSError as exc:
        raise IoError(f"cannot access {path}: {exc}", str(path)) from exc

    body = MultipartBody()
    if stat.S_ISDIR(st.st_mode):
        root_name = Path(os.path.abspath(path)).name
        # listdir/stat of a large tree would block the loop, so enumerate in a thread
        entries = await asyncio.to_thread(lambda: list(walk_directory(path)))
        for entry in entries:
            content = await asyncio.to_thread(entry.read)
            body.files.append(FilePart(f"{root_name}/{entry.relative_path}", content))
        if not body.files:
            raise ValidationError(f"directory contains no files: {path}")
        log.debug("Packaged %d files from %s", len(body.files), path)
    elif stat.S_ISREG(st.st_mode):
        try:
            content = await asyncio.to_thread(path.read_bytes)
        except OSError as exc:
            raise IoError(f"cannot read {path}: {exc}", str(path)) from exc
        body.files.append(FilePart(path.name, content))
    else:
        raise IoError(f"not a regular file or directory: {path}", str(path))

    for key, value in envelope(request.metadata, request.options).items():
        body.fields.append(TextPart(key, dumps(value)))
    return body


def package_json_request(request: PinByJson) -> JsonBody:
    payload: dict[str, Any] = {CONTENT_KEY: request.content}
    payload.update(envelope(request.metadata, request.options))
    return JsonBody(payload=payload, text=dumps(payload))


def package_hash_request(request: PinByHash) -> JsonBody:
    if not request.hash_to_pin:
        raise ValidationError("hash_to_pin must not be empty")
    payload: dict[str, Any] = {"hashToPin": request.hash_to_pin}
    payload.update(envelope(request.metadata, request.options))
    return JsonBody(payload=payload, text=dumps(payload))
