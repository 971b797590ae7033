"""Tier 2 fixtures: a local aiohttp server imitating the Pinata API."""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field

import pytest
from aiohttp import web

from pinata_sdk import PinataApi
from tests.conftest import TEST_API_KEY, TEST_API_SECRET

FAKE_SERVICE_PORT = 9311


@dataclass
class FakePinata:
    """State of the fake service: pinned CIDs and the uploads it received."""

    pinned: dict[str, int] = field(default_factory=dict)
    uploads: list[list[tuple[str, str | None]]] = field(default_factory=list)


def _fake_cid(data: bytes) -> str:
    return "Qm" + hashlib.sha256(data).hexdigest()[:44]


def _unauthorized() -> web.Response:
    return web.json_response(
        {"error": {"reason": "INVALID_CREDENTIALS", "details": "Invalid API key or secret"}},
        status=401,
    )


def _authorized(request: web.Request) -> bool:
    return (
        request.headers.get("pinata_api_key") == TEST_API_KEY
        and request.headers.get("pinata_secret_api_key") == TEST_API_SECRET
    )


def _pinned(state: FakePinata, data: bytes) -> web.Response:
    cid = _fake_cid(data)
    duplicate = cid in state.pinned
    state.pinned[cid] = len(data)
    return web.json_response({
        "IpfsHash": cid,
        "PinSize": len(data),
        "Timestamp": "2024-01-01T00:00:00.000Z",
        "isDuplicate": duplicate,
    })


def build_app(state: FakePinata) -> web.Application:
    async def test_auth(request: web.Request) -> web.Response:
        if not _authorized(request):
            return _unauthorized()
        return web.json_response({"message": "Congratulations! You are communicating with the Pinata API!"})

    async def pin_file(request: web.Request) -> web.Response:
        if not _authorized(request):
            return _unauthorized()
        reader = await request.multipart()
        parts: list[tuple[str, str | None]] = []
        digest = b""
        async for part in reader:
            data = await part.read()
            parts.append((part.name, part.filename))
            if part.name == "file":
                digest += (part.filename or "").encode() + data
            else:
                json.loads(data)
        state.uploads.append(parts)
        return _pinned(state, digest)

    async def pin_json(request: web.Request) -> web.Response:
        if not _authorized(request):
            return _unauthorized()
        payload = await request.json()
        if "pinataContent" not in payload:
            return web.json_response(
                {"error": {"reason": "INVALID_REQUEST", "details": "pinataContent is required"}},
                status=400,
            )
        return _pinned(state, json.dumps(payload["pinataContent"]).encode())

    async def unpin(request: web.Request) -> web.Response:
        if not _authorized(request):
            return _unauthorized()
        cid = request.match_info["cid"]
        if state.pinned.pop(cid, None) is None:
            return web.json_response(
                {"error": {"reason": "CURRENT_USER_HAS_NOT_PINNED_CID",
                           "details": "The current user has not pinned the cid: " + cid}},
                status=404,
            )
        return web.Response(text="OK")

    app = web.Application()
    app.router.add_get("/data/testAuthentication", test_auth)
    app.router.add_post("/pinning/pinFileToIPFS", pin_file)
    app.router.add_post("/pinning/pinJSONToIPFS", pin_json)
    app.router.add_delete("/pinning/unpin/{cid}", unpin)
    return app


@pytest.fixture
async def fake_service():
    """Run the fake service; yields (base_url, state)."""
    state = FakePinata()
    runner = web.AppRunner(build_app(state))
    await runner.setup()
    site = web.TCPSite(runner, "127.0.0.1", FAKE_SERVICE_PORT)
    await site.start()
    yield f"http://127.0.0.1:{FAKE_SERVICE_PORT}", state
    await runner.cleanup()


@pytest.fixture
def live_api(fake_service):
    base_url, _ = fake_service
    return PinataApi(TEST_API_KEY, TEST_API_SECRET, base_url=base_url, timeout=5)
