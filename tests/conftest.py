"""Shared fixtures for pinata_sdk tests."""

from __future__ import annotations

import pytest
from pytest_metadata.plugin import metadata_key

from pinata_sdk.api.client import PinataApi
from pinata_sdk.models.config import DEFAULT_BASE_URL

from tests.factories import make_tree
from tests.mocks import MockTransport

TEST_API_KEY = "test-api-key"
TEST_API_SECRET = "test-api-secret"


# ── Report metadata ──────────────────────────────────────────────


def pytest_configure(config):
    """Add service info to the HTML report Environment table."""
    meta = config.stash.setdefault(metadata_key, {})
    meta["Service"] = DEFAULT_BASE_URL
    meta["API Key"] = TEST_API_KEY


def pytest_html_results_summary(prefix, summary, postfix):
    """Note in the report summary that no request reaches the real service."""
    prefix.append(
        '<div style="margin:8px 0;padding:10px;background:#f8f9fa;border:1px solid #dee2e6;'
        'border-radius:4px;font-family:monospace;font-size:13px;">'
        "<strong>All requests served by mock transports or a local fake service</strong>"
        "</div>"
    )


@pytest.fixture
def mock_transport():
    return MockTransport()


@pytest.fixture
def api(mock_transport):
    """PinataApi wired to a MockTransport."""
    return PinataApi(TEST_API_KEY, TEST_API_SECRET, transport=mock_transport)


@pytest.fixture
def sample_tree(tmp_path):
    """Directory ``mydir`` with ``a.txt`` and ``sub/b.txt``."""
    return make_tree(
        tmp_path / "mydir",
        {"a.txt": b"alpha", "sub/b.txt": b"bravo"},
    )
