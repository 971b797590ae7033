"""Credential validation and header construction."""

from __future__ import annotations

import pytest

from pinata_sdk import Credentials, PinataApi, ValidationError


@pytest.mark.parametrize("key,secret", [("k", "s"), ("abc123", "xyz789")])
def test_valid_credentials_construct(key, secret):
    creds = Credentials(key, secret)
    assert creds.headers() == {
        "pinata_api_key": key,
        "pinata_secret_api_key": secret,
    }


@pytest.mark.parametrize("key,secret", [("", "s"), ("k", ""), ("", ""), ("   ", "s")])
def test_empty_member_rejected(key, secret):
    with pytest.raises(ValidationError):
        Credentials(key, secret)


def test_client_construction_validates_credentials():
    with pytest.raises(ValidationError):
        PinataApi("", "secret")


def test_secret_hidden_from_repr():
    creds = Credentials("visible-key", "hidden-secret")
    assert "hidden-secret" not in repr(creds)
    assert "visible-key" in repr(creds)


def test_credentials_are_immutable():
    creds = Credentials("k", "s")
    with pytest.raises(AttributeError):
        creds.api_key = "other"  # type: ignore[misc]
