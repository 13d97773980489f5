"""Tests for client settings."""

import pytest
from pydantic import ValidationError

from openf1_client.conf.settings import Settings


def test_defaults():
    s = Settings(_env_file=None)

    assert s.base_url == "https://api.openf1.org/v1"
    assert s.timeout == 15.0
    assert s.raise_for_status is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("OPENF1_TIMEOUT", "3.5")
    monkeypatch.setenv("OPENF1_RAISE_FOR_STATUS", "true")
    monkeypatch.setenv("OPENF1_BASE_URL", "http://localhost:8000/v1")

    s = Settings(_env_file=None)

    assert s.timeout == 3.5
    assert s.raise_for_status is True
    assert s.base_url == "http://localhost:8000/v1"


def test_settings_are_immutable():
    s = Settings(_env_file=None)

    with pytest.raises(ValidationError):
        s.timeout = 1.0
