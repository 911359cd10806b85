"""Mini README: Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pocketledger.configuration import PocketLedgerSettings


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POCKETLEDGER_API_BASE_URL", "http://ledger.example:8080/api/v1/")
    monkeypatch.setenv("POCKETLEDGER_REQUEST_TIMEOUT_SECONDS", "2.5")

    settings = PocketLedgerSettings()

    assert settings.api_base_url == "http://ledger.example:8080/api/v1"
    assert settings.request_timeout_seconds == 2.5
    assert settings.interface_port == 5000


def test_rejects_non_http_base_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("POCKETLEDGER_API_BASE_URL", "ftp://ledger.example")

    with pytest.raises(ValidationError):
        PocketLedgerSettings()
