"""Mini README: Tests for environment-driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from atcpilot.configuration import AtcPilotSettings


def test_defaults_keep_reversal_filter_disabled(monkeypatch) -> None:
    monkeypatch.delenv("ATCPILOT_ENFORCE_NO_REVERSAL", raising=False)
    settings = AtcPilotSettings(_env_file=None)
    assert settings.enforce_no_reversal is False
    assert settings.server_address == "localhost:4747"
    assert settings.service_provider == "simulator"


def test_environment_overrides_are_applied(monkeypatch) -> None:
    monkeypatch.setenv("ATCPILOT_ENFORCE_NO_REVERSAL", "true")
    monkeypatch.setenv("ATCPILOT_LOG_LEVEL", "debug")
    settings = AtcPilotSettings(_env_file=None)
    assert settings.enforce_no_reversal is True
    assert settings.log_level == "DEBUG"


def test_unknown_log_level_is_rejected() -> None:
    with pytest.raises(ValidationError):
        AtcPilotSettings(_env_file=None, log_level="chatty")


def test_server_address_is_documented_as_external_only() -> None:
    description = AtcPilotSettings.model_fields["server_address"].description
    assert "external providers only" in description
