"""Tests for DconvSettings — CLI flags over env vars over defaults."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from dconv.config.settings import DconvSettings


class TestDefaults:
    def test_all_defaults(self) -> None:
        settings = DconvSettings.from_cli()
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.log_json is False
        assert settings.utc_offset is None
        assert settings.offset is None

    def test_frozen(self) -> None:
        settings = DconvSettings.from_cli()
        with pytest.raises(ValidationError):
            settings.quiet = True  # type: ignore[misc]


class TestEnvVars:
    def test_env_flag(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DCONV_JSON_OUTPUT", "true")
        assert DconvSettings.from_cli().json_output is True

    def test_env_offset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DCONV_UTC_OFFSET", "+02:00")
        settings = DconvSettings.from_cli()
        assert settings.offset is not None
        assert settings.offset.utcoffset(None) == timedelta(hours=2)

    def test_unset_cli_flag_keeps_env_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DCONV_QUIET", "1")
        assert DconvSettings.from_cli(quiet=False).quiet is True

    def test_invalid_env_offset(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DCONV_UTC_OFFSET", "UTC+2")
        with pytest.raises(ValidationError):
            DconvSettings.from_cli()


class TestCliFlags:
    def test_cli_flags_override(self) -> None:
        settings = DconvSettings.from_cli(json_output=True, quiet=True, verbose=True)
        assert settings.json_output is True
        assert settings.quiet is True
        assert settings.verbose is True

    def test_cli_offset_overrides_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DCONV_UTC_OFFSET", "+02:00")
        settings = DconvSettings.from_cli(utc_offset="-05:30")
        assert settings.offset is not None
        assert settings.offset.utcoffset(None) == -timedelta(hours=5, minutes=30)
