"""Unit tests for env-driven settings."""

from __future__ import annotations

import pytest

from session_timing.config import (
    ConfigError,
    DemoSettings,
    EnvSettingsLoader,
    InvalidSettingValueError,
)


class TestDemoSettings:
    def test_defaults(self) -> None:
        settings = DemoSettings()
        assert settings.delay_seconds == 2
        assert settings.slack_seconds == 1
        assert settings.log_level == "WARNING"
        assert settings.json_logs is False

    def test_log_level_is_normalised(self) -> None:
        assert DemoSettings(log_level="debug").log_level == "DEBUG"

    def test_negative_delay_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            DemoSettings(delay_seconds=-1)
        assert exc_info.value.setting_name == "delay_seconds"

    def test_negative_slack_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            DemoSettings(slack_seconds=-1)

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            DemoSettings(log_level="chatty")


class TestEnvSettingsLoader:
    def test_no_env_uses_defaults(self) -> None:
        assert EnvSettingsLoader({}).load(DemoSettings) == DemoSettings()

    def test_loads_from_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SESSION_TIMING_DELAY_SECONDS", "5")
        assert EnvSettingsLoader().load(DemoSettings).delay_seconds == 5

    def test_loads_all_fields(self) -> None:
        settings = EnvSettingsLoader(
            {
                "SESSION_TIMING_DELAY_SECONDS": "0",
                "SESSION_TIMING_SLACK_SECONDS": "3",
                "SESSION_TIMING_LOG_LEVEL": "info",
                "SESSION_TIMING_JSON_LOGS": "yes",
            }
        ).load(DemoSettings)
        assert settings == DemoSettings(delay_seconds=0, slack_seconds=3, log_level="INFO", json_logs=True)

    @pytest.mark.parametrize("raw", ["false", "0", "off", "no"])
    def test_false_booleans(self, raw: str) -> None:
        settings = EnvSettingsLoader({"SESSION_TIMING_JSON_LOGS": raw}).load(DemoSettings)
        assert settings.json_logs is False

    def test_bad_int_is_invalid_value(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader({"SESSION_TIMING_DELAY_SECONDS": "soon"}).load(DemoSettings)
        assert exc_info.value.setting_name == "SESSION_TIMING_DELAY_SECONDS"

    def test_bad_bool_is_invalid_value(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"SESSION_TIMING_JSON_LOGS": "maybe"}).load(DemoSettings)

    def test_validation_failure_is_config_error(self) -> None:
        with pytest.raises(ConfigError):
            EnvSettingsLoader({"SESSION_TIMING_DELAY_SECONDS": "-4"}).load(DemoSettings)
