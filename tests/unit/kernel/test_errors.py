"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from session_timing.config import ConfigError, InvalidSettingValueError
from session_timing.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    DurationOutOfRangeError,
    InvariantViolationError,
    ScenarioFailedError,
    SessionNotStoppedError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        assert BaseError("something went wrong").message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_cause_is_chained(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause
        assert "root" in err.to_dict()["cause"]

    def test_str_is_valid_json(self) -> None:
        parsed = json.loads(str(BaseError("oops", code="oops", detail={"x": 1})))
        assert parsed == {"code": "oops", "message": "oops", "detail": {"x": 1}}

    def test_repr(self) -> None:
        assert repr(BaseError("m")) == "BaseError(code='base_error', message='m')"


class TestDomainErrors:
    def test_session_not_stopped_defaults(self) -> None:
        err = SessionNotStoppedError()
        assert err.code == "session_not_stopped"
        assert err.message == "Session has not been stopped"
        assert isinstance(err, InvariantViolationError)
        assert isinstance(err, DomainError)

    def test_duration_out_of_range(self) -> None:
        err = DurationOutOfRangeError(-5)
        assert err.total_seconds == -5
        assert err.code == "duration_out_of_range"
        assert isinstance(err, ValidationError)
        assert err.to_dict()["errors"][0]["value"] == -5

    def test_validation_error_errors_default_empty(self) -> None:
        assert ValidationError("bad").errors == []


class TestApplicationErrors:
    def test_scenario_failed_carries_values(self) -> None:
        err = ScenarioFailedError("mock_clock", expected="00:10:00", actual="00:09:59")
        assert err.scenario == "mock_clock"
        assert err.detail == {"scenario": "mock_clock", "expected": "00:10:00", "actual": "00:09:59"}
        assert isinstance(err, ApplicationError)

    def test_config_errors_are_application_errors(self) -> None:
        err = InvalidSettingValueError("delay_seconds", -1, "must be >= 0")
        assert isinstance(err, ConfigError)
        assert isinstance(err, ApplicationError)
        assert "delay_seconds" in err.message

    def test_catchable_as_base_error(self) -> None:
        with pytest.raises(BaseError):
            raise ScenarioFailedError("x", expected="a", actual="b")
