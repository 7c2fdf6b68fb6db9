"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from hooksign.config.validation import (
    ConfigError,
    InvalidSecretError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    UnsupportedAlgorithmError,
)
from hooksign.kernel.errors import ApplicationError, BaseError, TokenParseError


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        err = BaseError("m", code="custom")
        assert err.code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        d = err.to_dict()
        assert "original" in d["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.__cause__ is cause

    def test_str_is_valid_json(self) -> None:
        err = BaseError("oops", code="oops", detail={"x": 1})
        parsed = json.loads(str(err))
        assert parsed["code"] == "oops"

    def test_repr(self) -> None:
        assert repr(BaseError("m", code="c")) == "BaseError(code='c', message='m')"


class TestTokenParseError:
    def test_is_application_error(self) -> None:
        assert issubclass(TokenParseError, ApplicationError)

    def test_defaults(self) -> None:
        err = TokenParseError()
        assert err.code == "token_parse_error"
        assert err.message == "Malformed token"
        assert err.segment is None

    def test_segment(self) -> None:
        assert TokenParseError("bad", segment="claims").segment == "claims"


class TestConfigErrors:
    @pytest.mark.parametrize(
        "cls",
        [MissingRequiredSettingError, InvalidSettingValueError, InvalidSecretError, UnsupportedAlgorithmError],
    )
    def test_all_are_config_errors(self, cls: type) -> None:
        assert issubclass(cls, ConfigError)
        assert issubclass(cls, ApplicationError)

    def test_missing_required_setting(self) -> None:
        err = MissingRequiredSettingError("WEBHOOK_SECRET")
        assert err.setting_name == "WEBHOOK_SECRET"
        assert "WEBHOOK_SECRET" in err.message
        assert err.code == "missing_required_setting"

    def test_invalid_setting_value(self) -> None:
        err = InvalidSettingValueError("mac_algorithm", "HmacMD5", "unknown")
        assert err.value == "HmacMD5"
        assert err.reason == "unknown"

    def test_unsupported_algorithm_detail(self) -> None:
        err = UnsupportedAlgorithmError("RS256", ["HS256", "HS384"])
        assert err.code == "unsupported_algorithm"
        assert err.detail == {"algorithm": "RS256", "supported": ["HS256", "HS384"]}
        assert "HS256, HS384" in err.message

    def test_invalid_secret_code(self) -> None:
        assert InvalidSecretError("empty").code == "invalid_secret"
