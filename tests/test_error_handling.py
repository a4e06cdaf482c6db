"""
エラーハンドリング機能のテスト
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from lambreq import (
    BodyParseError,
    LambreqError,
    UnsupportedEventError,
    ValidationError,
)


class TestErrorTaxonomy:
    """例外クラスのテスト"""

    def test_unsupported_event_error(self):
        """UnsupportedEventError のテスト"""
        error = UnsupportedEventError()
        assert error.message == "Unsupported event shape"
        assert error.error_code == "UNSUPPORTED_EVENT"
        assert error.status_code == 500
        assert str(error) == "Unsupported event shape"

    def test_body_parse_error(self):
        """BodyParseError のテスト"""
        error = BodyParseError("Expecting value")
        assert error.status_code == 400
        assert error.error_code == "BODY_PARSE_ERROR"
        assert str(error) == "Expecting value"

    def test_validation_error_keeps_details(self):
        """ValidationError は details をそのまま保持"""
        issues = [{"path": ["name"], "message": "required"}]
        error = ValidationError("name is required", details=issues)
        assert error.status_code == 400
        assert error.details is issues

    def test_validation_error_default_message(self):
        """ValidationError のデフォルトメッセージ"""
        error = ValidationError()
        assert error.message == "Validation failed"
        assert error.details is None

    def test_kinds_are_distinct(self):
        """3 種類の例外は互いに別の種類"""
        assert not issubclass(BodyParseError, ValidationError)
        assert not issubclass(ValidationError, BodyParseError)
        assert not issubclass(UnsupportedEventError, BodyParseError)
        for error_class in (UnsupportedEventError, BodyParseError, ValidationError):
            assert issubclass(error_class, LambreqError)

    def test_to_dict(self):
        """辞書形式への変換"""
        error = ValidationError("bad input", details=[{"field": "age"}])
        assert error.to_dict() == {
            "error": "VALIDATION_ERROR",
            "message": "bad input",
            "status_code": 400,
            "details": [{"field": "age"}],
        }

    def test_to_dict_without_details(self):
        """details がない場合は含めない"""
        assert "details" not in BodyParseError("oops").to_dict()

    def test_raise_and_catch(self):
        """種類ごとに捕捉できること"""
        with pytest.raises(BodyParseError):
            raise BodyParseError("broken")
