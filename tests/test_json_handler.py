"""
JSON ハンドラーのテスト
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from lambreq.json_handler import JSONHandler


class TestJSONHandler:
    """JSONHandler のテスト"""

    def test_loads_any_value(self):
        """オブジェクト以外もパース"""
        assert JSONHandler.loads('{"a": 1}') == {"a": 1}
        assert JSONHandler.loads("[1, 2]") == [1, 2]
        assert JSONHandler.loads("null") is None
        assert JSONHandler.loads(b'"text"') == "text"

    def test_loads_invalid(self):
        """不正な JSON は ValueError"""
        with pytest.raises(ValueError):
            JSONHandler.loads("{invalid")

    def test_loads_stdlib_rejects_constants(self, monkeypatch):
        """標準 json でも NaN は ValueError"""
        monkeypatch.setattr("lambreq.json_handler.HAS_ORJSON", False)
        with pytest.raises(ValueError):
            JSONHandler.loads('{"a": NaN}')

    def test_loads_stdlib_deep_nesting(self, monkeypatch):
        """標準 json の RecursionError は ValueError に変換"""
        monkeypatch.setattr("lambreq.json_handler.HAS_ORJSON", False)
        with pytest.raises(ValueError):
            JSONHandler.loads("[" * 100000)

    def test_dumps_compact(self):
        """最小化して出力"""
        assert JSONHandler.dumps({"a": [1, 2]}) == '{"a":[1,2]}'

    def test_dumps_ensure_ascii(self):
        """ensure_ascii 指定時はエスケープ"""
        assert JSONHandler.dumps("é", ensure_ascii=True) == '"\\u00e9"'

    def test_dumps_unserializable(self):
        """シリアライズできない値は TypeError"""
        with pytest.raises(TypeError):
            JSONHandler.dumps({"value": object()})
