"""
JSON 処理統一ハンドラー

Lambda 環境での高速 JSON 処理を提供します。
orjson がインストールされていれば使用し、なければ標準 json モジュールを使用します。
"""

import json
from typing import Any, Union

# オプション: orjson による更なる高速化
try:
    import orjson

    HAS_ORJSON = True
except ImportError:
    HAS_ORJSON = False


class JSONHandler:
    """高速 JSON 処理の統一インターフェース"""

    @staticmethod
    def loads(data: Union[str, bytes]) -> Any:
        """
        JSON パース

        Args:
            data: JSON 文字列またはバイト列

        Returns:
            Any: パースされた値（オブジェクトに限らない）

        Raises:
            ValueError: 無効な JSON の場合（json.JSONDecodeError / orjson.JSONDecodeError）
        """
        if HAS_ORJSON:
            # orjson は文字列とバイト列の両方を受け入れる
            return orjson.loads(data)

        # 標準 json モジュールは文字列のみ
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        try:
            return json.loads(data, parse_constant=_reject_constant)
        except RecursionError as e:
            raise ValueError("JSON nesting too deep") from e

    @staticmethod
    def dumps(data: Any, ensure_ascii: bool = False) -> str:
        """
        JSON シリアライズ

        Lambda 環境での転送効率化のため、常に最小化されます。

        Raises:
            TypeError: シリアライズできない値が含まれる場合
        """
        if HAS_ORJSON and not ensure_ascii:
            try:
                return orjson.dumps(data, option=orjson.OPT_NON_STR_KEYS).decode("utf-8")
            except orjson.JSONEncodeError as e:
                raise TypeError(str(e)) from e

        return json.dumps(data, ensure_ascii=ensure_ascii, separators=(",", ":"))


def _reject_constant(name: str) -> Any:
    """NaN / Infinity / -Infinity は JSON として扱わない（orjson と同じ挙動）"""
    raise ValueError(f"Invalid JSON constant: {name}")
