"""
Response ヘルパー

API Gateway のプロキシ統合が受け付けるレスポンス辞書を作成します。
ペイロード v1.0 / v2.0 のどちらでも同じ形式を使用します。
"""

from typing import Any, Dict, Optional

from .json_handler import JSONHandler
from .types import ProxyResult

Headers = Dict[str, str]


def merge_headers(base: Optional[Headers], extra: Headers) -> Headers:
    """ヘッダーをマージ（キーが重複した場合は extra を優先）"""
    return {**(base or {}), **extra}


class Response:
    """レスポンス作成ヘルパー"""

    @staticmethod
    def json(body: Any, status_code: int = 200, headers: Optional[Headers] = None) -> ProxyResult:
        """JSON レスポンスを作成"""
        return {
            "statusCode": status_code,
            "headers": merge_headers(headers, {"content-type": "application/json"}),
            "body": JSONHandler.dumps(body),
        }

    @staticmethod
    def text(body: str, status_code: int = 200, headers: Optional[Headers] = None) -> ProxyResult:
        """テキストレスポンスを作成"""
        return {
            "statusCode": status_code,
            "headers": merge_headers(headers, {"content-type": "text/plain; charset=utf-8"}),
            "body": body,
        }

    @staticmethod
    def no_content(headers: Optional[Headers] = None) -> ProxyResult:
        """204 No Content レスポンスを作成（Content-Type は付与しない）"""
        result: ProxyResult = {"statusCode": 204, "body": ""}
        if headers is not None:
            result["headers"] = dict(headers)
        return result

    @staticmethod
    def redirect(
        location: str, status_code: int = 302, headers: Optional[Headers] = None
    ) -> ProxyResult:
        """リダイレクトレスポンスを作成

        呼び出し側が Location を指定した場合はそちらを優先します。
        """
        return {
            "statusCode": status_code,
            "headers": merge_headers({"Location": location}, headers or {}),
            "body": "",
        }
