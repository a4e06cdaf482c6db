"""
REST API (ペイロード v1.0) 用 Request
"""

from typing import List, Optional

from ..detect import detect_event_kind
from ..exceptions import UnsupportedEventError
from ..request import BaseRequest
from ..types import ProxyEvent, RequestOptions


class RestApiRequest(BaseRequest):
    """ペイロード v1.0 イベントの Request"""

    def __init__(self, event: ProxyEvent, options: Optional[RequestOptions] = None) -> None:
        if detect_event_kind(event) != "v1":
            raise UnsupportedEventError("Expected payload v1.0 event")
        super().__init__(event, options)

    def get_method(self) -> Optional[str]:
        return self._event.get("httpMethod")

    def get_path(self) -> Optional[str]:
        return self._event.get("path")

    def _header_lookup(self, normalized_name: str) -> Optional[str]:
        headers = self._event.get("headers") or {}
        for name, value in headers.items():
            if name.lower() == normalized_name:
                return value

        # 単一値ヘッダーになければ複数値ヘッダーの先頭を返す
        multi_headers = self._event.get("multiValueHeaders") or {}
        for name, values in multi_headers.items():
            if name.lower() == normalized_name:
                return values[0] if isinstance(values, list) and values else None

        return None

    def _query_value(self, key: str) -> Optional[str]:
        multi_values = self._event.get("multiValueQueryStringParameters") or {}
        values = multi_values.get(key)
        if values:
            return ",".join(values)

        singles = self._event.get("queryStringParameters") or {}
        return singles.get(key)

    def _query_values(self, key: str) -> Optional[List[str]]:
        multi_values = self._event.get("multiValueQueryStringParameters") or {}
        values = multi_values.get(key)
        if values:
            return list(values)

        singles = self._event.get("queryStringParameters") or {}
        value = singles.get(key)
        return None if value is None else [value]
