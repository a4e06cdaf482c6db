"""
HTTP API (ペイロード v2.0) 用 Request

v2.0 では複数値のクエリマップが存在しないため、
rawQueryString から複数値を復元します。
"""

from typing import Dict, List, Optional
from urllib.parse import parse_qsl

from ..detect import detect_event_kind
from ..exceptions import UnsupportedEventError
from ..request import BaseRequest
from ..types import ProxyEvent, RequestOptions


def parse_raw_query(raw_query: str) -> Dict[str, List[str]]:
    """rawQueryString をキーごとの値リストに変換（キーは出現順）"""
    result: Dict[str, List[str]] = {}
    if not raw_query:
        return result

    for key, value in parse_qsl(raw_query, keep_blank_values=True):
        result.setdefault(key, []).append(value)
    return result


class HttpApiRequest(BaseRequest):
    """ペイロード v2.0 イベントの Request"""

    def __init__(self, event: ProxyEvent, options: Optional[RequestOptions] = None) -> None:
        if detect_event_kind(event) != "v2":
            raise UnsupportedEventError("Expected payload v2.0 event")
        super().__init__(event, options)
        self._raw_query_values = parse_raw_query(event.get("rawQueryString") or "")
        self._raw_query_map = {
            key: ",".join(values) for key, values in self._raw_query_values.items()
        }

    def get_method(self) -> Optional[str]:
        context = self._event.get("requestContext") or {}
        http = context.get("http") or {}
        return http.get("method")

    def get_path(self) -> Optional[str]:
        return self._event.get("rawPath")

    def _header_lookup(self, normalized_name: str) -> Optional[str]:
        headers = self._event.get("headers") or {}
        for name, value in headers.items():
            if name.lower() == normalized_name:
                return value
        return None

    def _query_value(self, key: str) -> Optional[str]:
        if key in self._raw_query_map:
            return self._raw_query_map[key]

        # ゲートウェイが連結済みの単一値マップにフォールバック
        return self.query_params.get(key)

    def _query_values(self, key: str) -> Optional[List[str]]:
        if key in self._raw_query_values:
            return list(self._raw_query_values[key])

        value = self.query_params.get(key)
        return None if value is None else [value]
