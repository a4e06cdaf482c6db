"""
ペイロード形式ごとの Request アダプター
"""

from typing import Optional, Union

from ..detect import detect_event_kind
from ..types import ProxyEvent, RequestOptions
from .http_api import HttpApiRequest
from .rest_api import RestApiRequest


def create_request(
    event: ProxyEvent, options: Optional[RequestOptions] = None
) -> Union[RestApiRequest, HttpApiRequest]:
    """イベント種別を判定して対応する Request を作成

    Raises:
        UnsupportedEventError: どちらの形式にも該当しない場合
    """
    if detect_event_kind(event) == "v2":
        return HttpApiRequest(event, options)
    return RestApiRequest(event, options)


__all__ = ["RestApiRequest", "HttpApiRequest", "create_request"]
