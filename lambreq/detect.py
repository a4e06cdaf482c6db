"""
イベント種別の判定

API Gateway のプロキシイベントがペイロード v1.0 (REST API) か
v2.0 (HTTP API) かを判定します。
"""

import logging
from typing import Any, Mapping

from .exceptions import UnsupportedEventError
from .types import EventKind

logger = logging.getLogger(__name__)


def detect_event_kind(event: Any) -> EventKind:
    """イベント種別を判定

    v2.0 の判定を先に行います。両方の条件を満たすイベントは v2 として扱います。

    Args:
        event: Lambda に渡されたプロキシイベント

    Returns:
        "v1" または "v2"

    Raises:
        UnsupportedEventError: どちらの形式にも該当しない場合
    """
    if not isinstance(event, Mapping):
        raise UnsupportedEventError(f"Unsupported event type: {type(event).__name__}")

    if event.get("version") == "2.0" or "rawPath" in event:
        logger.debug("ペイロード v2.0 イベントとして判定")
        return "v2"

    if "httpMethod" in event and "path" in event:
        logger.debug("ペイロード v1.0 イベントとして判定")
        return "v1"

    raise UnsupportedEventError()
