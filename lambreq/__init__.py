"""
lambreq

API Gateway のプロキシイベント (ペイロード v1.0 / v2.0) を
統一されたインターフェースで読み取るための軽量ライブラリ

使用例:
    from lambreq import HttpApi

    def lambda_handler(event, context):
        request = HttpApi.Request(event)
        name = request.get_input("name", "anonymous")
        return HttpApi.Response.json({"message": f"Hello {name}!"})
"""

from .adapters import RestApiRequest, HttpApiRequest, create_request
from .detect import detect_event_kind
from .exceptions import (
    LambreqError,
    UnsupportedEventError,
    BodyParseError,
    ValidationError,
)
from .request import BaseRequest, ParsedBody
from .response import Response
from .types import (
    EventKind,
    ValidationSource,
    Validator,
    RequestOptions,
    create_request_options,
)
from .validators import create_pydantic_validator, create_jsonschema_validator


class RestApi:
    """REST API (ペイロード v1.0) 用の Request / Response"""

    Request = RestApiRequest
    Response = Response


class HttpApi:
    """HTTP API (ペイロード v2.0) 用の Request / Response"""

    Request = HttpApiRequest
    Response = Response


__version__ = "0.1.0"

__all__ = [
    "RestApi",
    "HttpApi",
    "BaseRequest",
    "ParsedBody",
    "RestApiRequest",
    "HttpApiRequest",
    "create_request",
    "detect_event_kind",
    "Response",
    "LambreqError",
    "UnsupportedEventError",
    "BodyParseError",
    "ValidationError",
    "EventKind",
    "ValidationSource",
    "Validator",
    "RequestOptions",
    "create_request_options",
    "create_pydantic_validator",
    "create_jsonschema_validator",
]
