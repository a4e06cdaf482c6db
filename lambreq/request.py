"""
Request 基底クラス

ペイロード v1.0 / v2.0 のプロキシイベントを統一されたインターフェースで読み取る
Request オブジェクトの共通実装を提供します。
ヘッダー検索と単一クエリ値の解決のみを各アダプターが実装します。
"""

import base64
import logging
import re
from abc import ABC, abstractmethod
from typing import Any, Dict, List, NamedTuple, Optional, TypeVar
from urllib.parse import parse_qsl

from .exceptions import BodyParseError, ValidationError
from .json_handler import JSONHandler
from .types import (
    ProxyEvent,
    RequestOptions,
    ValidationSource,
    Validator,
    VALIDATION_SOURCES,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class ParsedBody(NamedTuple):
    """パース済みボディ

    kind は "empty" / "json" / "form" / "text" のいずれか。
    """

    kind: str
    value: Any = None


EMPTY_BODY = ParsedBody("empty")

_NON_BASE64_CHARS = re.compile(r"[^A-Za-z0-9+/]")


def _lenient_b64decode(data: str) -> bytes:
    """Base64 (URL セーフ形式も可) を寛容にデコード"""
    cleaned = _NON_BASE64_CHARS.sub("", data.replace("-", "+").replace("_", "/"))
    # 4 文字単位で 1 文字だけ余った分はデコードできないため捨てる
    if len(cleaned) % 4 == 1:
        cleaned = cleaned[:-1]
    return base64.b64decode(cleaned + "=" * (-len(cleaned) % 4))


class BaseRequest(ABC):
    """Request の共通実装"""

    def __init__(self, event: ProxyEvent, options: Optional[RequestOptions] = None) -> None:
        self._event = event
        self.options = options or RequestOptions()
        self._parsed_body: Optional[ParsedBody] = None

    @property
    def event(self) -> ProxyEvent:
        """元のイベントを取得（変更しないこと）"""
        return self._event

    @property
    def query_params(self) -> Dict[str, Any]:
        """単一値のクエリパラメータを取得"""
        return self._event.get("queryStringParameters") or {}

    @property
    def path_params(self) -> Dict[str, Any]:
        """パスパラメータを取得"""
        return self._event.get("pathParameters") or {}

    # パスパラメータ

    def get_path_param(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """パスパラメータを取得"""
        value = self.path_params.get(key)
        return default if value is None else value

    # クエリ文字列

    def get_query_str(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """クエリ文字列を取得

        複数値のキーはカンマ区切りで連結された値を返します。
        """
        value = self._query_value(key)
        return default if value is None else value

    def get_query_strs(
        self, keys: List[str], default: Optional[str] = None
    ) -> Dict[str, Optional[str]]:
        """複数のクエリ文字列をまとめて取得"""
        return {key: self.get_query_str(key, default) for key in keys}

    def get_query_values(
        self, key: str, default: Optional[List[str]] = None
    ) -> Optional[List[str]]:
        """クエリ文字列の全ての値をリストで取得"""
        values = self._query_values(key)
        return default if values is None else values

    # ヘッダー

    def get_header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """ヘッダーを取得（大文字小文字を区別しない）"""
        value = self._header_lookup(name.lower())
        return default if value is None else value

    def get_method(self) -> Optional[str]:
        """HTTP メソッドを取得"""
        return None

    def get_path(self) -> Optional[str]:
        """リクエストパスを取得"""
        return None

    def get_request_time_epoch(self) -> Optional[float]:
        """リクエスト受信時刻（エポックミリ秒）を取得"""
        context = self._event.get("requestContext") or {}
        for field in ("timeEpoch", "requestTimeEpoch"):
            value = context.get(field)
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                return value
        return None

    # ボディ

    def get_raw_body(self) -> Optional[str]:
        """生のリクエストボディを取得

        isBase64Encoded が真の場合はデコードした文字列を返します。
        パディングの不足や不正な文字は無視してデコードします。
        """
        body = self._event.get("body")
        if body is None or body == "":
            return None

        if self._event.get("isBase64Encoded"):
            return _lenient_b64decode(body).decode("utf-8", errors="replace")
        return body

    def get_json_body(self) -> Any:
        """JSON ボディを取得

        Content-Type が application/json でない場合は None を返します。
        """
        body = self._ensure_parsed_body()
        if body.kind == "json":
            return body.value
        return None

    def get_input(self, key: str, default: Any = None) -> Any:
        """JSON またはフォームボディから値を取得"""
        body = self._ensure_parsed_body()
        if body.kind == "json" and isinstance(body.value, dict):
            value = body.value.get(key)
        elif body.kind == "form":
            value = body.value.get(key)
        else:
            return default
        return default if value is None else value

    def get_inputs(self, keys: List[str], default: Any = None) -> Dict[str, Any]:
        """JSON またはフォームボディから複数の値をまとめて取得"""
        return {key: self.get_input(key, default) for key in keys}

    # バリデーション

    def validate(self, validator: Validator[T], source: ValidationSource = "body") -> T:
        """指定したソースのデータをバリデータで検証

        Args:
            validator: validate(value) を持つバリデータ
            source: "body" / "query" / "path"

        Returns:
            バリデータが返した（変換済みの）値

        Raises:
            ValueError: source が不正な場合
            BodyParseError: source="body" でボディのパースに失敗した場合
            ValidationError: バリデーションに失敗した場合
        """
        if source == "body":
            data = self.get_json_body()
        elif source == "query":
            data = self.query_params
        elif source == "path":
            data = self.path_params
        else:
            raise ValueError(f"source は {VALIDATION_SOURCES} のいずれかである必要があります: {source!r}")

        try:
            return validator.validate(data)
        except ValidationError:
            raise
        except Exception as e:
            logger.debug("バリデータの例外を ValidationError に変換: %r", e)
            raise ValidationError(str(e), details=e) from e

    # アダプター実装

    @abstractmethod
    def _header_lookup(self, normalized_name: str) -> Optional[str]:
        """小文字化したヘッダー名で値を検索"""

    @abstractmethod
    def _query_value(self, key: str) -> Optional[str]:
        """単一のクエリ値を解決"""

    @abstractmethod
    def _query_values(self, key: str) -> Optional[List[str]]:
        """クエリの全ての値を解決"""

    # ボディのパース

    def _ensure_parsed_body(self) -> ParsedBody:
        """ボディを遅延パース（成功した結果のみキャッシュ）"""
        if self._parsed_body is not None:
            return self._parsed_body

        raw_body = self.get_raw_body()
        if raw_body is None:
            self._parsed_body = EMPTY_BODY
            return self._parsed_body

        content_type = self._content_type()

        if content_type == JSON_CONTENT_TYPE:
            try:
                value = JSONHandler.loads(raw_body)
            except ValueError as e:
                # キャッシュしない: 次回の呼び出しでも同じ例外になる
                raise BodyParseError(str(e) or "Invalid JSON body") from e
            self._parsed_body = ParsedBody("json", value)
        elif content_type == FORM_CONTENT_TYPE:
            self._parsed_body = ParsedBody("form", self._parse_form_body(raw_body))
        else:
            self._parsed_body = ParsedBody("text", raw_body)

        logger.debug("ボディをパース: kind=%s", self._parsed_body.kind)
        return self._parsed_body

    def _content_type(self) -> Optional[str]:
        """パラメータを除いた小文字の Content-Type"""
        header = self.get_header("content-type")
        if header is None:
            return None
        return header.split(";", 1)[0].strip().lower()

    def _parse_form_body(self, raw_body: str) -> Dict[str, Any]:
        """application/x-www-form-urlencoded をパース"""
        result: Dict[str, Any] = {}
        if self.options.form_duplicate_key_mode == "array":
            for key, value in parse_qsl(raw_body, keep_blank_values=True):
                if key not in result:
                    result[key] = value
                elif isinstance(result[key], list):
                    result[key].append(value)
                else:
                    result[key] = [result[key], value]
            return result

        # 重複キーは最後の値を採用
        for key, value in parse_qsl(raw_body, keep_blank_values=True):
            result[key] = value
        return result
