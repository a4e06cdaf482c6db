"""
共通の型定義と設定

イベント種別、バリデーション対象、バリデータのインターフェース、
リクエストのオプション設定を提供します。
"""

from typing import Any, Dict, Literal, Protocol, TypeVar, runtime_checkable
from dataclasses import dataclass

T_co = TypeVar("T_co", covariant=True)

# API Gateway のプロキシイベント（読み取り専用として扱う）
ProxyEvent = Dict[str, Any]
ProxyResult = Dict[str, Any]

EventKind = Literal["v1", "v2"]
ValidationSource = Literal["body", "query", "path"]
FormDuplicateKeyMode = Literal["last", "array"]

VALIDATION_SOURCES = ("body", "query", "path")
FORM_DUPLICATE_KEY_MODES = ("last", "array")


@runtime_checkable
class Validator(Protocol[T_co]):
    """バリデータのインターフェース

    値を検証し、（変換済みの）値を返すか例外を送出します。
    """

    def validate(self, value: Any) -> T_co: ...


@dataclass
class RequestOptions:
    """リクエストのオプション設定"""

    form_duplicate_key_mode: FormDuplicateKeyMode = "last"

    def __post_init__(self) -> None:
        """初期化後の処理"""
        if self.form_duplicate_key_mode not in FORM_DUPLICATE_KEY_MODES:
            raise ValueError(
                f"form_duplicate_key_mode は {FORM_DUPLICATE_KEY_MODES} のいずれかである必要があります: "
                f"{self.form_duplicate_key_mode!r}"
            )


def create_request_options(form_duplicate_key_mode: FormDuplicateKeyMode = "last") -> RequestOptions:
    """リクエストオプションを作成するヘルパー関数"""
    return RequestOptions(form_duplicate_key_mode=form_duplicate_key_mode)
