"""
構造化エラーハンドリング

イベント正規化レイヤーで発生する例外クラスを提供します。
呼び出し側は例外の種類でレスポンスのステータスコードを決定できます。
"""

from typing import Dict, Any, Optional
from dataclasses import dataclass


@dataclass
class LambreqError(Exception):
    """lambreq エラーの基底クラス"""

    message: str
    status_code: int = 500
    error_code: Optional[str] = None
    details: Any = None

    def __post_init__(self) -> None:
        """初期化後の処理"""
        if self.error_code is None:
            self.error_code = f"ERR_{self.status_code}"

        # Exception の message を設定
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """辞書形式に変換"""
        result: Dict[str, Any] = {
            "error": self.error_code,
            "message": self.message,
            "status_code": self.status_code,
        }

        if self.details:
            result["details"] = self.details

        return result


class UnsupportedEventError(LambreqError):
    """サポート外のイベント形式"""

    def __init__(self, message: str = "Unsupported event shape", details: Any = None):
        super().__init__(
            message=message, status_code=500, error_code="UNSUPPORTED_EVENT", details=details
        )


class BodyParseError(LambreqError):
    """リクエストボディのパースエラー"""

    def __init__(self, message: str = "Failed to parse request body", details: Any = None):
        super().__init__(
            message=message, status_code=400, error_code="BODY_PARSE_ERROR", details=details
        )


class ValidationError(LambreqError):
    """バリデーションエラー

    details にはバリデータ固有の情報（フィールド単位のエラー一覧など）を
    そのまま保持します。
    """

    def __init__(self, message: str = "Validation failed", details: Any = None):
        super().__init__(
            message=message, status_code=400, error_code="VALIDATION_ERROR", details=details
        )
