"""
サードパーティのスキーマバリデーションライブラリ用アダプター

各アダプターは対応するライブラリを使用時にのみインポートします。
コアはどのライブラリにも依存しません。
"""

from .jsonschema_validator import create_jsonschema_validator
from .pydantic_validator import create_pydantic_validator

__all__ = ["create_pydantic_validator", "create_jsonschema_validator"]
