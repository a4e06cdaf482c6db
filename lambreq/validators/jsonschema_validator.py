"""
JSON Schema 用バリデータアダプター

pip install lambreq[jsonschema]
"""

from typing import Any, Dict, List

from ..exceptions import ValidationError


class JSONSchemaValidator:
    """jsonschema をラップしたバリデータ

    スキーマの $schema に応じたバリデータクラスを使用します。
    JSON Schema は値を変換しないため、検証に成功した入力をそのまま返します。
    """

    def __init__(self, schema: Dict[str, Any]) -> None:
        from jsonschema.validators import validator_for

        validator_class = validator_for(schema)
        # 不正なスキーマは作成時に jsonschema.SchemaError を送出
        validator_class.check_schema(schema)
        self.schema = schema
        self._validator = validator_class(schema)

    def validate(self, value: Any) -> Any:
        """値を検証"""
        from jsonschema.exceptions import best_match

        errors = list(self._validator.iter_errors(value))
        if not errors:
            return value

        best = best_match(errors)
        raise ValidationError(best.message, details=_format_errors(errors))


def _format_errors(errors: List[Any]) -> List[Dict[str, Any]]:
    """jsonschema のエラーをフィールド単位の一覧に変換"""
    return [
        {
            "path": list(error.absolute_path),
            "message": error.message,
            "validator": error.validator,
        }
        for error in sorted(errors, key=lambda e: [str(p) for p in e.absolute_path])
    ]


def create_jsonschema_validator(schema: Dict[str, Any]) -> JSONSchemaValidator:
    """JSON Schema からバリデータを作成"""
    return JSONSchemaValidator(schema)
