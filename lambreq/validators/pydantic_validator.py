"""
Pydantic 用バリデータアダプター

pip install lambreq[pydantic]
"""

from typing import Any, Generic, TypeVar

from ..exceptions import ValidationError

T = TypeVar("T")


class PydanticValidator(Generic[T]):
    """pydantic.TypeAdapter をラップしたバリデータ"""

    def __init__(self, schema: Any) -> None:
        from pydantic import TypeAdapter

        self.schema = schema
        self._adapter = TypeAdapter(schema)

    def validate(self, value: Any) -> T:
        """値を検証し、Pydantic の出力（モデルインスタンスなど）を返す"""
        import pydantic

        try:
            return self._adapter.validate_python(value)
        except pydantic.ValidationError as e:
            raise ValidationError(
                "Validation failed", details=e.errors(include_url=False)
            ) from e


def create_pydantic_validator(schema: Any) -> PydanticValidator:
    """Pydantic モデル（または任意の型）からバリデータを作成

    Args:
        schema: BaseModel サブクラスや TypedDict などの型
    """
    return PydanticValidator(schema)
