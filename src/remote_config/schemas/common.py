# remote_config/schemas/common.py

from pydantic import BaseModel, model_validator
from typing import Generic, TypeVar, Optional, ClassVar, FrozenSet

T = TypeVar('T')  # 定义泛型类型

class JsonResponse(BaseModel, Generic[T]):
    success: bool = True
    data: T
    message: Optional[str] = None

class JsonFaildResponse(BaseModel):
    success: bool = False
    error: str
    data: None = None

class MsgResponse(BaseModel):
    success: bool = True
    data: None = None
    message: str = "success"

class PartialUpdateModel(BaseModel):
    """
    局部更新请求的基类：只有请求体中出现的字段会被写入 (exclude_unset)。
    NON_NULLABLE_FIELDS 中的字段可以省略，但不能显式地置为 null。
    """
    NON_NULLABLE_FIELDS: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_null_for_required_columns(self):
        nulled = sorted(
            name for name in self.model_fields_set
            if name in self.NON_NULLABLE_FIELDS and getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"Fields cannot be null: {', '.join(nulled)}")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)
