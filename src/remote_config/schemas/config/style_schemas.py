# remote_config/schemas/config/style_schemas.py

from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime
from remote_config.models.style import StyleCategory
from remote_config.schemas.common import PartialUpdateModel

class StyleCreate(BaseModel):
    style_key: str = Field(..., min_length=1, max_length=255, description="例如 primary_color")
    style_value: str = Field(..., description="含义取决于 style_category")
    style_category: StyleCategory
    description: Optional[str] = None

class StyleUpdate(PartialUpdateModel):
    NON_NULLABLE_FIELDS = frozenset({"style_key", "style_value", "style_category"})

    style_key: Optional[str] = Field(None, min_length=1, max_length=255)
    style_value: Optional[str] = None
    style_category: Optional[StyleCategory] = None
    description: Optional[str] = None

class StylePayload(BaseModel):
    style_key: str
    style_value: str
    style_category: StyleCategory
    description: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)

class StyleConfigItem(StylePayload):
    id: str

class StyleRead(StyleConfigItem):
    app_id: str
    created_at: datetime
    updated_at: datetime
