# remote_config/schemas/config/toolbar_schemas.py

from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List
from datetime import datetime
from remote_config.models.menu import ActionType
from remote_config.models.toolbar import ToolbarPosition
from remote_config.schemas.common import PartialUpdateModel

class ToolbarButton(BaseModel):
    """工具栏按钮是值对象，没有独立的生命周期。"""
    id: str = Field(..., min_length=1)
    title: str
    icon: Optional[str] = None
    action_type: ActionType
    action_value: str
    order_index: int = 0

class ToolbarCreate(BaseModel):
    toolbar_id: str = Field(..., min_length=1, max_length=255)
    title: str = Field(..., max_length=255)
    position: ToolbarPosition = ToolbarPosition.TOP
    background_color: str = Field("#FFFFFF", max_length=50)
    text_color: str = Field("#000000", max_length=50)
    height: int = Field(56, ge=0)
    is_visible: bool = True
    buttons: List[ToolbarButton] = Field(default_factory=list)

class ToolbarUpdate(PartialUpdateModel):
    NON_NULLABLE_FIELDS = frozenset({
        "toolbar_id", "title", "position", "background_color",
        "text_color", "height", "is_visible", "buttons"
    })

    toolbar_id: Optional[str] = Field(None, min_length=1, max_length=255)
    title: Optional[str] = Field(None, max_length=255)
    position: Optional[ToolbarPosition] = None
    background_color: Optional[str] = Field(None, max_length=50)
    text_color: Optional[str] = Field(None, max_length=50)
    height: Optional[int] = Field(None, ge=0)
    is_visible: Optional[bool] = None
    # 提供时整体替换按钮数组
    buttons: Optional[List[ToolbarButton]] = None

class ToolbarPayload(BaseModel):
    toolbar_id: str
    title: str
    position: ToolbarPosition
    background_color: str
    text_color: str
    height: int
    is_visible: bool
    buttons: List[ToolbarButton] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)

class ToolbarConfigItem(ToolbarPayload):
    id: str

class ToolbarRead(ToolbarConfigItem):
    app_id: str
    created_at: datetime
    updated_at: datetime
