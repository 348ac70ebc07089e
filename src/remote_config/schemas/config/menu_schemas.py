# remote_config/schemas/config/menu_schemas.py

from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime
from remote_config.models.menu import MenuType, ActionType
from remote_config.schemas.common import PartialUpdateModel

class MenuCreate(BaseModel):
    menu_id: str = Field(..., min_length=1, max_length=255)
    # divider 的标题可以是空字符串
    title: str = Field(..., max_length=255)
    icon: Optional[str] = Field(None, max_length=255)
    order_index: int = 0
    parent_id: Optional[str] = Field(None, description="同一应用下父菜单的内部 id")
    menu_type: MenuType = MenuType.ITEM
    action_type: Optional[ActionType] = None
    action_value: Optional[str] = None
    is_visible: bool = True
    is_enabled: bool = True

class MenuUpdate(PartialUpdateModel):
    NON_NULLABLE_FIELDS = frozenset({"menu_id", "title", "order_index", "menu_type", "is_visible", "is_enabled"})

    menu_id: Optional[str] = Field(None, min_length=1, max_length=255)
    title: Optional[str] = Field(None, max_length=255)
    icon: Optional[str] = Field(None, max_length=255)
    order_index: Optional[int] = None
    parent_id: Optional[str] = None
    menu_type: Optional[MenuType] = None
    action_type: Optional[ActionType] = None
    action_value: Optional[str] = None
    is_visible: Optional[bool] = None
    is_enabled: Optional[bool] = None

class MenuRead(BaseModel):
    id: str
    app_id: str
    menu_id: str
    title: str
    icon: Optional[str] = None
    order_index: int
    parent_id: Optional[str] = None
    menu_type: MenuType
    action_type: Optional[ActionType] = None
    action_value: Optional[str] = None
    is_visible: bool
    is_enabled: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

class MenuPayload(BaseModel):
    """Menu 的可移植投影：不含内部 id 与所属应用 id。"""
    menu_id: str
    title: str
    icon: Optional[str] = None
    order_index: int
    parent_id: Optional[str] = None
    menu_type: MenuType
    action_type: Optional[ActionType] = None
    action_value: Optional[str] = None
    is_visible: bool
    is_enabled: bool

    model_config = ConfigDict(from_attributes=True)

class MenuConfigItem(MenuPayload):
    id: str
