# remote_config/schemas/config/remote_config_schemas.py

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from remote_config.models.app import AppStatus
from remote_config.schemas.config.menu_schemas import MenuConfigItem
from remote_config.schemas.config.toolbar_schemas import ToolbarConfigItem
from remote_config.schemas.config.fcm_topic_schemas import FcmTopicConfigItem
from remote_config.schemas.config.style_schemas import StyleConfigItem

class RemoteConfigApp(BaseModel):
    """应用的公开投影，包含内部 id。"""
    id: str
    app_name: str
    app_id: str
    package_name: str
    version: str
    description: Optional[str] = None
    status: AppStatus

    model_config = ConfigDict(from_attributes=True)

class RemoteConfig(BaseModel):
    """移动端启动时拉取的完整配置。"""
    app: RemoteConfigApp
    menus: List[MenuConfigItem] = Field(default_factory=list)
    toolbars: List[ToolbarConfigItem] = Field(default_factory=list)
    fcm_topics: List[FcmTopicConfigItem] = Field(default_factory=list)
    styles: List[StyleConfigItem] = Field(default_factory=list)
