# remote_config/schemas/app/app_export_schemas.py

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List, Literal
from datetime import datetime
from remote_config.models.app import AppStatus
from remote_config.schemas.config.menu_schemas import MenuPayload
from remote_config.schemas.config.toolbar_schemas import ToolbarPayload
from remote_config.schemas.config.fcm_topic_schemas import FcmTopicPayload
from remote_config.schemas.config.style_schemas import StylePayload

EXPORT_FORMAT_VERSION = "1.0"

class AppExportInfo(BaseModel):
    app_name: str
    app_id: str
    package_name: str
    version: str
    description: Optional[str] = None
    status: AppStatus

    model_config = ConfigDict(from_attributes=True)

class AppExportDocument(BaseModel):
    """
    与存储无关的应用快照。所有内部 id 和所属应用 id 都被剥离。
    注意: menus[].parent_id 仍是源应用中的内部菜单 id，只在同一份导出文档内有意义。
    """
    app: AppExportInfo
    menus: List[MenuPayload] = Field(default_factory=list)
    toolbars: List[ToolbarPayload] = Field(default_factory=list)
    fcm_topics: List[FcmTopicPayload] = Field(default_factory=list)
    styles: List[StylePayload] = Field(default_factory=list)
    exported_at: datetime
    version: Literal["1.0"] = EXPORT_FORMAT_VERSION
