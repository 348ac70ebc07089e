# remote_config/schemas/app/app_schemas.py

from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime
from remote_config.models.app import AppStatus
from remote_config.schemas.common import PartialUpdateModel

class AppCreate(BaseModel):
    app_name: str = Field(..., min_length=1, max_length=255, description="显示名称")
    app_id: str = Field(..., min_length=1, max_length=255, description="公开的应用标识")
    package_name: str = Field(..., min_length=1, max_length=255)
    version: str = Field("1.0.0", min_length=1, max_length=50)
    description: Optional[str] = None
    status: AppStatus = AppStatus.ACTIVE

class AppUpdate(PartialUpdateModel):
    NON_NULLABLE_FIELDS = frozenset({"app_name", "app_id", "package_name", "version", "status"})

    app_name: Optional[str] = Field(None, min_length=1, max_length=255)
    app_id: Optional[str] = Field(None, min_length=1, max_length=255)
    package_name: Optional[str] = Field(None, min_length=1, max_length=255)
    version: Optional[str] = Field(None, min_length=1, max_length=50)
    description: Optional[str] = None
    status: Optional[AppStatus] = None

class AppCloneRequest(BaseModel):
    """克隆时必须提供新应用的名称、公开 id 和包名。"""
    app_name: str = Field(..., min_length=1, max_length=255)
    app_id: str = Field(..., min_length=1, max_length=255)
    package_name: str = Field(..., min_length=1, max_length=255)

class AppRead(BaseModel):
    id: str
    app_name: str
    app_id: str
    package_name: str
    version: str
    description: Optional[str] = None
    status: AppStatus
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
