# remote_config/schemas/config/fcm_topic_schemas.py

from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime
from remote_config.schemas.common import PartialUpdateModel

# 推送服务允许的主题字符集
TOPIC_ID_PATTERN = r"^[A-Za-z0-9\-_.~%]+$"

class FcmTopicCreate(BaseModel):
    topic_name: str = Field(..., min_length=1, max_length=255)
    topic_id: str = Field(..., max_length=255, pattern=TOPIC_ID_PATTERN)
    description: Optional[str] = None
    is_default: bool = False
    is_active: bool = True

class FcmTopicUpdate(PartialUpdateModel):
    NON_NULLABLE_FIELDS = frozenset({"topic_name", "topic_id", "is_default", "is_active"})

    topic_name: Optional[str] = Field(None, min_length=1, max_length=255)
    topic_id: Optional[str] = Field(None, max_length=255, pattern=TOPIC_ID_PATTERN)
    description: Optional[str] = None
    is_default: Optional[bool] = None
    is_active: Optional[bool] = None

class FcmTopicPayload(BaseModel):
    topic_name: str
    topic_id: str
    description: Optional[str] = None
    is_default: bool
    is_active: bool

    model_config = ConfigDict(from_attributes=True)

class FcmTopicConfigItem(FcmTopicPayload):
    id: str

class FcmTopicRead(FcmTopicConfigItem):
    app_id: str
    created_at: datetime
    updated_at: datetime
