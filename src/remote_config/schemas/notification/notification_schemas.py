# remote_config/schemas/notification/notification_schemas.py

from pydantic import BaseModel, Field
from typing import Dict, Optional
from remote_config.schemas.config.fcm_topic_schemas import TOPIC_ID_PATTERN

class BroadcastNotificationRequest(BaseModel):
    title: str = Field(..., min_length=1)
    body: str = Field(..., min_length=1)
    data: Dict[str, str] = Field(default_factory=dict, description="随通知下发的自定义键值")
    image: Optional[str] = None

class TopicNotificationRequest(BroadcastNotificationRequest):
    topic: str = Field(..., pattern=TOPIC_ID_PATTERN, description="目标主题的 topic_id")
