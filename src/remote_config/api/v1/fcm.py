# remote_config/api/v1/fcm.py

from fastapi import APIRouter
from typing import Any
from remote_config.core.context import AppContext
from remote_config.api.dependencies.context import ContextDep
from remote_config.schemas.notification.notification_schemas import TopicNotificationRequest, BroadcastNotificationRequest

# 纯转发：上游响应体原样返回，不套用 JsonResponse
router = APIRouter()

@router.post("/send-to-topic", summary="Send Notification to Topic")
async def send_to_topic(notification_in: TopicNotificationRequest, context: AppContext = ContextDep) -> Any:
    return await context.relay.send_to_topic(notification_in.model_dump(exclude_none=True))

@router.post("/broadcast/{app_id}", summary="Broadcast Notification to App")
async def broadcast(app_id: str, notification_in: BroadcastNotificationRequest, context: AppContext = ContextDep) -> Any:
    return await context.relay.broadcast(app_id, notification_in.model_dump(exclude_none=True))
