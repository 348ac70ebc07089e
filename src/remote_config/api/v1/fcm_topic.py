# remote_config/api/v1/fcm_topic.py

from fastapi import APIRouter, status, HTTPException
from typing import List
from remote_config.core.context import AppContext
from remote_config.api.dependencies.context import ContextDep
from remote_config.schemas.common import JsonResponse, MsgResponse
from remote_config.schemas.config.fcm_topic_schemas import FcmTopicRead, FcmTopicCreate, FcmTopicUpdate
from remote_config.services.config.fcm_topic_service import FcmTopicService
from remote_config.services.exceptions import NotFoundError

router = APIRouter()

@router.get("", response_model=JsonResponse[List[FcmTopicRead]], summary="List FCM Topics of App")
async def list_fcm_topics(app_uuid: str, context: AppContext = ContextDep):
    try:
        topics = await FcmTopicService(context).list_by_app(app_uuid)
        return JsonResponse(data=topics)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.post("", response_model=JsonResponse[FcmTopicRead], status_code=status.HTTP_201_CREATED, summary="Create FCM Topic")
async def create_fcm_topic(app_uuid: str, topic_in: FcmTopicCreate, context: AppContext = ContextDep):
    try:
        topic = await FcmTopicService(context).create(app_uuid, topic_in)
        return JsonResponse(data=topic, message="FCM topic created successfully.")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.get("/{topic_uuid}", response_model=JsonResponse[FcmTopicRead], summary="Get FCM Topic")
async def get_fcm_topic(app_uuid: str, topic_uuid: str, context: AppContext = ContextDep):
    try:
        topic = await FcmTopicService(context).get_by_id(app_uuid, topic_uuid)
        return JsonResponse(data=topic)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.put("/{topic_uuid}", response_model=JsonResponse[FcmTopicRead], summary="Update FCM Topic")
async def update_fcm_topic(app_uuid: str, topic_uuid: str, topic_in: FcmTopicUpdate, context: AppContext = ContextDep):
    try:
        topic = await FcmTopicService(context).update(app_uuid, topic_uuid, topic_in)
        return JsonResponse(data=topic, message="FCM topic updated successfully.")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.delete("/{topic_uuid}", response_model=MsgResponse, summary="Delete FCM Topic")
async def delete_fcm_topic(app_uuid: str, topic_uuid: str, context: AppContext = ContextDep):
    try:
        await FcmTopicService(context).delete(app_uuid, topic_uuid)
        return MsgResponse(message="FCM topic deleted successfully.")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
