# remote_config/api/v1/style.py

from fastapi import APIRouter, status, HTTPException
from typing import List
from remote_config.core.context import AppContext
from remote_config.api.dependencies.context import ContextDep
from remote_config.schemas.common import JsonResponse, MsgResponse
from remote_config.schemas.config.style_schemas import StyleRead, StyleCreate, StyleUpdate
from remote_config.services.config.style_service import StyleService
from remote_config.services.exceptions import NotFoundError

router = APIRouter()

@router.get("", response_model=JsonResponse[List[StyleRead]], summary="List Styles of App")
async def list_styles(app_uuid: str, context: AppContext = ContextDep):
    try:
        styles = await StyleService(context).list_by_app(app_uuid)
        return JsonResponse(data=styles)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.post("", response_model=JsonResponse[StyleRead], status_code=status.HTTP_201_CREATED, summary="Create Style")
async def create_style(app_uuid: str, style_in: StyleCreate, context: AppContext = ContextDep):
    try:
        style = await StyleService(context).create(app_uuid, style_in)
        return JsonResponse(data=style, message="Style created successfully.")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.get("/{style_uuid}", response_model=JsonResponse[StyleRead], summary="Get Style")
async def get_style(app_uuid: str, style_uuid: str, context: AppContext = ContextDep):
    try:
        style = await StyleService(context).get_by_id(app_uuid, style_uuid)
        return JsonResponse(data=style)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.put("/{style_uuid}", response_model=JsonResponse[StyleRead], summary="Update Style")
async def update_style(app_uuid: str, style_uuid: str, style_in: StyleUpdate, context: AppContext = ContextDep):
    try:
        style = await StyleService(context).update(app_uuid, style_uuid, style_in)
        return JsonResponse(data=style, message="Style updated successfully.")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.delete("/{style_uuid}", response_model=MsgResponse, summary="Delete Style")
async def delete_style(app_uuid: str, style_uuid: str, context: AppContext = ContextDep):
    try:
        await StyleService(context).delete(app_uuid, style_uuid)
        return MsgResponse(message="Style deleted successfully.")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
