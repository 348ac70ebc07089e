# remote_config/api/v1/toolbar.py

from fastapi import APIRouter, status, HTTPException
from typing import List
from remote_config.core.context import AppContext
from remote_config.api.dependencies.context import ContextDep
from remote_config.schemas.common import JsonResponse, MsgResponse
from remote_config.schemas.config.toolbar_schemas import ToolbarRead, ToolbarCreate, ToolbarUpdate
from remote_config.services.config.toolbar_service import ToolbarService
from remote_config.services.exceptions import NotFoundError

router = APIRouter()

@router.get("", response_model=JsonResponse[List[ToolbarRead]], summary="List Toolbars of App")
async def list_toolbars(app_uuid: str, context: AppContext = ContextDep):
    try:
        toolbars = await ToolbarService(context).list_by_app(app_uuid)
        return JsonResponse(data=toolbars)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.post("", response_model=JsonResponse[ToolbarRead], status_code=status.HTTP_201_CREATED, summary="Create Toolbar")
async def create_toolbar(app_uuid: str, toolbar_in: ToolbarCreate, context: AppContext = ContextDep):
    try:
        toolbar = await ToolbarService(context).create(app_uuid, toolbar_in)
        return JsonResponse(data=toolbar, message="Toolbar created successfully.")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.get("/{toolbar_uuid}", response_model=JsonResponse[ToolbarRead], summary="Get Toolbar")
async def get_toolbar(app_uuid: str, toolbar_uuid: str, context: AppContext = ContextDep):
    try:
        toolbar = await ToolbarService(context).get_by_id(app_uuid, toolbar_uuid)
        return JsonResponse(data=toolbar)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.put("/{toolbar_uuid}", response_model=JsonResponse[ToolbarRead], summary="Update Toolbar")
async def update_toolbar(app_uuid: str, toolbar_uuid: str, toolbar_in: ToolbarUpdate, context: AppContext = ContextDep):
    """只写入请求体中出现的字段；提供 buttons 时整体替换按钮数组。"""
    try:
        toolbar = await ToolbarService(context).update(app_uuid, toolbar_uuid, toolbar_in)
        return JsonResponse(data=toolbar, message="Toolbar updated successfully.")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.delete("/{toolbar_uuid}", response_model=MsgResponse, summary="Delete Toolbar")
async def delete_toolbar(app_uuid: str, toolbar_uuid: str, context: AppContext = ContextDep):
    try:
        await ToolbarService(context).delete(app_uuid, toolbar_uuid)
        return MsgResponse(message="Toolbar deleted successfully.")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
