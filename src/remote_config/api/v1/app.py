# remote_config/api/v1/app.py

import json
from fastapi import APIRouter, status, HTTPException, Query, Response
from typing import List
from remote_config.core.context import AppContext
from remote_config.api.dependencies.context import ContextDep
from remote_config.schemas.common import JsonResponse, MsgResponse
from remote_config.schemas.app.app_schemas import AppRead, AppCreate, AppUpdate, AppCloneRequest
from remote_config.schemas.app.app_stats_schemas import AppStats, GlobalStats
from remote_config.services.app.app_service import AppService
from remote_config.services.app.app_lifecycle_service import AppLifecycleService
from remote_config.services.app.app_stats_service import AppStatsService
from remote_config.services.exceptions import NotFoundError, ValidationError

router = APIRouter()

@router.get("", response_model=JsonResponse[List[AppRead]], summary="List Apps")
async def list_apps(context: AppContext = ContextDep):
    service = AppService(context)
    apps = await service.list_apps()
    return JsonResponse(data=apps)

@router.post("", response_model=JsonResponse[AppRead], status_code=status.HTTP_201_CREATED, summary="Create App")
async def create_app(app_in: AppCreate, context: AppContext = ContextDep):
    try:
        service = AppService(context)
        new_app = await service.create_app(app_in)
        return JsonResponse(data=new_app, message="App created successfully.")
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

# 注意: 必须声明在 /{app_uuid} 之前，否则 "stats" 会被当作 app_uuid
@router.get("/stats", response_model=JsonResponse[GlobalStats], summary="Get Global Statistics")
async def get_global_stats(context: AppContext = ContextDep):
    service = AppStatsService(context)
    stats = await service.get_global_stats()
    return JsonResponse(data=stats)

@router.get("/{app_uuid}", response_model=JsonResponse[AppRead], summary="Get App")
async def get_app(app_uuid: str, context: AppContext = ContextDep):
    try:
        service = AppService(context)
        app = await service.get_app(app_uuid)
        return JsonResponse(data=app)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.put("/{app_uuid}", response_model=JsonResponse[AppRead], summary="Update App")
async def update_app(app_uuid: str, app_in: AppUpdate, context: AppContext = ContextDep):
    try:
        service = AppService(context)
        updated_app = await service.update_app(app_uuid, app_in)
        return JsonResponse(data=updated_app, message="App updated successfully.")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.delete("/{app_uuid}", response_model=MsgResponse, summary="Delete App")
async def delete_app(
    app_uuid: str,
    cascade: bool = Query(False, description="同时删除该应用的菜单、工具栏、推送主题和样式"),
    context: AppContext = ContextDep
):
    try:
        service = AppService(context)
        await service.delete_app(app_uuid, cascade=cascade)
        return MsgResponse(message="App deleted successfully.")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.post(
    "/{app_uuid}/clone",
    response_model=JsonResponse[AppRead],
    status_code=status.HTTP_201_CREATED,
    summary="Clone App"
)
async def clone_app(app_uuid: str, clone_in: AppCloneRequest, context: AppContext = ContextDep):
    try:
        service = AppLifecycleService(context)
        new_app = await service.clone_app(app_uuid, clone_in)
        return JsonResponse(data=new_app, message="App cloned successfully.")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.get("/{app_uuid}/export", summary="Export App Configuration")
async def export_app(app_uuid: str, context: AppContext = ContextDep):
    try:
        service = AppLifecycleService(context)
        document = await service.export_config(app_uuid)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    file_name = service.export_file_name(document)
    return Response(
        content=json.dumps(document.model_dump(mode="json"), ensure_ascii=False, indent=2),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{file_name}"'},
    )

@router.get("/{app_uuid}/stats", response_model=JsonResponse[AppStats], summary="Get App Statistics")
async def get_app_stats(app_uuid: str, context: AppContext = ContextDep):
    try:
        service = AppStatsService(context)
        stats = await service.get_app_stats(app_uuid)
        return JsonResponse(data=stats)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
