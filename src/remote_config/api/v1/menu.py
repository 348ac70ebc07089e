# remote_config/api/v1/menu.py

from fastapi import APIRouter, status, HTTPException
from typing import List
from remote_config.core.context import AppContext
from remote_config.api.dependencies.context import ContextDep
from remote_config.schemas.common import JsonResponse, MsgResponse
from remote_config.schemas.config.menu_schemas import MenuRead, MenuCreate, MenuUpdate
from remote_config.services.config.menu_service import MenuService
from remote_config.services.exceptions import NotFoundError, ValidationError

router = APIRouter()

@router.get("", response_model=JsonResponse[List[MenuRead]], summary="List Menus of App")
async def list_menus(app_uuid: str, context: AppContext = ContextDep):
    try:
        menus = await MenuService(context).list_by_app(app_uuid)
        return JsonResponse(data=menus)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.post("", response_model=JsonResponse[MenuRead], status_code=status.HTTP_201_CREATED, summary="Create Menu")
async def create_menu(app_uuid: str, menu_in: MenuCreate, context: AppContext = ContextDep):
    try:
        menu = await MenuService(context).create(app_uuid, menu_in)
        return JsonResponse(data=menu, message="Menu created successfully.")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.get("/{menu_uuid}", response_model=JsonResponse[MenuRead], summary="Get Menu")
async def get_menu(app_uuid: str, menu_uuid: str, context: AppContext = ContextDep):
    try:
        menu = await MenuService(context).get_by_id(app_uuid, menu_uuid)
        return JsonResponse(data=menu)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

@router.put("/{menu_uuid}", response_model=JsonResponse[MenuRead], summary="Update Menu")
async def update_menu(app_uuid: str, menu_uuid: str, menu_in: MenuUpdate, context: AppContext = ContextDep):
    try:
        menu = await MenuService(context).update(app_uuid, menu_uuid, menu_in)
        return JsonResponse(data=menu, message="Menu updated successfully.")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

@router.delete("/{menu_uuid}", response_model=MsgResponse, summary="Delete Menu")
async def delete_menu(app_uuid: str, menu_uuid: str, context: AppContext = ContextDep):
    try:
        await MenuService(context).delete(app_uuid, menu_uuid)
        return MsgResponse(message="Menu deleted successfully.")
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
