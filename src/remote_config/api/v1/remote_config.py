# remote_config/api/v1/remote_config.py

from fastapi import APIRouter, HTTPException
from remote_config.core.context import AppContext
from remote_config.api.dependencies.context import ContextDep
from remote_config.schemas.common import JsonResponse
from remote_config.schemas.config.remote_config_schemas import RemoteConfig
from remote_config.services.config.remote_config_service import RemoteConfigService
from remote_config.services.exceptions import NotFoundError

router = APIRouter()

@router.get("/{public_app_id}", response_model=JsonResponse[RemoteConfig], summary="Get Remote Config for Mobile Clients")
async def get_remote_config(public_app_id: str, context: AppContext = ContextDep):
    """
    移动端启动时调用。只返回 active 应用的可见菜单、可见工具栏、激活的推送主题和全部样式。
    四类数据在同一会话、同一事务中依次查询（AsyncSession 不支持并发语句），任一失败即整体返回 500。
    """
    try:
        config = await RemoteConfigService(context).get_public_config(public_app_id)
        return JsonResponse(data=config)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
