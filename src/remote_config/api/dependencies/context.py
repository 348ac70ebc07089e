# remote_config/api/dependencies/context.py

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession
from remote_config.core.context import AppContext
from remote_config.db.session import get_db

async def get_context(
    request: Request,
    db: AsyncSession = Depends(get_db)
) -> AppContext:
    """
    构建包含请求级数据库会话和全局共享依赖的 AppContext。
    管理 API 没有认证模型，所有路由共用同一个构建器。
    """
    return AppContext(
        db=db,
        notification_relay=getattr(request.app.state, "notification_relay", None),
    )

ContextDep = Depends(get_context)
