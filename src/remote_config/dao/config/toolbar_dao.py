# remote_config/dao/config/toolbar_dao.py

from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
from remote_config.dao.config.app_scoped_dao import AppScopedDao
from remote_config.models import Toolbar

class ToolbarDao(AppScopedDao[Toolbar]):
    # 创建时间排序只是为了结果稳定，不是对外契约
    default_order = ("created_at",)

    def __init__(self, db_session: AsyncSession):
        super().__init__(Toolbar, db_session)

    async def list_visible_by_app(self, app_id: str) -> List[Toolbar]:
        return await self.list_by_app(app_id, is_visible=True)
