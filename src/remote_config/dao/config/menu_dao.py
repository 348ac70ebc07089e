# remote_config/dao/config/menu_dao.py

from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
from remote_config.dao.config.app_scoped_dao import AppScopedDao
from remote_config.models import Menu

class MenuDao(AppScopedDao[Menu]):
    # order_index 相同时按创建时间，保证多次读取顺序一致
    default_order = ("order_index", "created_at")

    def __init__(self, db_session: AsyncSession):
        super().__init__(Menu, db_session)

    async def list_visible_by_app(self, app_id: str) -> List[Menu]:
        return await self.list_by_app(app_id, is_visible=True)

    async def detach_children(self, app_id: str, parent_id: str) -> int:
        """把直接子菜单提升为根级，避免删除父菜单后留下悬空的 parent_id。"""
        return await self.update_where({"app_id": app_id, "parent_id": parent_id}, {"parent_id": None})
