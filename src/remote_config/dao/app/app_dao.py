# remote_config/dao/app/app_dao.py

from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional, List
from remote_config.dao.base_dao import BaseDao
from remote_config.models import App, AppStatus

class AppDao(BaseDao[App]):
    def __init__(self, db_session: AsyncSession):
        super().__init__(App, db_session)

    async def get_by_public_id(self, public_app_id: str) -> Optional[App]:
        """Finds an app by its public app_id, whatever its status."""
        return await self.get_one(where={"app_id": public_app_id})

    async def get_active_by_public_id(self, public_app_id: str) -> Optional[App]:
        """只返回 status = active 的应用，非激活应用对移动端不可见。"""
        return await self.get_one(where={"app_id": public_app_id, "status": AppStatus.ACTIVE})

    async def get_all(self) -> List[App]:
        return await self.get_list(order=[self.model.created_at.desc()])
