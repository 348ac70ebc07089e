# remote_config/dao/config/fcm_topic_dao.py

from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
from remote_config.dao.config.app_scoped_dao import AppScopedDao
from remote_config.models import FcmTopic

class FcmTopicDao(AppScopedDao[FcmTopic]):
    default_order = ("created_at",)

    def __init__(self, db_session: AsyncSession):
        super().__init__(FcmTopic, db_session)

    async def list_active_by_app(self, app_id: str) -> List[FcmTopic]:
        return await self.list_by_app(app_id, is_active=True)
