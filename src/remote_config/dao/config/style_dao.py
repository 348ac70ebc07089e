# remote_config/dao/config/style_dao.py

from sqlalchemy.ext.asyncio import AsyncSession
from remote_config.dao.config.app_scoped_dao import AppScopedDao
from remote_config.models import Style

class StyleDao(AppScopedDao[Style]):
    default_order = ("style_category", "style_key")

    def __init__(self, db_session: AsyncSession):
        super().__init__(Style, db_session)
