# remote_config/services/app/app_service.py

import logging
from typing import List, Optional
from remote_config.core.context import AppContext
from remote_config.models import App
from remote_config.dao.app.app_dao import AppDao
from remote_config.dao.config.menu_dao import MenuDao
from remote_config.dao.config.toolbar_dao import ToolbarDao
from remote_config.dao.config.fcm_topic_dao import FcmTopicDao
from remote_config.dao.config.style_dao import StyleDao
from remote_config.schemas.app.app_schemas import AppCreate, AppUpdate, AppRead
from remote_config.services.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

class AppService:
    def __init__(self, context: AppContext):
        self.context = context
        self.db = context.db
        self.dao = AppDao(context.db)

    # --- Public DTO-returning "Wrapper" Method ---
    async def create_app(self, app_data: AppCreate) -> AppRead:
        app = await self._create_app(app_data)
        return AppRead.model_validate(app)

    async def list_apps(self) -> List[AppRead]:
        apps = await self.dao.get_all()
        return [AppRead.model_validate(a) for a in apps]

    async def get_app(self, app_id: str) -> AppRead:
        app = await self.get_app_or_fail(app_id)
        return AppRead.model_validate(app)

    async def update_app(self, app_id: str, update_data: AppUpdate) -> AppRead:
        app = await self._update_app(app_id, update_data)
        return AppRead.model_validate(app)

    async def delete_app(self, app_id: str, cascade: bool = False) -> None:
        await self._delete_app(app_id, cascade)

    # --- Internal ORM-returning "Workhorse" Method ---
    async def get_app_or_fail(self, app_id: str) -> App:
        """按内部 id 查找应用，不存在时抛出 NotFoundError。"""
        app = await self.dao.get_by_pk(app_id)
        if not app:
            raise NotFoundError("App not found.")
        return app

    async def ensure_public_id_available(self, public_app_id: str, exclude_id: Optional[str] = None) -> None:
        existing = await self.dao.get_by_public_id(public_app_id)
        if existing and existing.id != exclude_id:
            raise ValidationError(f"App id '{public_app_id}' is already in use.")

    async def _create_app(self, app_data: AppCreate) -> App:
        await self.ensure_public_id_available(app_data.app_id)
        new_app = App(**app_data.model_dump())
        app = await self.dao.add(new_app)
        logger.info(f"Created app '{app.app_id}' ({app.id}).")
        return app

    async def _update_app(self, app_id: str, update_data: AppUpdate) -> App:
        app = await self.get_app_or_fail(app_id)
        changes = update_data.changes()
        if "app_id" in changes and changes["app_id"] != app.app_id:
            await self.ensure_public_id_available(changes["app_id"], exclude_id=app.id)

        for key, value in changes.items():
            setattr(app, key, value)
        return await self.dao.save(app)

    async def _delete_app(self, app_id: str, cascade: bool) -> None:
        app = await self.get_app_or_fail(app_id)

        if cascade:
            # 与删除应用处于同一事务中，要么全部删除，要么全部保留
            for dao in (MenuDao(self.db), ToolbarDao(self.db), FcmTopicDao(self.db), StyleDao(self.db)):
                removed = await dao.delete_by_app(app.id)
                logger.info(f"Cascade delete: removed {removed} {dao.model.__name__} rows of app {app.id}.")

        # 不级联时，从属的菜单/工具栏/主题/样式会保留为孤儿行
        await self.dao.remove(app)
        logger.info(f"Deleted app '{app.app_id}' ({app.id}), cascade={cascade}.")
