# remote_config/services/app/app_lifecycle_service.py

import copy
import logging
from datetime import datetime, timezone
from typing import Dict, List
from remote_config.core.context import AppContext
from remote_config.models import App, AppStatus, Menu, Toolbar, FcmTopic, Style
from remote_config.dao.app.app_dao import AppDao
from remote_config.dao.config.menu_dao import MenuDao
from remote_config.dao.config.toolbar_dao import ToolbarDao
from remote_config.dao.config.fcm_topic_dao import FcmTopicDao
from remote_config.dao.config.style_dao import StyleDao
from remote_config.schemas.app.app_schemas import AppCloneRequest, AppRead
from remote_config.schemas.app.app_export_schemas import AppExportDocument, AppExportInfo
from remote_config.schemas.config.menu_schemas import MenuPayload
from remote_config.schemas.config.toolbar_schemas import ToolbarPayload
from remote_config.schemas.config.fcm_topic_schemas import FcmTopicPayload
from remote_config.schemas.config.style_schemas import StylePayload
from remote_config.services.app.app_service import AppService

logger = logging.getLogger(__name__)

CLONE_DESCRIPTION_SUFFIX = "(cloned)"

class AppLifecycleService:
    """应用级的整体操作：克隆与导出。"""

    def __init__(self, context: AppContext):
        self.context = context
        self.db = context.db
        self.app_service = AppService(context)
        self.app_dao = AppDao(context.db)
        self.menu_dao = MenuDao(context.db)
        self.toolbar_dao = ToolbarDao(context.db)
        self.fcm_topic_dao = FcmTopicDao(context.db)
        self.style_dao = StyleDao(context.db)

    # ==============================================================================
    # Clone
    # ==============================================================================

    async def clone_app(self, source_app_id: str, clone_in: AppCloneRequest) -> AppRead:
        new_app = await self._clone_app(source_app_id, clone_in)
        return AppRead.model_validate(new_app)

    async def _clone_app(self, source_app_id: str, clone_in: AppCloneRequest) -> App:
        # 1. 读取源应用及全部从属实体
        source = await self.app_service.get_app_or_fail(source_app_id)
        menus = await self.menu_dao.list_by_app(source.id)
        toolbars = await self.toolbar_dao.list_by_app(source.id)
        fcm_topics = await self.fcm_topic_dao.list_by_app(source.id)
        styles = await self.style_dao.list_by_app(source.id)

        await self.app_service.ensure_public_id_available(clone_in.app_id)

        # 2. 新应用总是以 inactive 状态创建，克隆出来的配置不会自动上线
        new_app = await self.app_dao.add(App(
            app_name=clone_in.app_name,
            app_id=clone_in.app_id,
            package_name=clone_in.package_name,
            version=source.version,
            description=f"{source.description} {CLONE_DESCRIPTION_SUFFIX}" if source.description else CLONE_DESCRIPTION_SUFFIX,
            status=AppStatus.INACTIVE,
        ))

        # 3. 菜单：两遍处理，先全部插入 (parent_id 置空)，再按新旧 id 映射回填 parent_id
        await self._clone_menus(menus, new_app)

        # 4. 其余实体没有内部交叉引用，直接复制
        await self.toolbar_dao.add_all([
            Toolbar(**self._toolbar_values(t), app_id=new_app.id) for t in toolbars
        ])
        await self.fcm_topic_dao.add_all([
            FcmTopic(**FcmTopicPayload.model_validate(f).model_dump(), app_id=new_app.id) for f in fcm_topics
        ])
        await self.style_dao.add_all([
            Style(**StylePayload.model_validate(s).model_dump(), app_id=new_app.id) for s in styles
        ])

        logger.info(
            f"Cloned app {source.id} into '{new_app.app_id}' ({new_app.id}): {len(menus)} menus, "
            f"{len(toolbars)} toolbars, {len(fcm_topics)} topics, {len(styles)} styles."
        )
        return new_app

    async def _clone_menus(self, menus: List[Menu], new_app: App) -> Dict[str, str]:
        clones = []
        for menu in menus:
            values = MenuPayload.model_validate(menu).model_dump()
            values["parent_id"] = None
            clones.append(Menu(**values, app_id=new_app.id))
        clones = await self.menu_dao.add_all(clones)

        id_map = {old.id: new.id for old, new in zip(menus, clones)}
        for old, new in zip(menus, clones):
            if not old.parent_id:
                continue
            # 源数据中指向其他应用的陈旧 parent_id 在映射中找不到，克隆后保持根级
            new.parent_id = id_map.get(old.parent_id)
            if new.parent_id is None:
                logger.warning(f"Menu {old.id} references parent {old.parent_id} outside its app; clone placed at root.")
            await self.menu_dao.save(new)
        return id_map

    @staticmethod
    def _toolbar_values(toolbar: Toolbar) -> dict:
        values = ToolbarPayload.model_validate(toolbar).model_dump()
        values["buttons"] = copy.deepcopy(toolbar.buttons or [])
        return values

    # ==============================================================================
    # Export
    # ==============================================================================

    async def export_config(self, app_id: str) -> AppExportDocument:
        app = await self.app_service.get_app_or_fail(app_id)
        # 导出不做任何可见性过滤
        menus = await self.menu_dao.list_by_app(app.id)
        toolbars = await self.toolbar_dao.list_by_app(app.id)
        fcm_topics = await self.fcm_topic_dao.list_by_app(app.id)
        styles = await self.style_dao.list_by_app(app.id)

        return AppExportDocument(
            app=AppExportInfo.model_validate(app),
            menus=[MenuPayload.model_validate(m) for m in menus],
            toolbars=[ToolbarPayload.model_validate(t) for t in toolbars],
            fcm_topics=[FcmTopicPayload.model_validate(f) for f in fcm_topics],
            styles=[StylePayload.model_validate(s) for s in styles],
            exported_at=datetime.now(timezone.utc),
        )

    @staticmethod
    def export_file_name(document: AppExportDocument) -> str:
        return f"{document.app.app_id}_config_{document.exported_at.date().isoformat()}.json"
