# remote_config/services/config/remote_config_service.py

import logging
from remote_config.core.context import AppContext
from remote_config.dao.app.app_dao import AppDao
from remote_config.dao.config.menu_dao import MenuDao
from remote_config.dao.config.toolbar_dao import ToolbarDao
from remote_config.dao.config.fcm_topic_dao import FcmTopicDao
from remote_config.dao.config.style_dao import StyleDao
from remote_config.schemas.config.remote_config_schemas import RemoteConfig, RemoteConfigApp
from remote_config.schemas.config.menu_schemas import MenuConfigItem
from remote_config.schemas.config.toolbar_schemas import ToolbarConfigItem
from remote_config.schemas.config.fcm_topic_schemas import FcmTopicConfigItem
from remote_config.schemas.config.style_schemas import StyleConfigItem
from remote_config.services.exceptions import NotFoundError

logger = logging.getLogger(__name__)

class RemoteConfigService:
    """
    移动端读取接口：把一个应用及其四类从属实体组装成一份配置。
    纯读操作，不产生任何写入。
    """
    def __init__(self, context: AppContext):
        self.context = context
        self.app_dao = AppDao(context.db)
        self.menu_dao = MenuDao(context.db)
        self.toolbar_dao = ToolbarDao(context.db)
        self.fcm_topic_dao = FcmTopicDao(context.db)
        self.style_dao = StyleDao(context.db)

    async def get_public_config(self, public_app_id: str) -> RemoteConfig:
        # 1. 只解析 active 应用。不存在与未激活返回同一个错误，调用方无法区分
        app = await self.app_dao.get_active_by_public_id(public_app_id)
        if not app:
            raise NotFoundError("App not found.")

        # 2. 四类查询彼此独立。AsyncSession 不允许并发执行，
        #    因此在同一个会话/事务里依次发出，读到的是同一份快照。
        #    任一查询失败都会抛出 StorageError，整个聚合作废，不会返回部分结果。
        menus = await self.menu_dao.list_visible_by_app(app.id)
        toolbars = await self.toolbar_dao.list_visible_by_app(app.id)
        fcm_topics = await self.fcm_topic_dao.list_active_by_app(app.id)
        # 样式没有可见性标志，总是全部下发
        styles = await self.style_dao.list_by_app(app.id)

        # 3. 组装
        logger.debug(
            f"Assembled config for '{public_app_id}': {len(menus)} menus, {len(toolbars)} toolbars, "
            f"{len(fcm_topics)} topics, {len(styles)} styles."
        )
        return RemoteConfig(
            app=RemoteConfigApp.model_validate(app),
            menus=[MenuConfigItem.model_validate(m) for m in menus],
            toolbars=[ToolbarConfigItem.model_validate(t) for t in toolbars],
            fcm_topics=[FcmTopicConfigItem.model_validate(f) for f in fcm_topics],
            styles=[StyleConfigItem.model_validate(s) for s in styles],
        )
