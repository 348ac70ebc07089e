# remote_config/services/config/menu_service.py

import logging
from typing import Optional
from remote_config.dao.config.menu_dao import MenuDao
from remote_config.models import App, Menu
from remote_config.schemas.config.menu_schemas import MenuRead
from remote_config.services.config.base_config_service import BaseConfigService
from remote_config.services.exceptions import ValidationError

logger = logging.getLogger(__name__)

class MenuService(BaseConfigService[MenuRead]):
    dao_class = MenuDao
    read_schema = MenuRead
    entity_label = "Menu"

    async def _before_create(self, app: App, values: dict) -> None:
        if values.get("parent_id"):
            await self._ensure_parent_in_app(app, values["parent_id"])

    async def _before_update(self, app: App, entity: Menu, changes: dict) -> None:
        parent_id = changes.get("parent_id")
        if not parent_id or parent_id == entity.parent_id:
            return
        if parent_id == entity.id:
            raise ValidationError("A menu cannot be its own parent.")
        await self._ensure_parent_in_app(app, parent_id)
        await self._ensure_no_cycle(app, entity, parent_id)

    async def _before_delete(self, app: App, entity: Menu) -> None:
        detached = await self.dao.detach_children(app.id, entity.id)
        if detached:
            logger.info(f"Menu {entity.id} deleted; {detached} child menus moved to root level.")

    async def _ensure_parent_in_app(self, app: App, parent_id: str) -> Menu:
        parent = await self.dao.get_in_app(app.id, parent_id)
        if not parent:
            raise ValidationError("Parent menu does not exist in this app.")
        return parent

    async def _ensure_no_cycle(self, app: App, entity: Menu, parent_id: str) -> None:
        """沿着新父菜单向上遍历，若回到自身则说明会形成环。"""
        seen = set()
        current: Optional[str] = parent_id
        while current and current not in seen:
            if current == entity.id:
                raise ValidationError("Menu parent assignment would create a cycle.")
            seen.add(current)
            node = await self.dao.get_in_app(app.id, current)
            current = node.parent_id if node else None
