# remote_config/services/config/base_config_service.py

import logging
from typing import Any, Generic, List, Type, TypeVar
from pydantic import BaseModel
from remote_config.core.context import AppContext
from remote_config.dao.config.app_scoped_dao import AppScopedDao
from remote_config.models import App
from remote_config.schemas.common import PartialUpdateModel
from remote_config.services.app.app_service import AppService
from remote_config.services.exceptions import NotFoundError

logger = logging.getLogger(__name__)

ReadSchemaType = TypeVar("ReadSchemaType", bound=BaseModel)

class BaseConfigService(Generic[ReadSchemaType]):
    """
    从属于 App 的配置实体的通用 CRUD。
    子类只需声明 DAO、读取 DTO 和实体名称；需要额外不变量的实体 (Menu)
    覆盖 _before_create / _before_update / _before_delete 钩子。
    """
    dao_class: Type[AppScopedDao]
    read_schema: Type[ReadSchemaType]
    entity_label: str = "Entity"

    def __init__(self, context: AppContext):
        self.context = context
        self.db = context.db
        self.dao = self.dao_class(context.db)
        self.app_service = AppService(context)

    # --- Public DTO-returning "Wrapper" Method ---
    async def create(self, app_id: str, data: BaseModel) -> ReadSchemaType:
        entity = await self._create(app_id, data)
        return self.read_schema.model_validate(entity)

    async def list_by_app(self, app_id: str) -> List[ReadSchemaType]:
        app = await self.app_service.get_app_or_fail(app_id)
        entities = await self.dao.list_by_app(app.id)
        return [self.read_schema.model_validate(e) for e in entities]

    async def get_by_id(self, app_id: str, entity_id: str) -> ReadSchemaType:
        app = await self.app_service.get_app_or_fail(app_id)
        entity = await self._get_or_fail(app.id, entity_id)
        return self.read_schema.model_validate(entity)

    async def update(self, app_id: str, entity_id: str, data: PartialUpdateModel) -> ReadSchemaType:
        entity = await self._update(app_id, entity_id, data)
        return self.read_schema.model_validate(entity)

    async def delete(self, app_id: str, entity_id: str) -> bool:
        await self._delete(app_id, entity_id)
        return True

    # --- Internal ORM-returning "Workhorse" Method ---
    async def _get_or_fail(self, app_id: str, entity_id: str) -> Any:
        # 必须同时按 app_id 和实体 id 过滤
        entity = await self.dao.get_in_app(app_id, entity_id)
        if not entity:
            raise NotFoundError(f"{self.entity_label} not found.")
        return entity

    def _to_columns(self, data: dict) -> dict:
        """把请求字段转换为可直接写入列的值 (子类按需覆盖)。"""
        return data

    async def _create(self, app_id: str, data: BaseModel) -> Any:
        app = await self.app_service.get_app_or_fail(app_id)
        values = self._to_columns(data.model_dump())
        await self._before_create(app, values)
        entity = self.dao.model(**values, app_id=app.id)
        entity = await self.dao.add(entity)
        logger.debug(f"Created {self.entity_label} {entity.id} in app {app.id}.")
        return entity

    async def _update(self, app_id: str, entity_id: str, data: PartialUpdateModel) -> Any:
        app = await self.app_service.get_app_or_fail(app_id)
        entity = await self._get_or_fail(app.id, entity_id)
        changes = self._to_columns(data.changes())
        await self._before_update(app, entity, changes)
        for key, value in changes.items():
            setattr(entity, key, value)
        return await self.dao.save(entity)

    async def _delete(self, app_id: str, entity_id: str) -> None:
        app = await self.app_service.get_app_or_fail(app_id)
        entity = await self._get_or_fail(app.id, entity_id)
        await self._before_delete(app, entity)
        await self.dao.remove(entity)

    # --- Hooks ---
    async def _before_create(self, app: App, values: dict) -> None:
        pass

    async def _before_update(self, app: App, entity: Any, changes: dict) -> None:
        pass

    async def _before_delete(self, app: App, entity: Any) -> None:
        pass
