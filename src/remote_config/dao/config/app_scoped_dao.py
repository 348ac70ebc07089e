# remote_config/dao/config/app_scoped_dao.py

from typing import Optional, List, Any
from remote_config.dao.base_dao import BaseDao, ModelType

class AppScopedDao(BaseDao[ModelType]):
    """
    所有从属于某个 App 的实体 (Menu / Toolbar / FcmTopic / Style) 共用的 DAO。
    每一次按 id 的读写都同时按 app_id 过滤，防止通过猜测 id 跨应用访问。
    """
    # 子类覆盖：list_by_app 的默认排序
    default_order: tuple = ()

    def _default_order(self) -> list:
        return [getattr(self.model, name) for name in self.default_order]

    async def get_in_app(self, app_id: str, entity_id: str) -> Optional[ModelType]:
        return await self.get_one(where={"app_id": app_id, "id": entity_id})

    async def list_by_app(self, app_id: str, **filters: Any) -> List[ModelType]:
        return await self.get_list(
            where={"app_id": app_id, **filters},
            order=self._default_order()
        )

    async def delete_by_app(self, app_id: str) -> int:
        return await self.delete_where({"app_id": app_id})

    async def count_by_app(self, app_id: str, **filters: Any) -> int:
        return await self.count(where={"app_id": app_id, **filters})
