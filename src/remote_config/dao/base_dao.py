from typing import Type, TypeVar, Generic, Any, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import inspect, and_, func, select, update, delete
from sqlalchemy.sql.selectable import Select
from sqlalchemy.exc import SQLAlchemyError
from remote_config.db.base import Base
from remote_config.services.exceptions import StorageError

# --- 使用 TypeVar 和 Generic 实现类型安全的 DAO ---
ModelType = TypeVar("ModelType", bound=Base)

class BaseDao(Generic[ModelType]):
    """
    通用数据访问层。所有 SQLAlchemyError 都在这里被转换为 StorageError，
    上层永远不会看到驱动或 SQL 的原始异常。

    where 参数接受两种形式:
      - dict: {"app_id": "...", "is_visible": True}，按列相等过滤
      - list: 任意 SQLAlchemy 布尔表达式，例如 [Menu.order_index > 0]
    """
    def __init__(self, model_class: Type[ModelType], db_session: AsyncSession):
        self.model: Type[ModelType] = model_class
        self.db_session: AsyncSession = db_session
        primary_keys = inspect(model_class).primary_key
        if not primary_keys:
            raise ValueError(f"Model {model_class.__name__} does not have a primary key.")
        self.pk: str = primary_keys[0].name

    # ==============================================================================
    # 1. 实体/对象方法 (Object Methods)
    #    - 输入和输出都应该是 ORM 对象实例
    # ==============================================================================

    async def get_list(self, where: Optional[dict | list] = None, order: Optional[list] = None) -> list[ModelType]:
        stmt = self._quick_query(where=where, order=order)
        executed = await self._execute(stmt)
        return list(executed.scalars().all())

    async def get_one(self, where: Optional[dict | list] = None, order: Optional[list] = None) -> Optional[ModelType]:
        stmt = self._quick_query(where=where, order=order)
        executed = await self._execute(stmt)
        return executed.scalars().first()

    async def get_by_pk(self, pk_value: Any) -> Optional[ModelType]:
        return await self.get_one(where={self.pk: pk_value})

    async def count(self, where: Optional[dict | list] = None) -> int:
        subquery_stmt = self._quick_query(where=where).subquery()
        count_stmt = select(func.count()).select_from(subquery_stmt)
        executed = await self._execute(count_stmt)
        return executed.scalar() or 0

    async def add(self, instance: ModelType) -> ModelType:
        try:
            self.db_session.add(instance)
            await self.db_session.flush()
            # created_at/updated_at 由数据库生成
            await self.db_session.refresh(instance)
            return instance
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to insert {self.model.__name__}.") from e

    async def add_all(self, instances: list[ModelType]) -> list[ModelType]:
        if not instances:
            return []
        try:
            self.db_session.add_all(instances)
            await self.db_session.flush()
            for instance in instances:
                await self.db_session.refresh(instance)
            return instances
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to insert {self.model.__name__} rows.") from e

    async def save(self, instance: ModelType) -> ModelType:
        """Flush pending attribute changes of an already-persistent instance and reload it."""
        try:
            await self.db_session.flush()
            # updated_at 由数据库生成，必须 refresh 才能在异步环境下安全读取
            await self.db_session.refresh(instance)
            return instance
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to update {self.model.__name__}.") from e

    async def remove(self, instance: ModelType) -> None:
        try:
            await self.db_session.delete(instance)
            await self.db_session.flush()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to delete {self.model.__name__}.") from e

    # ==============================================================================
    # 2. 数据/批量方法 (Data/Bulk Methods)
    #    - 用于非对象驱动的批量操作，会同步会话中已加载的对象
    # ==============================================================================

    async def update_where(self, where: dict | list, values: dict) -> int:
        if not where or not values:
            return 0
        stmt = (
            update(self.model)
            .where(*self._where_format(where))
            .values(values)
            .execution_options(synchronize_session="fetch")
        )
        executed = await self._execute(stmt)
        return executed.rowcount

    async def delete_where(self, where: dict | list) -> int:
        if not where:
            return 0
        stmt = (
            delete(self.model)
            .where(*self._where_format(where))
            .execution_options(synchronize_session="fetch")
        )
        executed = await self._execute(stmt)
        return executed.rowcount

    # ==============================================================================
    # 3. 聚合方法 (Aggregation Methods)
    # ==============================================================================

    async def count_by(self, column_name: str, where: Optional[dict | list] = None) -> dict[Any, int]:
        """按某一列分组计数，返回 {列值: 数量}。"""
        column = getattr(self.model, column_name)
        stmt = select(column, func.count()).group_by(column)
        if where is not None:
            stmt = stmt.where(*self._where_format(where))
        executed = await self._execute(stmt)
        return {value: total for value, total in executed.all()}

    # ==============================================================================
    # 4. 查询构建辅助方法 (Query Building Helpers)
    # ==============================================================================

    async def _execute(self, stmt):
        try:
            return await self.db_session.execute(stmt)
        except SQLAlchemyError as e:
            raise StorageError(f"Query on {self.model.__name__} failed.") from e

    def _quick_query(self, where: Optional[dict | list] = None, order: Optional[list] = None) -> Select:
        stmt = select(self.model)
        if where is not None:
            stmt = stmt.where(*self._where_format(where))
        if order is not None:
            stmt = stmt.order_by(*order)
        return stmt

    def _where_format(self, conditions: dict | list) -> list:
        if not conditions:
            return []
        if isinstance(conditions, dict):
            processed_conditions = [getattr(self.model, field) == value for field, value in conditions.items()]
        else:
            processed_conditions = list(conditions)
        if len(processed_conditions) > 1:
            processed_conditions = [and_(*processed_conditions)]
        return processed_conditions
