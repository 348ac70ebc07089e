# remote_config/db/init_db.py

import logging
from sqlalchemy.ext.asyncio import AsyncEngine
from remote_config.db.base import Base
# 导入所有模型，确保它们注册到 Base.metadata
from remote_config import models  # noqa: F401

logger = logging.getLogger(__name__)

async def init_db(engine: AsyncEngine) -> None:
    """Create every table that does not exist yet. Existing tables are left untouched."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ensured (%d tables).", len(Base.metadata.tables))
