import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker

from remote_config.core.config import settings
from remote_config.core.context import AppContext
from remote_config.dao.app.app_dao import AppDao
from remote_config.db.init_db import init_db
from remote_config.schemas.app.app_schemas import AppCreate
from remote_config.schemas.config.menu_schemas import MenuCreate
from remote_config.schemas.config.toolbar_schemas import ToolbarCreate
from remote_config.schemas.config.fcm_topic_schemas import FcmTopicCreate
from remote_config.schemas.config.style_schemas import StyleCreate
from remote_config.services.app.app_service import AppService
from remote_config.services.config.menu_service import MenuService
from remote_config.services.config.toolbar_service import ToolbarService
from remote_config.services.config.fcm_topic_service import FcmTopicService
from remote_config.services.config.style_service import StyleService

# --- Setup Logging ---
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

SEED_FILE = Path(__file__).resolve().parent.parent / "seed_data" / "sample_app.json"

class SampleMenu(MenuCreate):
    # 父菜单在种子文件中用 menu_id 引用，写入时再换成内部 id
    parent: Optional[str] = None

class SampleApp(BaseModel):
    app: AppCreate
    menus: List[SampleMenu] = Field(default_factory=list)
    toolbars: List[ToolbarCreate] = Field(default_factory=list)
    fcm_topics: List[FcmTopicCreate] = Field(default_factory=list)
    styles: List[StyleCreate] = Field(default_factory=list)

def _load_sample(path: Path = SEED_FILE) -> SampleApp:
    logger.info(f"  - Loading and validating {path.name}...")
    try:
        with path.open(encoding="utf-8") as f:
            return SampleApp.model_validate(json.load(f))
    except ValidationError as e:
        logger.critical(f"FATAL: Validation failed for {path.name}. See details below.")
        for error in e.errors():
            logger.critical(f"  - Location: {error['loc']} | Error: {error['msg']}")
        raise

async def _seed_menus(context: AppContext, app_id: str, menus: List[SampleMenu]) -> None:
    service = MenuService(context)
    created_ids = {}
    for menu in menus:
        menu_in = MenuCreate(**menu.model_dump(exclude={"parent", "parent_id"}))
        if menu.parent:
            if menu.parent not in created_ids:
                raise ValueError(f"Menu '{menu.menu_id}' references '{menu.parent}', which must be listed before it.")
            menu_in.parent_id = created_ids[menu.parent]
        created = await service.create(app_id, menu_in)
        created_ids[created.menu_id] = created.id

async def seed_sample_data(db: AsyncSession, sample: Optional[SampleApp] = None) -> bool:
    """Insert the demo app with its configuration. Returns False when it already exists."""
    sample = sample or _load_sample()

    # 1. Idempotency Check
    if await AppDao(db).get_by_public_id(sample.app.app_id):
        logger.warning(f"App '{sample.app.app_id}' already exists. Skipping.")
        return False

    context = AppContext(db=db)
    app = await AppService(context).create_app(sample.app)
    logger.info(f"Step: App '{app.app_id}' created ({app.id}).")

    await _seed_menus(context, app.id, sample.menus)
    for toolbar_in in sample.toolbars:
        await ToolbarService(context).create(app.id, toolbar_in)
    for topic_in in sample.fcm_topics:
        await FcmTopicService(context).create(app.id, topic_in)
    for style_in in sample.styles:
        await StyleService(context).create(app.id, style_in)

    logger.info(
        f"Step: Seeded {len(sample.menus)} menus, {len(sample.toolbars)} toolbars, "
        f"{len(sample.fcm_topics)} topics and {len(sample.styles)} styles."
    )
    return True

# --- Main execution block ---

async def main():
    """Creates missing tables and seeds the demo app within a single transaction."""
    engine = create_async_engine(settings.DATABASE_URL, echo=False)
    AsyncSessionLocal = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    try:
        await init_db(engine)
        async with AsyncSessionLocal() as db:
            async with db.begin():  # Single transaction for the whole process
                await seed_sample_data(db)
    except Exception:
        logger.critical("FATAL ERROR during seeding: the transaction has been rolled back.", exc_info=True)
        sys.exit(1)
    finally:
        await engine.dispose()

if __name__ == "__main__":
    logger.info("Running seed script as a standalone process...")
    asyncio.run(main())
