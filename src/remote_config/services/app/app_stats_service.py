# remote_config/services/app/app_stats_service.py

import enum
from decimal import Decimal, ROUND_HALF_UP
from datetime import datetime, timezone
from typing import Any, Dict
from remote_config.core.context import AppContext
from remote_config.models import AppStatus, MenuType
from remote_config.dao.app.app_dao import AppDao
from remote_config.dao.config.menu_dao import MenuDao
from remote_config.dao.config.toolbar_dao import ToolbarDao
from remote_config.dao.config.fcm_topic_dao import FcmTopicDao
from remote_config.dao.config.style_dao import StyleDao
from remote_config.schemas.app.app_stats_schemas import (
    AppStats, MenuStats, ToolbarStats, FcmTopicStats, StyleStats,
    GlobalStats, AppStatusStats, EntityTotals, GlobalStyleStats, StyleCategoryCount
)
from remote_config.services.app.app_service import AppService

TOP_STYLE_CATEGORIES = 5

def _by_value(counts: Dict[Any, int]) -> Dict[str, int]:
    """把以枚举为键的计数结果转换为以字符串为键。"""
    return {(k.value if isinstance(k, enum.Enum) else str(k)): v for k, v in counts.items()}

def _average(total: int, app_count: int) -> float:
    """保留一位小数，0.5 向上取整。"""
    if app_count <= 0:
        return 0.0
    return float((Decimal(total) / Decimal(app_count)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))

class AppStatsService:
    def __init__(self, context: AppContext):
        self.context = context
        self.app_service = AppService(context)
        self.app_dao = AppDao(context.db)
        self.menu_dao = MenuDao(context.db)
        self.toolbar_dao = ToolbarDao(context.db)
        self.fcm_topic_dao = FcmTopicDao(context.db)
        self.style_dao = StyleDao(context.db)

    async def get_app_stats(self, app_id: str) -> AppStats:
        app = await self.app_service.get_app_or_fail(app_id)

        menu_types = _by_value(await self.menu_dao.count_by("menu_type", where={"app_id": app.id}))
        menus = MenuStats(
            total=await self.menu_dao.count_by_app(app.id),
            visible=await self.menu_dao.count_by_app(app.id, is_visible=True),
            enabled=await self.menu_dao.count_by_app(app.id, is_enabled=True),
            categories=menu_types.get(MenuType.CATEGORY.value, 0),
            items=menu_types.get(MenuType.ITEM.value, 0),
            dividers=menu_types.get(MenuType.DIVIDER.value, 0),
        )
        toolbars = ToolbarStats(
            total=await self.toolbar_dao.count_by_app(app.id),
            visible=await self.toolbar_dao.count_by_app(app.id, is_visible=True),
        )
        fcm_topics = FcmTopicStats(
            total=await self.fcm_topic_dao.count_by_app(app.id),
            active=await self.fcm_topic_dao.count_by_app(app.id, is_active=True),
            default=await self.fcm_topic_dao.count_by_app(app.id, is_default=True),
        )
        categories = _by_value(await self.style_dao.count_by("style_category", where={"app_id": app.id}))
        styles = StyleStats(total=sum(categories.values()), categories=categories)

        return AppStats(menus=menus, toolbars=toolbars, fcm_topics=fcm_topics, styles=styles)

    async def get_global_stats(self) -> GlobalStats:
        statuses = _by_value(await self.app_dao.count_by("status"))
        app_count = sum(statuses.values())
        apps = AppStatusStats(
            total=app_count,
            active=statuses.get(AppStatus.ACTIVE.value, 0),
            inactive=statuses.get(AppStatus.INACTIVE.value, 0),
            maintenance=statuses.get(AppStatus.MAINTENANCE.value, 0),
        )

        menu_total = await self.menu_dao.count()
        toolbar_total = await self.toolbar_dao.count()
        topic_total = await self.fcm_topic_dao.count()

        categories = _by_value(await self.style_dao.count_by("style_category"))
        style_total = sum(categories.values())
        top_categories = sorted(categories.items(), key=lambda item: item[1], reverse=True)[:TOP_STYLE_CATEGORIES]

        return GlobalStats(
            apps=apps,
            menus=EntityTotals(total=menu_total, average_per_app=_average(menu_total, app_count)),
            toolbars=EntityTotals(total=toolbar_total, average_per_app=_average(toolbar_total, app_count)),
            fcm_topics=EntityTotals(total=topic_total, average_per_app=_average(topic_total, app_count)),
            styles=GlobalStyleStats(
                total=style_total,
                average_per_app=_average(style_total, app_count),
                top_categories=[StyleCategoryCount(category=c, count=n) for c, n in top_categories],
            ),
            last_updated=datetime.now(timezone.utc),
        )
