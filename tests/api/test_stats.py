# tests/api/test_stats.py

import pytest
from httpx import AsyncClient
from fastapi import status
from typing import Callable, Dict, Any

pytestmark = pytest.mark.asyncio

class TestAppStats:
    """测试单个应用的统计。"""

    async def test_app_stats_counts(
        self,
        client: AsyncClient,
        created_app_factory: Callable,
        menu_factory: Callable,
        toolbar_factory: Callable,
        fcm_topic_factory: Callable,
        style_factory: Callable,
    ):
        app = await created_app_factory()
        other = await created_app_factory()
        await menu_factory(app["id"], menu_type="category")
        await menu_factory(app["id"], is_visible=False)
        await menu_factory(app["id"], menu_type="divider", is_enabled=False)
        await toolbar_factory(app["id"], is_visible=False)
        await fcm_topic_factory(app["id"], is_default=True)
        await fcm_topic_factory(app["id"], is_active=False)
        await style_factory(app["id"], style_category="color")
        await style_factory(app["id"], style_category="color")
        await style_factory(app["id"], style_category="spacing")
        # 其他应用的数据不计入
        await menu_factory(other["id"])
        await style_factory(other["id"], style_category="layout")

        response = await client.get(f"/api/apps/{app['id']}/stats")

        assert response.status_code == status.HTTP_200_OK
        stats = response.json()["data"]
        assert stats["menus"] == {"total": 3, "visible": 2, "enabled": 2, "categories": 1, "items": 1, "dividers": 1}
        assert stats["toolbars"] == {"total": 1, "visible": 0}
        assert stats["fcm_topics"] == {"total": 2, "active": 1, "default": 1}
        assert stats["styles"] == {"total": 3, "categories": {"color": 2, "spacing": 1}}

    async def test_stats_of_empty_app(self, client: AsyncClient, created_app_factory: Callable):
        app = await created_app_factory()

        response = await client.get(f"/api/apps/{app['id']}/stats")

        stats = response.json()["data"]
        assert stats["menus"]["total"] == 0
        assert stats["styles"] == {"total": 0, "categories": {}}

    async def test_stats_of_unknown_app(self, client: AsyncClient):
        response = await client.get("/api/apps/does-not-exist/stats")

        assert response.status_code == status.HTTP_404_NOT_FOUND

class TestGlobalStats:
    """测试全局统计。"""

    async def test_global_stats_without_apps(self, client: AsyncClient):
        """[边界] 没有任何应用时平均值为 0，而不是除零错误。"""
        response = await client.get("/api/apps/stats")

        assert response.status_code == status.HTTP_200_OK
        stats = response.json()["data"]
        assert stats["apps"]["total"] == 0
        assert stats["menus"] == {"total": 0, "averagePerApp": 0.0}
        assert stats["styles"]["topCategories"] == []
        assert stats["lastUpdated"]

    async def test_global_stats(
        self, client: AsyncClient, created_app_factory: Callable, menu_factory: Callable, style_factory: Callable
    ):
        first = await created_app_factory()
        second = await created_app_factory(status="inactive")
        await created_app_factory(status="maintenance")
        for _ in range(3):
            await menu_factory(first["id"])
        await menu_factory(second["id"])
        await style_factory(first["id"], style_category="color")
        await style_factory(first["id"], style_category="color")
        await style_factory(second["id"], style_category="typography")

        response = await client.get("/api/apps/stats")

        stats = response.json()["data"]
        assert stats["apps"] == {"total": 3, "active": 1, "inactive": 1, "maintenance": 1}
        assert stats["menus"] == {"total": 4, "averagePerApp": 1.3}
        assert stats["toolbars"] == {"total": 0, "averagePerApp": 0.0}
        assert stats["styles"]["total"] == 3
        assert stats["styles"]["averagePerApp"] == 1.0
        assert stats["styles"]["topCategories"] == [
            {"category": "color", "count": 2},
            {"category": "typography", "count": 1},
        ]

    async def test_global_stats_use_camel_case_keys(self, client: AsyncClient, created_app: Dict[str, Any]):
        response = await client.get("/api/apps/stats")

        stats = response.json()["data"]
        assert "lastUpdated" in stats and "last_updated" not in stats
        assert set(stats["styles"]) == {"total", "averagePerApp", "topCategories"}
        assert set(stats["fcm_topics"]) == {"total", "averagePerApp"}

    async def test_average_rounds_half_up(self, client: AsyncClient, created_app_factory: Callable, style_factory: Callable):
        """[边界] 1 个样式 / 4 个应用 = 0.25，保留一位小数后为 0.3 而不是 0.2。"""
        first = await created_app_factory()
        for _ in range(3):
            await created_app_factory()
        await style_factory(first["id"])

        response = await client.get("/api/apps/stats")

        assert response.json()["data"]["styles"]["averagePerApp"] == 0.3
