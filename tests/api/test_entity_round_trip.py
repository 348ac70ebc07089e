# tests/api/test_entity_round_trip.py

import pytest
from httpx import AsyncClient
from fastapi import status
from typing import Callable, Dict, Any

pytestmark = pytest.mark.asyncio

TIMESTAMPS = ("created_at", "updated_at")

# 每类实体都给出所有可选字段，确保它们原样写入并原样读回
ENTITY_PAYLOADS = {
    "menus": {
        "menu_id": "support",
        "title": "Support",
        "icon": "headphones",
        "order_index": 6,
        "menu_type": "item",
        "action_type": "external_link",
        "action_value": "https://support.example.com",
        "is_visible": False,
        "is_enabled": False,
    },
    "toolbars": {
        "toolbar_id": "main_toolbar",
        "title": "Main Toolbar",
        "position": "bottom",
        "background_color": "#222222",
        "text_color": "#EEEEEE",
        "height": 60,
        "is_visible": False,
        "buttons": [
            {"id": "btn_home", "title": "Home", "icon": "home", "action_type": "navigate", "action_value": "/home", "order_index": 0},
            {"id": "btn_api", "title": "Sync", "icon": None, "action_type": "api_call", "action_value": "/api/sync", "order_index": 1},
        ],
    },
    "fcm_topics": {
        "topic_name": "Orders",
        "topic_id": "orders.v2",
        "description": "Order status updates",
        "is_default": True,
        "is_active": False,
    },
    "styles": {
        "style_key": "button_radius",
        "style_value": "8dp",
        "style_category": "component",
        "description": "Corner radius of buttons",
    },
}

def _without_timestamps(record: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in record.items() if k not in TIMESTAMPS}

class TestEntityRoundTrip:
    """创建后按 id 读取，得到的记录除时间戳外与创建结果完全一致。"""

    @pytest.mark.parametrize("collection", list(ENTITY_PAYLOADS))
    async def test_create_then_get_returns_same_record(
        self, client: AsyncClient, created_app: Dict[str, Any], collection: str
    ):
        app_uuid = created_app["id"]
        response = await client.post(f"/api/apps/{app_uuid}/{collection}", json=ENTITY_PAYLOADS[collection])
        assert response.status_code == status.HTTP_201_CREATED
        created = response.json()["data"]

        response_get = await client.get(f"/api/apps/{app_uuid}/{collection}/{created['id']}")

        assert response_get.status_code == status.HTTP_200_OK
        fetched = response_get.json()["data"]
        assert _without_timestamps(fetched) == _without_timestamps(created)
        for field, value in ENTITY_PAYLOADS[collection].items():
            assert created[field] == value

    async def test_child_menu_round_trip(self, client: AsyncClient, created_app: Dict[str, Any], menu_factory: Callable):
        """[边界] parent_id 等可空字段也原样读回。"""
        app_uuid = created_app["id"]
        parent = await menu_factory(app_uuid, menu_type="category", action_type=None, action_value=None)
        created = await menu_factory(app_uuid, parent_id=parent["id"], icon="shirt", action_type="api_call", action_value="/api/x")

        fetched = (await client.get(f"/api/apps/{app_uuid}/menus/{created['id']}")).json()["data"]

        assert _without_timestamps(fetched) == _without_timestamps(created)
        assert fetched["parent_id"] == parent["id"]
