# tests/api/test_fcm_topic.py

import pytest
from httpx import AsyncClient
from fastapi import status
from typing import Callable, Dict, Any

pytestmark = pytest.mark.asyncio

class TestFcmTopicCrud:

    async def test_create_topic_with_defaults(self, client: AsyncClient, created_app: Dict[str, Any]):
        response = await client.post(
            f"/api/apps/{created_app['id']}/fcm_topics",
            json={"topic_name": "Promotions", "topic_id": "promotions"}
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()["data"]
        assert data["is_default"] is False
        assert data["is_active"] is True

    @pytest.mark.parametrize("topic_id", ["news-2024", "a.b_c~d", "%7Eencoded"])
    async def test_topic_id_accepted_characters(self, client: AsyncClient, created_app: Dict[str, Any], topic_id: str):
        response = await client.post(
            f"/api/apps/{created_app['id']}/fcm_topics",
            json={"topic_name": "T", "topic_id": topic_id}
        )

        assert response.status_code == status.HTTP_201_CREATED

    @pytest.mark.parametrize("topic_id", ["has space", "slash/topic", "", "emoji😀"])
    async def test_topic_id_rejected_characters(self, client: AsyncClient, created_app: Dict[str, Any], topic_id: str):
        """[失败路径] 推送服务不接受的字符在写入前就被拒绝。"""
        response = await client.post(
            f"/api/apps/{created_app['id']}/fcm_topics",
            json={"topic_name": "T", "topic_id": topic_id}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    async def test_update_topic(self, client: AsyncClient, created_app: Dict[str, Any], fcm_topic_factory: Callable):
        topic = await fcm_topic_factory(created_app["id"])

        response = await client.put(
            f"/api/apps/{created_app['id']}/fcm_topics/{topic['id']}",
            json={"is_active": False, "description": "Paused"}
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["is_active"] is False
        assert data["description"] == "Paused"
        assert data["topic_id"] == topic["topic_id"]

    async def test_update_topic_with_invalid_id(self, client: AsyncClient, created_app: Dict[str, Any], fcm_topic_factory: Callable):
        topic = await fcm_topic_factory(created_app["id"])

        response = await client.put(
            f"/api/apps/{created_app['id']}/fcm_topics/{topic['id']}", json={"topic_id": "bad topic"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    async def test_delete_topic(self, client: AsyncClient, created_app: Dict[str, Any], fcm_topic_factory: Callable):
        topic = await fcm_topic_factory(created_app["id"])

        response = await client.delete(f"/api/apps/{created_app['id']}/fcm_topics/{topic['id']}")
        assert response.status_code == status.HTTP_200_OK

        response_get = await client.get(f"/api/apps/{created_app['id']}/fcm_topics/{topic['id']}")
        assert response_get.status_code == status.HTTP_404_NOT_FOUND
