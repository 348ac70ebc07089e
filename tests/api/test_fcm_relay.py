# tests/api/test_fcm_relay.py

import pytest
from httpx import AsyncClient
from fastapi import status

from tests.conftest import FakeRelayUpstream

pytestmark = pytest.mark.asyncio

NOTIFICATION = {"title": "Sale", "body": "50% off today", "data": {"screen": "/sale"}}

class TestNotificationRelay:
    """测试推送请求向外部推送服务的转发。"""

    async def test_send_to_topic_forwards_payload(self, client: AsyncClient, fcm_upstream: FakeRelayUpstream):
        response = await client.post("/api/fcm/send-to-topic", json={**NOTIFICATION, "topic": "promotions"})

        assert response.status_code == status.HTTP_200_OK
        # 上游响应体原样返回
        assert response.json() == fcm_upstream.body

        request = fcm_upstream.requests[-1]
        assert request.method == "POST"
        assert str(request.url) == "https://relay.test/api/fcm/send-to-topic"
        assert fcm_upstream.last_json() == {**NOTIFICATION, "topic": "promotions"}

    async def test_broadcast_forwards_to_app_path(self, client: AsyncClient, fcm_upstream: FakeRelayUpstream):
        fcm_upstream.body = {"success": True, "sent": 12}

        response = await client.post("/api/fcm/broadcast/com.example.shop", json=NOTIFICATION)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"success": True, "sent": 12}
        assert str(fcm_upstream.requests[-1].url) == "https://relay.test/api/fcm/broadcast/com.example.shop"

    async def test_optional_image_is_omitted_when_absent(self, client: AsyncClient, fcm_upstream: FakeRelayUpstream):
        await client.post("/api/fcm/broadcast/com.example.shop", json={"title": "Hi", "body": "There"})

        assert fcm_upstream.last_json() == {"title": "Hi", "body": "There", "data": {}}

    async def test_invalid_topic_is_rejected_before_forwarding(self, client: AsyncClient, fcm_upstream: FakeRelayUpstream):
        response = await client.post("/api/fcm/send-to-topic", json={**NOTIFICATION, "topic": "bad topic"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert fcm_upstream.requests == []

    async def test_upstream_error_maps_to_502(self, client: AsyncClient, fcm_upstream: FakeRelayUpstream):
        """[失败路径] 上游非 2xx 时返回 502 错误信封。"""
        fcm_upstream.status_code = 500
        fcm_upstream.body = {"error": "boom"}

        response = await client.post("/api/fcm/send-to-topic", json={**NOTIFICATION, "topic": "promotions"})

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        body = response.json()
        assert body["success"] is False
        assert body["data"] is None
        assert "500" in body["error"]

    async def test_unreachable_upstream_maps_to_502(self, client: AsyncClient, fcm_upstream: FakeRelayUpstream):
        fcm_upstream.raise_connect_error = True

        response = await client.post("/api/fcm/broadcast/com.example.shop", json=NOTIFICATION)

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert response.json()["error"] == "Notification relay is unreachable."

    async def test_non_json_upstream_response_maps_to_502(self, client: AsyncClient, fcm_upstream: FakeRelayUpstream):
        fcm_upstream.body = "<html>ok</html>"

        response = await client.post("/api/fcm/broadcast/com.example.shop", json=NOTIFICATION)

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
