# remote_config/services/notification/notification_relay.py

import logging
import httpx
from typing import Any, Dict, Optional
from remote_config.core.config import settings
from remote_config.services.exceptions import UpstreamError

logger = logging.getLogger(__name__)

class NotificationRelay:
    """
    把推送请求原样转发给外部推送服务。
    不解析、不依赖上游响应的内容，上游返回的 JSON 原样交还给调用方。
    """
    def __init__(self, base_url: Optional[str] = None, client: Optional[httpx.AsyncClient] = None):
        self.base_url = str(base_url or settings.FCM_RELAY_BASE_URL).rstrip("/")
        self.http_client = client or httpx.AsyncClient(timeout=settings.FCM_RELAY_TIMEOUT_SECONDS)

    async def send_to_topic(self, payload: Dict[str, Any]) -> Any:
        return await self._post("/send-to-topic", payload)

    async def broadcast(self, app_id: str, payload: Dict[str, Any]) -> Any:
        return await self._post(f"/broadcast/{app_id}", payload)

    async def close(self) -> None:
        await self.http_client.aclose()

    async def _post(self, path: str, payload: Dict[str, Any]) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = await self.http_client.post(url, json=payload)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Notification relay returned HTTP {e.response.status_code} for {e.request.url}: {e.response.text[:500]}")
            raise UpstreamError(
                f"Notification relay responded with status {e.response.status_code}.",
                status_code=e.response.status_code
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Notification relay request failed for {e.request.url}: {e}")
            raise UpstreamError("Notification relay is unreachable.") from e
        except ValueError as e:
            # 2xx 但响应体不是 JSON
            raise UpstreamError("Notification relay returned a non-JSON response.") from e
