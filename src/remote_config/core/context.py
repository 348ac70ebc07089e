# remote_config/core/context.py

from pydantic import BaseModel, ConfigDict
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from remote_config.services.notification.notification_relay import NotificationRelay

class AppContext(BaseModel):
    """
    Defines the complete, typed context for service layer operations.
    This acts as a "contract" for what dependencies are available and is
    the single source of truth for service dependencies.
    """
    model_config = ConfigDict(arbitrary_types_allowed=True)

    # 核心数据库会话 (每个请求一个事务)
    db: AsyncSession

    # 全局应用级服务；只有推送相关的路由需要它
    notification_relay: Optional[NotificationRelay] = None

    @property
    def relay(self) -> NotificationRelay:
        if self.notification_relay is None:
            raise RuntimeError("Notification relay is not configured for this application.")
        return self.notification_relay
