from sqlalchemy import Column, String, Text, Boolean, DateTime, func
from remote_config.db.base import Base
from remote_config.utils.id_generator import generate_uuid

class FcmTopic(Base):
    """推送主题表。is_active 决定主题是否出现在移动端配置中。"""
    __tablename__ = 'app_fcm_topic'

    id = Column(String(36), primary_key=True, default=generate_uuid)
    app_id = Column(String(36), nullable=False, index=True)
    topic_name = Column(String(255), nullable=False, comment="显示名称")
    topic_id = Column(String(255), nullable=False, comment="推送服务订阅使用的主题字符串")
    description = Column(Text, nullable=True)
    # 客户端应自动订阅
    is_default = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())
