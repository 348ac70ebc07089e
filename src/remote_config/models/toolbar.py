import enum
from sqlalchemy import Column, String, Integer, Boolean, Enum, JSON, DateTime, func
from remote_config.db.base import Base
from remote_config.utils.id_generator import generate_uuid

class ToolbarPosition(enum.Enum): TOP = "top"; BOTTOM = "bottom"

class Toolbar(Base):
    """工具栏表。按钮不是独立实体，作为有序数组整体存放在 buttons 列中。"""
    __tablename__ = 'app_toolbar'

    id = Column(String(36), primary_key=True, default=generate_uuid)
    app_id = Column(String(36), nullable=False, index=True)
    toolbar_id = Column(String(255), nullable=False)
    title = Column(String(255), nullable=False)
    position = Column(
        Enum(ToolbarPosition, values_callable=lambda e: [m.value for m in e], native_enum=False, length=10),
        nullable=False, default=ToolbarPosition.TOP
    )
    # 原始颜色字符串，不做校验
    background_color = Column(String(50), nullable=False, default="#FFFFFF")
    text_color = Column(String(50), nullable=False, default="#000000")
    height = Column(Integer, nullable=False, default=56)
    is_visible = Column(Boolean, nullable=False, default=True)
    # 结构示例: [{"id": "search", "title": "Search", "icon": "search", "action_type": "navigate", "action_value": "/search", "order_index": 0}]
    buttons = Column(JSON, nullable=False, default=lambda: [])

    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())
