import enum
from sqlalchemy import Column, String, Text, Enum, DateTime, func
from remote_config.db.base import Base
from remote_config.utils.id_generator import generate_uuid

class StyleCategory(enum.Enum):
    COLOR = "color"
    TYPOGRAPHY = "typography"
    SPACING = "spacing"
    COMPONENT = "component"
    LAYOUT = "layout"

class Style(Base):
    """
    样式表 - 主题字典中的一个键值对。
    (app_id, style_key) 不做唯一约束，重复创建时以最后写入为准。
    """
    __tablename__ = 'app_style'

    id = Column(String(36), primary_key=True, default=generate_uuid)
    app_id = Column(String(36), nullable=False, index=True)
    style_key = Column(String(255), nullable=False)
    style_value = Column(Text, nullable=False)
    style_category = Column(
        Enum(StyleCategory, values_callable=lambda e: [m.value for m in e], native_enum=False, length=20),
        nullable=False
    )
    description = Column(Text, nullable=True)

    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())
