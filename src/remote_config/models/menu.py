import enum
from sqlalchemy import Column, String, Text, Integer, Boolean, Enum, DateTime, func, Index
from remote_config.db.base import Base
from remote_config.utils.id_generator import generate_uuid

class MenuType(enum.Enum): ITEM = "item"; CATEGORY = "category"; DIVIDER = "divider"

class ActionType(enum.Enum): NAVIGATE = "navigate"; EXTERNAL_LINK = "external_link"; API_CALL = "api_call"

def _enum_column(enum_cls, **kwargs):
    return Column(
        Enum(enum_cls, values_callable=lambda e: [m.value for m in e], native_enum=False, length=20),
        **kwargs
    )

class Menu(Base):
    """
    菜单表 - 以扁平表存储的树。
    parent_id 只是指向同一应用下另一条菜单的回引用 (不是外键所有权)，
    树结构由客户端按 parent_id 分组重建。
    """
    __tablename__ = 'menu'

    id = Column(String(36), primary_key=True, default=generate_uuid)
    # 所属应用的内部 id；删除应用时不会级联 (见 AppService.delete_app)
    app_id = Column(String(36), nullable=False, index=True)
    menu_id = Column(String(255), nullable=False, comment="外部菜单标识，仅约定唯一")
    title = Column(String(255), nullable=False)
    icon = Column(String(255), nullable=True)
    order_index = Column(Integer, nullable=False, default=0, comment="同级排序，升序")
    parent_id = Column(String(36), nullable=True, index=True, comment="父菜单内部 id，为空表示根级")
    menu_type = _enum_column(MenuType, nullable=False, default=MenuType.ITEM)
    # 仅当 menu_type = item 时有意义
    action_type = _enum_column(ActionType, nullable=True)
    action_value = Column(Text, nullable=True)
    is_visible = Column(Boolean, nullable=False, default=True)
    is_enabled = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index('ix_menu_app_id_order_index', 'app_id', 'order_index'),
    )
