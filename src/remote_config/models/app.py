import enum
from sqlalchemy import Column, String, Text, Enum, DateTime, func
from remote_config.db.base import Base
from remote_config.utils.id_generator import generate_uuid

class AppStatus(enum.Enum): ACTIVE = "active"; INACTIVE = "inactive"; MAINTENANCE = "maintenance"

class App(Base):
    """
    应用表 - 远程配置的租户根。
    移动端通过公开的 app_id 拉取配置，管理端通过内部 id 操作。
    """
    __tablename__ = 'app'

    id = Column(String(36), primary_key=True, default=generate_uuid, comment="内部主键")
    app_name = Column(String(255), nullable=False, comment="显示名称")
    app_id = Column(String(255), nullable=False, unique=True, index=True, comment="公开的应用标识，移动端查询键")
    package_name = Column(String(255), nullable=False, comment="包名")
    version = Column(String(50), nullable=False, default="1.0.0", comment="语义化版本号")
    description = Column(Text, nullable=True)
    # 状态之间的迁移不受约束；只有 active 的应用对移动端可见
    status = Column(
        Enum(AppStatus, values_callable=lambda e: [m.value for m in e], native_enum=False, length=20),
        nullable=False, default=AppStatus.ACTIVE
    )

    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())
