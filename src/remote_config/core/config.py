# remote_config/core/config.py
from dotenv import load_dotenv
load_dotenv(".env")
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, HttpUrl, computed_field
from typing import Optional, List

class Settings(BaseSettings):
    # model_config 会自动加载 .env 文件
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    # 应用配置 (会自动转换类型)
    APP_ENV: str = "production"
    APP_HOST: str = "127.0.0.1"
    APP_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: List[str] = ["*"]

    # --- Database ---
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_NAME: str = "remote_config"

    # 完整的 SQLAlchemy URL，设置后优先于上面的分项配置 (例如 sqlite+aiosqlite:///./local.db)
    DATABASE_URL_OVERRIDE: Optional[str] = None

    # 连接回收时间 (秒)
    DB_POOL_RECYCLE: int = 3600
    # 启动时自动建表 (仅建议在开发环境开启)
    DB_AUTO_CREATE: bool = False

    @computed_field
    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    # --- Notification relay (FCM) ---
    FCM_RELAY_BASE_URL: HttpUrl = Field(
        "https://remote-config-node-express.onrender.com/api/fcm",
        description="Base URL of the external push-notification relay."
    )
    FCM_RELAY_TIMEOUT_SECONDS: float = 30.0

settings = Settings()
