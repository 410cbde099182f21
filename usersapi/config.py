"""配置管理"""

from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

_ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """应用配置（环境变量 / .env）"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 必填字段
    database_url: str

    # 服务监听
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)

    # 应用配置
    app_name: str = "Users API"
    debug: bool = False
    log_level: str = "INFO"
    json_logs: bool = False

    # 启动时建表（开发/测试环境）
    create_tables: bool = False

    # 连接池（SQLite 不使用）
    pool_size: int = Field(default=5, ge=1)
    max_overflow: int = Field(default=10, ge=0)
    pool_timeout: float = Field(default=30.0, gt=0)

    # 优雅关闭等待时间（秒）
    shutdown_timeout: int = Field(default=10, ge=0)

    # CORS
    cors_origins: Annotated[list[str], NoDecode] = []

    @field_validator("database_url")
    @classmethod
    def normalize_database_url(cls, v: str) -> str:
        """普通 postgres URL 统一使用 asyncpg 驱动"""
        for prefix in ("postgres://", "postgresql://"):
            if v.startswith(prefix):
                return "postgresql+asyncpg://" + v[len(prefix):]
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in _ALLOWED_LOG_LEVELS:
            msg = f"log_level must be one of {sorted(_ALLOWED_LOG_LEVELS)}"
            raise ValueError(msg)
        return upper

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: str | list[str]) -> list[str]:
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


@lru_cache
def get_settings() -> Settings:
    """全局单例"""
    return Settings()
