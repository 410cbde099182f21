"""数据库配置 - 显式构造的存储客户端

引擎与会话工厂由 Database 持有，生命周期（创建、健康检查、关闭）
由应用 lifespan 管理，路由层只通过依赖注入拿到会话。
"""

from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Request
from loguru import logger
from sqlalchemy import MetaData, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncAttrs,
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from usersapi.config import Settings

# 命名约定（Alembic 自动生成迁移友好）
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(AsyncAttrs, DeclarativeBase):
    """ORM 基类"""

    metadata = MetaData(naming_convention=convention)


class Database:
    """存储客户端：引擎 + 会话工厂"""

    def __init__(self, settings: Settings) -> None:
        self.url = settings.database_url
        self.engine: AsyncEngine = create_async_engine(
            self.url,
            echo=settings.debug,
            pool_pre_ping=True,
            **self._pool_options(settings),
        )
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    def _pool_options(self, settings: Settings) -> dict[str, Any]:
        # SQLite 驱动自带连接管理
        if make_url(self.url).get_backend_name() == "sqlite":
            return {}
        return {
            "pool_size": settings.pool_size,
            "max_overflow": settings.max_overflow,
            "pool_timeout": settings.pool_timeout,
        }

    async def ping(self) -> bool:
        """验证连接，失败只记录警告"""
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            logger.warning(f"数据库连接失败: {e}，应用将在无数据库模式下启动")
            return False
        logger.info("数据库连接成功")
        return True

    async def create_all(self) -> None:
        """建表（开发/测试环境）"""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """关闭连接池"""
        await self.engine.dispose()
        logger.info("数据库连接池已关闭")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """会话上下文，自动管理事务"""
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise


def get_database(request: Request) -> Database:
    """从应用状态获取存储客户端"""
    return request.app.state.database


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """数据库会话依赖，自动管理事务"""
    async with get_database(request).session() as session:
        yield session
