"""
应用入口

- create_app 工厂模式，便于测试和多实例
- 存储客户端由 lifespan 创建、检查、释放，通过 app.state 注入
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from usersapi.config import Settings, get_settings
from usersapi.core.database import Database
from usersapi.core.exception_handlers import setup_exception_handlers
from usersapi.core.middlewares import setup_middlewares
from usersapi.core.routers import setup_routers


def create_app(settings: Settings | None = None) -> FastAPI:
    """应用工厂函数"""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # 启动：连接检查失败只告警，不阻止启动
        database = Database(settings)
        await database.ping()
        if settings.create_tables:
            await database.create_all()
        app.state.database = database
        yield
        # 关闭：释放连接池
        await database.dispose()

    application = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url=None,
    )

    # 注册组件（顺序重要）
    setup_middlewares(application, settings)
    setup_routers(application)
    setup_exception_handlers(application)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """存活检查（不访问数据库）"""
        return {"status": "ok"}

    return application
