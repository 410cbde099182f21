"""路由配置"""

from fastapi import FastAPI

from usersapi.modules.user.router import router as user_router


def setup_routers(app: FastAPI) -> None:
    """注册路由"""
    app.include_router(user_router, prefix="/users", tags=["users"])
