"""用户模块 - 业务逻辑层

入参均为已校验、已规范化的值；业务规则检查先于写操作执行。
"""

from loguru import logger

from .exceptions import DuplicateEmailError, UserNotFoundError
from .models import User
from .repository import UserRepository
from .schemas import UserCreate, UserListQuery, UserResponse, UserUpdate
from .validators import email_is_unique, user_exists


class UserService:
    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    async def list(self, query: UserListQuery) -> list[UserResponse]:
        """获取用户列表"""
        users = await self.repository.list(query)
        return [UserResponse.model_validate(u) for u in users]

    async def get(self, user_id: int) -> UserResponse:
        """获取单个用户"""
        user = await self.repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return UserResponse.model_validate(user)

    async def create(self, user_in: UserCreate) -> UserResponse:
        """创建用户"""
        if not await email_is_unique(self.repository, user_in.email):
            raise DuplicateEmailError(user_in.email)

        user = await self.repository.create(User(name=user_in.name, email=user_in.email))
        logger.info("用户已创建 id={}", user.id)
        return UserResponse.model_validate(user)

    async def update(self, user_id: int, user_in: UserUpdate) -> UserResponse:
        """部分更新用户"""
        user = await self.repository.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        if user_in.email is not None and not await email_is_unique(
            self.repository, user_in.email, exclude_id=user_id
        ):
            raise DuplicateEmailError(user_in.email)

        user = await self.repository.update(user, user_in.changes())
        logger.info("用户已更新 id={}", user.id)
        return UserResponse.model_validate(user)

    async def delete(self, user_id: int) -> None:
        """删除用户"""
        if not await user_exists(self.repository, user_id):
            raise UserNotFoundError(user_id)
        await self.repository.delete_by_id(user_id)
        logger.info("用户已删除 id={}", user_id)
