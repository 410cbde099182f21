"""用户模块 - 业务规则检查（需要访问存储）

仅用于提前给出友好错误码，最终以数据库唯一约束为准。
"""

from .repository import UserRepository


async def user_exists(repository: UserRepository, user_id: int) -> bool:
    return await repository.get_by_id(user_id) is not None


async def email_is_unique(
    repository: UserRepository,
    email: str,
    exclude_id: int | None = None,
) -> bool:
    """没有记录使用该邮箱，或唯一使用者就是 exclude_id（更新时保留自己的邮箱）"""
    user = await repository.get_by_email(email)
    if user is None:
        return True
    return exclude_id is not None and user.id == exclude_id
