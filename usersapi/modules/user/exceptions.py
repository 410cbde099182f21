"""用户模块 - 异常"""

from usersapi.core.error_codes import ErrorCode
from usersapi.core.exceptions import ConflictError, NotFoundError


class UserNotFoundError(NotFoundError):
    """用户不存在"""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(code=ErrorCode.USER_NOT_FOUND, message="User not found")


class DuplicateEmailError(ConflictError):
    """邮箱已存在"""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(code=ErrorCode.DUPLICATE_EMAIL, message="Email already exists")
