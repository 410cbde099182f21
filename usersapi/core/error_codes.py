"""错误码定义"""

from enum import StrEnum


class ErrorCode(StrEnum):
    """对外暴露的错误码"""

    # 请求错误
    VALIDATION_FAILED = "VALIDATION_FAILED"
    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"

    # 用户模块
    USER_NOT_FOUND = "USER_NOT_FOUND"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"

    # 系统错误
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"
