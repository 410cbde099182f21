"""异常定义

错误是一个封闭的带标签集合：ErrorKind 决定如何映射为响应，
异常处理器只看标签，不依赖子类判断。
"""

from dataclasses import dataclass
from enum import StrEnum

from usersapi.core.error_codes import ErrorCode


class ErrorKind(StrEnum):
    """错误类别"""

    VALIDATION = "validation"  # 输入不合法，固定 400
    BUSINESS = "business"  # 业务规则冲突，自带状态码
    TECHNICAL = "technical"  # 其他一切，固定 500


@dataclass(frozen=True, slots=True)
class FieldViolation:
    """单个字段的校验错误"""

    field: str
    message: str


class ApiError(Exception):
    """应用异常基类"""

    def __init__(
        self,
        kind: ErrorKind,
        code: ErrorCode,
        message: str,
        status_code: int,
        details: tuple[FieldViolation, ...] = (),
    ) -> None:
        self.kind = kind
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class ValidationFailedError(ApiError):
    """请求参数校验失败"""

    def __init__(self, details: tuple[FieldViolation, ...]) -> None:
        super().__init__(
            ErrorKind.VALIDATION,
            ErrorCode.VALIDATION_FAILED,
            "Invalid input",
            status_code=400,
            details=tuple(details),
        )


class BusinessError(ApiError):
    """业务规则错误"""

    def __init__(self, status_code: int, code: ErrorCode, message: str) -> None:
        super().__init__(ErrorKind.BUSINESS, code, message, status_code=status_code)


class NotFoundError(BusinessError):
    """资源不存在"""

    def __init__(
        self,
        code: ErrorCode = ErrorCode.NOT_FOUND,
        message: str = "Resource not found",
    ) -> None:
        super().__init__(404, code, message)


class ConflictError(BusinessError):
    """资源冲突"""

    def __init__(self, code: ErrorCode, message: str = "Resource conflict") -> None:
        super().__init__(409, code, message)


class TechnicalError(ApiError):
    """技术错误（存储不可用、程序缺陷等）"""

    def __init__(self, message: str = "An unexpected error occurred") -> None:
        super().__init__(
            ErrorKind.TECHNICAL,
            ErrorCode.INTERNAL_SERVER_ERROR,
            message,
            status_code=500,
        )
