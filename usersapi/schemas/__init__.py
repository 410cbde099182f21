"""Schema 模块"""

from .response import (
    ApiListResponse,
    ApiResponse,
    BaseSchema,
    ErrorBody,
    ErrorDetail,
    ErrorResponse,
)

__all__ = [
    "ApiListResponse",
    "ApiResponse",
    "BaseSchema",
    "ErrorBody",
    "ErrorDetail",
    "ErrorResponse",
]
