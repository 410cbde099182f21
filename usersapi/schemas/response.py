"""统一响应模型"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class BaseSchema(BaseModel):
    """
    所有 Schema 的基类

    特性：
    - from_attributes: 支持 ORM 模型转换
    - str_strip_whitespace: 自动去除字符串首尾空白
    """

    model_config = ConfigDict(
        from_attributes=True,
        str_strip_whitespace=True,
        validate_default=True,
    )


class ApiResponse(BaseModel, Generic[T]):
    """单个对象响应"""

    data: T


class ApiListResponse(BaseModel, Generic[T]):
    """列表响应（count 为本页条数）"""

    data: list[T]
    count: int


class ErrorDetail(BaseModel):
    """字段级错误"""

    field: str
    message: str


class ErrorBody(BaseModel):
    code: str
    message: str
    details: list[ErrorDetail] | None = None


class ErrorResponse(BaseModel):
    """错误响应：{"error": {code, message, details?}}"""

    error: ErrorBody
