"""用户模块 - Schema

每种输入形状一个 schema，由 core.validation.validate() 驱动。
"""

import re
from enum import StrEnum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    field_validator,
    model_validator,
)
from pydantic_core import PydanticCustomError

from usersapi.schemas.response import BaseSchema

# 仅 ASCII 数字（\d 会匹配其他文字的数字）
_DIGITS = re.compile(r"[0-9]+")


def parse_digits(value: Any, message: str) -> Any:
    """十进制数字字符串 -> int；其他类型交给字段自身校验"""
    if isinstance(value, str):
        if not _DIGITS.fullmatch(value):
            raise PydanticCustomError("digits", message)
        return int(value)
    return value


class UserCreate(BaseSchema):
    name: str = Field(min_length=2, max_length=100)
    email: EmailStr


class UserUpdate(BaseSchema):
    """部分更新：字段均可选，但至少提供一个"""

    name: str | None = Field(default=None, min_length=2, max_length=100)
    email: EmailStr | None = None

    @model_validator(mode="after")
    def check_any_field(self) -> "UserUpdate":
        if self.name is None and self.email is None:
            raise PydanticCustomError(
                "missing_fields",
                "At least one field (name or email) must be provided",
            )
        return self

    def changes(self) -> dict[str, str]:
        """仅包含本次提供的字段"""
        return self.model_dump(exclude_none=True)


class UserIdParam(BaseModel):
    id: int = Field(ge=0)

    @field_validator("id", mode="before")
    @classmethod
    def parse_id(cls, v: Any) -> Any:
        return parse_digits(v, "ID must be a positive integer")


class SortField(StrEnum):
    ID = "id"
    NAME = "name"
    EMAIL = "email"


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"


class UserListQuery(BaseModel):
    """列表查询参数（sortBy / sortOrder 使用驼峰别名）"""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    limit: int = Field(default=10, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    sort_by: SortField = Field(default=SortField.ID, alias="sortBy")
    sort_order: SortOrder = Field(default=SortOrder.ASC, alias="sortOrder")
    email: str | None = None
    name: str | None = None
    search: str | None = None

    @field_validator("limit", mode="before")
    @classmethod
    def parse_limit(cls, v: Any) -> Any:
        return parse_digits(v, "Limit must be a positive integer")

    @field_validator("offset", mode="before")
    @classmethod
    def parse_offset(cls, v: Any) -> Any:
        return parse_digits(v, "Offset must be a non-negative integer")

    @field_validator("email", "name", "search", mode="after")
    @classmethod
    def empty_as_absent(cls, v: str | None) -> str | None:
        return v or None


class UserResponse(BaseSchema):
    """用户响应模型"""

    id: int
    name: str
    email: str
