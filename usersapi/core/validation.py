"""纯函数式校验：输入 -> 规范化值 或 有序的字段错误列表"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from usersapi.core.exceptions import FieldViolation, ValidationFailedError

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True, slots=True)
class ValidationResult(Generic[M]):
    """校验结果：要么有 value，要么有 violations"""

    value: M | None = None
    violations: tuple[FieldViolation, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.violations

    def unwrap(self) -> M:
        """取出规范化值；失败时抛出 ValidationFailedError"""
        if not self.ok:
            raise ValidationFailedError(self.violations)
        return self.value


def violations_from(exc: PydanticValidationError, root: str) -> tuple[FieldViolation, ...]:
    """Pydantic 错误 -> 字段错误（点分路径，顶层错误记到 root 上）"""
    violations = []
    for error in exc.errors():
        loc = error["loc"]
        field = ".".join(str(x) for x in loc) if loc else root
        violations.append(FieldViolation(field=field, message=error["msg"]))
    return tuple(violations)


def validate(model: type[M], data: Any, *, root: str = "body") -> ValidationResult[M]:
    """按 schema 校验并规范化输入，不抛异常"""
    try:
        return ValidationResult(value=model.model_validate(data))
    except PydanticValidationError as exc:
        return ValidationResult(violations=violations_from(exc, root))
