"""全局异常处理器注册

所有失败最终都经过 error_response() 序列化为统一错误信封。
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from usersapi.core.error_codes import ErrorCode
from usersapi.core.exceptions import (
    ApiError,
    BusinessError,
    ErrorKind,
    FieldViolation,
    TechnicalError,
    ValidationFailedError,
)
from usersapi.schemas.response import ErrorBody, ErrorDetail, ErrorResponse

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


def error_response(exc: ApiError) -> JSONResponse:
    """按错误类别映射状态码与信封（唯一的映射入口）"""
    if exc.kind is ErrorKind.VALIDATION:
        status_code = 400
        body = ErrorBody(
            code=exc.code,
            message=exc.message,
            details=[ErrorDetail(field=v.field, message=v.message) for v in exc.details],
        )
    elif exc.kind is ErrorKind.BUSINESS:
        status_code = exc.status_code
        body = ErrorBody(code=exc.code, message=exc.message)
    else:
        # 技术错误不向调用方暴露细节
        status_code = 500
        body = ErrorBody(
            code=ErrorCode.INTERNAL_SERVER_ERROR, message=GENERIC_ERROR_MESSAGE
        )

    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=body).model_dump(exclude_none=True),
    )


def unexpected_error_response(request: Request, exc: Exception) -> JSONResponse:
    """未捕获异常：记录完整堆栈，返回通用 500"""
    logger.opt(exception=exc).error(
        "未捕获异常 {method} {path}", method=request.method, path=request.url.path
    )
    return error_response(TechnicalError())


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """应用异常处理"""
    if exc.kind is ErrorKind.TECHNICAL:
        return unexpected_error_response(request, exc)
    logger.warning(
        "业务异常: {} | code={} path={}",
        exc.message,
        exc.code,
        request.url.path,
    )
    return error_response(exc)


async def validation_error_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """框架层校验异常（如 JSON 格式错误）"""
    details = []
    for error in exc.errors():
        loc = error["loc"]
        field = ".".join(str(x) for x in loc[1:]) if len(loc) > 1 else str(loc[0])
        details.append(FieldViolation(field=field, message=error["msg"]))
    return error_response(ValidationFailedError(tuple(details)))


async def http_error_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """HTTP 异常处理（未匹配路由、方法不允许）"""
    if exc.status_code == 404:
        error = BusinessError(404, ErrorCode.NOT_FOUND, "Route not found")
    elif exc.status_code == 405:
        error = BusinessError(405, ErrorCode.METHOD_NOT_ALLOWED, "Method not allowed")
    elif exc.status_code >= 500:
        return unexpected_error_response(request, exc)
    else:
        error = BusinessError(exc.status_code, ErrorCode.BAD_REQUEST, str(exc.detail))

    response = error_response(error)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def setup_exception_handlers(app: FastAPI) -> None:
    """注册全局异常处理器"""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
