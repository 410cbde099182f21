"""用户模块 - 路由

处理流程：校验输入 -> 业务检查 -> 存储操作 -> 组装响应。
路由本身从不格式化错误，失败一律抛给全局异常处理器。
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Request, Response, status

from usersapi.core.exceptions import ValidationFailedError
from usersapi.core.validation import validate
from usersapi.schemas.response import ApiListResponse, ApiResponse

from .dependencies import UserServiceDep
from .schemas import UserCreate, UserIdParam, UserListQuery, UserResponse, UserUpdate

router = APIRouter()

RawBody = Annotated[Any, Body()]


def _parse_id(user_id: str) -> int:
    return validate(UserIdParam, {"id": user_id}, root="params").unwrap().id


@router.post("", response_model=ApiResponse[UserResponse], status_code=status.HTTP_201_CREATED)
async def create_user(service: UserServiceDep, payload: RawBody = None):
    """创建用户"""
    user_in = validate(UserCreate, payload).unwrap()
    return ApiResponse(data=await service.create(user_in))


@router.get("", response_model=ApiListResponse[UserResponse])
async def list_users(request: Request, service: UserServiceDep):
    """获取用户列表（过滤、排序、分页）"""
    query = validate(UserListQuery, dict(request.query_params), root="query").unwrap()
    users = await service.list(query)
    return ApiListResponse(data=users, count=len(users))


@router.get("/{user_id}", response_model=ApiResponse[UserResponse])
async def get_user(user_id: str, service: UserServiceDep):
    """获取单个用户"""
    return ApiResponse(data=await service.get(_parse_id(user_id)))


@router.put("/{user_id}", response_model=ApiResponse[UserResponse])
async def update_user(user_id: str, service: UserServiceDep, payload: RawBody = None):
    """更新用户（只写入提供的字段）"""
    # 路径参数与请求体都校验完，才进入业务检查
    params = validate(UserIdParam, {"id": user_id}, root="params")
    body = validate(UserUpdate, payload)
    if not (params.ok and body.ok):
        raise ValidationFailedError(params.violations + body.violations)

    return ApiResponse(data=await service.update(params.value.id, body.value))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str, service: UserServiceDep) -> Response:
    """删除用户"""
    await service.delete(_parse_id(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
