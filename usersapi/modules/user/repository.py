"""用户模块 - 数据访问层"""

from sqlalchemy import and_, asc, delete, desc, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from .exceptions import DuplicateEmailError
from .models import EMAIL_UNIQUE_CONSTRAINT, MAX_USER_ID, User
from .schemas import SortField, SortOrder, UserListQuery

_SORT_COLUMNS = {
    SortField.ID: User.id,
    SortField.NAME: User.name,
    SortField.EMAIL: User.email,
}


UNIQUE_VIOLATION = "23505"


def _is_email_conflict(exc: IntegrityError) -> bool:
    """是否为 email 唯一约束冲突"""
    message = str(exc.orig)
    # PostgreSQL：unique_violation，报错中带约束名
    if getattr(exc.orig, "sqlstate", None) == UNIQUE_VIOLATION:
        return EMAIL_UNIQUE_CONSTRAINT in message
    # SQLite：不保留约束名，只报表名.列名
    return f"UNIQUE constraint failed: {User.__tablename__}.email" in message


class UserRepository:
    """用户数据访问层

    注意：事务由 get_db() 依赖自动管理，Repository 只用 flush/refresh
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_id(self, user_id: int) -> User | None:
        # 超出 id 列范围的值直接视为不存在，不下发到数据库
        if user_id > MAX_USER_ID:
            return None
        return await self.db.get(User, user_id)

    async def get_by_email(self, email: str) -> User | None:
        return await self.db.scalar(select(User).where(User.email == email))

    async def list(self, query: UserListQuery) -> list[User]:
        """过滤 -> 排序 -> 分页"""
        conditions = []
        if query.email:
            conditions.append(User.email == query.email)
        if query.name:
            conditions.append(User.name == query.name)
        if query.search:
            pattern = f"%{query.search}%"
            conditions.append(or_(User.name.ilike(pattern), User.email.ilike(pattern)))

        column = _SORT_COLUMNS[query.sort_by]
        order = asc(column) if query.sort_order is SortOrder.ASC else desc(column)

        stmt = select(User)
        if conditions:
            stmt = stmt.where(and_(*conditions))
        stmt = stmt.order_by(order).limit(query.limit).offset(query.offset)

        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def create(self, user: User) -> User:
        """插入用户；email 唯一约束冲突转为 DuplicateEmailError"""
        self.db.add(user)
        await self._flush(user.email)
        await self.db.refresh(user)
        return user

    async def update(self, user: User, changes: dict[str, str]) -> User:
        """只写入提供的字段"""
        for field, value in changes.items():
            setattr(user, field, value)
        await self._flush(user.email)
        await self.db.refresh(user)
        return user

    async def delete_by_id(self, user_id: int) -> None:
        """按 ID 删除"""
        await self.db.execute(delete(User).where(User.id == user_id))
        await self.db.flush()

    async def _flush(self, email: str) -> None:
        try:
            await self.db.flush()
        except IntegrityError as exc:
            if _is_email_conflict(exc):
                raise DuplicateEmailError(email) from exc
            raise
