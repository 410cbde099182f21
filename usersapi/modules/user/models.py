"""用户模块 - ORM 模型"""

from sqlalchemy import Identity, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from usersapi.core.database import Base

# id 列为 int4，超出范围的 ID 不可能存在
MAX_USER_ID = 2**31 - 1

EMAIL_UNIQUE_CONSTRAINT = "uq_users_email"


class User(Base):
    """
    用户模型

    - id: 数据库生成的自增标识，不可修改、不复用
    - email: 全局唯一（数据库唯一约束为最终保证）
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, Identity(), primary_key=True)
    name: Mapped[str] = mapped_column(String(100))
    email: Mapped[str] = mapped_column(String(255))

    __table_args__ = (
        UniqueConstraint("email", name=EMAIL_UNIQUE_CONSTRAINT),
        # SQLite 下同样保证 id 不复用
        {"sqlite_autoincrement": True},
    )
