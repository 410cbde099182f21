"""
Tests for translating store integrity errors.
"""

import pytest
from sqlalchemy.exc import IntegrityError

from usersapi.modules.user.repository import _is_email_conflict


class DriverError(Exception):
    """Stand-in for a DBAPI error carrying an optional SQLSTATE."""

    def __init__(self, message: str, sqlstate: str | None = None) -> None:
        super().__init__(message)
        self.sqlstate = sqlstate


def integrity_error(orig: Exception) -> IntegrityError:
    return IntegrityError("INSERT INTO users ...", {}, orig)


class TestEmailConflictDetection:
    def test_postgres_email_constraint(self):
        orig = DriverError(
            'duplicate key value violates unique constraint "uq_users_email"', "23505"
        )
        assert _is_email_conflict(integrity_error(orig))

    def test_postgres_other_unique_constraint(self):
        orig = DriverError(
            'duplicate key value violates unique constraint "pk_users"', "23505"
        )
        assert not _is_email_conflict(integrity_error(orig))

    def test_postgres_not_null_mentioning_email(self):
        orig = DriverError(
            'null value in column "email" of relation "users" violates not-null constraint',
            "23502",
        )
        assert not _is_email_conflict(integrity_error(orig))

    def test_sqlite_email_unique(self):
        orig = DriverError("UNIQUE constraint failed: users.email")
        assert _is_email_conflict(integrity_error(orig))

    @pytest.mark.parametrize(
        "message",
        ["NOT NULL constraint failed: users.email", "UNIQUE constraint failed: users.id"],
    )
    def test_sqlite_other_constraints(self, message):
        assert not _is_email_conflict(integrity_error(DriverError(message)))
