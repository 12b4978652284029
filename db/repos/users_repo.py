from __future__ import annotations

import sqlite3
from typing import Any, List

from pydantic import ValidationError

from db.errors import ConstraintViolation, PersistenceFailure
from models import User, UserRecord


_COLUMNS = "id, first_name, last_name, email, company_id, email_status, active_status, tokens"


def _row_to_user(row: tuple) -> User:
    return User(
        id=row[0],
        first_name=row[1],
        last_name=row[2],
        email=row[3],
        company_id=row[4],
        email_status=bool(row[5]),
        active_status=bool(row[6]),
        tokens=row[7],
    )


class UsersRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def create_user(self, fields: Any) -> User:
        """Insert a user and return it with its store-assigned id.

        Any `id` in `fields` is ignored. Raises ConstraintViolation for malformed
        fields or a duplicate (company_id, email) pair.
        """
        try:
            record = UserRecord.model_validate(fields)
        except ValidationError as exc:
            raise ConstraintViolation(f"Validation failed: {exc.errors(include_url=False)}") from exc
        try:
            cur = self.conn.execute(
                "INSERT INTO users (first_name, last_name, email, company_id, email_status, active_status, tokens) "
                "VALUES (?, ?, ?, ?, ?, ?, ?)",
                (
                    record.first_name,
                    record.last_name,
                    record.email,
                    record.company_id,
                    int(record.email_status),
                    int(record.active_status),
                    record.tokens,
                ),
            )
        except sqlite3.IntegrityError as exc:
            raise ConstraintViolation(str(exc)) from exc
        return User(id=int(cur.lastrowid), **record.model_dump())

    def active_users_of(self, company_id: int) -> List[User]:
        """Active users of a company, ascending by last_name; ties keep insertion order."""
        cur = self.conn.cursor()
        cur.execute(
            f"SELECT {_COLUMNS} FROM users "
            "WHERE company_id = ? AND active_status = 1 "
            "ORDER BY last_name ASC, id ASC",
            (company_id,),
        )
        return [_row_to_user(r) for r in cur.fetchall()]

    def update_tokens(self, user_id: int, tokens: int) -> None:
        try:
            cur = self.conn.execute("UPDATE users SET tokens = ? WHERE id = ?", (tokens, user_id))
        except sqlite3.Error as exc:
            raise PersistenceFailure(f"Failed to update tokens for user {user_id}: {exc}") from exc
        if cur.rowcount != 1:
            raise PersistenceFailure(f"Failed to update tokens for user {user_id}: no such user")

    def count(self) -> int:
        cur = self.conn.cursor()
        cur.execute("SELECT COUNT(*) FROM users")
        return int(cur.fetchone()[0])

    def count_orphans(self) -> int:
        """Users whose company_id matches no company."""
        cur = self.conn.cursor()
        cur.execute(
            "SELECT COUNT(*) FROM users u "
            "LEFT JOIN companies c ON u.company_id = c.id WHERE c.id IS NULL"
        )
        return int(cur.fetchone()[0])
