from __future__ import annotations

import sqlite3
from typing import Any, List

from pydantic import ValidationError

from db.errors import ConstraintViolation
from models import Company, CompanyRecord


_COLUMNS = "id, name, top_up, email_status"


def _row_to_company(row: tuple) -> Company:
    return Company(id=row[0], name=row[1], top_up=row[2], email_status=bool(row[3]))


class CompaniesRepo:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def create_company(self, fields: Any) -> Company:
        """Insert a company using the caller-supplied id.

        Raises ConstraintViolation for malformed fields or a duplicate id.
        """
        try:
            record = CompanyRecord.model_validate(fields)
        except ValidationError as exc:
            raise ConstraintViolation(f"Validation failed: {exc.errors(include_url=False)}") from exc
        try:
            self.conn.execute(
                f"INSERT INTO companies ({_COLUMNS}) VALUES (?, ?, ?, ?)",
                (record.id, record.name, record.top_up, int(record.email_status)),
            )
        except sqlite3.IntegrityError as exc:
            raise ConstraintViolation(str(exc)) from exc
        return Company(**record.model_dump())

    def list_companies(self) -> List[Company]:
        """All companies, ascending by id."""
        cur = self.conn.cursor()
        cur.execute(f"SELECT {_COLUMNS} FROM companies ORDER BY id ASC")
        return [_row_to_company(r) for r in cur.fetchall()]

    def count(self) -> int:
        cur = self.conn.cursor()
        cur.execute("SELECT COUNT(*) FROM companies")
        return int(cur.fetchone()[0])
