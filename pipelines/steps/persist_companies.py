from __future__ import annotations

import logging
import sqlite3
from typing import Any, List, Mapping

from db.errors import ConstraintViolation
from db.repos.companies_repo import CompaniesRepo
from models import RecordFailure
from pipelines.runner import RunContext


logger = logging.getLogger(__name__)


class PersistCompanies:
    """Insert every company in order; stop at the first rejected record."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.repo = CompaniesRepo(conn)

    def run(self, ctx: RunContext) -> RunContext:
        companies: List[Any] = ctx.companies or []
        processed = 0
        for index, c in enumerate(companies):
            try:
                self.repo.create_company(c)
            except ConstraintViolation as exc:
                ctx.meta["failure"] = RecordFailure(kind="Company", index=index, record=dict(c) if isinstance(c, Mapping) else c, error=str(exc))
                logger.error("company rejected", extra={"step": "persist_companies", "status": "failed", "error": str(exc)})
                break
            processed += 1
        ctx.meta["processed_companies"] = processed
        return ctx
