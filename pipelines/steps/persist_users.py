from __future__ import annotations

import logging
import sqlite3
from typing import Any, List, Mapping

from db.errors import ConstraintViolation
from db.repos.users_repo import UsersRepo
from models import RecordFailure
from pipelines.runner import RunContext


logger = logging.getLogger(__name__)


class PersistUsers:
    """Insert every user in order; stop at the first rejected record.

    Does nothing if an earlier step already recorded a failure.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.repo = UsersRepo(conn)

    def run(self, ctx: RunContext) -> RunContext:
        processed = 0
        if ctx.meta.get("failure") is None:
            users: List[Any] = ctx.users or []
            for index, u in enumerate(users):
                try:
                    self.repo.create_user(u)
                except ConstraintViolation as exc:
                    ctx.meta["failure"] = RecordFailure(kind="User", index=index, record=dict(u) if isinstance(u, Mapping) else u, error=str(exc))
                    logger.error("user rejected", extra={"step": "persist_users", "status": "failed", "error": str(exc)})
                    break
                processed += 1
        ctx.meta["processed_users"] = processed
        return ctx
