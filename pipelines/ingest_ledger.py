from __future__ import annotations

import logging
import sqlite3
import time
from typing import Dict, Iterable

from db.connection import begin, commit, rollback
from db.repos.users_repo import UsersRepo
from models import IngestionResult
from pipelines.runner import Pipeline, RunContext
from pipelines.steps.persist_companies import PersistCompanies
from pipelines.steps.persist_users import PersistUsers


logger = logging.getLogger(__name__)


def ingest_ledger(conn: sqlite3.Connection, companies: Iterable[Dict], users: Iterable[Dict]) -> IngestionResult:
    """Load all companies, then all users, as one all-or-nothing batch.

    User ids in the input are ignored. If any record is rejected the whole
    batch is rolled back and the result carries the offending record; the
    caller decides how to report it. Unexpected errors roll back and propagate.
    """
    started = time.monotonic()
    ctx = RunContext()
    ctx.companies = list(companies)
    ctx.users = list(users)
    pipeline = Pipeline([
        PersistCompanies(conn),
        PersistUsers(conn),
    ])

    begin(conn)
    try:
        ctx = pipeline.run(ctx)
    except Exception as exc:
        rollback(conn)
        logger.error("ingestion aborted", extra={"step": "ingest", "status": "error", "error": str(exc)})
        raise

    failure = ctx.meta.get("failure")
    if failure is not None:
        rollback(conn)
        logger.error(
            "ingestion rolled back at %s #%d", failure.kind, failure.index,
            extra={"step": "ingest", "status": "rolled_back", "error": failure.error},
        )
        return IngestionResult(failure=failure)

    orphans = UsersRepo(conn).count_orphans()
    commit(conn)

    if orphans:
        logger.warning("%d users reference unknown companies and will not be topped up", orphans, extra={"step": "ingest"})
    result = IngestionResult(
        companies_loaded=int(ctx.meta.get("processed_companies") or 0),
        users_loaded=int(ctx.meta.get("processed_users") or 0),
    )
    logger.info(
        "ingested %d companies and %d users", result.companies_loaded, result.users_loaded,
        extra={"step": "ingest", "status": "ok", "duration_ms": int((time.monotonic() - started) * 1000)},
    )
    return result
