from __future__ import annotations

import logging
import sqlite3
import time

from db.connection import transaction
from db.errors import PersistenceFailure
from models import TopUpRun
from pipelines.runner import Pipeline, RunContext
from pipelines.steps.apply_top_ups import ApplyTopUps
from pipelines.steps.load_companies import LoadCompanies


logger = logging.getLogger(__name__)


def top_up_ledger(conn: sqlite3.Connection) -> TopUpRun:
    """Apply one top-up pass to every company with active users.

    All reads and writes share one transaction: if any token update fails,
    every update made so far is rolled back and the error propagates, so a
    retry never double-credits. Top-ups are not idempotent; each successful
    call credits again.
    """
    started = time.monotonic()
    pipeline = Pipeline([
        LoadCompanies(conn),
        ApplyTopUps(conn),
    ])
    try:
        with transaction(conn, immediate=True):
            ctx = pipeline.run(RunContext())
    except PersistenceFailure as exc:
        logger.error("top-up rolled back", extra={"step": "top_up", "status": "rolled_back", "error": str(exc)})
        raise

    run = TopUpRun(companies=list(ctx.top_ups))
    logger.info(
        "topped up %d users across %d companies", run.users_credited, len(run.companies),
        extra={"step": "top_up", "status": "ok", "duration_ms": int((time.monotonic() - started) * 1000)},
    )
    return run
