from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from typing import Iterator, Optional


def get_connection(db_path: str, timeout: Optional[float] = 30.0) -> sqlite3.Connection:
    """Open a SQLite connection for the ledger store.

    - autocommit driver mode; transactions are opened with begin()/transaction()
    - WAL journal for file databases
    - NORMAL synchronous for performance
    """
    conn = sqlite3.connect(db_path, timeout=timeout or 30.0, isolation_level=None)
    # Pragmas
    if db_path != ":memory:":
        conn.execute("PRAGMA journal_mode=WAL;")
    conn.execute("PRAGMA synchronous=NORMAL;")
    return conn


def begin(conn: sqlite3.Connection, immediate: bool = False) -> None:
    conn.execute("BEGIN IMMEDIATE;" if immediate else "BEGIN;")


def commit(conn: sqlite3.Connection) -> None:
    # A failed COMMIT (busy, deferred constraint) leaves the transaction open
    try:
        conn.execute("COMMIT;")
    except sqlite3.Error:
        rollback(conn)
        raise


def rollback(conn: sqlite3.Connection) -> None:
    # SQLite may already have ended the transaction (e.g. RAISE(ROLLBACK) in a trigger)
    if conn.in_transaction:
        conn.execute("ROLLBACK;")


@contextmanager
def transaction(conn: sqlite3.Connection, immediate: bool = False) -> Iterator[sqlite3.Connection]:
    """Run the enclosed block as one all-or-nothing unit.

    Commits when the block exits normally; rolls back and re-raises otherwise.
    """
    begin(conn, immediate=immediate)
    try:
        yield conn
    except BaseException:
        rollback(conn)
        raise
    commit(conn)
