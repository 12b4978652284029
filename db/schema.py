from __future__ import annotations

import sqlite3


def bootstrap(conn: sqlite3.Connection) -> None:
    """Create ledger tables and indexes (idempotent)."""
    cur = conn.cursor()

    # Companies keep the caller-supplied id
    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS companies (\n"
            "  id INTEGER PRIMARY KEY,\n"
            "  name TEXT NOT NULL,\n"
            "  top_up INTEGER NOT NULL,\n"
            "  email_status INTEGER NOT NULL\n"
            ")"
        )
    )

    # Users get a store-assigned id. company_id is not a foreign key:
    # users of unknown companies are stored but never surface in an active set.
    cur.execute(
        (
            "CREATE TABLE IF NOT EXISTS users (\n"
            "  id INTEGER PRIMARY KEY,\n"
            "  first_name TEXT NOT NULL,\n"
            "  last_name TEXT NOT NULL,\n"
            "  email TEXT NOT NULL,\n"
            "  company_id INTEGER NOT NULL,\n"
            "  email_status INTEGER NOT NULL,\n"
            "  active_status INTEGER NOT NULL,\n"
            "  tokens INTEGER NOT NULL,\n"
            "  UNIQUE(company_id, email)\n"
            ")"
        )
    )
    cur.execute(
        "CREATE INDEX IF NOT EXISTS idx_users_company_active_last "
        "ON users(company_id, active_status, last_name);"
    )
