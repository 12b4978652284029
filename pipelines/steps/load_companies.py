from __future__ import annotations

import sqlite3

from db.repos.companies_repo import CompaniesRepo
from pipelines.runner import RunContext


class LoadCompanies:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self.repo = CompaniesRepo(conn)

    def run(self, ctx: RunContext) -> RunContext:
        ctx.companies = self.repo.list_companies()
        return ctx
