from __future__ import annotations

import logging
import sqlite3
from typing import List

from db.repos.users_repo import UsersRepo
from models import Company, CompanyTopUp, CreditLine, User
from pipelines.runner import RunContext
from services.eligibility import partition


logger = logging.getLogger(__name__)


class ApplyTopUps:
    """Credit every active user of every loaded company with the company's top-up.

    Companies are visited in the order LoadCompanies produced (ascending id);
    within a company, emailable users first, then the rest. Must run inside
    the caller's transaction.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.repo = UsersRepo(conn)

    def _credit(self, company: Company, users: List[User], emailed: bool, result: CompanyTopUp) -> List[CreditLine]:
        lines: List[CreditLine] = []
        for user in users:
            new_tokens = user.tokens + company.top_up
            self.repo.update_tokens(user.id, new_tokens)
            result.total += company.top_up
            lines.append(CreditLine(user=user, previous_tokens=user.tokens, new_tokens=new_tokens, emailed=emailed))
        return lines

    def run(self, ctx: RunContext) -> RunContext:
        top_ups: List[CompanyTopUp] = []
        for company in ctx.companies or []:
            active = self.repo.active_users_of(company.id)
            if not active:
                continue
            split = partition(company, active)
            result = CompanyTopUp(company=company)
            result.emailed = self._credit(company, split.emailable, True, result)
            result.not_emailed = self._credit(company, split.not_emailable, False, result)
            top_ups.append(result)
            logger.debug(
                "company topped up",
                extra={"step": "apply_top_ups", "status": "ok", "company_id": company.id},
            )
        ctx.top_ups = top_ups
        return ctx
