from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .company_record import Company
from .user_record import User


@dataclass(frozen=True)
class CreditLine:
    """One user visited by the top-up pass."""

    user: User
    previous_tokens: int
    new_tokens: int
    emailed: bool


@dataclass
class CompanyTopUp:
    company: Company
    emailed: List[CreditLine] = field(default_factory=list)
    not_emailed: List[CreditLine] = field(default_factory=list)
    total: int = 0

    @property
    def lines(self) -> List[CreditLine]:
        """All credit lines in visitation order."""
        return self.emailed + self.not_emailed


@dataclass
class TopUpRun:
    companies: List[CompanyTopUp] = field(default_factory=list)

    @property
    def users_credited(self) -> int:
        return sum(len(c.lines) for c in self.companies)

    @property
    def total(self) -> int:
        return sum(c.total for c in self.companies)
