from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from models import Company, User


@dataclass(frozen=True)
class Partition:
    emailable: List[User] = field(default_factory=list)
    not_emailable: List[User] = field(default_factory=list)


def partition(company: Company, active_users: Sequence[User]) -> Partition:
    """Split a company's ordered active users into emailable and not emailable.

    A user is emailable only when both the company and the user have
    email_status set. Both lists keep the order of `active_users`.
    """
    emailable: List[User] = []
    not_emailable: List[User] = []
    for user in active_users:
        if company.email_status and user.email_status:
            emailable.append(user)
        else:
            not_emailable.append(user)
    return Partition(emailable=emailable, not_emailable=not_emailable)
