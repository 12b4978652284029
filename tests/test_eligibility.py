from __future__ import annotations

import pytest

from models import Company, User
from services.eligibility import partition


def _user(uid: int, last_name: str, email_status: bool) -> User:
    return User(
        id=uid,
        first_name="F",
        last_name=last_name,
        email=f"{uid}@example.com",
        company_id=1,
        email_status=email_status,
        active_status=True,
        tokens=0,
    )


USERS = [
    _user(1, "Adams", False),
    _user(2, "Brown", True),
    _user(3, "Clark", True),
    _user(4, "Davis", False),
]


def test_partition_when_company_emails():
    company = Company(id=1, name="Acme", top_up=10, email_status=True)
    split = partition(company, USERS)
    assert [u.id for u in split.emailable] == [2, 3]
    assert [u.id for u in split.not_emailable] == [1, 4]


def test_company_email_switch_off_makes_nobody_emailable():
    company = Company(id=1, name="Acme", top_up=10, email_status=False)
    split = partition(company, USERS)
    assert split.emailable == []
    assert [u.id for u in split.not_emailable] == [1, 2, 3, 4]


@pytest.mark.parametrize("company_email", [True, False])
def test_partition_is_complete_and_disjoint(company_email):
    company = Company(id=1, name="Acme", top_up=10, email_status=company_email)
    split = partition(company, USERS)
    emailable = {u.id for u in split.emailable}
    not_emailable = {u.id for u in split.not_emailable}
    assert emailable | not_emailable == {u.id for u in USERS}
    assert emailable & not_emailable == set()


def test_no_active_users_yields_empty_partition():
    company = Company(id=1, name="Acme", top_up=10, email_status=True)
    split = partition(company, [])
    assert split.emailable == [] and split.not_emailable == []
