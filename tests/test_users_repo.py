from __future__ import annotations

import pytest

from db import schema
from db.connection import get_connection
from db.errors import ConstraintViolation, PersistenceFailure
from db.repos.companies_repo import CompaniesRepo
from db.repos.users_repo import UsersRepo


def _seed_user(repo, last_name, email, active=True, company_id=1, first_name="X"):
    return repo.create_user({
        "first_name": first_name,
        "last_name": last_name,
        "email": email,
        "company_id": company_id,
        "email_status": True,
        "active_status": active,
        "tokens": 0,
    })


def test_active_users_sorted_by_last_name_with_stable_ties(tmp_path):
    conn = get_connection(str(tmp_path / "t.db"))
    try:
        schema.bootstrap(conn)
        CompaniesRepo(conn).create_company({"id": 1, "name": "Acme", "top_up": 1, "email_status": True})
        repo = UsersRepo(conn)
        _seed_user(repo, "Ng", "ng@acme.com")
        _seed_user(repo, "Lee", "lee1@acme.com", first_name="First")
        _seed_user(repo, "Adams", "adams@acme.com", active=False)
        _seed_user(repo, "Lee", "lee2@acme.com", first_name="Second")
        _seed_user(repo, "Brown", "brown@other.com", company_id=2)

        active = repo.active_users_of(1)
        assert [(u.last_name, u.first_name) for u in active] == [("Lee", "First"), ("Lee", "Second"), ("Ng", "X")]
        assert all(u.active_status for u in active)
        assert repo.active_users_of(3) == []
    finally:
        conn.close()


def test_create_user_assigns_ids_and_drops_input_id(tmp_path):
    conn = get_connection(str(tmp_path / "t.db"))
    try:
        schema.bootstrap(conn)
        repo = UsersRepo(conn)
        user = repo.create_user({
            "id": 500,
            "first_name": "Ann",
            "last_name": "Lee",
            "email": "ann@acme.com",
            "company_id": 1,
            "email_status": False,
            "active_status": True,
            "tokens": 3,
        })
        assert user.id == 1
        assert user.email_status is False
    finally:
        conn.close()


def test_create_user_rejects_malformed_record(tmp_path):
    conn = get_connection(str(tmp_path / "t.db"))
    try:
        schema.bootstrap(conn)
        with pytest.raises(ConstraintViolation):
            UsersRepo(conn).create_user({"first_name": "Ann", "last_name": "Lee"})
    finally:
        conn.close()


def test_update_tokens_for_missing_user_fails(tmp_path):
    conn = get_connection(str(tmp_path / "t.db"))
    try:
        schema.bootstrap(conn)
        with pytest.raises(PersistenceFailure):
            UsersRepo(conn).update_tokens(42, 10)
    finally:
        conn.close()


def test_list_companies_orders_by_id(tmp_path):
    conn = get_connection(str(tmp_path / "t.db"))
    try:
        schema.bootstrap(conn)
        repo = CompaniesRepo(conn)
        for cid in (3, 1, 2):
            repo.create_company({"id": cid, "name": f"C{cid}", "top_up": cid, "email_status": False})
        companies = repo.list_companies()
        assert [c.id for c in companies] == [1, 2, 3]
        assert [c.name for c in companies] == ["C1", "C2", "C3"]
    finally:
        conn.close()
