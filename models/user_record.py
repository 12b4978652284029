from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class UserRecord(BaseModel):
    """Input record shape. Any `id` in the input is dropped; the store assigns one."""

    first_name: str
    last_name: str
    email: str
    company_id: int
    email_status: bool
    active_status: bool
    tokens: int

    model_config = ConfigDict(extra="ignore")


class User(UserRecord):
    """Persisted user row, as read at the start of a top-up pass."""

    id: int

    model_config = ConfigDict(extra="ignore", frozen=True)
