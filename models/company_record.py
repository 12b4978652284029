from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CompanyRecord(BaseModel):
    """Input record shape: the id is caller-supplied and kept verbatim."""

    id: int
    name: str
    top_up: int
    email_status: bool

    model_config = ConfigDict(extra="ignore")


class Company(CompanyRecord):
    """Persisted company row."""

    model_config = ConfigDict(extra="ignore", frozen=True)
