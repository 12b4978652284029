from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class RecordFailure:
    """The first record that could not be inserted, and why."""

    kind: str  # "Company" | "User"
    index: int
    record: Any  # the raw input record, copied when it is a mapping
    error: str


@dataclass(frozen=True)
class IngestionResult:
    companies_loaded: int = 0
    users_loaded: int = 0
    failure: Optional[RecordFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None
