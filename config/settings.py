from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


@dataclass(frozen=True)
class Settings:
    # Core/runtime
    db_path: str
    sqlite_timeout_seconds: float

    # Input files
    users_path: str
    companies_path: str

    log_level: str


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    return Settings(
        db_path=os.getenv("DB_PATH", ":memory:"),
        sqlite_timeout_seconds=float(os.getenv("SQLITE_TIMEOUT", "30")),
        users_path=os.getenv("USERS_JSON", "users.json"),
        companies_path=os.getenv("COMPANIES_JSON", "companies.json"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
