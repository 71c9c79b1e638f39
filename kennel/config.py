"""
Central configuration loader.
Reads from environment variables (via .env).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


# ---------------------------------------------------------------------------
# Load .env from repo root (if present)
# ---------------------------------------------------------------------------
_REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(_REPO_ROOT / ".env")

MEMORY_DB = ":memory:"


def _get(key: str, default: Optional[str] = None, required: bool = False) -> Optional[str]:
    val = os.getenv(key, default)
    if required and not val:
        raise EnvironmentError(f"Missing required environment variable: {key}")
    return val


# ---------------------------------------------------------------------------
# Kennel config
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class KennelConfig:
    db_path: Path | str
    log_level: str

    @property
    def in_memory(self) -> bool:
        return str(self.db_path) == MEMORY_DB


def get_config() -> KennelConfig:
    return KennelConfig(
        db_path=get_db_path(),
        log_level=_get("KENNEL_LOG_LEVEL", default="INFO").upper(),  # type: ignore[union-attr]
    )


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
def get_repo_root() -> Path:
    return _REPO_ROOT


def get_db_path() -> Path | str:
    raw = _get("KENNEL_DB_PATH")
    if not raw:
        return _REPO_ROOT / "data" / "kennel.db"
    if raw == MEMORY_DB:
        return MEMORY_DB
    return Path(raw)
