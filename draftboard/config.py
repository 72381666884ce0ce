# draftboard/config.py
"""
Tunable constants and environment-driven paths.

Paths given relative are anchored to the project root so the terminal UI,
the web app and the audit tool all resolve the same files regardless of
the working directory they are launched from.
"""

from __future__ import annotations

import os
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]

DEFAULT_DB_PATH = "data/draftboard.db"
DEFAULT_HERO_CATALOG_PATH = "data/heroes.json"

# Stage value that disables filtering, alongside the empty string.
ALL_STAGES = "All"

# Battle identifiers that are never checked for uniqueness (compared lower-cased).
BATTLE_ID_SENTINELS = frozenset({"", "n/a", "default"})

# The side that drafts first. Blue always holds first pick in the
# tournament format this tool records; change here for other conventions.
FIRST_PICK_SIDE = "blue"

TOP_N_HEROES = 10
DEFAULT_LAST_MATCHES = 10
MAX_LAST_MATCHES = 500


def resolve_path(raw: str | os.PathLike) -> Path:
    """Return an absolute path, anchoring relative paths at the project root."""
    path = Path(raw)
    if path.is_absolute():
        return path
    return PROJECT_ROOT / path


def db_path() -> Path:
    env_db = os.getenv("DRAFTBOARD_DB_PATH", "").strip()
    return resolve_path(env_db or DEFAULT_DB_PATH)


def hero_catalog_path() -> Path:
    env_catalog = os.getenv("DRAFTBOARD_HERO_CATALOG", "").strip()
    return resolve_path(env_catalog or DEFAULT_HERO_CATALOG_PATH)
