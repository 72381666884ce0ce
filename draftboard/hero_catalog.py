# draftboard/hero_catalog.py
"""
Read-only hero catalog used for autocomplete and icons.

Match rows store hero names as free text; nothing here is enforced
against them.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass
from typing import List

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Hero:
    code: str
    name: str
    icon_url: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


class HeroCatalog:
    def __init__(self, heroes: List[Hero] | None = None):
        self.heroes = list(heroes or [])

    @classmethod
    def from_file(cls, path: str | os.PathLike) -> "HeroCatalog":
        """Load `[{code, name, icon_url}, ...]` from JSON. Missing or bad files give an empty catalog."""
        if not os.path.exists(path):
            logger.warning("Hero catalog not found at %s; continuing without heroes.", path)
            return cls()
        try:
            with open(path, encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Failed to read hero catalog %s: %s", path, e)
            return cls()

        if not isinstance(raw, list):
            logger.warning("Hero catalog %s is not a list; ignoring.", path)
            return cls()

        heroes = []
        for entry in raw:
            if not isinstance(entry, dict):
                continue
            name = str(entry.get("name") or "").strip()
            if not name:
                continue
            heroes.append(Hero(
                code=str(entry.get("code") or "").strip(),
                name=name,
                icon_url=str(entry.get("icon_url") or entry.get("iconUrl") or "").strip(),
            ))
        return cls(heroes)

    def names(self) -> List[str]:
        return sorted({h.name for h in self.heroes})

    def to_list(self) -> List[dict]:
        return [h.to_dict() for h in sorted(self.heroes, key=lambda h: h.name)]
