# draftboard/integrity.py
"""
Pre-write checks: next sequence number and battle id uniqueness.

Both are single-column scans. `next_sequence_number` looks only at the
last row, so a store whose rows were reordered or hand-edited can hand out
a number that already exists. Reading the last number and appending are
also two separate steps: two submissions racing each other can receive
the same number. Both limitations are accepted; callers needing strictly
unique numbering must serialize submissions themselves.
"""

from __future__ import annotations

import logging

from draftboard.cells import as_int, as_trimmed_string
from draftboard.config import BATTLE_ID_SENTINELS
from draftboard.row_store import RowStore
from draftboard.schema import BATTLE_ID_COL, SEQUENCE_COL

logger = logging.getLogger(__name__)


def next_sequence_number(store: RowStore) -> int:
    total_rows = store.row_count()
    # Row 0 is the header; a header-only store has no matches yet.
    if total_rows <= 1:
        return 1
    last = store.read_column(SEQUENCE_COL, total_rows - 1, 1)
    if not last:
        return 1
    value = as_int(last[0], default=None)
    if value is None:
        logger.warning("Last row has unparsable sequence number %r; restarting at 1", last[0])
        return 1
    return value + 1


def is_sentinel_battle_id(battle_id: object) -> bool:
    return as_trimmed_string(battle_id).lower() in BATTLE_ID_SENTINELS


def battle_id_exists(store: RowStore, battle_id: object) -> bool:
    """True if a non-sentinel battle id is already stored (trimmed, case-sensitive)."""
    if is_sentinel_battle_id(battle_id):
        return False
    wanted = as_trimmed_string(battle_id)

    total_rows = store.row_count()
    if total_rows <= 1:
        return False
    existing = store.read_column(BATTLE_ID_COL, 1, total_rows - 1)
    return any(as_trimmed_string(value) == wanted for value in existing)
