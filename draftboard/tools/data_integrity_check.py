"""Diagnostics for a match row store.

Reports rows that the reducers will read with fallbacks (wrong width,
unparsable numbers or durations, unknown winners) and the known
sequence-number and battle-id collisions the write path cannot prevent.

Run:
    python -m draftboard.tools.data_integrity_check
or:
    python -m draftboard.tools.data_integrity_check --db data/draftboard.db --show-stages
"""

from __future__ import annotations

import argparse
import logging
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Sequence

from draftboard import config
from draftboard.cells import as_int, as_trimmed_string, cell
from draftboard.duration import parse_duration
from draftboard.errors import StoreUnavailable
from draftboard.integrity import is_sentinel_battle_id
from draftboard.record_builder import header_row
from draftboard.row_store import SqliteRowStore
from draftboard.schema import (
    BATTLE_ID_COL,
    DURATION_COL,
    ROW_WIDTH,
    SEQUENCE_COL,
    STAGE_COL,
    WINNER_COL,
    all_role_columns,
)

logger = logging.getLogger(__name__)

NUMERIC_STATS = ("kills", "deaths", "assists", "gold", "damage", "turret_damage", "damage_taken")


@dataclass
class AuditReport:
    source: str
    run_at: str = field(default_factory=lambda: datetime.now().isoformat())
    total_rows: int = 0
    header_ok: bool = True
    wrong_width_rows: list[int] = field(default_factory=list)
    duplicate_sequence_numbers: dict[int, int] = field(default_factory=dict)
    out_of_order_rows: list[int] = field(default_factory=list)
    duplicate_battle_ids: dict[str, int] = field(default_factory=dict)
    unknown_winner_rows: list[int] = field(default_factory=list)
    bad_duration_rows: list[int] = field(default_factory=list)
    non_numeric_cells: int = 0
    stage_counts: dict[str, int] = field(default_factory=dict)

    @property
    def issue_count(self) -> int:
        return (
            (0 if self.header_ok else 1)
            + len(self.wrong_width_rows)
            + len(self.duplicate_sequence_numbers)
            + len(self.out_of_order_rows)
            + len(self.duplicate_battle_ids)
            + len(self.unknown_winner_rows)
            + len(self.bad_duration_rows)
            + self.non_numeric_cells
        )

    def print_summary(self, show_stages: bool = False) -> None:
        print("\n" + "=" * 60)
        print("DRAFTBOARD - DATA INTEGRITY REPORT")
        print("=" * 60)
        print(f"Store:                {self.source}")
        print(f"Run at:               {self.run_at}")
        print(f"Match rows:           {self.total_rows}")
        print(f"Header matches:       {'yes' if self.header_ok else 'NO'}")
        print()
        print("--- Row shape ---")
        print(f"  Rows not {ROW_WIDTH} cells wide: {len(self.wrong_width_rows)}")
        print(f"  Non-numeric stat cells:   {self.non_numeric_cells}")
        print()
        print("--- Sequence numbers ---")
        print(f"  Duplicated numbers:  {len(self.duplicate_sequence_numbers)}")
        for number, count in sorted(self.duplicate_sequence_numbers.items()):
            print(f"    #{number} x{count}")
        print(f"  Rows not above their predecessor: {len(self.out_of_order_rows)}")
        print()
        print("--- Battle ids ---")
        print(f"  Duplicated ids: {len(self.duplicate_battle_ids)}")
        for battle_id, count in sorted(self.duplicate_battle_ids.items()):
            print(f"    {battle_id} x{count}")
        print()
        print("--- Results ---")
        print(f"  Unknown winner values: {len(self.unknown_winner_rows)}")
        print(f"  Unparsable durations:  {len(self.bad_duration_rows)}")
        if show_stages:
            print()
            print("--- Stages ---")
            if not self.stage_counts:
                print("  (no rows)")
            for stage, count in sorted(self.stage_counts.items(), key=lambda item: (-item[1], item[0])):
                print(f"  - {stage}: {count}")
        print("=" * 60)


def _is_numeric_cell(value: Any) -> bool:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return True
    text = as_trimmed_string(value)
    if not text:
        return True
    try:
        float(text)
    except ValueError:
        return False
    return True


def audit_rows(rows: Sequence[Sequence[Any]], source: str = "<memory>") -> AuditReport:
    """Audit a full row list (header at index 0)."""
    report = AuditReport(source=source)
    if not rows:
        report.header_ok = False
        return report

    report.header_ok = [as_trimmed_string(c) for c in rows[0]] == header_row()
    match_rows = rows[1:]
    report.total_rows = len(match_rows)

    sequence_counts: Counter = Counter()
    battle_counts: Counter = Counter()
    stage_counts: Counter = Counter()
    previous = None

    # Row numbers are reported 1-based as they appear below the header.
    for row_number, row in enumerate(match_rows, start=1):
        if len(row) != ROW_WIDTH:
            report.wrong_width_rows.append(row_number)

        sequence = as_int(cell(row, SEQUENCE_COL))
        sequence_counts[sequence] += 1
        if previous is not None and sequence <= previous:
            report.out_of_order_rows.append(row_number)
        previous = sequence

        battle_id = as_trimmed_string(cell(row, BATTLE_ID_COL))
        if not is_sentinel_battle_id(battle_id):
            battle_counts[battle_id] += 1

        winner = as_trimmed_string(cell(row, WINNER_COL)).lower()
        if winner not in ("", "blue", "red"):
            report.unknown_winner_rows.append(row_number)

        duration = cell(row, DURATION_COL)
        if as_trimmed_string(duration) and parse_duration(duration) == 0:
            report.bad_duration_rows.append(row_number)

        for _side, role_cols in all_role_columns():
            for stat in NUMERIC_STATS:
                if not _is_numeric_cell(cell(row, role_cols.stat(stat))):
                    report.non_numeric_cells += 1

        stage = as_trimmed_string(cell(row, STAGE_COL))
        if stage:
            stage_counts[stage] += 1

    report.duplicate_sequence_numbers = {n: c for n, c in sequence_counts.items() if c > 1}
    report.duplicate_battle_ids = {b: c for b, c in battle_counts.items() if c > 1}
    report.stage_counts = dict(stage_counts)
    logger.debug("Audited %s match rows from %s: %s issues", report.total_rows, source, report.issue_count)
    return report


def main() -> int:
    parser = argparse.ArgumentParser(description="Draftboard data integrity diagnostics")
    parser.add_argument("--db", default="", help="SQLite DB path (defaults to DRAFTBOARD_DB_PATH or data/draftboard.db)")
    parser.add_argument("--show-stages", action="store_true", help="Print per-stage match counts")
    parser.add_argument("--verbose", action="store_true", help="Verbose logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    db_path = config.resolve_path(args.db.strip()) if args.db.strip() else config.db_path()
    print(f"DB path: {db_path}")
    try:
        store = SqliteRowStore(db_path, create=False)
    except StoreUnavailable as e:
        print(f"ERROR: {e}")
        return 2

    try:
        report = audit_rows(store.read_all(), source=str(db_path))
    finally:
        store.close()
    report.print_summary(show_stages=args.show_stages)
    return 1 if report.issue_count else 0


if __name__ == "__main__":
    raise SystemExit(main())
