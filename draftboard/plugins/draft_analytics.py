"""
draftboard/plugins/draft_analytics.py
=====================================
First-pick versus second-pick win rates.

No column records which side drafted first. The side is taken from
`FIRST_PICK_SIDE` (Blue in the recorded format); only games with a
recognized winner are counted.
"""

from __future__ import annotations

from typing import Any, Sequence

from draftboard.cells import as_trimmed_string, cell, split_percents
from draftboard.config import FIRST_PICK_SIDE
from draftboard.schema import SIDES, WINNER_COL
from draftboard.stage_filter import StageFilter, filter_rows, parse_stage_filter


class DraftAnalyticsPlugin:
    def __init__(
        self,
        rows: Sequence[Sequence[Any]],
        stage: str | StageFilter | None = None,
        first_pick_side: str = FIRST_PICK_SIDE,
    ):
        if first_pick_side not in SIDES:
            raise ValueError(f"first_pick_side must be one of {SIDES}, got {first_pick_side!r}")
        self.rows = rows
        self.stage_filter = parse_stage_filter(stage)
        self.first_pick_side = first_pick_side
        self.second_pick_side = next(s for s in SIDES if s != first_pick_side)

    def analyze(self) -> dict:
        wins = {side: 0 for side in SIDES}
        for row in filter_rows(self.rows, self.stage_filter):
            winner = as_trimmed_string(cell(row, WINNER_COL)).lower()
            if winner in wins:
                wins[winner] += 1

        decided = sum(wins.values())
        first_wins = wins[self.first_pick_side]
        second_wins = wins[self.second_pick_side]
        first_rate, second_rate = split_percents(first_wins, second_wins, decided)
        return {
            "stage": self.stage_filter.label,
            "total_games": decided,
            "first_pick_side": self.first_pick_side,
            "first_pick_wins": first_wins,
            "second_pick_wins": second_wins,
            "first_pick_win_rate": first_rate,
            "second_pick_win_rate": second_rate,
        }
