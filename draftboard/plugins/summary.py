"""
draftboard/plugins/summary.py
=============================
Games played, side win counts and average game length.
"""

from __future__ import annotations

from typing import Any, Sequence

from draftboard.cells import as_trimmed_string, cell, round_half_up, split_percents
from draftboard.duration import format_duration, parse_duration
from draftboard.schema import DURATION_COL, WINNER_COL
from draftboard.stage_filter import StageFilter, filter_rows, parse_stage_filter


class SummaryPlugin:
    def __init__(self, rows: Sequence[Sequence[Any]], stage: str | StageFilter | None = None):
        self.rows = rows
        self.stage_filter = parse_stage_filter(stage)

    def analyze(self) -> dict:
        games = filter_rows(self.rows, self.stage_filter)
        if not games:
            return self._empty_result()

        blue_wins = 0
        red_wins = 0
        total_seconds = 0
        timed_games = 0
        for row in games:
            winner = as_trimmed_string(cell(row, WINNER_COL)).lower()
            if winner == "blue":
                blue_wins += 1
            elif winner == "red":
                red_wins += 1

            if as_trimmed_string(cell(row, DURATION_COL)):
                total_seconds += parse_duration(cell(row, DURATION_COL))
                timed_games += 1

        total = len(games)
        avg_seconds = round_half_up(total_seconds / timed_games) if timed_games else 0
        blue_rate, red_rate = split_percents(blue_wins, red_wins, total)
        return {
            "stage": self.stage_filter.label,
            "total_games": total,
            "blue_wins": blue_wins,
            "red_wins": red_wins,
            "blue_win_rate": blue_rate,
            "red_win_rate": red_rate,
            "avg_duration": format_duration(avg_seconds),
        }

    def _empty_result(self) -> dict:
        return {
            "stage": self.stage_filter.label,
            "total_games": 0,
            "blue_wins": 0,
            "red_wins": 0,
            "blue_win_rate": 0,
            "red_win_rate": 0,
            "avg_duration": "0:00",
        }
