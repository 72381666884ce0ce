"""
draftboard/plugins/player_stats.py
==================================
Per-player totals across every role slot of both teams.

A player is keyed by trimmed name. Match duration is added once per
appearance, which is what GPM is computed against.
"""

from __future__ import annotations

from typing import Any, Sequence

from draftboard.cells import as_int, as_trimmed_string, cell, kda, percent, round_half_up
from draftboard.duration import parse_duration
from draftboard.schema import DURATION_COL, WINNER_COL, all_role_columns
from draftboard.stage_filter import StageFilter, filter_rows, parse_stage_filter


class PlayerStatsPlugin:
    def __init__(self, rows: Sequence[Sequence[Any]], stage: str | StageFilter | None = None):
        self.rows = rows
        self.stage_filter = parse_stage_filter(stage)

    def analyze(self) -> list[dict]:
        games = filter_rows(self.rows, self.stage_filter)
        players = self._aggregate(games)
        # sorted() is stable: ties keep first-appearance order.
        return sorted(
            (self._finalize(name, agg) for name, agg in players.items()),
            key=lambda p: -p["games"],
        )

    @staticmethod
    def _aggregate(games: Sequence[Sequence[Any]]) -> dict[str, dict]:
        players: dict[str, dict] = {}
        for row in games:
            winner = as_trimmed_string(cell(row, WINNER_COL)).lower()
            seconds = parse_duration(cell(row, DURATION_COL))
            for side, role_cols in all_role_columns():
                name = as_trimmed_string(cell(row, role_cols.player))
                if not name:
                    continue
                if name not in players:
                    players[name] = {
                        "games": 0, "wins": 0, "kills": 0, "deaths": 0,
                        "assists": 0, "gold": 0, "seconds": 0,
                    }
                agg = players[name]
                agg["games"] += 1
                if winner == side:
                    agg["wins"] += 1
                agg["kills"] += as_int(cell(row, role_cols.kills))
                agg["deaths"] += as_int(cell(row, role_cols.deaths))
                agg["assists"] += as_int(cell(row, role_cols.assists))
                agg["gold"] += as_int(cell(row, role_cols.gold))
                agg["seconds"] += seconds
        return players

    @staticmethod
    def _finalize(name: str, agg: dict) -> dict:
        seconds = agg["seconds"]
        avg_gpm = round_half_up(agg["gold"] / (seconds / 60)) if seconds > 0 else 0
        return {
            "name": name,
            "games": agg["games"],
            "wins": agg["wins"],
            "kills": agg["kills"],
            "deaths": agg["deaths"],
            "assists": agg["assists"],
            "gold": agg["gold"],
            "avg_kda": f"{kda(agg['kills'], agg['deaths'], agg['assists']):.2f}",
            "win_rate": percent(agg["wins"], agg["games"]),
            "avg_gpm": avg_gpm,
        }
