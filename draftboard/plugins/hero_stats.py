"""
draftboard/plugins/hero_stats.py
================================
Hero meta: pick, ban and win rates.

Bans and picks are counted in two independent maps. Bans come from the ten
ban slots of each game; picks, wins and K/D/A come from the hero played in
each role slot. `most_banned` ranks the ban map on its own, so a hero that
was only ever banned still shows up there.
"""

from __future__ import annotations

from typing import Any, Sequence

from draftboard.cells import as_int, as_trimmed_string, cell, kda, percent
from draftboard.config import TOP_N_HEROES
from draftboard.schema import SCHEMA, SIDES, WINNER_COL, all_role_columns
from draftboard.stage_filter import StageFilter, filter_rows, parse_stage_filter


class HeroStatsPlugin:
    def __init__(
        self,
        rows: Sequence[Sequence[Any]],
        stage: str | StageFilter | None = None,
        top_n: int = TOP_N_HEROES,
    ):
        self.rows = rows
        self.stage_filter = parse_stage_filter(stage)
        self.top_n = top_n

    def analyze(self) -> dict:
        games = filter_rows(self.rows, self.stage_filter)
        total_games = len(games)

        bans = self._count_bans(games)
        picks = self._aggregate_picks(games)

        heroes = sorted(
            (self._finalize(name, agg, bans.get(name, 0), total_games) for name, agg in picks.items()),
            key=lambda h: -h["picks"],
        )
        most_banned = [
            {"name": name, "bans": count, "ban_rate": percent(count, total_games)}
            for name, count in sorted(bans.items(), key=lambda item: -item[1])
        ][:self.top_n]

        return {
            "stage": self.stage_filter.label,
            "total_games": total_games,
            "heroes": heroes,
            "most_picked": heroes[:self.top_n],
            "most_banned": most_banned,
        }

    @staticmethod
    def _count_bans(games: Sequence[Sequence[Any]]) -> dict[str, int]:
        bans: dict[str, int] = {}
        for row in games:
            for side in SIDES:
                for col in SCHEMA[side].bans:
                    hero = as_trimmed_string(cell(row, col))
                    if hero:
                        bans[hero] = bans.get(hero, 0) + 1
        return bans

    @staticmethod
    def _aggregate_picks(games: Sequence[Sequence[Any]]) -> dict[str, dict]:
        picks: dict[str, dict] = {}
        for row in games:
            winner = as_trimmed_string(cell(row, WINNER_COL)).lower()
            for side, role_cols in all_role_columns():
                hero = as_trimmed_string(cell(row, role_cols.hero))
                if not hero:
                    continue
                if hero not in picks:
                    picks[hero] = {"picks": 0, "wins": 0, "kills": 0, "deaths": 0, "assists": 0}
                agg = picks[hero]
                agg["picks"] += 1
                if winner == side:
                    agg["wins"] += 1
                agg["kills"] += as_int(cell(row, role_cols.kills))
                agg["deaths"] += as_int(cell(row, role_cols.deaths))
                agg["assists"] += as_int(cell(row, role_cols.assists))
        return picks

    @staticmethod
    def _finalize(name: str, agg: dict, ban_count: int, total_games: int) -> dict:
        return {
            "name": name,
            "picks": agg["picks"],
            "wins": agg["wins"],
            "bans": ban_count,
            "kills": agg["kills"],
            "deaths": agg["deaths"],
            "assists": agg["assists"],
            "pick_rate": percent(agg["picks"], total_games),
            "ban_rate": percent(ban_count, total_games),
            "win_rate": percent(agg["wins"], agg["picks"]),
            "avg_kda": f"{kda(agg['kills'], agg['deaths'], agg['assists']):.2f}",
        }
