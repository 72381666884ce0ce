# tests/test_hero_stats.py

import pytest

from draftboard.plugins.hero_stats import HeroStatsPlugin
from tests.helpers import make_rows


def _by_name(heroes):
    return {h["name"]: h for h in heroes}


class TestHeroStatsPlugin:
    @pytest.fixture
    def rows(self):
        return make_rows(
            {"winner": "Blue", "blue_bans": ["Lancelot"], "red_bans": ["Hayabusa"]},
            {"winner": "Red", "blue_bans": ["Lancelot"], "red_bans": ["Layla"]},
        )

    def test_pick_counts_and_rates(self, rows):
        result = HeroStatsPlugin(rows).analyze()
        layla = _by_name(result["heroes"])["Layla"]
        assert result["total_games"] == 2
        assert layla["picks"] == 2
        assert layla["wins"] == 1
        assert layla["pick_rate"] == 100
        assert layla["win_rate"] == 50
        assert layla["bans"] == 1
        assert layla["ban_rate"] == 50
        # default slot stats: 2/1/3 per game
        assert layla["kills"] == 4
        assert layla["deaths"] == 2
        assert layla["assists"] == 6
        assert layla["avg_kda"] == "5.00"

    def test_ban_only_hero_is_in_most_banned_not_hero_list(self, rows):
        result = HeroStatsPlugin(rows).analyze()
        heroes = _by_name(result["heroes"])
        assert "Lancelot" not in heroes
        assert result["most_banned"][0] == {"name": "Lancelot", "bans": 2, "ban_rate": 100}
        banned = [h["name"] for h in result["most_banned"]]
        assert banned == ["Lancelot", "Hayabusa", "Layla"]

    def test_unbanned_hero_defaults_to_zero_bans(self, rows):
        fanny = _by_name(HeroStatsPlugin(rows).analyze()["heroes"])["Fanny"]
        assert fanny["bans"] == 0
        assert fanny["ban_rate"] == 0

    def test_hero_totals_span_players(self):
        rows = make_rows(
            {"winner": "Blue", "blue_heroes": ["Ling", "Chou", "Pharsa", "Tigreal", "Layla"]},
            {"winner": "Blue",
             "blue_heroes": ["Miya", "Chou", "Pharsa", "Tigreal", "Layla"],
             "red_heroes": ["Ling", "Fanny", "Yu Zhong", "Valentina", "Mathilda"]},
        )
        ling = _by_name(HeroStatsPlugin(rows).analyze()["heroes"])["Ling"]
        assert ling["picks"] == 2
        assert ling["wins"] == 1

    def test_most_picked_is_top_ten(self):
        rows = make_rows(
            {},
            {},
            {"blue_heroes": ["Miya", "Alucard", "Eudora", "Zilong", "Saber"],
             "red_heroes": ["Nana", "Balmond", "Alice", "Karina", "Rafaela"]},
        )
        result = HeroStatsPlugin(rows).analyze()
        assert len(result["heroes"]) == 20
        assert len(result["most_picked"]) == 10
        assert all(h["picks"] == 2 for h in result["most_picked"])
        assert result["heroes"][10]["picks"] == 1

    def test_stage_filter_changes_denominator(self):
        rows = make_rows(
            {"stage": "A"},
            {"stage": "B", "blue_heroes": ["Miya", "Alucard", "Eudora", "Zilong", "Saber"]},
        )
        result = HeroStatsPlugin(rows, "B").analyze()
        heroes = _by_name(result["heroes"])
        assert result["total_games"] == 1
        assert heroes["Miya"]["pick_rate"] == 100
        assert "Layla" not in heroes

    def test_empty_rows(self):
        result = HeroStatsPlugin([]).analyze()
        assert result["heroes"] == []
        assert result["most_picked"] == []
        assert result["most_banned"] == []
