# tests/test_summary.py

import pytest

from draftboard.plugins.summary import SummaryPlugin
from draftboard.stage_filter import ByStage, NoFilter
from tests.helpers import make_row, make_rows


class TestSummaryPlugin:
    @pytest.fixture
    def rows(self):
        return make_rows(
            {"stage": "A", "winner": "Blue", "duration": "10:00"},
            {"stage": "A", "winner": "Red", "duration": "12:00"},
            {"stage": "B", "winner": "Blue", "duration": "8:00"},
        )

    def test_stage_filter(self, rows):
        result = SummaryPlugin(rows, "A").analyze()
        assert result["total_games"] == 2
        assert result["blue_wins"] == 1
        assert result["red_wins"] == 1
        assert result["blue_win_rate"] == 50
        assert result["red_win_rate"] == 50
        assert result["avg_duration"] == "11:00"

    def test_all_stages(self, rows):
        result = SummaryPlugin(rows, "All").analyze()
        assert result["total_games"] == 3
        assert result["avg_duration"] == "10:00"
        assert SummaryPlugin(rows, "").analyze() == SummaryPlugin(rows, None).analyze()

    def test_stage_match_is_case_sensitive(self, rows):
        assert SummaryPlugin(rows, "a").analyze()["total_games"] == 0

    def test_explicit_filter_objects(self, rows):
        assert SummaryPlugin(rows, ByStage("B")).analyze()["total_games"] == 1
        assert SummaryPlugin(rows, NoFilter()).analyze()["total_games"] == 3

    def test_empty_dataset_is_zeroed(self):
        result = SummaryPlugin([]).analyze()
        assert result["total_games"] == 0
        assert result["blue_win_rate"] == 0
        assert result["red_win_rate"] == 0
        assert result["avg_duration"] == "0:00"

    def test_unset_winner_counts_as_game_but_not_win(self):
        rows = make_rows(
            {"winner": "Blue", "duration": "10:00"},
            {"winner": "", "duration": "20:00"},
        )
        result = SummaryPlugin(rows).analyze()
        assert result["total_games"] == 2
        assert result["blue_wins"] == 1
        assert result["red_wins"] == 0
        assert result["blue_win_rate"] == 50
        assert result["avg_duration"] == "15:00"

    def test_winner_comparison_ignores_case(self):
        row = make_row(1)
        row[117] = "BLUE"
        assert SummaryPlugin([row]).analyze()["blue_wins"] == 1

    def test_blank_durations_are_not_averaged(self):
        rows = make_rows(
            {"duration": "9:00"},
            {"duration": ""},
        )
        assert SummaryPlugin(rows).analyze()["avg_duration"] == "9:00"

    def test_rates_never_exceed_one_hundred(self):
        rows = make_rows(
            {"winner": "Blue"}, {"winner": "Red"}, {"winner": "Red"},
        )
        result = SummaryPlugin(rows).analyze()
        assert result["blue_win_rate"] == 33
        assert result["red_win_rate"] == 67
        assert result["blue_win_rate"] + result["red_win_rate"] <= 100

    def test_rates_stay_within_one_hundred_on_half_shares(self):
        rows = make_rows({"winner": "Blue"}, *[{"winner": "Red"}] * 7)
        result = SummaryPlugin(rows).analyze()
        assert result["blue_win_rate"] == 13
        assert result["red_win_rate"] == 87

    def test_undecided_games_leave_rates_below_one_hundred(self):
        rows = make_rows({"winner": "Blue"}, {"winner": "Red"}, {"winner": ""}, {"winner": ""})
        result = SummaryPlugin(rows).analyze()
        assert result["blue_win_rate"] == 25
        assert result["red_win_rate"] == 25
