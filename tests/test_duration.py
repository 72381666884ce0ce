# tests/test_duration.py

import pytest

from draftboard.duration import format_duration, parse_duration


class TestParseDuration:
    def test_known_values(self):
        assert parse_duration("") == 0
        assert parse_duration("12:34") == 754
        assert parse_duration("1:02:03") == 3723
        assert parse_duration("garbage") == 0

    def test_no_range_validation(self):
        assert parse_duration("75:999") == 75 * 60 + 999

    def test_other_shapes_are_zero(self):
        assert parse_duration("1:2:3:4") == 0
        assert parse_duration("754") == 0
        assert parse_duration(None) == 0

    def test_whitespace_is_ignored(self):
        assert parse_duration("  9:05 ") == 545

    def test_non_numeric_component_counts_as_zero(self):
        assert parse_duration("ab:30") == 30


class TestFormatDuration:
    def test_seconds_are_zero_padded(self):
        assert format_duration(0) == "0:00"
        assert format_duration(65) == "1:05"
        assert format_duration(754) == "12:34"

    def test_hour_scale_renders_as_minutes(self):
        assert format_duration(3723) == "62:03"

    def test_negative_clamped(self):
        assert format_duration(-5) == "0:00"

    def test_fractional_seconds_round_half_up(self):
        assert format_duration(59.5) == "1:00"

    @pytest.mark.parametrize("seconds", [0, 1, 59, 60, 61, 599, 754, 1800, 3599])
    def test_round_trip_below_one_hour(self, seconds):
        assert parse_duration(format_duration(seconds)) == seconds
