"""tests for hour:minute parsing and window arithmetic"""
from datetime import datetime, time

import pytest

from departure_board.timeutils import (
    ParseError, current_time_of_day, format_hour_minute, parse_hour_minute,
    parse_param_to_time, window_end
)


class TestParseHourMinute:

    @pytest.mark.parametrize("value, expected", [
        ("00:00", time(0, 0)),
        ("9:00", time(9, 0)),
        ("09:05", time(9, 5)),
        ("13:00", time(13, 0)),
        (" 23:59 ", time(23, 59)),
    ])
    def test_valid(self, value, expected):
        assert parse_hour_minute(value) == expected

    @pytest.mark.parametrize("value", ["", "abc", "24:00", "12:60", "12", "12:5", "1:00pm", "-1:00"])
    def test_invalid(self, value):
        with pytest.raises(ParseError) as info:
            parse_hour_minute(value)
        assert info.value.value == value

    def test_non_ascii_digits_rejected(self):
        with pytest.raises(ParseError):
            parse_hour_minute("\u0661\u0660:\u0663\u0660")

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_hour_minute("noon")

    def test_format(self):
        assert format_hour_minute(time(9, 5)) == "09:05"
        assert format_hour_minute(parse_hour_minute("9:00")) == "09:00"


class TestParseParamToTime:

    def test_empty_defaults_to_now(self):
        now = datetime(2024, 3, 1, 14, 27, 45, 123)
        assert parse_param_to_time("", now=now) == time(14, 27)
        assert parse_param_to_time(None, now=now) == time(14, 27)

    def test_default_uses_clock(self):
        before = datetime.now().replace(second=0, microsecond=0).time()
        resolved = parse_param_to_time("")
        after = datetime.now().replace(second=0, microsecond=0).time()
        assert resolved.second == 0 and resolved.microsecond == 0
        assert resolved in (before, after)

    def test_given_value(self):
        assert parse_param_to_time("00:00") == time(0, 0)
        assert parse_param_to_time("13:00") == time(13, 0)

    def test_invalid_value(self):
        with pytest.raises(ParseError):
            parse_param_to_time("13h00")

    def test_current_time_of_day(self):
        assert current_time_of_day(datetime(2024, 1, 1, 8, 0, 59)) == time(8, 0)


class TestWindowEnd:

    def test_adds_minutes(self):
        assert window_end(time(10, 0), 60) == time(11, 0)
        assert window_end(time(10, 45), 30) == time(11, 15)

    def test_clamps_at_midnight(self):
        assert window_end(time(23, 30), 60) == time(23, 59)
        assert window_end(time(23, 0), 59) == time(23, 59)
        assert window_end(time(23, 0), 60) == time(23, 59)
