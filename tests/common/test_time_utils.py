from src.payroll_engine.payroll_engine.common.money import round_half_up, round_to
from src.payroll_engine.payroll_engine.common.time_utils import format_clock, format_minutes, parse_time


def test_parse_time_handles_midnight_and_noon():
    assert parse_time("12:00 AM") == 0
    assert parse_time("12:30 AM") == 30
    assert parse_time("12:00 PM") == 720
    assert parse_time("09:00 AM") == 540
    assert parse_time("06:30 PM") == 1110


def test_parse_time_invalid_input_is_zero():
    assert parse_time("") == 0
    assert parse_time(None) == 0
    assert parse_time("garbage") == 0
    assert parse_time("ab:cd PM") == 0


def test_format_minutes_drops_zero_minutes():
    assert format_minutes(540) == "9h"
    assert format_minutes(510) == "8h 30m"
    assert format_minutes(45) == "0h 45m"


def test_format_clock_wraps_past_midnight():
    assert format_clock(0) == "12:00 AM"
    assert format_clock(720) == "12:00 PM"
    assert format_clock(1170) == "07:30 PM"
    assert format_clock(1500) == "01:00 AM"


def test_format_clock_reads_back_with_parse_time():
    for minutes in (0, 59, 535, 720, 1075, 1439):
        assert parse_time(format_clock(minutes)) == minutes


def test_round_half_up_is_not_bankers_rounding():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(149.4) == 149
    assert round_to(8.335, 2) == 8.34
