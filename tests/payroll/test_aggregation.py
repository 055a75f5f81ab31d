from datetime import date

from src.payroll_engine.payroll_engine.attendance.model import AttendanceRecord
from src.payroll_engine.payroll_engine.core.enums import AttendanceStatus, WageType
from src.payroll_engine.payroll_engine.payroll.aggregation import (
    aggregate,
    present_day_credit,
    resolve_shift_minutes,
    select_window,
    split_overtime,
)
from src.payroll_engine.payroll_engine.shifts.model import Shift

D = date(2026, 10, 19)


def _present(working: int, overtime: int = 0) -> AttendanceRecord:
    return AttendanceRecord(work_date=D, status=AttendanceStatus.PRESENT, working_minutes=working, overtime_minutes=overtime)


def test_shift_minutes_default_and_net_of_break():
    assert resolve_shift_minutes(None) == 540
    shift = Shift(shift_id="s", shift_name="G", start_time="09:00 AM", end_time="06:00 PM", break_minutes=60)
    assert resolve_shift_minutes(shift) == 480
    night = Shift(shift_id="n", shift_name="N", start_time="10:00 PM", end_time="06:00 AM", break_minutes=30)
    assert resolve_shift_minutes(night) == 450


def test_present_day_credit_levels():
    assert present_day_credit(_present(540), 540) == 1.0
    assert present_day_credit(_present(525), 540) == 1.0  # inside the 15 minute buffer
    assert present_day_credit(_present(524), 540) == 0.5
    assert present_day_credit(_present(270), 540) == 0.5
    assert present_day_credit(_present(269), 540) == 0.0
    absent = AttendanceRecord(work_date=D, status=AttendanceStatus.ABSENT)
    assert present_day_credit(absent, 540) == 0.0


def test_sub_hour_overtime_is_not_paid():
    assert split_overtime(_present(525, 45)) == (525, 0)
    assert split_overtime(_present(539, 59)) == (539, 0)


def test_overtime_minutes_are_not_paid_twice():
    assert split_overtime(_present(540, 60)) == (480, 1)
    assert split_overtime(_present(570, 90)) == (510, 1)
    assert split_overtime(_present(620, 140)) == (500, 2)


def test_window_is_today_only_for_daily_and_hourly():
    history = [_present(i) for i in range(30)]

    assert select_window(history, WageType.DAILY) == [history[0]]
    assert select_window(history, WageType.HOURLY) == [history[0]]
    assert len(select_window(history, WageType.MONTHLY)) == 30
    assert len(select_window(history, None)) == 30


def test_aggregate_only_counts_present_days():
    records = [
        _present(540),
        _present(570, 90),
        _present(300),
        AttendanceRecord(work_date=D, status=AttendanceStatus.LEAVE),
        AttendanceRecord(work_date=D, status=AttendanceStatus.WEEK_OFF),
    ]

    totals = aggregate(records, 540)

    assert totals.present_days == 2.5
    assert totals.present_shifts == 3
    assert totals.total_shifts == 5
    assert totals.regular_minutes == 540 + 510 + 300
    assert totals.overtime_hours == 1


def test_zero_length_shift_falls_back_to_default_minutes():
    garbage = Shift(shift_id="g", shift_name="Broken", start_time="garbage", end_time="", break_minutes=30)
    same = Shift(shift_id="z", shift_name="Zero", start_time="09:00 AM", end_time="09:00 AM", break_minutes=60)

    assert resolve_shift_minutes(garbage) == 540
    assert resolve_shift_minutes(same) == 540
