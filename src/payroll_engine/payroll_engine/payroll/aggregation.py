from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from ..core.constants import BUFFER_MINUTES, DEFAULT_SHIFT_MINUTES, MIN_OT_MINUTES
from ..core.enums import WageType
from ..attendance.model import AttendanceRecord
from ..shifts.model import Shift, ShiftWindow


@dataclass(frozen=True)
class AttendanceAggregate:
    present_days: float
    present_shifts: int
    total_shifts: int
    regular_minutes: int
    overtime_hours: int


def resolve_shift_minutes(shift: Optional[Shift]) -> int:
    """Expected working minutes per day, net of break (540 when unassigned or zero-length)."""
    if shift is None or shift.is_zero_length:
        return DEFAULT_SHIFT_MINUTES
    return ShiftWindow.from_shift(shift).effective_minutes


def present_day_credit(record: AttendanceRecord, shift_minutes: int) -> float:
    """Monthly attendance credit for one day: 1.0, 0.5 or 0."""
    if not record.is_present:
        return 0.0
    if record.working_minutes >= shift_minutes - BUFFER_MINUTES:
        return 1.0
    if record.working_minutes >= shift_minutes / 2:
        return 0.5
    return 0.0


def split_overtime(record: AttendanceRecord) -> Tuple[int, int]:
    """Split a day into (regular_minutes, overtime_hours).

    Only completed overtime hours are paid, and only from the first full hour.
    Minutes billed as overtime are removed from the regular minutes so they are
    never paid twice.
    """
    ot_hours = 0
    if record.overtime_minutes >= MIN_OT_MINUTES:
        ot_hours = record.overtime_minutes // 60
    regular = max(0, record.working_minutes - ot_hours * 60)
    return regular, ot_hours


def select_window(history: Sequence[AttendanceRecord], wage_type: Optional[WageType]) -> list[AttendanceRecord]:
    """Daily and hourly wages settle today only; everything else uses the full history."""
    if not history:
        return []
    if wage_type in (WageType.DAILY, WageType.HOURLY):
        return [history[0]]
    return list(history)


def aggregate(records: Sequence[AttendanceRecord], shift_minutes: int) -> AttendanceAggregate:
    present_days = 0.0
    present_shifts = 0
    regular_minutes = 0
    overtime_hours = 0

    for r in records:
        if not r.is_present:
            continue
        present_shifts += 1
        present_days += present_day_credit(r, shift_minutes)
        regular, ot_hours = split_overtime(r)
        regular_minutes += regular
        overtime_hours += ot_hours

    return AttendanceAggregate(
        present_days=present_days,
        present_shifts=present_shifts,
        total_shifts=len(records),
        regular_minutes=regular_minutes,
        overtime_hours=overtime_hours,
    )
