from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import List, Optional

from ..common.datetime_utils import today_local
from ..common.time_utils import format_clock
from ..core.constants import HISTORY_DAYS
from ..core.enums import AttendanceStatus
from ..employees.model import Employee
from ..shifts.model import Shift, ShiftWindow
from .factory import VarianceStrategyFactory
from .model import AttendanceRecord
from .seed import attendance_roll, seed

logger = logging.getLogger(__name__)

# Only weekend days can be configured as weekly offs.
WEEKLY_OFF_DAYS = {5: "Saturday", 6: "Sunday"}


class AttendanceHistoryGenerator:
    """Synthesizes a trailing attendance history for an employee.

    The output is a pure function of the employee id, weekly offs, shift and
    `today`: calling `generate` twice with the same inputs gives identical records.
    """

    def __init__(self, *, strategy_factory: VarianceStrategyFactory | None = None, days: int = HISTORY_DAYS):
        self._factory = strategy_factory or VarianceStrategyFactory()
        self._days = int(days)

    def generate(
        self,
        employee: Employee,
        shift: Optional[Shift] = None,
        *,
        today: Optional[date] = None,
    ) -> List[AttendanceRecord]:
        """Return records for today (index 0) back to `days - 1` days ago."""
        today = today or today_local()
        window = ShiftWindow.from_shift(shift)
        history = [self.record_for_day(employee, window, today=today, day_offset=i) for i in range(self._days)]
        logger.debug("Generated %d attendance records for employee %s", len(history), employee.employee_id)
        return history

    def record_for_day(
        self,
        employee: Employee,
        window: ShiftWindow,
        *,
        today: date,
        day_offset: int,
    ) -> AttendanceRecord:
        work_date = today - timedelta(days=day_offset)

        if self.is_weekly_off(employee, work_date):
            return AttendanceRecord(work_date=work_date, status=AttendanceStatus.WEEK_OFF)

        value = seed(employee.employee_id, day_offset)
        roll = attendance_roll(value)
        if roll < 5:
            return AttendanceRecord(work_date=work_date, status=AttendanceStatus.ABSENT)
        if roll < 10:
            return AttendanceRecord(work_date=work_date, status=AttendanceStatus.LEAVE)

        variance = self._factory.for_seed(value).variance(value)
        actual_in = window.start_minutes + variance.in_minutes
        actual_out = window.end_minutes + variance.out_minutes

        working = max(0, actual_out - actual_in - window.break_minutes)
        overtime = max(0, working - window.effective_minutes)

        return AttendanceRecord(
            work_date=work_date,
            status=AttendanceStatus.PRESENT,
            working_minutes=working,
            overtime_minutes=overtime,
            punch_in=format_clock(actual_in),
            punch_out=format_clock(actual_out),
        )

    @staticmethod
    def is_weekly_off(employee: Employee, work_date: date) -> bool:
        day_name = WEEKLY_OFF_DAYS.get(work_date.weekday())
        return day_name is not None and day_name in (employee.weekly_offs or ())
