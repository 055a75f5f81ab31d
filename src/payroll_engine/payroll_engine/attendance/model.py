from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.time_utils import format_minutes
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one day of attendance for one employee.

    Transient: recomputed on every request, never persisted.
    """

    work_date: date
    status: AttendanceStatus
    working_minutes: int = 0
    overtime_minutes: int = 0
    punch_in: Optional[str] = None
    punch_out: Optional[str] = None

    @property
    def date_label(self) -> str:
        """Short display label, e.g. "7 Oct"."""
        return f"{self.work_date.day} {self.work_date.strftime('%b')}"

    @property
    def is_present(self) -> bool:
        return self.status == AttendanceStatus.PRESENT

    def to_dict(self) -> dict:
        return {
            "date": self.date_label,
            "work_date": self.work_date.strftime("%Y-%m-%d"),
            "status": self.status.value,
            "punch_in": self.punch_in,
            "punch_out": self.punch_out,
            "working_minutes": self.working_minutes,
            "worked": format_minutes(self.working_minutes),
            "overtime_minutes": self.overtime_minutes,
        }
