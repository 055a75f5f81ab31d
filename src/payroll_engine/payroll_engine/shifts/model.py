from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.time_utils import parse_time
from ..core.constants import (
    DEFAULT_BREAK_MINUTES,
    DEFAULT_SHIFT_END_MINUTES,
    DEFAULT_SHIFT_START_MINUTES,
    MINUTES_PER_DAY,
)


@dataclass(frozen=True)
class Shift:
    """Domain entity: a work shift with 12-hour clock boundaries ("09:00 AM")."""

    shift_id: str
    shift_name: str
    start_time: str
    end_time: str
    break_minutes: int = 0

    @property
    def is_zero_length(self) -> bool:
        """Start and end resolve to the same minute (including both unparsable)."""
        return parse_time(self.start_time) == parse_time(self.end_time)


@dataclass(frozen=True)
class ShiftWindow:
    """A shift resolved to minutes since midnight.

    `end_minutes` is rolled forward past midnight for overnight shifts, so it is
    always greater than `start_minutes`. A zero-length shift is treated as unassigned.
    """

    start_minutes: int
    end_minutes: int
    break_minutes: int

    @property
    def duration_minutes(self) -> int:
        return self.end_minutes - self.start_minutes

    @property
    def effective_minutes(self) -> int:
        return self.duration_minutes - self.break_minutes

    @classmethod
    def from_shift(cls, shift: Optional[Shift]) -> "ShiftWindow":
        if shift is None or shift.is_zero_length:
            return cls(
                start_minutes=DEFAULT_SHIFT_START_MINUTES,
                end_minutes=DEFAULT_SHIFT_END_MINUTES,
                break_minutes=DEFAULT_BREAK_MINUTES,
            )

        start = parse_time(shift.start_time)
        end = parse_time(shift.end_time)
        if end < start:
            end += MINUTES_PER_DAY
        return cls(start_minutes=start, end_minutes=end, break_minutes=int(shift.break_minutes or 0))
