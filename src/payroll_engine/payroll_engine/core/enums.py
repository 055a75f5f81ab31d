from __future__ import annotations

from enum import Enum


class _CaseInsensitiveEnum(str, Enum):
    """Stored values are matched regardless of case ("monthly" -> Monthly)."""

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            folded = value.strip().casefold()
            for member in cls:
                if member.value.casefold() == folded:
                    return member
        return None


class WageType(_CaseInsensitiveEnum):
    """How an employee's salary amount is interpreted."""

    MONTHLY = "Monthly"
    DAILY = "Daily"
    HOURLY = "Hourly"


class AttendanceStatus(str, Enum):
    PRESENT = "present"
    ABSENT = "absent"
    LEAVE = "leave"
    HOLIDAY = "holiday"
    WEEK_OFF = "week_off"


class AdvanceStatus(_CaseInsensitiveEnum):
    """Lifecycle of an approved salary advance."""

    OPEN = "open"
    DEDUCTED = "deducted"


class AdjustmentType(str, Enum):
    ADDITION = "addition"
    DEDUCTION = "deduction"


class PaymentMode(str, Enum):
    UPI = "UPI"
    BANK = "Bank"
    CASH = "Cash"


class EntryStatus(str, Enum):
    READY = "ready"
    MISSING_DETAILS = "missing_details"


class CalculationMethod(str, Enum):
    """Business setting choosing the per-day divisor for monthly wages."""

    CALENDAR_MONTH = "calendar_month"
    FIXED_30_DAYS = "fixed_30_days"
    EXCLUDE_WEEKLY_OFFS = "exclude_weekly_offs"
