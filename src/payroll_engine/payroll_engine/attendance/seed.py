"""Deterministic pseudo-randomness for synthetic attendance.

Every decision the generator makes for a day is derived from `seed()`, so the
same employee, shift and day always produce the same record. No clock entropy
and no `hash()` (which is salted per process for strings) are involved.
"""
from __future__ import annotations


def seed(employee_id: str, day_offset: int) -> int:
    """Sum of the Unicode code points of `employee_id`, plus `day_offset`.

    >>> seed("ab", 0)
    195
    >>> seed("ab", 3)
    198
    """
    return sum(ord(ch) for ch in str(employee_id)) + int(day_offset)


def attendance_roll(value: int) -> int:
    """Bucket 0-99 deciding absent (0-4), leave (5-9) or present."""
    return value % 100


def scenario_bucket(value: int) -> int:
    """Bucket 0-9 choosing the punch variance pattern of a present day."""
    return value % 10
