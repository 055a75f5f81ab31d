from __future__ import annotations

from typing import Optional

from ..core.constants import MINUTES_PER_DAY


def parse_time(value: Optional[str]) -> int:
    """Parse a 12-hour clock string ("09:00 AM", "6:30 PM") into minutes since midnight.

    12:00 AM is 0 and 12:00 PM is 720. Empty or unparsable input yields 0.
    """
    if not value or not value.strip():
        return 0

    parts = value.strip().split()
    clock = parts[0]
    modifier = parts[1].upper() if len(parts) > 1 else ""

    try:
        hours_s, minutes_s = clock.split(":")
        hours = int(hours_s)
        minutes = int(minutes_s)
    except ValueError:
        return 0

    if hours == 12 and modifier == "AM":
        hours = 0
    if modifier == "PM" and hours != 12:
        hours += 12

    return hours * 60 + minutes


def format_minutes(total: int) -> str:
    """Render a minute count as "9h" or "8h 30m" for display."""
    total = int(total)
    h, m = divmod(total, 60)
    if m == 0:
        return f"{h}h"
    return f"{h}h {m}m"


def format_clock(minutes: int) -> str:
    """Render minutes since midnight as a punch string ("09:05 AM")."""
    minutes = int(minutes) % MINUTES_PER_DAY
    h, m = divmod(minutes, 60)
    period = "PM" if h >= 12 else "AM"
    display_h = h - 12 if h > 12 else (12 if h == 0 else h)
    return f"{display_h:02d}:{m:02d} {period}"
