"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

HISTORY_DAYS = 30
STANDARD_DAYS_IN_MONTH = 30

# Shift assumed by the attendance generator when none is assigned (09:00 AM - 06:00 PM).
DEFAULT_SHIFT_START_MINUTES = 540
DEFAULT_SHIFT_END_MINUTES = 1080
DEFAULT_BREAK_MINUTES = 60

# Net shift length assumed by the payroll builder when none is assigned.
DEFAULT_SHIFT_MINUTES = 540

MINUTES_PER_DAY = 1440

BUFFER_MINUTES = 15
MIN_OT_MINUTES = 60
OT_MULTIPLIER = 1.5

ADVANCE_DEDUCTION_LABEL = "Less Advance"
