"""
Core logic for locating working days.
"""

from nth_workday.core.errors import (
    InvalidArgumentError,
    NthWorkdayError,
    WorkingDayNotFoundError,
)
from nth_workday.core.locator import (
    WorkingDayLocator,
    days_in_month,
    is_working_day,
    iter_working_days,
    locate,
)
from nth_workday.core.ordinals import ordinal, ordinal_suffix
from nth_workday.core.weekday_parser import (
    parse_excluded_days,
    parse_weekday,
    parse_weekdays,
)

__all__ = [
    "InvalidArgumentError",
    "NthWorkdayError",
    "WorkingDayLocator",
    "WorkingDayNotFoundError",
    "days_in_month",
    "is_working_day",
    "iter_working_days",
    "locate",
    "ordinal",
    "ordinal_suffix",
    "parse_excluded_days",
    "parse_weekday",
    "parse_weekdays",
]
