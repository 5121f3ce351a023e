"""
Find the nth working day of a month.
"""

from nth_workday.core import (
    InvalidArgumentError,
    WorkingDayLocator,
    WorkingDayNotFoundError,
    days_in_month,
    locate,
)
from nth_workday.data.schemas import DEFAULT_WORKING_WEEK, Weekday

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_WORKING_WEEK",
    "InvalidArgumentError",
    "Weekday",
    "WorkingDayLocator",
    "WorkingDayNotFoundError",
    "days_in_month",
    "locate",
]
