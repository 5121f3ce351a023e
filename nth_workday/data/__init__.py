"""
Data models and schemas for the nth working day locator.
"""

from nth_workday.data.schemas import (
    DEFAULT_WORKING_WEEK,
    Config,
    MonthWorkingDays,
    NthWorkingDayRequest,
    NthWorkingDayResult,
    Weekday,
    WorkingDayEntry,
)

__all__ = [
    "DEFAULT_WORKING_WEEK",
    "Config",
    "MonthWorkingDays",
    "NthWorkingDayRequest",
    "NthWorkingDayResult",
    "Weekday",
    "WorkingDayEntry",
]
