"""
Data models for the nth working day locator using Pydantic.
"""

import calendar
from datetime import date, datetime
from enum import IntEnum
from typing import FrozenSet, List, Optional, Set

from pydantic import BaseModel, Field, field_validator


class Weekday(IntEnum):
    """Days of the week, numbered from Sunday (0) to Saturday (6)."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def of(cls, day: date) -> "Weekday":
        """Return the weekday of a calendar date."""
        return cls(day.isoweekday() % 7)

    @property
    def label(self) -> str:
        """English display name, e.g. 'Monday'."""
        return self.name.capitalize()


DEFAULT_WORKING_WEEK: FrozenSet[Weekday] = frozenset(
    {
        Weekday.MONDAY,
        Weekday.TUESDAY,
        Weekday.WEDNESDAY,
        Weekday.THURSDAY,
        Weekday.FRIDAY,
    }
)


def month_label(month: int) -> str:
    """English month name for 1..12."""
    return calendar.month_name[month]


class NthWorkingDayRequest(BaseModel):
    """Request model for locating the nth working day of a month."""

    nth: int = Field(..., description="Position of the working day to find (1-31)")
    month: int = Field(..., description="Month (1-12)")
    year: int = Field(..., description="Year (1-9999)")
    working_weekdays: Optional[Set[Weekday]] = Field(
        default=None, description="Weekdays counted as working days (default Mon-Fri)"
    )
    excluded_days: Optional[Set[int]] = Field(
        default=None, description="Days of month to skip regardless of weekday"
    )


class NthWorkingDayResult(BaseModel):
    """Result of a successful nth working day lookup."""

    nth: int = Field(..., ge=1, le=31, description="Requested position")
    month: int = Field(..., ge=1, le=12, description="Month searched")
    year: int = Field(..., ge=1, le=9999, description="Year searched")
    working_date: date = Field(..., description="The nth working day")
    weekday: Weekday = Field(..., description="Weekday of the resolved date")
    working_weekdays: List[Weekday] = Field(..., description="Working weekdays used, Sunday first")
    excluded_days: Optional[List[int]] = Field(
        default=None, description="Excluded days of month, if supplied"
    )
    working_days_in_month: int = Field(..., ge=0, description="Number of working days in the month")
    calculation_timestamp: datetime = Field(
        default_factory=datetime.now, description="When the lookup was performed"
    )

    @property
    def month_name(self) -> str:
        return month_label(self.month)


class WorkingDayEntry(BaseModel):
    """A single working day and its position within the month."""

    position: int = Field(..., ge=1, description="Ordinal position among working days")
    working_date: date = Field(..., description="Calendar date")
    weekday: Weekday = Field(..., description="Weekday of the date")


class MonthWorkingDays(BaseModel):
    """All working days of one month."""

    month: int = Field(..., ge=1, le=12, description="Month")
    year: int = Field(..., ge=1, le=9999, description="Year")
    days_in_month: int = Field(..., ge=28, le=31, description="Calendar days in the month")
    working_weekdays: List[Weekday] = Field(..., description="Working weekdays used, Sunday first")
    excluded_days: Optional[List[int]] = Field(default=None, description="Excluded days of month")
    working_days: List[WorkingDayEntry] = Field(default_factory=list, description="Working days in order")

    @property
    def month_name(self) -> str:
        return month_label(self.month)


class Config(BaseModel):
    """Configuration for the nth working day locator."""

    working_weekdays: List[Weekday] = Field(
        default_factory=lambda: sorted(DEFAULT_WORKING_WEEK),
        description="Default working weekdays",
    )
    excluded_days: Optional[List[int]] = Field(
        default=None, description="Default days of month to exclude"
    )
    output_format: str = Field(default="console", description="Default output format: console, json, csv or both")
    output_directory: str = Field(default="results", description="Directory for output files")
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, ge=1, le=65535, description="API server port")
    log_level: str = Field(default="INFO", description="Initial logging level")

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """Only formats the exporter understands are allowed."""
        if v not in ("console", "json", "csv", "both"):
            raise ValueError("output_format must be console, json, csv or both")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level
