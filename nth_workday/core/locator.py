"""
Locates the nth working day of a month.
"""

import calendar
import logging
from datetime import date
from typing import AbstractSet, Iterable, Iterator, Optional

from nth_workday.core.errors import InvalidArgumentError, WorkingDayNotFoundError
from nth_workday.data.schemas import (
    DEFAULT_WORKING_WEEK,
    MonthWorkingDays,
    NthWorkingDayRequest,
    NthWorkingDayResult,
    Weekday,
    WorkingDayEntry,
)

logger = logging.getLogger(__name__)


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise InvalidArgumentError(f"{name} out of range")


def days_in_month(year: int, month: int) -> int:
    """
    Number of days in a month of the proleptic Gregorian calendar.

    Raises:
        InvalidArgumentError: If month or year is out of range.
    """
    _check_range("month", month, 1, 12)
    _check_range("year", year, 1, 9999)
    return calendar.monthrange(year, month)[1]


def is_working_day(
    day: date,
    working_weekdays: AbstractSet[Weekday] = DEFAULT_WORKING_WEEK,
    excluded_days: Optional[AbstractSet[int]] = None,
) -> bool:
    """Check whether a date is a working day under the given rules."""
    if excluded_days and day.day in excluded_days:
        return False
    return Weekday.of(day) in working_weekdays


def iter_working_days(
    month: int,
    year: int,
    working_weekdays: AbstractSet[Weekday] = DEFAULT_WORKING_WEEK,
    excluded_days: Optional[AbstractSet[int]] = None,
) -> Iterator[date]:
    """
    Yield every working day of a month in ascending order.

    Excluded days are skipped before their weekday is looked at. Exclusions
    that name a day the month does not have are simply never hit.
    """
    for day in range(1, days_in_month(year, month) + 1):
        candidate = date(year, month, day)
        if is_working_day(candidate, working_weekdays, excluded_days):
            yield candidate


def locate(
    nth: int,
    month: int,
    year: int,
    working_weekdays: AbstractSet[Weekday] = DEFAULT_WORKING_WEEK,
    excluded_days: Optional[AbstractSet[int]] = None,
) -> date:
    """
    Find the nth working day of a month.

    Args:
        nth: Position of the working day (1-31).
        month: Month (1-12).
        year: Year (1-9999).
        working_weekdays: Weekdays that count as working days.
        excluded_days: Days of month to skip. ``None`` means no exclusions
            were given; an empty set is treated the same for the search but
            is mentioned in the error message.

    Returns:
        The date of the nth working day.

    Raises:
        InvalidArgumentError: If nth, month or year is out of range.
        WorkingDayNotFoundError: If the month has fewer than nth working days.
    """
    _check_range("nth", nth, 1, 31)
    _check_range("month", month, 1, 12)
    _check_range("year", year, 1, 9999)

    for count, candidate in enumerate(
        iter_working_days(month, year, working_weekdays, excluded_days), start=1
    ):
        logger.debug("Working day #%s: %s (%s)", count, candidate.isoformat(), Weekday.of(candidate).label)
        if count == nth:
            return candidate

    raise WorkingDayNotFoundError(nth, working_weekdays, month, year, excluded_days)


class WorkingDayLocator:
    """Locates working days using configured default rules."""

    def __init__(
        self,
        working_weekdays: Optional[Iterable[Weekday]] = None,
        excluded_days: Optional[Iterable[int]] = None,
    ):
        """
        Initialize the locator.

        Args:
            working_weekdays: Default working weekdays (Mon-Fri if omitted).
            excluded_days: Default days of month to exclude.
        """
        self.working_weekdays = (
            frozenset(working_weekdays) if working_weekdays is not None else DEFAULT_WORKING_WEEK
        )
        self.excluded_days = frozenset(excluded_days) if excluded_days is not None else None

    def _rules(self, working_weekdays, excluded_days):
        weekdays = frozenset(working_weekdays) if working_weekdays is not None else self.working_weekdays
        excluded = frozenset(excluded_days) if excluded_days is not None else self.excluded_days
        return weekdays, excluded

    def locate(self, request: NthWorkingDayRequest) -> NthWorkingDayResult:
        """
        Locate the nth working day for a request.

        Args:
            request: NthWorkingDayRequest with position, month and rules.

        Returns:
            NthWorkingDayResult with the resolved date and metadata.
        """
        weekdays, excluded = self._rules(request.working_weekdays, request.excluded_days)

        working_date = locate(request.nth, request.month, request.year, weekdays, excluded)
        total = sum(1 for _ in iter_working_days(request.month, request.year, weekdays, excluded))
        logger.info(
            "%s/%s: working day #%s is %s",
            request.year, request.month, request.nth, working_date.isoformat(),
        )

        return NthWorkingDayResult(
            nth=request.nth,
            month=request.month,
            year=request.year,
            working_date=working_date,
            weekday=Weekday.of(working_date),
            working_weekdays=sorted(weekdays),
            excluded_days=sorted(excluded) if excluded is not None else None,
            working_days_in_month=total,
        )

    def locate_simple(
        self,
        nth: int,
        month: int,
        year: int,
        working_weekdays: Optional[Iterable[Weekday]] = None,
        excluded_days: Optional[Iterable[int]] = None,
    ) -> NthWorkingDayResult:
        """Simplified lookup method for CLI and tool usage."""
        request = NthWorkingDayRequest(
            nth=nth,
            month=month,
            year=year,
            working_weekdays=set(working_weekdays) if working_weekdays is not None else None,
            excluded_days=set(excluded_days) if excluded_days is not None else None,
        )
        return self.locate(request)

    def working_days(
        self,
        month: int,
        year: int,
        working_weekdays: Optional[Iterable[Weekday]] = None,
        excluded_days: Optional[Iterable[int]] = None,
    ) -> MonthWorkingDays:
        """List all working days of a month with their positions."""
        weekdays, excluded = self._rules(working_weekdays, excluded_days)
        entries = [
            WorkingDayEntry(position=position, working_date=day, weekday=Weekday.of(day))
            for position, day in enumerate(
                iter_working_days(month, year, weekdays, excluded), start=1
            )
        ]
        return MonthWorkingDays(
            month=month,
            year=year,
            days_in_month=days_in_month(year, month),
            working_weekdays=sorted(weekdays),
            excluded_days=sorted(excluded) if excluded is not None else None,
            working_days=entries,
        )
