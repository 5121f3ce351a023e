"""
Exceptions raised by the working day locator.
"""

from typing import Iterable, Optional

from nth_workday.core.ordinals import ordinal
from nth_workday.data.schemas import Weekday, month_label


class NthWorkdayError(Exception):
    """Base class for locator errors."""


class InvalidArgumentError(NthWorkdayError, ValueError):
    """An input is outside its accepted range or cannot be parsed."""


class WorkingDayNotFoundError(NthWorkdayError, LookupError):
    """No day in the month satisfies the requested position."""

    def __init__(
        self,
        nth: int,
        working_weekdays: Iterable[Weekday],
        month: int,
        year: int,
        excluded_days: Optional[Iterable[int]] = None,
    ):
        self.nth = nth
        self.working_weekdays = sorted(Weekday(w) for w in working_weekdays)
        self.month = month
        self.year = year
        self.excluded_days = sorted(excluded_days) if excluded_days is not None else None
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        weekdays = ", ".join(w.label for w in self.working_weekdays) or "none"
        message = (
            f"There isn't a {ordinal(self.nth)} working day ({weekdays}) "
            f"in {month_label(self.month)} {self.year}"
        )
        if self.excluded_days is not None:
            excluded = ", ".join(str(d) for d in self.excluded_days)
            message += f", excluding day(s) of month: {excluded}"
        return message + "."
