"""
Parser turning human weekday and exclusion input into canonical sets.
"""

import re
from typing import FrozenSet, Iterable, List, Optional, Set, Union

from nth_workday.core.errors import InvalidArgumentError
from nth_workday.data.schemas import Weekday

WeekdayInput = Union[Weekday, int, str]

WEEKDAY_ALIASES = {
    "sun": Weekday.SUNDAY,
    "mon": Weekday.MONDAY,
    "tue": Weekday.TUESDAY,
    "tues": Weekday.TUESDAY,
    "wed": Weekday.WEDNESDAY,
    "thu": Weekday.THURSDAY,
    "thur": Weekday.THURSDAY,
    "thurs": Weekday.THURSDAY,
    "fri": Weekday.FRIDAY,
    "sat": Weekday.SATURDAY,
}

_TOKEN_SPLIT = re.compile(r"[,\s]+")


def parse_weekday(value: WeekdayInput) -> Weekday:
    """
    Convert a single weekday identifier to a Weekday.

    Accepts Weekday members, integers 0-6 (Sunday=0), numeric strings,
    full English names and common abbreviations, case-insensitive.

    Raises:
        InvalidArgumentError: If the value is not a recognised weekday.
    """
    if isinstance(value, Weekday):
        return value

    if isinstance(value, bool):
        raise InvalidArgumentError(f"invalid weekday: {value!r}")

    if isinstance(value, int):
        if 0 <= value <= 6:
            return Weekday(value)
        raise InvalidArgumentError(f"invalid weekday: {value} (use 0-6, Sunday=0)")

    if isinstance(value, str):
        token = value.strip().lower()
        if token.isdigit():
            return parse_weekday(int(token))
        if token.upper() in Weekday.__members__:
            return Weekday[token.upper()]
        if token in WEEKDAY_ALIASES:
            return WEEKDAY_ALIASES[token]

    raise InvalidArgumentError(f"invalid weekday: {value!r}")


def _expand_range(start: Weekday, end: Weekday) -> List[Weekday]:
    """Inclusive range of weekdays, wrapping past Saturday if needed."""
    span = (end - start) % 7
    return [Weekday((start + offset) % 7) for offset in range(span + 1)]


def _parse_token(token: str) -> List[Weekday]:
    if "-" in token:
        start, _, end = token.partition("-")
        if not start or not end:
            raise InvalidArgumentError(f"invalid weekday range: {token!r}")
        return _expand_range(parse_weekday(start), parse_weekday(end))
    return [parse_weekday(token)]


def parse_weekdays(values: Iterable[WeekdayInput]) -> FrozenSet[Weekday]:
    """
    Convert a collection of weekday identifiers to a set of Weekdays.

    Strings may hold several comma- or whitespace-separated identifiers and
    inclusive ranges such as ``mon-fri`` or ``1-5``.

    Args:
        values: Identifiers to convert. A bare string is treated as one value.

    Returns:
        Frozen set of Weekday values; duplicates collapse.
    """
    if isinstance(values, (str, int)):
        values = [values]

    result: Set[Weekday] = set()
    for value in values:
        if isinstance(value, str):
            for token in _TOKEN_SPLIT.split(value.strip()):
                if token:
                    result.update(_parse_token(token))
        else:
            result.add(parse_weekday(value))
    return frozenset(result)


def parse_excluded_days(values: Optional[Iterable[Union[int, str]]]) -> Optional[Set[int]]:
    """
    Convert day-of-month exclusions to a set of integers.

    Values are not range-checked: a day the month does not have is never
    matched by the locator anyway.

    Returns:
        Set of integers, or None if values is None.

    Raises:
        InvalidArgumentError: If a value is not an integer.
    """
    if values is None:
        return None
    if isinstance(values, (str, int)):
        values = [values]

    result: Set[int] = set()
    for value in values:
        if isinstance(value, bool):
            raise InvalidArgumentError(f"invalid day of month: {value!r}")
        if isinstance(value, int):
            result.add(value)
            continue
        for token in _TOKEN_SPLIT.split(str(value).strip()):
            if not token:
                continue
            try:
                result.add(int(token))
            except ValueError:
                raise InvalidArgumentError(f"invalid day of month: {token!r}")
    return result
