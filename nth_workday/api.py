"""
FastAPI REST API for the nth working day locator.
"""

import logging
from datetime import date
from typing import List, Optional, Union

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from nth_workday import __version__
from nth_workday.config.manager import ConfigManager
from nth_workday.core.errors import InvalidArgumentError, WorkingDayNotFoundError
from nth_workday.core.locator import WorkingDayLocator
from nth_workday.core.weekday_parser import WEEKDAY_ALIASES, parse_excluded_days, parse_weekdays
from nth_workday.data.schemas import Weekday

logger = logging.getLogger(__name__)

config_manager = ConfigManager()
config = config_manager.load_config()

locator = WorkingDayLocator(
    working_weekdays=config.working_weekdays,
    excluded_days=config.excluded_days,
)


class LocateRequest(BaseModel):
    """Request model for locating a working day."""

    nth: int = Field(..., description="Position of the working day (1-31)")
    month: int = Field(..., description="Month (1-12)")
    year: int = Field(..., description="Year (1-9999)")
    weekdays: Optional[List[Union[int, str]]] = Field(
        None, description="Working weekdays as names or numbers 0-6 (Sunday=0)"
    )
    exclude: Optional[List[int]] = Field(None, description="Days of month to skip")


class LocateResponse(BaseModel):
    """Response model for a located working day."""

    nth: int
    month: int
    month_name: str
    year: int
    date: date
    weekday: str
    working_weekdays: List[str]
    excluded_days: Optional[List[int]]
    working_days_in_month: int


class WorkingDayResponse(BaseModel):
    """A working day and its position."""

    position: int
    date: date
    weekday: str


class MonthResponse(BaseModel):
    """All working days of a month."""

    month: int
    month_name: str
    year: int
    days_in_month: int
    working_weekdays: List[str]
    excluded_days: Optional[List[int]]
    working_days: List[WorkingDayResponse]


class WeekdayInfo(BaseModel):
    """Accepted identifiers for a weekday."""

    number: int
    name: str
    aliases: List[str]


app = FastAPI(
    title="Nth Workday API",
    description="Find the nth working day of a month",
    version=__version__,
)


def _parse_rules(weekdays, exclude):
    try:
        working_weekdays = parse_weekdays(weekdays) if weekdays is not None else None
        excluded_days = parse_excluded_days(exclude)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return working_weekdays, excluded_days


@app.get("/")
async def root():
    """API root endpoint with basic info."""
    return {
        "name": "Nth Workday API",
        "version": __version__,
        "endpoints": {
            "POST /locate": "Find the nth working day of a month",
            "GET /working-days/{year}/{month}": "List all working days of a month",
            "GET /weekdays": "List accepted weekday identifiers",
        },
    }


@app.post("/locate", response_model=LocateResponse)
async def locate_working_day(request: LocateRequest):
    """
    Find the nth working day of a month.

    Weekdays default to the configured working week (Monday-Friday unless
    changed). Exclusions name days of month that never count.
    """
    working_weekdays, excluded_days = _parse_rules(request.weekdays, request.exclude)

    try:
        result = locator.locate_simple(
            request.nth, request.month, request.year, working_weekdays, excluded_days
        )
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except WorkingDayNotFoundError as e:
        logger.info("No match: %s", e)
        raise HTTPException(status_code=404, detail=str(e))

    return LocateResponse(
        nth=result.nth,
        month=result.month,
        month_name=result.month_name,
        year=result.year,
        date=result.working_date,
        weekday=result.weekday.label,
        working_weekdays=[w.label for w in result.working_weekdays],
        excluded_days=result.excluded_days,
        working_days_in_month=result.working_days_in_month,
    )


@app.get("/working-days/{year}/{month}", response_model=MonthResponse)
async def list_working_days(
    year: int,
    month: int,
    weekdays: Optional[str] = Query(None, description="e.g. mon-fri or 1,2,3"),
    exclude: Optional[str] = Query(None, description="e.g. 1,25"),
):
    """
    List all working days of a month.

    Args:
        year: Year (1-9999)
        month: Month (1-12)
    """
    working_weekdays, excluded_days = _parse_rules(weekdays, exclude)

    try:
        month_days = locator.working_days(month, year, working_weekdays, excluded_days)
    except InvalidArgumentError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return MonthResponse(
        month=month_days.month,
        month_name=month_days.month_name,
        year=month_days.year,
        days_in_month=month_days.days_in_month,
        working_weekdays=[w.label for w in month_days.working_weekdays],
        excluded_days=month_days.excluded_days,
        working_days=[
            WorkingDayResponse(
                position=entry.position,
                date=entry.working_date,
                weekday=entry.weekday.label,
            )
            for entry in month_days.working_days
        ],
    )


@app.get("/weekdays", response_model=List[WeekdayInfo])
async def list_weekdays():
    """List weekday numbers, names and accepted aliases."""
    return [
        WeekdayInfo(
            number=weekday.value,
            name=weekday.label,
            aliases=sorted(alias for alias, value in WEEKDAY_ALIASES.items() if value == weekday),
        )
        for weekday in Weekday
    ]


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}
