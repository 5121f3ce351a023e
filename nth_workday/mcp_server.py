"""
MCP Server for the nth working day locator.

Exposes the locator to MCP clients such as Claude Desktop.

Supports two transport modes:
- stdio: For local desktop integration
- sse: For HTTP-based integration (Docker, remote servers)
"""

import argparse
import logging
import os
from typing import List, Optional, Union

from mcp.server.fastmcp import FastMCP

from nth_workday.config.manager import ConfigManager
from nth_workday.core.errors import NthWorkdayError
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


def locate_working_day(
    nth: int,
    month: int,
    year: int,
    weekdays: Optional[List[Union[int, str]]] = None,
    exclude: Optional[List[int]] = None,
) -> dict:
    """
    Find the nth working day of a month.

    A working day is a day whose weekday is one of the working weekdays
    (Monday-Friday by default) and whose day of month is not excluded.

    Args:
        nth: Position of the working day to find (1-31)
        month: Month number (1-12)
        year: Year (1-9999)
        weekdays: Working weekdays as names ("monday", "tue") or numbers
                  0-6 with Sunday=0; ranges like "mon-thu" are accepted
        exclude: Days of month to skip, e.g. public holidays [1, 6]

    Returns:
        Dictionary with the date (YYYY-MM-DD), its weekday and the query echo,
        or {"error": message} if no such day exists.

    Examples:
        10th working day of January 2020:
        >>> locate_working_day(10, 1, 2020)

        Same, with a four day week and New Year's Day excluded:
        >>> locate_working_day(10, 1, 2020, weekdays=["mon-thu"], exclude=[1])
    """
    try:
        working_weekdays = parse_weekdays(weekdays) if weekdays is not None else None
        excluded_days = parse_excluded_days(exclude)
        result = locator.locate_simple(nth, month, year, working_weekdays, excluded_days)
    except NthWorkdayError as e:
        return {"error": str(e)}

    return {
        "date": result.working_date.isoformat(),
        "weekday": result.weekday.label,
        "nth": result.nth,
        "month": result.month,
        "month_name": result.month_name,
        "year": result.year,
        "working_weekdays": [w.label for w in result.working_weekdays],
        "excluded_days": result.excluded_days,
        "working_days_in_month": result.working_days_in_month,
    }


def list_working_days(
    month: int,
    year: int,
    weekdays: Optional[List[Union[int, str]]] = None,
    exclude: Optional[List[int]] = None,
) -> dict:
    """
    List every working day of a month with its position.

    Args:
        month: Month number (1-12)
        year: Year (1-9999)
        weekdays: Working weekdays, same format as locate_working_day
        exclude: Days of month to skip

    Returns:
        Dictionary with the month, the number of working days and a list
        of {position, date, weekday} entries.
    """
    try:
        working_weekdays = parse_weekdays(weekdays) if weekdays is not None else None
        excluded_days = parse_excluded_days(exclude)
        month_days = locator.working_days(month, year, working_weekdays, excluded_days)
    except NthWorkdayError as e:
        return {"error": str(e)}

    return {
        "month": month_days.month,
        "month_name": month_days.month_name,
        "year": month_days.year,
        "days_in_month": month_days.days_in_month,
        "count": len(month_days.working_days),
        "working_days": [
            {
                "position": entry.position,
                "date": entry.working_date.isoformat(),
                "weekday": entry.weekday.label,
            }
            for entry in month_days.working_days
        ],
    }


def list_weekdays() -> dict:
    """
    List weekday identifiers accepted by the other tools.

    Returns:
        Dictionary with number (Sunday=0), name and aliases per weekday.
    """
    return {
        "weekdays": [
            {
                "number": weekday.value,
                "name": weekday.label,
                "aliases": sorted(a for a, w in WEEKDAY_ALIASES.items() if w == weekday),
            }
            for weekday in Weekday
        ],
    }


def create_mcp_server(host: str = "127.0.0.1", port: int = 8000) -> FastMCP:
    """Create and configure the MCP server with tools."""
    mcp = FastMCP("Nth Workday", host=host, port=port)

    mcp.tool()(locate_working_day)
    mcp.tool()(list_working_days)
    mcp.tool()(list_weekdays)

    return mcp


def main():
    """Run the MCP server with configurable transport.

    Transport can be set via:
    - Command line: --transport sse --port 8080
    - Environment: MCP_TRANSPORT=sse MCP_PORT=8080 MCP_HOST=0.0.0.0
    """
    parser = argparse.ArgumentParser(description="Nth Workday MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=os.environ.get("MCP_TRANSPORT", "stdio"),
        help="Transport mode: stdio (default) or sse for HTTP",
    )
    parser.add_argument(
        "--host",
        default=os.environ.get("MCP_HOST", os.environ.get("FASTMCP_HOST", "0.0.0.0")),
        help="Host to bind to (SSE mode only, default: 0.0.0.0)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("MCP_PORT", os.environ.get("FASTMCP_PORT", "8080"))),
        help="Port to listen on (SSE mode only, default: 8080)",
    )

    args = parser.parse_args()

    mcp = create_mcp_server(host=args.host, port=args.port)
    logger.info("Starting MCP server (%s transport)", args.transport)

    if args.transport == "sse":
        mcp.run(transport="sse")
    else:
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
