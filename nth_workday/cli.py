"""
CLI interface for the nth working day locator.
"""

import logging
import sys
from typing import Optional, Sequence

import click

from nth_workday import __version__
from nth_workday.config.manager import ConfigManager
from nth_workday.core.errors import InvalidArgumentError, WorkingDayNotFoundError
from nth_workday.core.locator import WorkingDayLocator
from nth_workday.core.weekday_parser import parse_excluded_days, parse_weekdays
from nth_workday.data.schemas import Config
from nth_workday.output.exporter import ResultExporter
from nth_workday.output.formatter import ConsoleFormatter

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def load_settings(config_path: Optional[str], verbose: bool = False) -> Config:
    """Load configuration and apply its log level."""
    cfg = ConfigManager(config_path).load_config()
    logging.getLogger().setLevel(logging.DEBUG if verbose else cfg.log_level)
    return cfg


def build_locator(cfg: Config, weekdays: Sequence[str], exclude: Sequence[str]) -> WorkingDayLocator:
    """
    Create a locator from config defaults and command line overrides.

    Raises:
        InvalidArgumentError: If a weekday or excluded day cannot be parsed.
    """
    working_weekdays = parse_weekdays(weekdays) if weekdays else cfg.working_weekdays
    excluded_days = parse_excluded_days(exclude) if exclude else cfg.excluded_days
    return WorkingDayLocator(working_weekdays=working_weekdays, excluded_days=excluded_days)


weekdays_option = click.option(
    "--weekdays", "-w",
    multiple=True,
    help="Working weekdays: names, abbreviations, 0-6 (Sunday=0) or ranges like mon-fri. Repeatable.",
)
exclude_option = click.option(
    "--exclude", "-x",
    multiple=True,
    help="Day(s) of month to skip, e.g. -x 1 -x 25 or -x 1,25. Repeatable.",
)
config_option = click.option(
    "--config", "-c",
    type=click.Path(exists=True),
    help="Path to config file (optional)",
)
verbose_option = click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Log every counted working day",
)


@click.group()
@click.version_option(version=__version__, prog_name="nth-workday")
def main():
    """Nth Workday - Find the nth working day of a month."""
    pass


@main.command()
@click.argument("nth", type=int)
@click.argument("month", type=int)
@click.argument("year", type=int)
@weekdays_option
@exclude_option
@click.option(
    "--output", "-o",
    type=click.Path(),
    help="Output file path (optional)",
)
@click.option(
    "--format", "-f",
    type=click.Choice(["json", "csv", "both", "console"]),
    default=None,
    help="Output format (default: from config, console)",
)
@config_option
@verbose_option
def locate(nth, month, year, weekdays, exclude, output, format, config, verbose):
    """Find the NTH working day of MONTH in YEAR.

    Example:
        nth-workday locate 10 1 2020 -w mon-thu -x 1
    """
    formatter = ConsoleFormatter()

    try:
        cfg = load_settings(config, verbose)
        locator = build_locator(cfg, weekdays, exclude)
        result = locator.locate_simple(nth, month, year)

        output_format = format or cfg.output_format

        if output_format in ("console", "both"):
            formatter.print_result(result)

        if output_format in ("json", "csv", "both"):
            exporter = ResultExporter(output_directory=cfg.output_directory)

            if output_format == "json":
                path = exporter.export_json(result, output)
                formatter.print_success(f"Result saved to {path}")
            elif output_format == "csv":
                path = exporter.export_csv(result, output)
                formatter.print_success(f"Result saved to {path}")
            else:  # both
                json_path, csv_path = exporter.export_both(result)
                formatter.print_success(f"Results saved to:\n  - {json_path}\n  - {csv_path}")

    except InvalidArgumentError as e:
        formatter.print_error(str(e))
        sys.exit(2)
    except WorkingDayNotFoundError as e:
        formatter.print_error(str(e))
        sys.exit(1)
    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)
    except Exception as e:
        formatter.print_error(f"Unexpected error: {e}")
        sys.exit(1)


@main.command()
@click.argument("month", type=int)
@click.argument("year", type=int)
@weekdays_option
@exclude_option
@config_option
@verbose_option
def month(month, year, weekdays, exclude, config, verbose):
    """List every working day of MONTH in YEAR."""
    formatter = ConsoleFormatter()

    try:
        cfg = load_settings(config, verbose)
        locator = build_locator(cfg, weekdays, exclude)
        formatter.print_month(locator.working_days(month, year))

    except InvalidArgumentError as e:
        formatter.print_error(str(e))
        sys.exit(2)
    except ValueError as e:
        formatter.print_error(str(e))
        sys.exit(1)
    except Exception as e:
        formatter.print_error(f"Unexpected error: {e}")
        sys.exit(1)


@main.command()
def weekdays():
    """List accepted weekday identifiers."""
    formatter = ConsoleFormatter()
    formatter.print_weekdays()


@main.command()
@click.option(
    "--host", "-h",
    default=None,
    help="Host to bind to (default: from config or 0.0.0.0)",
)
@click.option(
    "--port", "-p",
    type=int,
    default=None,
    help="Port to bind to (default: from config or 8000)",
)
@config_option
def serve(host, port, config):
    """Start the FastAPI server."""
    formatter = ConsoleFormatter()

    try:
        import uvicorn

        cfg = load_settings(config)

        api_host = host or cfg.api_host
        api_port = port or cfg.api_port

        formatter.console.print(f"Starting API server at http://{api_host}:{api_port}")
        formatter.console.print("Press Ctrl+C to stop")
        formatter.console.print()

        uvicorn.run(
            "nth_workday.api:app",
            host=api_host,
            port=api_port,
            reload=False,
        )

    except ImportError:
        formatter.print_error("uvicorn is required for the API server. Install it with: pip install uvicorn")
        sys.exit(1)
    except Exception as e:
        formatter.print_error(f"Error starting server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
