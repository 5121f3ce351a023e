"""
Console output formatting using Rich.
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from nth_workday.core.ordinals import ordinal
from nth_workday.core.weekday_parser import WEEKDAY_ALIASES
from nth_workday.data.schemas import MonthWorkingDays, NthWorkingDayResult, Weekday


def _weekday_list(weekdays) -> str:
    return ", ".join(w.label for w in weekdays) or "none"


class ConsoleFormatter:
    """Formats output for console display using Rich."""

    def __init__(self, console: Optional[Console] = None):
        """Initialize the console formatter."""
        self.console = console or Console()

    def print_result(self, result: NthWorkingDayResult) -> None:
        """
        Print a located working day.

        Args:
            result: NthWorkingDayResult to display.
        """
        self.console.print()
        self.console.rule("[bold blue]Working Day Lookup[/bold blue]")
        self.console.print()

        query_table = Table(show_header=False, box=None)
        query_table.add_column("Label", style="cyan", width=20)
        query_table.add_column("Value", style="white")

        query_table.add_row("Month:", f"{result.month_name} {result.year}")
        query_table.add_row("Position:", ordinal(result.nth))
        query_table.add_row("Working Weekdays:", _weekday_list(result.working_weekdays))
        if result.excluded_days is not None:
            query_table.add_row(
                "Excluded Days:",
                ", ".join(str(d) for d in result.excluded_days) or "none",
            )

        self.console.print(Panel(query_table, title="[bold]Query[/bold]"))

        result_table = Table(show_header=False, box=None)
        result_table.add_column("Label", style="cyan", width=20)
        result_table.add_column("Value", style="white")

        result_table.add_row(
            Text("Date:", style="bold green"),
            Text(result.working_date.isoformat(), style="bold green"),
        )
        result_table.add_row("Weekday:", result.weekday.label)
        result_table.add_row("Working Days in Month:", str(result.working_days_in_month))

        self.console.print(Panel(result_table, title="[bold]Result[/bold]"))
        self.console.print()

    def print_month(self, month_days: MonthWorkingDays) -> None:
        """
        Print every working day of a month.

        Args:
            month_days: MonthWorkingDays to display.
        """
        self.console.print()
        self.console.rule(
            f"[bold blue]Working Days - {month_days.month_name} {month_days.year}[/bold blue]"
        )
        self.console.print()
        self.console.print(f"[dim]Working weekdays:[/dim] {_weekday_list(month_days.working_weekdays)}")
        if month_days.excluded_days is not None:
            excluded = ", ".join(str(d) for d in month_days.excluded_days) or "none"
            self.console.print(f"[dim]Excluded days:[/dim] {excluded}")
        self.console.print()

        if not month_days.working_days:
            self.console.print("[dim]No working days in this month.[/dim]")
            self.console.print()
            return

        table = Table(title=f"[bold]{len(month_days.working_days)} of {month_days.days_in_month} days[/bold]")
        table.add_column("#", style="cyan", justify="right", width=6)
        table.add_column("Date", style="white", width=12)
        table.add_column("Day", style="dim", width=12)

        for entry in month_days.working_days:
            table.add_row(
                ordinal(entry.position),
                entry.working_date.isoformat(),
                entry.weekday.label,
            )

        self.console.print(table)
        self.console.print()

    def print_weekdays(self) -> None:
        """Print the accepted weekday identifiers."""
        self.console.print()
        self.console.rule("[bold blue]Weekday Identifiers[/bold blue]")
        self.console.print()

        table = Table()
        table.add_column("Number", style="cyan", width=8)
        table.add_column("Name", style="white")
        table.add_column("Aliases", style="dim")

        for weekday in Weekday:
            aliases = sorted(alias for alias, value in WEEKDAY_ALIASES.items() if value == weekday)
            table.add_row(str(weekday.value), weekday.label, ", ".join(aliases))

        self.console.print(table)
        self.console.print("[dim]Ranges such as 'mon-fri' or '1-5' are accepted.[/dim]")
        self.console.print()

    def print_error(self, message: str) -> None:
        """
        Print an error message.

        Args:
            message: Error message to display.
        """
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True)

    def print_success(self, message: str) -> None:
        """
        Print a success message.

        Args:
            message: Success message to display.
        """
        self.console.print(f"[bold green]Success:[/bold green] {message}")
