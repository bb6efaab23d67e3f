"""Command-line interface for libranet.

Built with Typer for commands and Rich for beautiful output.
"""

from datetime import datetime, timezone
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .config import get_config
from .errors import LendingError
from .lending import ItemResponse
from .utils import format_duration, parse_duration, parse_id

# Create the main app
app = typer.Typer(
    name="libranet",
    help="Lend books, audiobooks and e-magazines from memory.",
    no_args_is_help=True,
)

# Rich console for pretty output
console = Console()


# ============================================================================
# Helper Functions
# ============================================================================


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[dim]{message}[/dim]")


def format_item_table(items: list[ItemResponse], title: str = "Items") -> Table:
    """Create a rich table for displaying item snapshots."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Kind")
    table.add_column("Title", no_wrap=False, max_width=40)
    table.add_column("Author", style="green", max_width=25)
    table.add_column("State", style="yellow")
    table.add_column("Due", justify="center")
    table.add_column("Details")

    for item in items:
        if item.page_count is not None:
            details = f"{item.page_count} pages"
        elif item.playback_duration is not None:
            details = format_duration(item.playback_duration)
        elif item.issue_number is not None:
            details = f"issue {item.issue_number}" + (" (archived)" if item.archived else "")
        else:
            details = "-"

        table.add_row(
            str(item.id),
            item.kind.value,
            item.title,
            item.author,
            item.state.value,
            item.borrow_end_time.strftime("%Y-%m-%d %H:%M") if item.borrow_end_time else "-",
            details,
        )

    return table


def _load_config():
    config = get_config()
    errors = config.validate()
    if errors:
        for message in errors:
            print_error(message)
        raise typer.Exit(1)
    return config


# ============================================================================
# Commands
# ============================================================================


@app.command()
def demo() -> None:
    """Run the sample lending session.

    Borrows and returns a book, plays a borrowed audiobook and archives an
    e-magazine issue, then shows the final state of each item.
    """
    from .demo import run_demo

    config = _load_config()
    items = run_demo(config)
    console.print()
    console.print(format_item_table([item.to_response() for item in items], title="Sample Items"))


@app.command("parse-id")
def parse_id_command(
    text: str = typer.Argument(..., help="Item ID text"),
) -> None:
    """Parse an item ID."""
    try:
        item_id = parse_id(text)
    except LendingError as e:
        print_error(str(e))
        raise typer.Exit(1)

    console.print(str(item_id))


@app.command("check-duration")
def check_duration(
    text: str = typer.Argument(..., help="ISO-8601 duration, e.g. PT72H"),
) -> None:
    """Check a borrow duration and show it in canonical form."""
    try:
        duration = parse_duration(text)
    except LendingError as e:
        print_error(str(e))
        raise typer.Exit(1)

    hours = duration.total_seconds() / 3600
    print_success(f"{format_duration(duration)} ({hours:g} hours)")


@app.command("loan-preview")
def loan_preview(
    duration: Optional[str] = typer.Argument(
        None, help="ISO-8601 borrow duration (default from LIBRANET_DEFAULT_LOAN_DURATION)"
    ),
    start: Optional[str] = typer.Option(
        None, "--start", "-s", help="Loan start as ISO datetime (default now, UTC)"
    ),
) -> None:
    """Show when a loan would end."""
    if duration is None:
        duration = _load_config().default_loan_duration
        print_info(f"Using default loan duration {duration}")

    if start:
        try:
            start_time = datetime.fromisoformat(start)
        except ValueError:
            print_error(f"Invalid start time: {start}")
            raise typer.Exit(1)
        if start_time.tzinfo is None:
            start_time = start_time.replace(tzinfo=timezone.utc)
    else:
        start_time = datetime.now(timezone.utc)

    try:
        end_time = start_time + parse_duration(duration)
    except LendingError as e:
        print_error(str(e))
        raise typer.Exit(1)
    except OverflowError:
        print_error(f"Duration out of range: {duration}")
        raise typer.Exit(1)

    if end_time <= start_time:
        print_warning("Loan is already lapsed when it starts")

    console.print(f"Loan of {format_duration(end_time - start_time)}")
    console.print(f"  starts: {start_time.isoformat()}")
    console.print(f"  ends:   {end_time.isoformat()}")


@app.command()
def version() -> None:
    """Show version information."""
    from . import __version__

    console.print(f"libranet version {__version__}")


# ============================================================================
# Main Entry Point
# ============================================================================


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
