"""
CLI entry point for flipdeck.
"""

# Standard library imports
import logging
from pathlib import Path

# Third-party imports
import typer
from rich.console import Console
from rich.markup import escape

# Local application imports
from flipdeck.constants import DEFAULT_DELIMITER, DEFAULT_WRAP_WIDTH
from flipdeck.exceptions import DeckLoadError
from flipdeck.cli._view_logic import view_logic


console = Console()

app = typer.Typer(
    name="flipdeck",
    help="Flipdeck: step through a CSV deck of flashcards.",
    add_completion=False,
    rich_markup_mode="markdown",
)


def _configure_logging(verbose: bool) -> None:
    """Send log records to stderr; DEBUG when verbose, WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@app.command()
def view(
    source: Path = typer.Argument(  # noqa: B008
        ...,
        help="CSV file with 'front' and 'back' columns.",
    ),
    wrap_width: int = typer.Option(
        DEFAULT_WRAP_WIDTH,
        "--wrap-width",
        "-w",
        min=1,
        envvar="FLIPDECK_WRAP_WIDTH",
        help="Maximum line width card text is wrapped to.",
    ),
    delimiter: str = typer.Option(
        DEFAULT_DELIMITER,
        "--delimiter",
        help="Field delimiter used in the CSV file.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging."
    ),
):
    """
    Load a flashcard deck from a CSV file and browse it one card at a time.

    The file must have a header row with `front` and `back` columns and at
    least one data row. Any problem reading it aborts before a card is shown.
    """
    _configure_logging(verbose)
    try:
        view_logic(
            source_file=source,
            wrap_width=wrap_width,
            delimiter=delimiter,
        )
    except DeckLoadError as e:
        console.print(
            f"[bold red]Error loading deck:[/bold red] {escape(str(e))}"
        )
        raise typer.Exit(code=1) from e


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main():
    """
    Run the CLI application.

    If an unexpected exception occurs, print a bold red error message to the console and exit the process with status code 1.
    """
    try:
        app()
    except Exception as e:
        console.print(f"[bold red]UNEXPECTED ERROR: {e}[/bold red]")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
