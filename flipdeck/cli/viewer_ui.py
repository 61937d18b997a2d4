"""
Command-line interface for stepping through a deck of flashcards.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from flipdeck.constants import KEY_BINDINGS, QUIT_KEYS
from flipdeck.viewer import Action, ViewerSession

logger = logging.getLogger(__name__)
console = Console()

HELP_TEXT = (
    "[dim]n: next  p: previous  f or Enter: flip  q: quit[/dim]"
)


def _display_text(session: ViewerSession) -> None:
    """Render the session's current text in a panel with a card counter."""
    position, total = session.position
    console.print(
        Panel(
            Text(session.text, justify="center"),
            title=f"Card {position} of {total}",
            border_style="green",
        )
    )


def _read_action() -> Optional[Action]:
    """
    Prompt until the user enters a known command.

    Returns:
        Optional[Action]: The trigger to apply, or None when the user asks to quit or input ends.
    """
    while True:
        try:
            command = console.input("[bold]> [/bold]")
        except (EOFError, KeyboardInterrupt):
            logger.debug("Input closed; leaving viewer.")
            return None

        key = command.strip().lower()
        if key in QUIT_KEYS:
            return None
        action_name = KEY_BINDINGS.get(key)
        if action_name is not None:
            return Action(action_name)
        console.print(
            f"[bold red]Unknown command: {escape(repr(key))}.[/bold red]"
        )
        console.print(HELP_TEXT)


def start_viewer_flow(session: ViewerSession) -> None:
    """
    Run the interactive viewing loop until the user quits.

    Args:
        session: The ViewerSession owning the deck's Holder.
    """
    console.print("[bold cyan]Starting flashcard viewer...[/bold cyan]")
    console.print(HELP_TEXT)
    _display_text(session)

    while (action := _read_action()) is not None:
        session.handle(action)
        _display_text(session)

    console.print("[bold cyan]Viewer closed.[/bold cyan]")
