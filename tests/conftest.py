import pytest
from pathlib import Path
from typing import Callable

from flipdeck.models import Card, Deck
from flipdeck.holder import Holder


# --- Deck Fixtures ---
@pytest.fixture
def two_card_deck() -> Deck:
    """
    Provide the two-card deck used throughout the navigation tests.

    Returns:
        Deck: Cards ("Front 1", "Back 1") and ("Front 2", "Back 2"), in that order.
    """
    return Deck(
        cards=[
            Card(front_text="Front 1", back_text="Back 1"),
            Card(front_text="Front 2", back_text="Back 2"),
        ]
    )


@pytest.fixture
def deck_factory() -> Callable[[int], Deck]:
    """Build a deck of `n` cards with texts "Front i" / "Back i"."""

    def _make(n: int) -> Deck:
        return Deck(
            cards=[
                Card(front_text=f"Front {i}", back_text=f"Back {i}")
                for i in range(n)
            ]
        )

    return _make


@pytest.fixture
def holder(two_card_deck: Deck) -> Holder:
    return Holder(two_card_deck)


# --- CSV Fixtures ---
@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[str, str], Path]:
    """
    Return a helper that writes `content` to `tmp_path / filename` and returns the path.
    """

    def _write(content: str, filename: str = "deck.csv") -> Path:
        file_path = tmp_path / filename
        file_path.write_text(content, encoding="utf-8")
        return file_path

    return _write


@pytest.fixture
def valid_csv(write_csv) -> Path:
    return write_csv(
        "front,back\n"
        "Front 1,Back 1\n"
        "Front 2,Back 2\n"
    )
