"""
Card and deck models for the flashcard viewer.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Side(IntEnum):
    """
    Which face of a card is currently turned up.
    """

    Front = 0
    Back = 1

    def flip(self) -> Side:
        """Return the opposite side."""
        return Side.Back if self is Side.Front else Side.Front


class Card(BaseModel):
    """
    A single front/back text pair.

    The texts are fixed once the card is built; only the visible side
    changes, through flip().
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    front_text: str = Field(
        ...,
        frozen=True,
        description="Text shown on the front (question) side.",
    )
    back_text: str = Field(
        ...,
        frozen=True,
        description="Text shown on the back (answer) side.",
    )
    visible_side: Side = Field(
        default=Side.Front,
        description="The side currently turned up.",
    )

    def flip(self) -> None:
        """Turn the card over."""
        self.visible_side = self.visible_side.flip()


class Deck(BaseModel):
    """
    Ordered collection of cards, fixed after it is built.

    Emptiness is not checked here; a Holder refuses an empty deck.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: Optional[str] = Field(
        default=None,
        description="Deck name, taken from the source file stem on ingestion.",
    )
    cards: Tuple[Card, ...] = Field(
        default_factory=tuple,
        description="The cards, in source order.",
    )

    def __len__(self) -> int:
        return len(self.cards)

    def __getitem__(self, index: int) -> Card:
        return self.cards[index]
