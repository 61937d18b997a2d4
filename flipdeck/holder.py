"""
This module defines the Holder class, the cursor that tracks which card of a
deck is shown and what text is currently on display.
"""

import logging

from .models import Card, Deck, Side

logger = logging.getLogger(__name__)


class Holder:
    """
    Navigation and flip state machine over a single deck.

    `index` is the only source of truth for position. `text` is a cache
    recomputed on every transition and is what the display reads:

    - moving to another card (next/prev) always shows its front text,
      whatever side that card was left on;
    - flip() records the text of the side that was up *before* turning
      the card, so the displayed text trails the card's side by one flip.
    """

    def __init__(self, deck: Deck):
        """
        Take ownership of a copy of `deck` and show the front of its first card.

        Parameters:
            deck (Deck): The deck to step through. Must contain at least one card.

        Raises:
            IndexError: If the deck is empty.
        """
        self._deck = deck.model_copy(deep=True)
        self.text: str = self._deck[0].front_text
        self._index = 0
        logger.debug(f"Holder created over {len(self._deck)} cards.")

    def __len__(self) -> int:
        return len(self._deck)

    @property
    def index(self) -> int:
        """Position of the current card."""
        return self._index

    @property
    def current_card(self) -> Card:
        """The card at the current position."""
        return self._deck[self._index]

    def next(self) -> None:
        """Step forward, wrapping from the last card to the first."""
        if self._index < len(self._deck) - 1:
            self._index += 1
        else:
            self._index = 0
        self.text = self._deck[self._index].front_text
        logger.debug(f"Moved to card {self._index}.")

    def prev(self) -> None:
        """Step backward, wrapping from the first card to the last."""
        if self._index > 0:
            self._index -= 1
        else:
            self._index = len(self._deck) - 1
        self.text = self._deck[self._index].front_text
        logger.debug(f"Moved to card {self._index}.")

    def flip(self) -> None:
        """Show the side currently up, then turn the card over."""
        card = self._deck[self._index]
        if card.visible_side is Side.Front:
            self.text = card.front_text
        else:
            self.text = card.back_text
        card.flip()
        logger.debug(
            f"Flipped card {self._index}; "
            f"visible side is now {card.visible_side.name}."
        )
