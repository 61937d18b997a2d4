"""Flipdeck - A lightweight flashcard viewer for CSV decks."""

from .models import Card, Deck, Side
from .holder import Holder
from .constants import DEFAULT_WRAP_WIDTH
from .csv_models import CSVProcessingError, CSVProcessorConfig
from .exceptions import DeckLoadError
from .parser import CSVProcessor, load_deck
from .text_wrap import wrap_text
from .viewer import Action, ViewerSession

__all__ = [
    "Card",
    "Deck",
    "Side",
    "Holder",
    "DEFAULT_WRAP_WIDTH",
    "CSVProcessingError",
    "CSVProcessorConfig",
    "DeckLoadError",
    "CSVProcessor",
    "load_deck",
    "wrap_text",
    "Action",
    "ViewerSession",
]
