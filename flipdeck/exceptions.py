from typing import Optional


class FlipdeckError(Exception):
    """Base exception for flashcard viewer errors."""

    def __init__(
        self, message: str, original_exception: Optional[Exception] = None
    ):
        super().__init__(message)
        self.original_exception = original_exception


class DeckLoadError(FlipdeckError):
    """Raised when a deck cannot be built from its source file."""

    pass
