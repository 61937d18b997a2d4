"""
Defines the configuration and error dataclasses for CSV deck processing.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .constants import (
    BACK_COLUMN,
    DEFAULT_DELIMITER,
    DEFAULT_WRAP_WIDTH,
    FRONT_COLUMN,
)


# --- Custom Error Reporting Dataclass ---
@dataclass
class CSVProcessingError(Exception):
    file_path: Path
    message: str
    row_index: Optional[int] = None
    column: Optional[str] = None

    def __str__(self) -> str:
        """
        Format the error into a contextual, human-readable string.

        The result includes the source file name and, when present, the row index
        and column name, followed by the underlying error message.
        """
        context_parts = [f"File: {self.file_path.name}"]
        if self.row_index is not None:
            context_parts.append(f"Row: {self.row_index}")
        if self.column:
            context_parts.append(f"Column: '{self.column}'")
        return f"{' | '.join(context_parts)} | Error: {self.message}"


@dataclass
class CSVProcessorConfig:
    """Configuration for loading a deck from a CSV file."""

    source_file: Path
    wrap_width: int = DEFAULT_WRAP_WIDTH
    front_column: str = FRONT_COLUMN
    back_column: str = BACK_COLUMN
    delimiter: str = DEFAULT_DELIMITER

    def __post_init__(self) -> None:
        if self.wrap_width < 1:
            raise ValueError(
                f"wrap_width must be at least 1, got {self.wrap_width}."
            )
