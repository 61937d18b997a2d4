import logging
from typing import List

import pandas as pd

from .csv_models import CSVProcessingError, CSVProcessorConfig
from .exceptions import DeckLoadError
from .models import Card, Deck
from .text_wrap import wrap_text

logger = logging.getLogger(__name__)


class CSVProcessor:
    def __init__(self, config: CSVProcessorConfig):
        """
        Initialize the CSVProcessor with the provided configuration.

        Parameters:
            config (CSVProcessorConfig): Processor configuration controlling the source file, column names, delimiter and wrap width; stored on the instance.
        """
        self.config = config

    def process_file(self) -> Deck:
        """
        Read the configured CSV file and turn each row into a Card, in file order.

        Returns:
            Deck: A deck holding one card per data row, named after the file stem.

        Raises:
            CSVProcessingError: If the file is missing, unreadable or malformed, if the front or back column is absent, if a cell cannot be read, or if the file holds no data rows. No partial deck is ever returned.
        """
        file_path = self.config.source_file
        df = self._read_frame()

        for column in (self.config.front_column, self.config.back_column):
            if column not in df.columns:
                raise CSVProcessingError(
                    file_path,
                    f"Couldn't find column '{column}'.",
                    column=column,
                )

        if df.empty:
            raise CSVProcessingError(file_path, "File contains no cards.")

        cards: List[Card] = []
        for row_index in range(len(df)):
            front_text = self._read_cell(df, row_index, self.config.front_column)
            back_text = self._read_cell(df, row_index, self.config.back_column)
            cards.append(
                Card(
                    front_text=wrap_text(front_text, self.config.wrap_width),
                    back_text=wrap_text(back_text, self.config.wrap_width),
                )
            )

        return Deck(name=file_path.stem, cards=cards)

    def _read_frame(self) -> pd.DataFrame:
        """
        Load the whole source file into a DataFrame of strings.

        Empty fields are kept as empty strings; only fields missing from a short
        row come back as NaN.
        """
        file_path = self.config.source_file
        try:
            return pd.read_csv(
                file_path,
                sep=self.config.delimiter,
                dtype=str,
                keep_default_na=False,
            )
        except FileNotFoundError:
            raise CSVProcessingError(file_path, "File not found.") from None
        except pd.errors.EmptyDataError as e:
            raise CSVProcessingError(file_path, "File is empty.") from e
        except pd.errors.ParserError as e:
            raise CSVProcessingError(
                file_path, f"Invalid CSV syntax: {e}"
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            raise CSVProcessingError(
                file_path, f"Could not read file: {e}"
            ) from e

    def _read_cell(self, df: pd.DataFrame, row_index: int, column: str) -> str:
        """
        Return the text stored at `row_index` in `column`.

        Raises:
            CSVProcessingError: If the row does not exist or the value is missing.
        """
        try:
            value = df[column].iloc[row_index]
        except IndexError as e:
            raise CSVProcessingError(
                self.config.source_file,
                "Couldn't access data at the given index.",
                row_index=row_index,
                column=column,
            ) from e

        if pd.isna(value):
            raise CSVProcessingError(
                self.config.source_file,
                "Couldn't access data at the given index.",
                row_index=row_index,
                column=column,
            )
        return str(value)


def load_deck(config: CSVProcessorConfig) -> Deck:
    """
    Build a Deck from the CSV file named in `config`.

    Parameters:
        config (CSVProcessorConfig): Source file and processing options.

    Returns:
        Deck: The loaded, non-empty deck.

    Raises:
        DeckLoadError: If the file cannot be turned into a deck; the underlying CSVProcessingError is attached as `original_exception`.
    """
    logger.info("Loading deck from %s", config.source_file)
    processor = CSVProcessor(config)
    try:
        deck = processor.process_file()
    except CSVProcessingError as e:
        logger.error("Failed to load deck: %s", e)
        raise DeckLoadError(str(e), original_exception=e) from e

    logger.info(
        "Successfully loaded %s cards from %s.",
        len(deck),
        config.source_file.name,
    )
    return deck
