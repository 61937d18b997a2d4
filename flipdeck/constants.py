"""
Flashcard viewer constants.

Column names, wrapping defaults and key bindings used by the ingestion
pipeline and the terminal viewer. No runtime configuration here.
"""
from typing import Dict

# Column headers expected in the source CSV file.
FRONT_COLUMN: str = "front"
BACK_COLUMN: str = "back"

# Width (in characters) cells are wrapped to during ingestion.
DEFAULT_WRAP_WIDTH: int = 18

DEFAULT_DELIMITER: str = ","

# Line commands understood by the terminal viewer.
# Arrow-right / arrow-left / space in the desktop shell map to these.
# Values must match flipdeck.viewer.Action values.
KEY_BINDINGS: Dict[str, str] = {
    "n": "advance",
    "d": "advance",
    ">": "advance",
    "p": "retreat",
    "a": "retreat",
    "<": "retreat",
    "f": "flip",
    "": "flip",
}

QUIT_KEYS = frozenset({"q", "quit", "exit"})
