"""
Word wrapping applied to card text during ingestion.
"""

from typing import List

from .constants import DEFAULT_WRAP_WIDTH


def wrap_text(text: str, width: int = DEFAULT_WRAP_WIDTH) -> str:
    """
    Greedily pack whitespace-delimited words into lines of at most `width` characters.

    A word joins the current line when the line, a separating space and the word
    still fit within `width`; otherwise it starts a new line. The separating space
    is counted for the first word too, so a first word of `width` characters or
    more is preceded by an empty line. Words longer than `width` are kept whole.
    Double quotes left over from quoted source fields are removed from the result.

    Parameters:
        text (str): Raw cell text.
        width (int): Maximum line length in characters.

    Returns:
        str: The wrapped text, lines joined with newlines.
    """
    lines: List[str] = []
    current: List[str] = []
    line_length = 0

    for word in text.split():
        if line_length + 1 + len(word) > width:
            lines.append(" ".join(current))
            current = []
            line_length = 0
        if current:
            line_length += 1
        current.append(word)
        line_length += len(word)

    if current:
        lines.append(" ".join(current))

    return "\n".join(lines).replace('"', "")
