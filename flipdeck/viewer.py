"""
Application-level session object that owns the Holder for the display shell.
"""

import logging
from enum import Enum
from typing import Tuple

from .holder import Holder

logger = logging.getLogger(__name__)


class Action(str, Enum):
    """
    Discrete triggers the display shell can send.
    """

    ADVANCE = "advance"
    RETREAT = "retreat"
    FLIP = "flip"


class ViewerSession:
    """
    Owns the Holder for the lifetime of one viewing session.

    Each trigger runs exactly one Holder mutator; the shell re-reads the
    returned text and redraws.
    """

    def __init__(self, holder: Holder):
        self.holder = holder

    @property
    def text(self) -> str:
        """Text the shell should display."""
        return self.holder.text

    @property
    def position(self) -> Tuple[int, int]:
        """One-based position of the current card and the deck size."""
        return self.holder.index + 1, len(self.holder)

    def handle(self, action: Action) -> str:
        """
        Apply a single trigger to the holder and return the text to display.

        Parameters:
            action (Action): The trigger received from the input device.

        Returns:
            str: The holder's text after the transition.
        """
        if action is Action.ADVANCE:
            self.holder.next()
        elif action is Action.RETREAT:
            self.holder.prev()
        elif action is Action.FLIP:
            self.holder.flip()
        else:
            raise ValueError(f"Unknown action: {action!r}")
        logger.debug(f"Handled {action.value}; showing card {self.holder.index}.")
        return self.holder.text
