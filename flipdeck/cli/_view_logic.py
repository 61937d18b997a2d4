from pathlib import Path

from flipdeck.cli.viewer_ui import start_viewer_flow
from flipdeck.csv_models import CSVProcessorConfig
from flipdeck.holder import Holder
from flipdeck.parser import load_deck
from flipdeck.viewer import ViewerSession


def view_logic(
    source_file: Path,
    wrap_width: int,
    delimiter: str,
):
    """
    Load a deck and start an interactive viewing session over it.

    The whole file is read before anything is displayed; a load failure
    propagates as DeckLoadError and no session is started.

    Parameters:
        source_file (Path): CSV file with "front" and "back" columns.
        wrap_width (int): Width card text is wrapped to.
        delimiter (str): Field delimiter of the CSV file.
    """
    config = CSVProcessorConfig(
        source_file=source_file,
        wrap_width=wrap_width,
        delimiter=delimiter,
    )
    deck = load_deck(config)

    session = ViewerSession(Holder(deck))

    start_viewer_flow(session)
