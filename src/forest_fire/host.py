"""Capabilities the simulation expects from whatever is hosting it."""

from .cell import CellState


class Host:
    """Base host: paints nothing, plays nothing, remembers the status text.

    Subclasses override the methods they can actually provide. The base class
    doubles as the headless host used by the console runner.
    """

    def __init__(self) -> None:
        self.status_text = ""

    def paint_cell(self, x: int, y: int, state: CellState) -> None:
        pass

    def play_sound(self, name: str) -> None:
        pass

    def set_status(self, text: str) -> None:
        self.status_text = text
