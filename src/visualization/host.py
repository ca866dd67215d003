"""Pygame implementation of the simulation host."""

from forest_fire.cell import CellState
from forest_fire.host import Host

from .audio import SoundBank
from .renderer import GridRenderer


class PygameHost(Host):
    """Routes model callbacks to the renderer and the sound bank.

    The status text is kept on the host and drawn by the info panel.
    """

    def __init__(self, renderer: GridRenderer, sounds: SoundBank) -> None:
        super().__init__()
        self.renderer = renderer
        self.sounds = sounds

    def paint_cell(self, x: int, y: int, state: CellState) -> None:
        self.renderer.paint_cell(x, y, state)

    def play_sound(self, name: str) -> None:
        self.sounds.play(name)
