"""Cell states, outcomes and errors for the forest fire grid."""

from enum import Enum


class CellState(Enum):
    """Possible states of a grid cell."""
    Soil = 0
    Tree = 1
    Fire = 2
    Water = 3

    def is_flammable(self) -> bool:
        """Only trees catch fire."""
        return self is CellState.Tree


class Outcome(Enum):
    """Terminal result of a simulation run."""
    ForestSaved = "saved"
    ForestLost = "lost"


class OutOfBoundsError(IndexError):
    """Raised when a coordinate lies outside the grid."""

    def __init__(self, x: int, y: int, size: int):
        self.x = x
        self.y = y
        self.size = size
        super().__init__(f"Cell ({x}, {y}) is outside the {size}x{size} grid")
