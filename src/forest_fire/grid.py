"""Square grid holding the state of every cell."""

from typing import Callable, Iterator, Optional

import numpy as np

from .cell import CellState, OutOfBoundsError

Coord = tuple[int, int]
CellListener = Callable[[int, int, CellState], None]

UNSET = -1

EMOJI = {
    CellState.Soil: "🟫",
    CellState.Tree: "🌲",
    CellState.Fire: "🔥",
    CellState.Water: "🌊",
}


class GridState:
    """Authoritative N x N store of cell states.

    Cells are addressed as ``(x, y)`` with ``0 <= x, y < size``. All writes go
    through :meth:`set`, which forwards the change to an optional listener so
    the host can repaint the cell.

    Attributes:
        size: Number of cells per side.
        listener: Callable invoked as ``listener(x, y, state)`` after each write.
    """

    def __init__(self, size: int, listener: Optional[CellListener] = None):
        """
        Initialize an empty grid.

        Args:
            size: Number of cells per side (must be positive)
            listener: Optional change listener, usually the host's painter
        """
        if size < 1:
            raise ValueError(f"Grid size must be positive, got {size}")
        self.size = size
        self.listener = listener
        self._cells = np.full((size, size), UNSET, dtype=np.int8)

    def __contains__(self, pos) -> bool:
        x, y = pos
        return 0 <= x < self.size and 0 <= y < self.size

    def _check(self, x: int, y: int) -> None:
        if (x, y) not in self:
            raise OutOfBoundsError(x, y, self.size)

    def get(self, x: int, y: int) -> CellState:
        """
        Return the state of a cell.

        Raises:
            OutOfBoundsError: if the coordinate is outside the grid
            ValueError: if the cell was never written
        """
        self._check(x, y)
        value = int(self._cells[x, y])
        if value == UNSET:
            raise ValueError(f"Cell ({x}, {y}) has not been initialised")
        return CellState(value)

    def set(self, x: int, y: int, state: CellState) -> None:
        """Write a cell and notify the listener."""
        self._check(x, y)
        self._cells[x, y] = state.value
        if self.listener is not None:
            self.listener(x, y, state)

    def fill(self, state: CellState) -> None:
        for x, y in self.coords():
            self.set(x, y, state)

    def count(self, state: CellState) -> int:
        return int(np.count_nonzero(self._cells == state.value))

    def coords(self) -> Iterator[Coord]:
        for x in range(self.size):
            for y in range(self.size):
                yield (x, y)

    def column(self, x: int) -> Iterator[Coord]:
        """Yield every coordinate of column ``x`` from top to bottom."""
        self._check(x, 0)
        for y in range(self.size):
            yield (x, y)

    def neighbourhood(self, cx: int, cy: int, radius: int = 1) -> Iterator[Coord]:
        """Yield the square neighbourhood around a cell, clipped to the grid."""
        for dx in range(-radius, radius + 1):
            for dy in range(-radius, radius + 1):
                pos = (cx + dx, cy + dy)
                if pos in self:
                    yield pos

    def orthogonal_fire_front(self) -> list[Coord]:
        """
        Find trees touching a fire on any of their four sides.

        The whole array is read once before anything is returned, so callers
        can ignite the result without affecting the scan.

        Returns:
            Sorted list of ``(x, y)`` tree coordinates
        """
        fire = self._cells == CellState.Fire.value
        exposed = np.zeros_like(fire)
        exposed[1:, :] |= fire[:-1, :]
        exposed[:-1, :] |= fire[1:, :]
        exposed[:, 1:] |= fire[:, :-1]
        exposed[:, :-1] |= fire[:, 1:]
        front = exposed & (self._cells == CellState.Tree.value)
        return [(int(x), int(y)) for x, y in np.argwhere(front)]

    def snapshot(self) -> np.ndarray:
        return self._cells.copy()

    def render_text(self) -> str:
        """Render the grid row by row with one emoji per cell."""
        rows = []
        for y in range(self.size):
            row = ""
            for x in range(self.size):
                value = int(self._cells[x, y])
                row += EMOJI[CellState(value)] if value != UNSET else "  "
            rows.append(row)
        return "\n".join(rows)
