"""Temporary water overlay placed around a doused fire."""

import logging
from typing import Optional

from .cell import CellState
from .grid import Coord, GridState
from .scheduler import TickScheduler, Timer

logger = logging.getLogger(__name__)


class WaterOverlay:
    """Covers a square patch with water and puts it back after a delay.

    Only one overlay is ever live. Dousing again while a restoration is still
    pending restores the previous patch straight away before the new one is
    laid down.

    Attributes:
        grid: Grid the overlay writes to.
        scheduler: Scheduler used for the delayed restoration.
        delay: Ticks the water stays on the board.
        radius: Half-width of the square patch (1 for 3x3).
    """

    def __init__(self, grid: GridState, scheduler: TickScheduler, delay: int, radius: int = 1):
        if delay < 1:
            raise ValueError(f"Water delay must be positive, got {delay}")
        self.grid = grid
        self.scheduler = scheduler
        self.delay = delay
        self.radius = radius
        self._under: dict[Coord, CellState] = {}
        self._timer: Optional[Timer] = None

    @property
    def active(self) -> bool:
        return self._timer is not None

    @property
    def cells(self) -> dict[Coord, CellState]:
        """Remembered states of the cells currently under water."""
        return dict(self._under)

    def douse(self, cx: int, cy: int) -> list[Coord]:
        """
        Cover the patch around ``(cx, cy)`` with water.

        Args:
            cx: Column of the patch centre
            cy: Row of the patch centre

        Returns:
            Coordinates that were turned into water
        """
        if self._timer is not None:
            self.restore()

        covered = []
        for x, y in self.grid.neighbourhood(cx, cy, self.radius):
            under = self.grid.get(x, y)
            # a covered fire comes back as bare soil
            if under is CellState.Fire:
                under = CellState.Soil
            self._under[(x, y)] = under
            self.grid.set(x, y, CellState.Water)
            covered.append((x, y))

        self._timer = self.scheduler.start_one_shot(self.delay, self.restore)
        logger.debug("Water overlay of %d cells at (%d, %d)", len(covered), cx, cy)
        return covered

    def restore(self) -> None:
        """Put back every remembered cell that is still water and drop the pending timer."""
        if self._timer is not None:
            self.scheduler.cancel(self._timer)
        restored = 0
        for (x, y), under in self._under.items():
            if self.grid.get(x, y) is CellState.Water:
                self.grid.set(x, y, under)
                restored += 1
        logger.debug("Water overlay cleared, %d of %d cells restored", restored, len(self._under))
        self._under = {}
        self._timer = None
