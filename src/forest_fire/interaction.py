"""Player actions on the grid."""

import logging
from enum import Enum
from typing import TYPE_CHECKING

from .cell import CellState
from .constants import EXTINGUISH_SOUND, FIREBREAK_SOUND

if TYPE_CHECKING:
    from .model import FireModel

logger = logging.getLogger(__name__)


class Action(Enum):
    """What a touch ended up doing."""
    Extinguish = "extinguish"
    Firebreak = "firebreak"
    Ignored = "ignored"


class InteractionHandler:
    """Turns a touch on a cell into a game action.

    Touching a fire puts it out and douses the cells around it. Touching a
    tree clears every tree in that column, cutting a firebreak across the
    whole board. Anything else, and any touch after the game has ended, is
    ignored.
    """

    def __init__(self, model: "FireModel"):
        self.model = model

    def touch(self, x: int, y: int) -> Action:
        if self.model.ended:
            return Action.Ignored

        grid = self.model.grid
        state = grid.get(x, y)

        if state is CellState.Fire:
            grid.set(x, y, CellState.Soil)
            self.model.host.play_sound(EXTINGUISH_SOUND)
            self.model.water.douse(x, y)
            logger.debug("Fire at (%d, %d) extinguished", x, y)
            return Action.Extinguish

        if state is CellState.Tree:
            self.model.host.play_sound(FIREBREAK_SOUND)
            cleared = 0
            for cx, cy in grid.column(x):
                if grid.get(cx, cy) is CellState.Tree:
                    grid.set(cx, cy, CellState.Soil)
                    cleared += 1
            logger.debug("Firebreak in column %d cleared %d trees", x, cleared)
            return Action.Firebreak

        return Action.Ignored
