"""
Forest Fire: put out the fire before it eats the forest.

A cellular automaton game on a square grid. Fire spreads one cell per
generation to orthogonally adjacent trees; the player douses fires with water
and cuts firebreaks through whole columns of trees.
"""

from .cell import CellState, Outcome, OutOfBoundsError
from .grid import GridState
from .host import Host
from .interaction import Action, InteractionHandler
from .model import FireModel
from .scheduler import TickScheduler, Timer
from .water import WaterOverlay

__version__ = "0.1.0"

__all__ = [
    "CellState",
    "Outcome",
    "OutOfBoundsError",
    "GridState",
    "Host",
    "Action",
    "InteractionHandler",
    "FireModel",
    "TickScheduler",
    "Timer",
    "WaterOverlay",
]
