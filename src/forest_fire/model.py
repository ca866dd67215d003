"""Forest fire model: simulation context and fire spread."""

import logging
import math
from typing import Optional

from mesa import Model

from .cell import CellState, Outcome
from .constants import (
    FIRE_TICK_INTERVAL,
    GRID_SIZE,
    INITIAL_FIRES,
    LOST_MESSAGE,
    SAVED_MESSAGE,
    SAVED_SOUND,
    SPREAD_SOUNDS,
    START_MESSAGE,
    WATER_DELAY,
    WATER_RADIUS,
)
from .grid import Coord, GridState
from .host import Host
from .interaction import Action, InteractionHandler
from .scheduler import TickScheduler, Timer
from .water import WaterOverlay

logger = logging.getLogger(__name__)


class FireModel(Model):
    """Single run of the forest fire game.

    The model owns every piece of mutable game state: the grid, the water
    overlay, the fire timer and the terminal outcome. Fires spread once per
    ``tick_interval`` scheduler ticks until either no fire or no tree is left.
    """

    def __init__(
        self,
        size: int = GRID_SIZE,
        host: Optional[Host] = None,
        scheduler: Optional[TickScheduler] = None,
        seed: Optional[int] = None,
        initial_fires: int = INITIAL_FIRES,
        tick_interval: int = FIRE_TICK_INTERVAL,
        water_delay: int = WATER_DELAY,
        start: bool = True,
    ):
        """
        Initialize the forest fire model.

        Args:
            size: Cells per side of the square grid
            host: Host providing painting, sounds and status text
            scheduler: Timer scheduler; a private one is created if omitted
            seed: Seed for the model's random source
            initial_fires: Number of fires seeded at random positions
            tick_interval: Ticks between two fire generations
            water_delay: Ticks a water overlay stays on the board
            start: Plant the forest, seed fires and start the fire timer.
                Pass False to lay out the grid by hand.
        """
        super().__init__(seed=seed)
        if initial_fires < 0:
            raise ValueError(f"initial_fires must not be negative, got {initial_fires}")
        if tick_interval < 1:
            raise ValueError(f"tick_interval must be positive, got {tick_interval}")
        if water_delay < 1:
            raise ValueError(f"water_delay must be positive, got {water_delay}")

        self.host = host if host is not None else Host()
        self.scheduler = scheduler if scheduler is not None else TickScheduler()
        self.grid = GridState(size, listener=self.host.paint_cell)
        self.water = WaterOverlay(self.grid, self.scheduler, water_delay, WATER_RADIUS)
        self.interaction = InteractionHandler(self)
        self.initial_fires = initial_fires
        self.tick_interval = tick_interval
        self.fire_timer: Optional[Timer] = None
        self.outcome: Optional[Outcome] = None

        if start:
            self.grid.fill(CellState.Tree)
            self.seed_fires()
            self.start_fire_timer()
            self.host.set_status(START_MESSAGE)
            logger.info("Forest of %dx%d started with %d fires", size, size, self.fire_count)

    @property
    def ended(self) -> bool:
        return self.outcome is not None

    @property
    def status(self) -> str:
        return "ended" if self.ended else "running"

    @property
    def tree_count(self) -> int:
        return self.grid.count(CellState.Tree)

    @property
    def fire_count(self) -> int:
        return self.grid.count(CellState.Fire)

    def seed_fires(self) -> list[Coord]:
        """Set ``initial_fires`` random cells on fire. Positions may repeat."""
        seeded = []
        for _ in range(self.initial_fires):
            x = self.random.randrange(self.grid.size)
            y = self.random.randrange(self.grid.size)
            self.grid.set(x, y, CellState.Fire)
            seeded.append((x, y))
        return seeded

    def start_fire_timer(self) -> None:
        self.fire_timer = self.scheduler.start_periodic(self.tick_interval, self.step)

    def touch(self, x: int, y: int) -> Action:
        return self.interaction.touch(x, y)

    def saved_percentage(self) -> int:
        """Share of the grid still covered by trees, rounded half up."""
        total = self.grid.size * self.grid.size
        return math.floor(self.tree_count / total * 100 + 0.5)

    def step(self) -> None:
        """Execute one generation. Driven by the periodic fire timer."""
        self.spread()

    def spread(self) -> list[Coord]:
        """
        Advance the fire by one generation.

        Every tree next to a fire (no diagonals) is found before any of them
        is ignited, so fire travels exactly one cell per generation. Fires are
        never put out here; only the player does that.

        Returns:
            Coordinates ignited during this generation
        """
        if self.ended:
            return []

        ignited = self.grid.orthogonal_fire_front()
        for x, y in ignited:
            self.grid.set(x, y, CellState.Fire)

        if ignited:
            self.host.play_sound(SPREAD_SOUNDS[self.random.randrange(len(SPREAD_SOUNDS))])
            logger.debug("%d trees caught fire", len(ignited))

        self._check_outcome()
        return ignited

    def _check_outcome(self) -> None:
        trees = self.tree_count
        fires = self.fire_count

        # saved wins when both counts reach zero together
        if fires == 0:
            self._end(Outcome.ForestSaved)
            self.host.play_sound(SAVED_SOUND)
            self.host.set_status(SAVED_MESSAGE.format(percent=self.saved_percentage()))
        elif trees == 0:
            self._end(Outcome.ForestLost)
            self.host.set_status(LOST_MESSAGE)

    def _end(self, outcome: Outcome) -> None:
        self.outcome = outcome
        self.running = False
        if self.fire_timer is not None:
            self.scheduler.cancel(self.fire_timer)
            self.fire_timer = None
        logger.info("Simulation ended: %s (%d trees left)", outcome.name, self.tree_count)
