#!/usr/bin/env python3
"""Pygame launcher for the forest fire game.

Click a fire to douse it, click a tree to clear its whole column.
The scheduler advances one tick per frame, so fire spreads once a second.

Usage:
    python scripts/pygame_run.py
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict

import pygame

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from forest_fire import FireModel, TickScheduler
from forest_fire.constants import ALL_SOUNDS, GRID_SIZE

from visualization import (
    GridRenderer,
    InfoPanel,
    PygameHost,
    SoundBank,
    BLACK,
    DEFAULT_CELL_SIZE,
    DEFAULT_FPS,
    PANEL_HEIGHT,
)

CONFIG: Dict[str, Any] = {
    "grid_size": GRID_SIZE,
    "cell_size": DEFAULT_CELL_SIZE,
    "fps": DEFAULT_FPS,
    "seed": None,
    "sound_dir": project_root / "sounds",
    "log_level": logging.INFO,
}


class SimulationRunner:
    """Main game runner with Pygame visualization.

    Handles the main loop, event processing, and coordination between
    the forest fire model and visualization components.

    Attributes:
        model: The forest fire model.
        scheduler: Tick scheduler driving the fire and water timers.
        screen: Pygame display surface.
        clock: Pygame clock for FPS control.
        renderer: Grid renderer for drawing cells.
        info_panel: UI panel for displaying game info.
        paused: Whether the scheduler is frozen.
    """

    def __init__(self, grid_size: int, cell_size: int, fps: int, seed, sound_dir: Path) -> None:
        """Initialize the game runner.

        Args:
            grid_size: Cells per side.
            cell_size: Size of each cell in pixels.
            fps: Frames (and scheduler ticks) per second.
            seed: Seed for fire placement, None for a random game.
            sound_dir: Directory holding the sound effect files.
        """
        pygame.init()
        self.window_width = grid_size * cell_size
        self.window_height = grid_size * cell_size + PANEL_HEIGHT
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption("Forest Fire")
        self.clock = pygame.time.Clock()

        self.grid_size = grid_size
        self.fps = fps
        self.seed = seed

        self.renderer = GridRenderer(grid_size, cell_size)
        self.info_panel = InfoPanel()
        self.host = PygameHost(self.renderer, SoundBank(sound_dir, ALL_SOUNDS))

        self.paused = False
        self._new_game()

    def _new_game(self) -> None:
        self.scheduler = TickScheduler()
        self.model = FireModel(
            size=self.grid_size,
            host=self.host,
            scheduler=self.scheduler,
            seed=self.seed,
        )
        self.paused = False

    def _handle_keyboard_events(self, event: pygame.event.Event) -> bool:
        """Handle keyboard input events.

        Args:
            event: The keyboard event to process.

        Returns:
            False if the game should quit, True otherwise.
        """
        if event.key == pygame.K_ESCAPE:
            return False

        elif event.key == pygame.K_SPACE:
            self.paused = not self.paused

        elif event.key == pygame.K_r:
            self._new_game()

        return True

    def _handle_mouse_events(self, event: pygame.event.Event) -> None:
        if event.button != 1 or self.paused:
            return
        cell = self.renderer.cell_at(event.pos)
        if cell is not None:
            self.model.touch(*cell)

    def _render(self) -> None:
        """Render all visual components to the screen."""
        self.screen.fill(BLACK)
        self.renderer.draw(self.screen)
        self.info_panel.draw(
            self.screen,
            self.model,
            self.host.status_text,
            self.paused,
            self.renderer.pixel_size,
            self.window_width,
            PANEL_HEIGHT,
        )
        pygame.display.flip()

    def run(self) -> None:
        """Run the main loop until the user quits."""
        running = True

        while running:
            self._render()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

                elif event.type == pygame.KEYDOWN:
                    if not self._handle_keyboard_events(event):
                        running = False

                elif event.type == pygame.MOUSEBUTTONDOWN:
                    self._handle_mouse_events(event)

            if not self.paused:
                self.scheduler.advance()

            self.clock.tick(self.fps)

        pygame.quit()


def main() -> None:
    """Main entry point for the Pygame game."""
    logging.basicConfig(
        level=CONFIG["log_level"],
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    runner = SimulationRunner(
        CONFIG["grid_size"],
        CONFIG["cell_size"],
        CONFIG["fps"],
        CONFIG["seed"],
        CONFIG["sound_dir"],
    )
    runner.run()


if __name__ == "__main__":
    main()
