"""Grid rendering functionality for the forest fire game.

This module provides the GridRenderer class which keeps an off-screen
picture of the grid up to date as cells change, and draws it to the screen.
"""

from typing import Optional

import pygame

from forest_fire.cell import CellState
from .colors import STATE_COLORS, WHITE, BLACK


class GridRenderer:
    """Renders the forest grid onto a Pygame surface.

    Cells are painted one at a time as the model writes them, so a frame
    only has to blit the finished picture.

    Attributes:
        grid_size: Number of cells per side.
        cell_size: Size of each cell in pixels.
        surface: Off-screen picture of the grid.
    """

    def __init__(self, grid_size: int, cell_size: int) -> None:
        """Initialize the grid renderer.

        Args:
            grid_size: Number of cells per side.
            cell_size: Size of each cell in pixels.
        """
        self.grid_size = grid_size
        self.cell_size = cell_size
        self.surface = pygame.Surface((grid_size * cell_size, grid_size * cell_size))
        self.surface.fill(BLACK)

    @property
    def pixel_size(self) -> int:
        return self.grid_size * self.cell_size

    def paint_cell(self, x: int, y: int, state: CellState) -> None:
        """Fill one cell with the color of its state."""
        rect = (x * self.cell_size, y * self.cell_size, self.cell_size, self.cell_size)
        pygame.draw.rect(self.surface, STATE_COLORS[state], rect)

    def cell_at(self, pos: tuple[int, int]) -> Optional[tuple[int, int]]:
        """Resolve a pixel position to grid coordinates, or None outside the grid."""
        px, py = pos
        if not (0 <= px < self.pixel_size and 0 <= py < self.pixel_size):
            return None
        return (px // self.cell_size, py // self.cell_size)

    def draw(self, screen: pygame.Surface) -> None:
        """Blit the grid and thin white lines between beads."""
        screen.blit(self.surface, (0, 0))
        for i in range(1, self.grid_size):
            offset = i * self.cell_size
            pygame.draw.line(screen, WHITE, (offset, 0), (offset, self.pixel_size))
            pygame.draw.line(screen, WHITE, (0, offset), (self.pixel_size, offset))
