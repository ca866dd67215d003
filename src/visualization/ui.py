"""UI components for the forest fire visualization.

This module contains the info panel shown below the grid with the status
message, simulation counters and keyboard shortcuts.
"""

from typing import TYPE_CHECKING

import pygame

from .colors import WHITE, PANEL_COLOR, FIRE_COLOR, TREE_COLOR

if TYPE_CHECKING:
    from forest_fire.model import FireModel


class InfoPanel:
    """Displays game information at the bottom of the screen.

    Attributes:
        font: Main font for the status message.
        small_font: Smaller font for counters and shortcuts.
    """

    def __init__(self) -> None:
        """Initialize the info panel with fonts."""
        self.font = pygame.font.Font(None, 30)
        self.small_font = pygame.font.Font(None, 22)

    def draw(
        self,
        screen: pygame.Surface,
        model: "FireModel",
        status_text: str,
        paused: bool,
        top: int,
        width: int,
        height: int
    ) -> None:
        """Draw the panel block beneath the grid."""
        pygame.draw.rect(screen, PANEL_COLOR, (0, top, width, height))

        status = self.font.render(status_text, True, WHITE)
        screen.blit(status, (width // 2 - status.get_width() // 2, top + 10))

        trees = self.small_font.render(f"Trees: {model.tree_count}", True, TREE_COLOR)
        fires = self.small_font.render(f"Fires: {model.fire_count}", True, FIRE_COLOR)
        steps = self.small_font.render(f"Generation: {model.steps}", True, WHITE)
        screen.blit(trees, (10, top + 40))
        screen.blit(fires, (10, top + 62))
        screen.blit(steps, (130, top + 40))

        hint = "SPACE = Resume" if paused else "SPACE = Pause"
        for i, line in enumerate((hint, "R = Reset", "ESC = Quit")):
            text = self.small_font.render(line, True, WHITE)
            screen.blit(text, (width - text.get_width() - 10, top + 36 + i * 18))
