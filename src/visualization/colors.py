"""Color definitions and constants for the forest fire visualization.

This module contains all RGB color tuples and default display values
used throughout the Pygame visualization.
"""

from typing import Tuple

from forest_fire.cell import CellState

# Type alias for RGB color tuples
Color = Tuple[int, int, int]

# ============================================================================
# CELL STATE COLORS
# ============================================================================

SOIL_COLOR: Color = (218, 165, 32)                  # goldenrod
TREE_COLOR: Color = (0, 255, 127)                   # springgreen
FIRE_COLOR: Color = (220, 20, 60)                   # crimson
WATER_COLOR: Color = (0, 255, 255)                  # cyan

STATE_COLORS: dict[CellState, Color] = {
    CellState.Soil: SOIL_COLOR,
    CellState.Tree: TREE_COLOR,
    CellState.Fire: FIRE_COLOR,
    CellState.Water: WATER_COLOR,
}

# ============================================================================
# UI COLORS
# ============================================================================

BLACK: Color = (0, 0, 0)                            # Text
WHITE: Color = (255, 255, 255)                      # Background, grid lines
PANEL_COLOR: Color = (40, 40, 40)                   # Status panel

# ============================================================================
# DEFAULT DISPLAY PARAMETERS
# ============================================================================

DEFAULT_CELL_SIZE: int = 20                         # Cell size in pixels
DEFAULT_FPS: int = 60                               # One scheduler tick per frame
PANEL_HEIGHT: int = 90                              # Space below the grid
