"""Visualization package for the forest fire game using Pygame."""

from .colors import *
from .audio import SoundBank
from .host import PygameHost
from .renderer import GridRenderer
from .ui import InfoPanel

__all__ = [
    # Host and components
    'PygameHost',
    'GridRenderer',
    'InfoPanel',
    'SoundBank',

    # Cell state colors
    'SOIL_COLOR',
    'TREE_COLOR',
    'FIRE_COLOR',
    'WATER_COLOR',
    'STATE_COLORS',

    # UI colors
    'BLACK',
    'WHITE',
    'PANEL_COLOR',

    # Default parameters
    'DEFAULT_CELL_SIZE',
    'DEFAULT_FPS',
    'PANEL_HEIGHT',
]
