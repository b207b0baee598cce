"""Visualization package for the toroidal fire simulation using Pygame."""

from .colors import *
from .renderer import GridRenderer
from .ui import InfoPanel, SpeedSlider

__all__ = [
    # Renderer and UI components
    'GridRenderer',
    'InfoPanel',
    'SpeedSlider',

    # Cell state colors
    'ALIVE_COLOR',
    'DEAD_COLOR',
    'FIRE_GRADIENT',
    'burning_color',
    'gradient_position',

    # UI colors
    'BLACK',
    'WHITE',
    'PANEL_COLOR',

    # Default parameters
    'DEFAULT_WIDTH',
    'DEFAULT_HEIGHT',
    'DEFAULT_CELL_SIZE',
    'DEFAULT_FPS',

    # FPS limits
    'MIN_FPS',
    'MAX_FPS',
]
