"""Color definitions and constants for the fire spread visualization.

This module contains all RGB color tuples and default configuration values
used throughout the Pygame visualization.
"""

from typing import Sequence, Tuple

# Type alias for RGB color tuples
Color = Tuple[int, int, int]

# ============================================================================
# CELL STATE COLORS
# ============================================================================

ALIVE_COLOR: Color = (2, 168, 2)                    # green
DEAD_COLOR: Color = (0, 0, 0)                       # black (burned out)

# Burning cells fade from bright yellow to deep red as their timer grows
FIRE_GRADIENT: Tuple[Color, ...] = (
    (255, 255, 160),
    (255, 236, 90),
    (255, 210, 40),
    (255, 170, 0),
    (255, 130, 0),
    (250, 90, 0),
    (235, 55, 0),
    (210, 25, 0),
    (180, 10, 0),
    (140, 0, 0),
)

# ============================================================================
# UI COLORS
# ============================================================================

BLACK: Color = (0, 0, 0)                            # Grid lines, text
WHITE: Color = (255, 255, 255)                      # Background
PANEL_COLOR: Color = (80, 0, 0)                     # Info panel background

# ============================================================================
# DEFAULT SIMULATION PARAMETERS
# ============================================================================

DEFAULT_WIDTH: int = 200                            # Grid width in cells
DEFAULT_HEIGHT: int = 120                           # Grid height in cells
DEFAULT_CELL_SIZE: int = 5                          # Cell size in pixels
DEFAULT_FPS: int = 10                               # Default frames per second

# ============================================================================
# FPS SLIDER LIMITS
# ============================================================================

MIN_FPS: int = 1                                    # Minimum simulation speed
MAX_FPS: int = 60                                   # Maximum simulation speed


def gradient_position(timer: int, limit: int, length: int) -> int:
    """Map a burn timer onto an index of a palette with ``length`` entries.

    A timer can sit exactly at the limit for one tick, so the result is
    clamped to the last entry.
    """
    if limit <= 0 or length <= 0:
        return 0
    return min(timer * length // limit, length - 1)


def burning_color(timer: int, limit: int, palette: Sequence[Color] = FIRE_GRADIENT) -> Color:
    """Color of a burning cell that has been on fire for ``timer`` ticks."""
    return palette[gradient_position(timer, limit, len(palette))]
