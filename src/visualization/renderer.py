"""Grid rendering functionality for the fire spread simulation.

This module provides the GridRenderer class which handles drawing the
toroidal grid with proper colors for each cell state.
"""

from typing import TYPE_CHECKING

import pygame

from torus_fire.cell import CellState
from .colors import (
    ALIVE_COLOR,
    BLACK,
    DEAD_COLOR,
    Color,
    burning_color,
)

if TYPE_CHECKING:
    from torus_fire.model import FireModel


class GridRenderer:
    """Renders the fire grid onto a Pygame surface.

    Each cell is drawn as a square colored by its state; burning cells
    take their color from the fire gradient according to their burn timer.

    Attributes:
        cell_size: Size of each cell in pixels.
    """

    def __init__(self, cell_size: int) -> None:
        self.cell_size = cell_size

    def get_cell_color(self, state: CellState, timer: int, limit: int) -> Color:
        """Get the RGB color for a cell.

        Args:
            state: Current state of the cell.
            timer: Ticks the cell has spent burning.
            limit: Burn duration limit of the model.

        Returns:
            RGB color tuple for the given cell.
        """
        if state == CellState.Burning:
            return burning_color(timer, limit)
        elif state == CellState.Dead:
            return DEAD_COLOR
        elif state == CellState.Alive:
            return ALIVE_COLOR
        return BLACK

    def draw_grid(self, screen: pygame.Surface, model: "FireModel", offset_x: int = 0, offset_y: int = 0) -> None:
        """Draw every cell of the model, row 0 at the top."""
        limit = model.config.burn_duration_limit
        cells = model.cells
        timers = model.burn_timers

        for idx, state in enumerate(cells):
            row, col = model.get_position(idx)
            color = self.get_cell_color(state, timers[idx], limit)
            pygame.draw.rect(
                screen,
                color,
                (
                    offset_x + col * self.cell_size,
                    offset_y + row * self.cell_size,
                    self.cell_size,
                    self.cell_size
                )
            )
