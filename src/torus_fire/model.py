"""Fire spread model on a toroidal grid."""

import logging
from typing import Protocol

import numpy as np
from mesa import Model

from .cell import CellState
from .config import FireConfig

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Random capability the model draws from.

    ``random.Random`` satisfies it, so does any scripted stand-in.
    """

    def random(self) -> float: ...

    def randrange(self, stop: int) -> int: ...


class FireModel(Model):
    """Stochastic fire spread over an edge-wrapping grid of cells."""

    def __init__(
        self,
        width: int,
        height: int,
        config: FireConfig | None = None,
        *,
        random_source: RandomSource | None = None,
        seed: int | None = None,
    ):
        """
        Initialize the fire spread model.

        Args:
            width: Width of the grid (number of cells)
            height: Height of the grid (number of cells)
            config: Ignition and burn parameters, defaults to FireConfig()
            random_source: Optional replacement for the model's random source,
                used for the ignition draws and every tick.
            seed: Seed for the model's own random source.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")

        super().__init__(seed=seed)
        if random_source is not None:
            self.random = random_source

        self.width = width
        self.height = height
        self.config = config if config is not None else FireConfig()

        size = width * height
        self.cells: list[CellState] = [CellState.Alive] * size
        self.burn_timers: list[int] = [0] * size

        # Draws are independent, the same index may come up twice
        for _ in range(self.config.initial_ignition_count):
            idx = self.random.randrange(size)
            self.cells[idx] = CellState.Burning

        logger.debug(
            "Created %dx%d grid, %d ignition draws, %s",
            width, height, self.config.initial_ignition_count, self.config,
        )

    def get_index(self, row: int, col: int) -> int:
        return row * self.width + col

    def get_position(self, index: int) -> tuple[int, int]:
        return divmod(index, self.width)

    def cell_at(self, row: int, col: int) -> CellState:
        return self.cells[self.get_index(row, col)]

    def burning_neighbor_count(self, row: int, col: int) -> int:
        """
        Count burning cells in the Moore neighbourhood with wraparound.

        All eight computed positions are counted, so on grids one or two
        cells wide or tall the same cell can be counted more than once.

        Returns:
            Number of burning neighbours, between 0 and 8
        """
        north = (row + self.height - 1) % self.height
        south = (row + 1) % self.height
        west = (col + self.width - 1) % self.width
        east = (col + 1) % self.width

        neighbours = (
            (north, west), (north, col), (north, east),
            (row, west), (row, east),
            (south, west), (south, col), (south, east),
        )
        return sum(
            1 for r, c in neighbours
            if self.cells[self.get_index(r, c)].is_burning()
        )

    def tick(self, random_source: RandomSource | None = None) -> bool:
        """
        Execute one synchronous update of the whole grid.

        Cells and burn timers are both double-buffered so every decision reads
        the pre-tick state. Timer increments are kept whether or not any
        cell changed.

        Args:
            random_source: Overrides the model's random source for this tick.

        Returns:
            True if no cell changed state this tick, False otherwise.
        """
        rng = random_source if random_source is not None else self.random
        ignite_probability = self.config.ignite_probability
        burn_limit = self.config.burn_duration_limit

        next_cells = list(self.cells)
        next_timers = list(self.burn_timers)

        for row in range(self.height):
            for col in range(self.width):
                idx = self.get_index(row, col)
                cell = self.cells[idx]

                if cell == CellState.Alive:
                    if self.burning_neighbor_count(row, col) > 0:
                        if rng.random() < ignite_probability:
                            next_cells[idx] = next_cells[idx].ignited()

                elif cell == CellState.Burning:
                    if self.burn_timers[idx] < burn_limit:
                        next_timers[idx] += 1
                    else:
                        next_cells[idx] = next_cells[idx].burned_out()

        self.burn_timers = next_timers

        if next_cells == self.cells:
            logger.debug("No cell changed state, grid is stable")
            return True

        self.cells = next_cells
        return False

    def step(self):
        """
        Execute one step of the simulation.

        Stops the model (``running = False``) once a tick reports that
        no cell changed state.
        """
        if self.tick():
            self.running = False

    def run(self, max_ticks: int | None = None) -> int:
        """
        Step the model until it finishes or ``max_ticks`` is reached.

        Returns:
            Number of steps performed
        """
        performed = 0
        while self.running and (max_ticks is None or performed < max_ticks):
            self.step()
            performed += 1
        logger.info("Simulation stopped after %d steps: %s", performed, self)
        return performed

    def ignite(self, row: int, col: int) -> bool:
        """
        Set a single alive cell on fire outside the transition rule.

        Returns:
            True if the cell was alive and is now burning
        """
        idx = self.get_index(row, col)
        before = self.cells[idx]
        self.cells[idx] = before.ignited()
        if self.cells[idx] is not before:
            self.running = True
            return True
        return False

    def count_states(self) -> dict[CellState, int]:
        counts = {state: 0 for state in CellState}
        for cell in self.cells:
            counts[cell] += 1
        return counts

    def state_grid(self) -> np.ndarray:
        """Cell states as a (height, width) array of ``CellState.value`` codes."""
        codes = np.fromiter((cell.value for cell in self.cells), dtype=np.uint8, count=len(self.cells))
        return codes.reshape(self.height, self.width)

    def timer_grid(self) -> np.ndarray:
        """Burn timers as a (height, width) array."""
        return np.asarray(self.burn_timers, dtype=np.uint32).reshape(self.height, self.width)

    def __str__(self):
        counts = self.count_states()
        return (
            f"FireModel {self.width}x{self.height}: "
            f"{counts[CellState.Alive]} alive, "
            f"{counts[CellState.Burning]} burning, "
            f"{counts[CellState.Dead]} dead"
        )
