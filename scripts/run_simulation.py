#!/usr/bin/env python3
"""Main script to run the toroidal fire simulation in the console."""

import logging
import sys
from pathlib import Path

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from torus_fire import CellState, FireConfig, FireModel

SYMBOLS = {
    CellState.Alive: "🌲",
    CellState.Burning: "🔥",
    CellState.Dead: "⬛",
}


def print_grid(model: FireModel) -> None:
    """
    Print a simple representation of the grid to console.

    Args:
        model: The FireModel instance to visualize
    """
    grid_str = ""
    for row in range(model.height):
        for col in range(model.width):
            grid_str += SYMBOLS[model.cell_at(row, col)]
        grid_str += "\n"
    print(grid_str)


def main():
    """Run the fire simulation until the grid is stable."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    # Simulation parameters
    WIDTH = 20
    HEIGHT = 12
    STEPS = 200
    config = FireConfig(ignite_probability=0.3, burn_duration_limit=3, initial_ignition_count=2)

    print("--- CREATING MODEL ---")
    model = FireModel(WIDTH, HEIGHT, config)

    print("--- INITIAL STATE ---")
    print_grid(model)

    for i in range(STEPS):
        print(f"\n--- STEP {i + 1} ---")
        model.step()
        print_grid(model)

        if not model.running:
            print("\nGrid is stable, no cell changed this step.")
            break

    print(model)


if __name__ == "__main__":
    main()
