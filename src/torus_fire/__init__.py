"""
Toroidal Fire Spread using Cellular Automata.

A stochastic cellular automaton in which fire spreads across an
edge-wrapping grid until it burns itself out.
"""

from .cell import CellState
from .config import FireConfig
from .model import FireModel

__version__ = "0.1.0"

__all__ = [
    "CellState",
    "FireConfig",
    "FireModel",
]
