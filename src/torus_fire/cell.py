"""Cell states for the toroidal fire grid."""

from enum import Enum


class CellState(Enum):
    """Possible states of a grid cell.

    The only forward transitions are ``Alive -> Burning`` and
    ``Burning -> Dead``. ``Dead`` is terminal.
    """
    Dead = 0
    Burning = 1
    Alive = 2

    def is_burning(self) -> bool:
        """Check whether the cell counts as a burning neighbour."""
        return self is CellState.Burning

    def ignited(self) -> "CellState":
        """
        Apply the ``Alive -> Burning`` transition.

        Returns:
            ``Burning`` if the cell is alive, otherwise the state unchanged.
        """
        if self is CellState.Alive:
            return CellState.Burning
        return self

    def burned_out(self) -> "CellState":
        """
        Apply the ``Burning -> Dead`` transition.

        Returns:
            ``Dead`` if the cell is burning, otherwise the state unchanged.
        """
        if self is CellState.Burning:
            return CellState.Dead
        return self
