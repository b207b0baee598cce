"""Parameters governing ignition and burn dynamics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FireConfig:
    """Immutable parameter bundle held by :class:`~torus_fire.model.FireModel`.

    Attributes:
        ignite_probability: Chance per tick that an alive cell with at least
            one burning neighbour catches fire. Values ``<= 0`` mean fire
            never spreads, values ``>= 1`` mean it always spreads. Values
            outside ``[0, 1]`` are accepted as-is.
        burn_duration_limit: Number of ticks a cell may stay burning before
            it turns dead. With ``0`` a cell that is burning at the start of
            a tick dies in that same tick.
        initial_ignition_count: Number of independent ignition draws made
            when the model is built. Draws may hit the same cell twice.
    """

    ignite_probability: float = 0.3
    burn_duration_limit: int = 10
    initial_ignition_count: int = 1

    def __post_init__(self) -> None:
        if self.burn_duration_limit < 0:
            raise ValueError(
                f"burn_duration_limit must be non-negative, got {self.burn_duration_limit}"
            )
        if self.initial_ignition_count < 0:
            raise ValueError(
                f"initial_ignition_count must be non-negative, got {self.initial_ignition_count}"
            )

    def __str__(self) -> str:
        return (
            f"Ignite probability: {self.ignite_probability}, "
            f"burn duration: {self.burn_duration_limit}, "
            f"ignitions: {self.initial_ignition_count}"
        )
