import sys
from itertools import cycle
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """Ensure `src/` is on sys.path so tests can import `torus_fire.*`.

    This repo uses the common `src/` layout but is not necessarily installed as a package
    in the active environment.
    """

    project_root = Path(__file__).resolve().parents[1]
    src_dir = project_root / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


class ScriptedRandom:
    """Deterministic random source.

    ``random()`` cycles through ``reals``; ``randrange()`` hands out ``ints``
    in order and fails once they run out.
    """

    def __init__(self, reals=(0.0,), ints=()):
        self._reals = cycle(reals)
        self._ints = iter(ints)
        self.real_calls = 0

    def random(self) -> float:
        self.real_calls += 1
        return next(self._reals)

    def randrange(self, stop: int) -> int:
        value = next(self._ints)
        assert 0 <= value < stop
        return value


@pytest.fixture
def scripted_random():
    """Factory for deterministic random sources."""
    return ScriptedRandom
