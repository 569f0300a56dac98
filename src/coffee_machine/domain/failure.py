"""
Failure simulation (Strategy pattern).

The machine holds a reference to a `GaussianSource` (a Protocol) and draws
one standard-normal value per brew. A draw whose magnitude reaches
FAILURE_THRESHOLD puts the machine out of order, which happens about 31.7%
of the time with a real standard normal distribution.

`random.Random` already satisfies the protocol, so production code injects a
seeded `random.Random` and tests inject a fixed-sequence source or a mock.
"""

import random
from typing import Protocol

FAILURE_THRESHOLD = 1.0


class GaussianSource(Protocol):
    """Anything able to draw from a normal distribution.

    Any class with a `gauss(mu, sigma) -> float` method satisfies this
    protocol (structural subtyping, no explicit inheritance needed).
    """

    def gauss(self, mu: float, sigma: float) -> float: ...


class FixedGaussianSource:
    """Replays a fixed sequence of draws, looping once exhausted.

    Ignores `mu` and `sigma`: the values are returned as given.
    """

    def __init__(self, *values: float) -> None:
        if not values:
            raise ValueError("FixedGaussianSource needs at least one value")
        self.values = values
        self._index = 0

    def gauss(self, mu: float = 0.0, sigma: float = 1.0) -> float:
        value = self.values[self._index % len(self.values)]
        self._index += 1
        return value


def default_source(seed: int | None = None) -> GaussianSource:
    """Seeded pseudo-random source; None seeds from OS entropy."""
    return random.Random(seed)  # noqa: S311


def draw_standard_normal(source: GaussianSource) -> float:
    return source.gauss(0.0, 1.0)


def is_failure(value: float) -> bool:
    """True when a standard-normal draw means the machine breaks down."""
    return abs(value) >= FAILURE_THRESHOLD
