"""
Water tank.

Holds the machine's water between a minimum and a maximum volume (liters).
Out-of-range changes are rejected with TankBoundsError rather than clamped:
the volume is only modified when the result stays within [min, max].
"""

import logging

from coffee_machine.domain.errors import TankBoundsError

logger = logging.getLogger(__name__)


class WaterTank:
    """Bounded water reservoir. Mutated only through increase/decrease."""

    def __init__(self, current_volume: float, min_volume: float, max_volume: float) -> None:
        if min_volume < 0:
            raise ValueError(f"Minimum volume must be non-negative, got {min_volume}")
        if min_volume > max_volume:
            raise ValueError(
                f"Minimum volume {min_volume} is greater than maximum volume {max_volume}"
            )
        if not min_volume <= current_volume <= max_volume:
            raise TankBoundsError(
                f"Initial volume {current_volume} outside [{min_volume}, {max_volume}]"
            )
        self._current_volume = current_volume
        self._min_volume = min_volume
        self._max_volume = max_volume

    @property
    def current_volume(self) -> float:
        return self._current_volume

    @property
    def min_volume(self) -> float:
        return self._min_volume

    @property
    def max_volume(self) -> float:
        return self._max_volume

    @property
    def available_volume(self) -> float:
        """Water that can be drawn without going below the minimum."""
        return self._current_volume - self._min_volume

    def can_supply(self, volume: float) -> bool:
        """True when `volume` liters can be drawn without going below the minimum."""
        return self._current_volume - volume >= self._min_volume

    def increase(self, volume: float) -> float:
        """Add `volume` liters and return the new current volume."""
        _check_volume(volume)
        new_volume = self._current_volume + volume
        if new_volume > self._max_volume:
            raise TankBoundsError(
                f"Tank capacity exceeded: {self._current_volume} + {volume} > {self._max_volume}"
            )
        self._current_volume = new_volume
        logger.debug("Tank increased by %s L, now %s L", volume, new_volume)
        return new_volume

    def decrease(self, volume: float) -> float:
        """Remove `volume` liters and return the new current volume."""
        _check_volume(volume)
        if not self.can_supply(volume):
            raise TankBoundsError(
                f"Insufficient volume in tank: {self._current_volume} - {volume} < {self._min_volume}"
            )
        new_volume = self._current_volume - volume
        self._current_volume = new_volume
        logger.debug("Tank decreased by %s L, now %s L", volume, new_volume)
        return new_volume

    def __str__(self) -> str:
        return (
            f"{self._current_volume} L (min {self._min_volume} L, max {self._max_volume} L)"
        )


def _check_volume(volume: float) -> None:
    if volume < 0:
        raise ValueError(f"Volume must be non-negative, got {volume}")
