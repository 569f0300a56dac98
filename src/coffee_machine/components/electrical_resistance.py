import logging

from coffee_machine.components.delay import SimulatedDelay

logger = logging.getLogger(__name__)

# J/(kg.K), one liter of water weighs one kilogram
WATER_SPECIFIC_HEAT = 4185.0
# Tap water (~20 °C) to brewing temperature (~90 °C)
HEATING_DELTA_KELVIN = 70.0
DEFAULT_POWER = 1000.0


class ElectricalResistance:
    """Heating element. Heating time only depends on volume and power (W)."""

    def __init__(self, power: float = DEFAULT_POWER, delay: SimulatedDelay | None = None) -> None:
        if power <= 0:
            raise ValueError(f"Power must be positive, got {power}")
        self._power = power
        self.delay = delay or SimulatedDelay()

    @property
    def power(self) -> float:
        return self._power

    def heating_duration(self, volume: float) -> float:
        """Milliseconds needed to bring `volume` liters to brewing temperature."""
        energy = volume * WATER_SPECIFIC_HEAT * HEATING_DELTA_KELVIN
        return energy / self._power * 1000

    def heat_water(self, volume: float) -> float:
        if volume < 0:
            raise ValueError(f"Volume must be non-negative, got {volume}")
        duration = self.heating_duration(volume)
        logger.info("Heating %s L of water (%.1f ms)", volume, duration)
        return self.delay.wait(duration, "water heating")

    def __str__(self) -> str:
        return f"{self._power} W"
