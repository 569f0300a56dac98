"""
Water pump.

Moves water out of the tank. Pumping time grows with the volume and shrinks
with the flow rate; the duration is expressed in milliseconds and doubled to
account for priming the circuit before water flows.
"""

import logging

from coffee_machine.components.delay import SimulatedDelay
from coffee_machine.components.water_tank import WaterTank
from coffee_machine.domain.errors import LackOfWaterInTankError

logger = logging.getLogger(__name__)


class WaterPump:
    """Pumps a requested volume out of a WaterTank.

    `flow_rate` is in liters per second and fixed at construction.
    """

    def __init__(self, flow_rate: float, delay: SimulatedDelay | None = None) -> None:
        if flow_rate <= 0:
            raise ValueError(f"Flow rate must be positive, got {flow_rate}")
        self._flow_rate = flow_rate
        self.delay = delay or SimulatedDelay()

    @property
    def flow_rate(self) -> float:
        return self._flow_rate

    def pumping_duration(self, volume: float) -> float:
        """Milliseconds needed to pump `volume` liters."""
        return (volume / self._flow_rate) * 1000 * 2

    def pump_water(self, volume: float, tank: WaterTank) -> float:
        """Draw `volume` liters from `tank` and return the pumping duration (ms)."""
        if tank.current_volume < volume:
            raise LackOfWaterInTankError(
                f"Cannot pump {volume} L, the tank only holds {tank.current_volume} L"
            )
        duration = self.pumping_duration(volume)
        logger.info("Pumping %s L of water (%.1f ms)", volume, duration)
        # An interrupted wait leaves the tank untouched
        self.delay.wait(duration, "water pumping")
        tank.decrease(volume)
        return duration

    def __str__(self) -> str:
        return f"{self._flow_rate} L/s"
