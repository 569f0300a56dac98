"""
CoffeeMachine: orchestrates the tank, the pump and the heating element.

States:
    UNPLUGGED     --plug_in()-->  IDLE
    IDLE          --make_coffee() with a bad draw-->  OUT_OF_ORDER
    OUT_OF_ORDER  --reset()-->  IDLE

make_coffee checks its preconditions in a fixed order and raises on the
first failure, leaving the machine untouched. The random breakdown is not an
error: the call returns None and the machine reports OUT_OF_ORDER.
"""

from __future__ import annotations

import logging

from coffee_machine.components.delay import SimulatedDelay
from coffee_machine.components.electrical_resistance import DEFAULT_POWER, ElectricalResistance
from coffee_machine.components.water_pump import WaterPump
from coffee_machine.components.water_tank import WaterTank
from coffee_machine.config import MachineConfig
from coffee_machine.domain.errors import (
    ContainerNotEmptyError,
    LackOfWaterInTankError,
    MachineNotPluggedError,
)
from coffee_machine.domain.failure import (
    GaussianSource,
    default_source,
    draw_standard_normal,
    is_failure,
)
from coffee_machine.domain.models import (
    CONTAINER_NOT_EMPTY_MESSAGE,
    CoffeeContainer,
    CoffeeType,
    Container,
    MachineStatus,
)

logger = logging.getLogger(__name__)

NOT_PLUGGED_MESSAGE = "You must plug your coffee machine to an electrical plug."
LACK_OF_WATER_MESSAGE = "You must add more water in the water tank."
OUT_OF_ORDER_MESSAGE = "The machine is out of order. Please reset the coffee machine"

SECONDS_PER_HOUR = 3600


class CoffeeMachine:
    """A coffee machine turning empty containers into filled ones.

    Args:
        min_water_tank: lowest volume the tank may hold (L). The tank starts there.
        max_water_tank: tank capacity (L).
        pumping_capacity: pump throughput in liters per hour.
        resistance_power: heating element power (W).
        random_source: strategy drawing the failure simulation values.
        delay: shared by pump and resistance; real waits only if realtime.
    """

    def __init__(
        self,
        min_water_tank: float,
        max_water_tank: float,
        pumping_capacity: float,
        *,
        resistance_power: float = DEFAULT_POWER,
        random_source: GaussianSource | None = None,
        delay: SimulatedDelay | None = None,
    ) -> None:
        self.delay = delay or SimulatedDelay()
        self._water_tank = WaterTank(min_water_tank, min_water_tank, max_water_tank)
        # The pump works in liters per second
        self._water_pump = WaterPump(pumping_capacity / SECONDS_PER_HOUR, self.delay)
        self._electrical_resistance = ElectricalResistance(resistance_power, self.delay)
        self._is_plugged = False
        self._is_out_of_order = False
        self._coffee_count = 0
        self.random_source: GaussianSource = random_source or default_source()

    @classmethod
    def from_config(
        cls, config: MachineConfig, random_source: GaussianSource | None = None
    ) -> CoffeeMachine:
        return cls(
            config.min_water_tank,
            config.max_water_tank,
            config.pumping_capacity,
            resistance_power=config.resistance_power,
            random_source=random_source or default_source(config.seed),
            delay=SimulatedDelay(realtime=config.realtime),
        )

    # ── State ────────────────────────────────────────────────────

    @property
    def water_tank(self) -> WaterTank:
        return self._water_tank

    @property
    def water_pump(self) -> WaterPump:
        return self._water_pump

    @property
    def electrical_resistance(self) -> ElectricalResistance:
        return self._electrical_resistance

    @property
    def is_plugged(self) -> bool:
        return self._is_plugged

    @property
    def is_out_of_order(self) -> bool:
        return self._is_out_of_order

    @is_out_of_order.setter
    def is_out_of_order(self, value: bool) -> None:
        self._is_out_of_order = value

    @property
    def coffee_count(self) -> int:
        return self._coffee_count

    @coffee_count.setter
    def coffee_count(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"Coffee count must be non-negative, got {value}")
        self._coffee_count = value

    @property
    def status(self) -> MachineStatus:
        if not self._is_plugged:
            return MachineStatus.UNPLUGGED
        if self._is_out_of_order:
            return MachineStatus.OUT_OF_ORDER
        return MachineStatus.IDLE

    # ── Commands ─────────────────────────────────────────────────

    def plug_in(self) -> None:
        """Plug the machine to the electrical network."""
        if not self._is_plugged:
            logger.info("Coffee machine plugged in")
        self._is_plugged = True

    def reset(self) -> None:
        """Clear an out-of-order condition."""
        if self._is_out_of_order:
            logger.info("Coffee machine reset")
        self._is_out_of_order = False

    def add_water(self, volume: float) -> None:
        """Pour `volume` liters into the tank."""
        self._water_tank.increase(volume)
        logger.info("Added %s L of water, tank now holds %s L", volume, self._water_tank.current_volume)

    def simulate_failure(self) -> bool:
        """Roll the failure simulation and return whether the machine broke."""
        value = draw_standard_normal(self.random_source)
        self._is_out_of_order = is_failure(value)
        return self._is_out_of_order

    def make_coffee(self, container: Container, coffee_type: CoffeeType) -> CoffeeContainer | None:
        """Brew `coffee_type` into `container`.

        Returns a new filled container (same capacity, requested coffee type),
        or None when the machine breaks down during the brew.

        Raises:
            MachineNotPluggedError: the machine is not plugged in.
            LackOfWaterInTankError: not enough water for the container.
            ContainerNotEmptyError: the container is full or cannot be filled.
            MachineInterruptedError: a real-time wait was cancelled.
        """
        if not self._is_plugged:
            raise MachineNotPluggedError(NOT_PLUGGED_MESSAGE)

        if not self._water_tank.can_supply(container.capacity):
            raise LackOfWaterInTankError(LACK_OF_WATER_MESSAGE)

        if not container.is_empty:
            raise ContainerNotEmptyError(CONTAINER_NOT_EMPTY_MESSAGE)

        if self.simulate_failure():
            logger.warning(OUT_OF_ORDER_MESSAGE)
            return None

        # Unknown variants raise here, before any water is used
        coffee_container = container.fill(coffee_type)

        # Heating first, then pumping
        self._electrical_resistance.heat_water(container.capacity)
        self._water_pump.pump_water(container.capacity, self._water_tank)

        self._coffee_count += 1
        logger.info(
            "Served %s L of %s in a %s (%d coffees made)",
            coffee_container.capacity,
            coffee_container.coffee_type.value,
            coffee_container.kind,
            self._coffee_count,
        )
        return coffee_container

    def __str__(self) -> str:
        return (
            "Your coffee machine has : \n"
            f"- water tank : {self._water_tank}\n"
            f"- water pump : {self._water_pump}\n"
            f"- electrical resistance : {self._electrical_resistance}\n"
            f"- is plugged : {self._is_plugged}\n"
            f"and made {self._coffee_count} coffees"
        )
