"""
Machine configuration.

A Pydantic v2 model so that values coming from the command line (or any
other caller) are validated before a machine is built.
"""

from pydantic import BaseModel, Field, model_validator

DEFAULT_MIN_WATER_TANK = 0.0     # Liters
DEFAULT_MAX_WATER_TANK = 10.0    # Liters
DEFAULT_PUMPING_CAPACITY = 700.0  # Liters per hour
DEFAULT_RESISTANCE_POWER = 1000.0  # Watts


class MachineConfig(BaseModel):
    """Construction parameters of a CoffeeMachine."""

    min_water_tank: float = Field(DEFAULT_MIN_WATER_TANK, ge=0)
    max_water_tank: float = Field(DEFAULT_MAX_WATER_TANK, gt=0)
    pumping_capacity: float = Field(DEFAULT_PUMPING_CAPACITY, gt=0)  # L/h
    resistance_power: float = Field(DEFAULT_RESISTANCE_POWER, gt=0)
    seed: int | None = None    # None seeds the failure simulator from OS entropy
    realtime: bool = False     # Actually wait while pumping and heating

    @model_validator(mode="after")
    def _check_tank_bounds(self) -> "MachineConfig":
        if self.min_water_tank > self.max_water_tank:
            raise ValueError(
                f"min_water_tank ({self.min_water_tank}) must not exceed "
                f"max_water_tank ({self.max_water_tank})"
            )
        return self
