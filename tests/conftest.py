"""
Shared pytest fixtures for the coffee machine tests.
"""

import pytest

from coffee_machine.domain.failure import FixedGaussianSource
from coffee_machine.machine import CoffeeMachine


@pytest.fixture
def machine() -> CoffeeMachine:
    """A fresh, unplugged machine (tank 0-10 L, pump 700 L/h) that never breaks."""
    return CoffeeMachine(0, 10, 700, random_source=FixedGaussianSource(0.6))


@pytest.fixture
def ready_machine(machine: CoffeeMachine) -> CoffeeMachine:
    """Plugged in with 10 L of water."""
    machine.add_water(10)
    machine.plug_in()
    return machine
