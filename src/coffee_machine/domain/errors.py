"""
Error taxonomy of the coffee machine.

Every precondition failure is raised synchronously and leaves the machine
untouched. The random "out of order" outcome is NOT an error: make_coffee
returns None in that case and callers inspect the machine state instead.
"""


class CoffeeMachineError(Exception):
    """Base class for every failure raised by the machine and its parts."""


class MachineNotPluggedError(CoffeeMachineError):
    """A brew was requested while the machine has no power."""


class LackOfWaterInTankError(CoffeeMachineError):
    """The tank does not hold enough water for the requested volume."""


class ContainerNotEmptyError(CoffeeMachineError):
    """The container already holds coffee or is an unknown variant."""


class MachineInterruptedError(CoffeeMachineError):
    """A simulated pumping or heating wait was cancelled."""


class TankBoundsError(CoffeeMachineError, ValueError):
    """An increase or decrease would leave the tank outside [min, max]."""
