"""
Domain models for the coffee machine.

Containers are Pydantic v2 BaseModels so they validate their capacity on
construction and serialize cleanly (the demo CLI prints produced containers
with `model_dump_json`). They are frozen: filling a container never mutates
it, a new filled instance is built instead.

Enums inherit from (str, Enum) so they serialize as plain strings in JSON
(e.g. "ARABICA" instead of {"value": "ARABICA"}).

Variant dispatch (Cup -> CoffeeCup, Mug -> CoffeeMug) lives on the
containers themselves through `fill()`, so the machine never has to inspect
concrete types.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Self

from pydantic import BaseModel, ConfigDict, Field

from coffee_machine.domain.errors import ContainerNotEmptyError

CONTAINER_NOT_EMPTY_MESSAGE = "The container given is not empty."


class CoffeeType(str, Enum):
    """Coffee varieties the machine can brew. Copied verbatim into the cup."""

    ARABICA = "ARABICA"
    BAHIA = "BAHIA"
    MOKA = "MOKA"
    ROBUSTA = "ROBUSTA"


class MachineStatus(str, Enum):
    """Observable state of a CoffeeMachine."""

    UNPLUGGED = "UNPLUGGED"        # No power, every brew is refused
    IDLE = "IDLE"                  # Plugged in and ready to brew
    OUT_OF_ORDER = "OUT_OF_ORDER"  # Random failure happened, needs reset()


# ── Empty containers ────────────────────────────────────────────────


class Container(BaseModel):
    """A vessel able to receive coffee.

    The base class is never filled by the machine: only the concrete Cup and
    Mug variants know which filled counterpart they turn into.
    """

    model_config = ConfigDict(frozen=True)

    kind: str = "container"
    capacity: float = Field(..., gt=0)  # Liters

    @property
    def is_empty(self) -> bool:
        return True

    def fill(self, coffee_type: CoffeeType) -> CoffeeContainer:
        """Return a new filled container of the matching variant.

        Unknown variants cannot be filled legitimately.
        """
        raise ContainerNotEmptyError(CONTAINER_NOT_EMPTY_MESSAGE)


class Cup(Container):
    kind: Literal["cup"] = "cup"

    def fill(self, coffee_type: CoffeeType) -> CoffeeCup:
        return CoffeeCup.from_container(self, coffee_type)


class Mug(Container):
    kind: Literal["mug"] = "mug"

    def fill(self, coffee_type: CoffeeType) -> CoffeeMug:
        return CoffeeMug.from_container(self, coffee_type)


# ── Filled containers ───────────────────────────────────────────────


class CoffeeContainer(Container):
    """A container holding coffee. Never empty, never fillable again."""

    kind: str = "coffee-container"
    coffee_type: CoffeeType

    @property
    def is_empty(self) -> bool:
        return False

    @classmethod
    def from_container(cls, container: Container, coffee_type: CoffeeType) -> Self:
        """Build a filled container with the capacity of `container`."""
        return cls(capacity=container.capacity, coffee_type=coffee_type)


class CoffeeCup(CoffeeContainer):
    kind: Literal["coffee-cup"] = "coffee-cup"


class CoffeeMug(CoffeeContainer):
    kind: Literal["coffee-mug"] = "coffee-mug"
