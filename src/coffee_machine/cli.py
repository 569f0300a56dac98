"""
CLI demo runner: fills the tank, plugs the machine in and brews coffees.

Every produced container is printed as JSON. When the machine breaks down
the runner resets it and tries again, until the requested number of coffees
has been served.

Usage:
    # One espresso cup of arabica:
    python -m coffee_machine.cli --water 1 --container cup --capacity 0.05 --coffee-type ARABICA

    # Three mugs, reproducible failures:
    python -m coffee_machine.cli --water 2 --container mug --capacity 0.3 --count 3 --seed 42
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from coffee_machine.config import (
    DEFAULT_MAX_WATER_TANK,
    DEFAULT_MIN_WATER_TANK,
    DEFAULT_PUMPING_CAPACITY,
    MachineConfig,
)
from coffee_machine.domain.errors import CoffeeMachineError
from coffee_machine.domain.models import CoffeeType, Container, Cup, Mug
from coffee_machine.machine import CoffeeMachine

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

CONTAINERS: dict[str, type[Container]] = {"cup": Cup, "mug": Mug}

# Upper bound on brew attempts per requested coffee before giving up
MAX_ATTEMPTS_PER_COFFEE = 20

logger = logging.getLogger(__name__)


def run(args: argparse.Namespace, machine: CoffeeMachine | None = None) -> int:
    """Run the demo and return the process exit status."""
    try:
        if machine is None:
            config = MachineConfig(
                min_water_tank=args.min_tank,
                max_water_tank=args.max_tank,
                pumping_capacity=args.pumping_capacity,
                seed=args.seed,
                realtime=args.realtime,
            )
            machine = CoffeeMachine.from_config(config)
        container_cls = CONTAINERS[args.container]
        coffee_type = CoffeeType(args.coffee_type)

        machine.add_water(args.water)
        if not args.no_plug:
            machine.plug_in()

        served = 0
        attempts = 0
        while served < args.count:
            if attempts >= MAX_ATTEMPTS_PER_COFFEE * args.count:
                logger.error("Giving up after %d attempts", attempts)
                return 1
            attempts += 1
            coffee = machine.make_coffee(container_cls(capacity=args.capacity), coffee_type)
            if coffee is None:
                machine.reset()
                continue
            served += 1
            print(coffee.model_dump_json(indent=2))
    except (CoffeeMachineError, ValidationError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    print(machine)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Brew coffee with a simulated coffee machine")
    parser.add_argument("--water", type=float, default=1.0, help="Liters of water to pour in the tank")
    parser.add_argument("--container", choices=sorted(CONTAINERS), default="cup", help="Container kind")
    parser.add_argument("--capacity", type=float, default=0.05, help="Container capacity in liters")
    parser.add_argument(
        "--coffee-type", choices=[t.value for t in CoffeeType], default=CoffeeType.ARABICA.value
    )
    parser.add_argument("--count", type=int, default=1, help="Number of coffees to serve")
    parser.add_argument("--min-tank", type=float, default=DEFAULT_MIN_WATER_TANK, help="Tank minimum (L)")
    parser.add_argument("--max-tank", type=float, default=DEFAULT_MAX_WATER_TANK, help="Tank maximum (L)")
    parser.add_argument(
        "--pumping-capacity", type=float, default=DEFAULT_PUMPING_CAPACITY, help="Pump throughput (L/h)"
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed of the failure simulation")
    parser.add_argument("--realtime", action="store_true", help="Really wait while pumping and heating")
    parser.add_argument("--no-plug", action="store_true", help="Do not plug the machine in")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format=LOG_FORMAT)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
