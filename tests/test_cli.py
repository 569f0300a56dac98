import json

from coffee_machine import cli
from coffee_machine.domain.failure import FixedGaussianSource
from coffee_machine.machine import CoffeeMachine


def parse(*argv: str):
    return cli.build_parser().parse_args(list(argv))


def split_documents(output: str) -> list[dict]:
    """Decode the JSON containers printed before the machine description."""
    decoder = json.JSONDecoder()
    documents = []
    text = output.lstrip()
    while text.startswith("{"):
        document, end = decoder.raw_decode(text)
        documents.append(document)
        text = text[end:].lstrip()
    return documents


def test_brews_and_resets_after_breakdown(capsys):
    machine = CoffeeMachine(0, 10, 700, random_source=FixedGaussianSource(1.5, 0.2))
    args = parse("--water", "1", "--container", "mug", "--capacity", "0.2", "--count", "2",
                 "--coffee-type", "MOKA")

    assert cli.run(args, machine) == 0

    output = capsys.readouterr().out
    assert split_documents(output) == [
        {"kind": "coffee-mug", "capacity": 0.2, "coffee_type": "MOKA"},
        {"kind": "coffee-mug", "capacity": 0.2, "coffee_type": "MOKA"},
    ]
    assert "and made 2 coffees" in output
    assert machine.coffee_count == 2


def test_unplugged_machine_fails(capsys):
    assert cli.run(parse("--no-plug")) == 1
    assert capsys.readouterr().out == ""


def test_not_enough_water_fails():
    assert cli.run(parse("--water", "0.01", "--capacity", "0.05")) == 1


def test_negative_water_fails(capsys):
    assert cli.run(parse("--water", "-1")) == 1
    assert capsys.readouterr().out == ""


def test_invalid_configuration_fails():
    assert cli.run(parse("--min-tank", "5", "--max-tank", "1")) == 1


def test_gives_up_when_machine_always_breaks():
    machine = CoffeeMachine(0, 10, 700, random_source=FixedGaussianSource(3.0))
    assert cli.run(parse(), machine) == 1
    assert machine.coffee_count == 0


def test_main_with_seed(capsys):
    assert cli.main(["--seed", "7", "--count", "3", "--log-level", "warning"]) == 0
    assert "and made 3 coffees" in capsys.readouterr().out
