import pytest

from coffee_machine.components.water_tank import WaterTank
from coffee_machine.domain.errors import TankBoundsError


@pytest.fixture
def water_tank() -> WaterTank:
    return WaterTank(15, 10, 20)


def test_decrease(water_tank):
    assert water_tank.current_volume == 15
    assert water_tank.decrease(3) == 12
    assert water_tank.current_volume == 12


def test_increase(water_tank):
    assert water_tank.current_volume == 15
    assert water_tank.increase(3) == 18
    assert water_tank.current_volume == 18


@pytest.mark.parametrize("volume", [0, 0.5, 2.25, 5])
def test_decrease_then_increase_restores_volume(water_tank, volume):
    water_tank.decrease(volume)
    water_tank.increase(volume)
    assert water_tank.current_volume == pytest.approx(15)


def test_increase_over_max_is_rejected(water_tank):
    with pytest.raises(TankBoundsError, match="capacity exceeded"):
        water_tank.increase(5.5)
    assert water_tank.current_volume == 15


def test_decrease_under_min_is_rejected(water_tank):
    with pytest.raises(TankBoundsError, match="Insufficient volume"):
        water_tank.decrease(5.5)
    assert water_tank.current_volume == 15


def test_fill_to_exact_bounds(water_tank):
    water_tank.increase(5)
    assert water_tank.current_volume == 20
    water_tank.decrease(10)
    assert water_tank.current_volume == 10
    assert water_tank.available_volume == 0


def test_negative_volume_is_rejected(water_tank):
    with pytest.raises(ValueError):
        water_tank.increase(-1)
    with pytest.raises(ValueError):
        water_tank.decrease(-1)


def test_invalid_construction():
    with pytest.raises(ValueError):
        WaterTank(5, 10, 2)
    with pytest.raises(TankBoundsError):
        WaterTank(30, 0, 20)


def test_str(water_tank):
    assert str(water_tank) == "15 L (min 10 L, max 20 L)"


def test_can_supply(water_tank):
    assert water_tank.can_supply(5)
    assert not water_tank.can_supply(5.5)


def test_can_supply_agrees_with_decrease():
    water_tank = WaterTank(0.11, 0.11, 10)
    water_tank.increase(0.34)
    assert not water_tank.can_supply(0.34)
    with pytest.raises(TankBoundsError):
        water_tank.decrease(0.34)
