import threading

import pytest

from coffee_machine.components.delay import SimulatedDelay
from coffee_machine.domain.errors import MachineInterruptedError


def test_simulated_wait_returns_duration():
    assert SimulatedDelay().wait(3636.36) == 3636.36


def test_realtime_wait_short_duration():
    assert SimulatedDelay(realtime=True).wait(1) == 1


def test_cancelled_delay_interrupts_until_cleared():
    delay = SimulatedDelay()
    delay.cancel()
    assert delay.cancelled
    with pytest.raises(MachineInterruptedError):
        delay.wait(10)
    with pytest.raises(MachineInterruptedError):
        delay.wait(10)

    delay.clear()
    assert delay.wait(10) == 10


def test_cancel_from_another_thread_wakes_realtime_wait():
    delay = SimulatedDelay(realtime=True)
    timer = threading.Timer(0.01, delay.cancel)
    timer.start()
    try:
        # Would block for a minute without the cancellation
        with pytest.raises(MachineInterruptedError):
            delay.wait(60_000)
    finally:
        timer.cancel()


def test_negative_duration():
    with pytest.raises(ValueError):
        SimulatedDelay().wait(-1)
