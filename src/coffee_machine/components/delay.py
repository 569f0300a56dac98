"""
Simulated waiting.

Pumping and heating take real-world time. By default the machine only
*computes* those durations and returns them, which keeps the simulation fast
and deterministic. With `realtime=True` the calling thread is blocked for
the computed duration instead, and another thread may `cancel()` the wait,
which surfaces as MachineInterruptedError.
"""

import logging
import threading

from coffee_machine.domain.errors import MachineInterruptedError

logger = logging.getLogger(__name__)


class SimulatedDelay:
    """Waits (or pretends to wait) for a simulated duration in milliseconds."""

    def __init__(self, realtime: bool = False) -> None:
        self.realtime = realtime
        self._cancelled = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        """Interrupt the current wait and every following one until clear()."""
        logger.debug("Simulated delay cancelled")
        self._cancelled.set()

    def clear(self) -> None:
        self._cancelled.clear()

    def wait(self, duration_ms: float, what: str = "operation") -> float:
        """Block for `duration_ms` when running in real time, then return it.

        Raises MachineInterruptedError if the delay is (or becomes) cancelled.
        """
        if duration_ms < 0:
            raise ValueError(f"Duration must be non-negative, got {duration_ms}")
        if self.realtime:
            logger.debug("Waiting %.1f ms for %s", duration_ms, what)
            # Event.wait returns True as soon as cancel() is called
            interrupted = self._cancelled.wait(duration_ms / 1000)
        else:
            interrupted = self._cancelled.is_set()
        if interrupted:
            raise MachineInterruptedError(f"The {what} was interrupted")
        return duration_ms
