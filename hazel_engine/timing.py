"""Frame time steps and a high-resolution stopwatch."""

from __future__ import annotations

import time
from dataclasses import dataclass


@dataclass(frozen=True)
class Timestep:
    """The time that passed between two frames, in seconds."""

    time: float = 0.0

    def __float__(self) -> float:
        return float(self.time)

    def __mul__(self, other: float) -> float:
        return self.time * other

    __rmul__ = __mul__

    @property
    def seconds(self) -> float:
        return self.time

    @property
    def milliseconds(self) -> float:
        return self.time * 1000.0


class Timer:
    """Measures wall-clock time since creation or the last reset."""

    def __init__(self) -> None:
        self._start = 0
        self.reset()

    def reset(self) -> None:
        self._start = time.perf_counter_ns()

    def elapsed(self) -> float:
        """Seconds since the timer was started or reset."""
        return (time.perf_counter_ns() - self._start) * 1e-9

    def elapsed_millis(self) -> float:
        return self.elapsed() * 1000.0