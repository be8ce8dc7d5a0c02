"""Time providers.

The core never reads a global clock: ``arm``/``tick``/``advance`` receive the
current time and push sequences receive a zero-argument ``clock`` callable.
"""

from __future__ import annotations

import time
from typing import Callable

import pygame

Clock = Callable[[], float]


class ManualClock:
    """Clock advanced explicitly by the caller. Useful for tests and simulation."""

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)

    def __call__(self) -> float:
        return self._now

    @property
    def now(self) -> float:
        return self._now

    def advance(self, dt: float) -> float:
        """Move the clock forward by ``dt`` seconds and return the new time."""
        if dt < 0:
            raise ValueError(f"Cannot move a clock backwards (dt={dt})")
        self._now += dt
        return self._now


def monotonic_clock() -> float:
    """Seconds from a monotonic high-resolution counter."""
    return time.perf_counter()


def pygame_clock() -> float:
    """Seconds since ``pygame.init()``, for hosts driven by a pygame loop."""
    return pygame.time.get_ticks() / 1000.0


__all__ = ["Clock", "ManualClock", "monotonic_clock", "pygame_clock"]
