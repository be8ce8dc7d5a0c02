"""Normalised progress from elapsed time.

A :class:`ProgressSource` combines a timing policy with a direction flag and
turns elapsed seconds into ``t`` in ``[0, 1]``. Two policies exist:

* :class:`DurationPolicy` - ``rawT = elapsed / duration``
* :class:`SpeedPolicy` - ``rawT = elapsed * speed / travel_distance``

The source can be driven in pull mode (``arm`` then repeated ``advance``) or
in push mode (iterate :meth:`ProgressSource.produce_sequence`). Both share
:meth:`ProgressSource.progress_at`.
"""

from __future__ import annotations

import math
from typing import Iterator, Tuple, Union

from .clock import Clock
from .errors import NotArmedError


def _check_positive(name: str, value: float) -> float:
    value = float(value)
    if math.isnan(value) or value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


class DurationPolicy:
    """Progress measured against a fixed duration in seconds."""

    def __init__(self, duration: float) -> None:
        self.duration = _check_positive("duration", duration)

    def raw_progress(self, elapsed: float) -> float:
        return elapsed / self.duration

    def __repr__(self) -> str:
        return f"DurationPolicy(duration={self.duration})"


class SpeedPolicy:
    """Progress measured as distance covered at ``speed`` units per second.

    A zero ``travel_distance`` is complete from the start.
    """

    def __init__(self, speed: float, travel_distance: float) -> None:
        self.speed = _check_positive("speed", speed)
        travel_distance = float(travel_distance)
        if math.isnan(travel_distance) or travel_distance < 0:
            raise ValueError(f"travel_distance must be >= 0, got {travel_distance}")
        self.travel_distance = travel_distance

    @property
    def duration(self) -> float:
        """Seconds needed to cover the distance."""
        return self.travel_distance / self.speed

    def raw_progress(self, elapsed: float) -> float:
        if self.travel_distance == 0:
            return math.inf
        return elapsed * self.speed / self.travel_distance

    def __repr__(self) -> str:
        return f"SpeedPolicy(speed={self.speed}, travel_distance={self.travel_distance})"


Policy = Union[DurationPolicy, SpeedPolicy]


class ProgressSource:
    """Direction-aware progress for one timing policy."""

    def __init__(self, policy: Policy, reversed: bool = False) -> None:
        self.policy = policy
        self._reversed = bool(reversed)
        self._start_time = 0.0
        self._armed = False

    @classmethod
    def over(cls, duration: float, reversed: bool = False) -> "ProgressSource":
        return cls(DurationPolicy(duration), reversed)

    @classmethod
    def at_speed(cls, speed: float, travel_distance: float, reversed: bool = False) -> "ProgressSource":
        return cls(SpeedPolicy(speed, travel_distance), reversed)

    @property
    def reversed(self) -> bool:
        return self._reversed

    @property
    def armed(self) -> bool:
        return self._armed

    @property
    def start_time(self) -> float:
        return self._start_time

    def arm(self, now: float) -> None:
        """Record ``now`` as the baseline for :meth:`advance`."""
        self._start_time = float(now)
        self._armed = True

    def progress_at(self, elapsed: float) -> Tuple[float, bool]:
        """Return ``(t, finished)`` for ``elapsed`` seconds of playback.

        ``t`` is clamped before the direction flip, so it stays in
        ``[0, 1]`` however far ``rawT`` overshoots. ``finished`` is true from
        the first moment ``rawT`` reaches 1.
        """
        raw = self.policy.raw_progress(max(0.0, elapsed))
        t = min(1.0, max(0.0, raw))
        if self._reversed:
            t = 1.0 - t
        return t, raw >= 1.0

    def advance(self, now: float) -> Tuple[float, bool]:
        """Pull mode: progress at ``now`` relative to the last :meth:`arm`."""
        if not self._armed:
            raise NotArmedError("ProgressSource.advance() called before arm()")
        return self.progress_at(now - self._start_time)

    def reverse(self) -> None:
        """Flip the direction. The source must be armed again before advancing."""
        self._reversed = not self._reversed
        self._armed = False

    def produce_sequence(self, clock: Clock) -> Iterator[float]:
        """Push mode: yield ``t`` once per resumption until complete.

        The baseline is read from ``clock`` on the first resumption and kept
        local to the iterator, so the pull-mode baseline is untouched. The
        frame that reaches completion is yielded before the iterator ends.
        """
        start = clock()
        while True:
            t, finished = self.progress_at(clock() - start)
            yield t
            if finished:
                return

    def __repr__(self) -> str:
        return f"ProgressSource({self.policy!r}, reversed={self._reversed})"


__all__ = ["DurationPolicy", "SpeedPolicy", "Policy", "ProgressSource"]
