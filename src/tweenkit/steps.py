"""Program steps.

Every step answers the same four calls:

* ``arm(now)`` - begin timing from ``now`` (no side effects)
* ``tick(now)`` - do this frame's work and return ``True`` once finished
* ``reverse()`` - flip direction; only timed steps react
* ``produce_sequence(clock)`` - push-mode equivalent of arm + repeated tick

A step is single-use per arm: arm it again to replay it.
"""

from __future__ import annotations

import math
from typing import Callable, Iterable, Iterator, Optional, Tuple

from .clock import Clock
from .easing import Easing, linear, resolve_easing
from .errors import NotArmedError, SealedError
from .progress import ProgressSource

Action = Callable[[float], None]


class Step:
    """Base class for the step variants."""

    def arm(self, now: float) -> None:
        raise NotImplementedError("Subclasses must implement arm()")

    def tick(self, now: float) -> bool:
        raise NotImplementedError("Subclasses must implement tick()")

    def reverse(self) -> None:
        """Does nothing for steps without a direction."""

    def seal(self) -> None:
        """Does nothing for steps without registration."""

    @property
    def progress(self) -> Optional[float]:
        """Last progress value computed by :meth:`tick`, if the step has one."""
        return None

    def produce_sequence(self, clock: Clock) -> Iterator[Optional[float]]:
        """Arm from ``clock`` and tick once per resumption until finished.

        Each resumption yields :attr:`progress`; the finishing frame is
        yielded before the iterator ends.
        """
        self.arm(clock())
        while True:
            finished = self.tick(clock())
            yield self.progress
            if finished:
                return


class TimedStep(Step):
    """Feed one :class:`ProgressSource` to a list of ``(t) -> None`` actions."""

    def __init__(self, source: ProgressSource, actions: Iterable[Action] = ()) -> None:
        self.source = source
        self._actions: list[Action] = []
        self._sealed = False
        self._progress: Optional[float] = None
        for action in actions:
            self.add_action(action)

    @classmethod
    def over(cls, duration: float, action: Action, ease: str | Easing | None = None,
             reversed: bool = False) -> "TimedStep":
        """Step running ``action(ease(t))`` for ``duration`` seconds."""
        return cls(ProgressSource.over(duration, reversed), [_eased(action, ease)])

    @classmethod
    def at_speed(cls, speed: float, travel_distance: float, action: Action,
                 ease: str | Easing | None = None, reversed: bool = False) -> "TimedStep":
        """Step running ``action(ease(t))`` while covering ``travel_distance``."""
        source = ProgressSource.at_speed(speed, travel_distance, reversed)
        return cls(source, [_eased(action, ease)])

    @property
    def actions(self) -> Tuple[Action, ...]:
        return tuple(self._actions)

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def progress(self) -> Optional[float]:
        return self._progress

    def add_action(self, action: Action) -> "TimedStep":
        """Register ``action``; it is called with ``t`` on every tick."""
        if self._sealed:
            raise SealedError(f"Cannot add actions to sealed {type(self).__name__}")
        if not callable(action):
            raise TypeError(f"Action must be callable, got {action!r}")
        self._actions.append(action)
        return self

    def seal(self) -> None:
        self._sealed = True

    def arm(self, now: float) -> None:
        self._sealed = True
        self.source.arm(now)

    def tick(self, now: float) -> bool:
        self._sealed = True
        t, finished = self.source.advance(now)
        self._progress = t
        for action in self._actions:
            action(t)
        return finished

    def reverse(self) -> None:
        """Flip direction. Arm again before the next tick."""
        self.source.reverse()


class DelayStep(Step):
    """Wait for a fixed number of seconds."""

    def __init__(self, duration: float) -> None:
        duration = float(duration)
        if math.isnan(duration) or duration < 0:
            raise ValueError(f"duration must be >= 0, got {duration}")
        self.duration = duration
        self._start_time = 0.0
        self._armed = False

    def arm(self, now: float) -> None:
        self._start_time = float(now)
        self._armed = True

    def tick(self, now: float) -> bool:
        if not self._armed:
            raise NotArmedError("DelayStep.tick() called before arm()")
        return now - self._start_time >= self.duration


class PredicateStep(Step):
    """Wait until ``predicate(now)`` is true. Needs no baseline."""

    def __init__(self, predicate: Callable[[float], bool]) -> None:
        if not callable(predicate):
            raise TypeError(f"Predicate must be callable, got {predicate!r}")
        self.predicate = predicate

    def arm(self, now: float) -> None:
        pass

    def tick(self, now: float) -> bool:
        return bool(self.predicate(now))


class OneShotStep(Step):
    """Call ``action`` once on the first tick after arming, then finish."""

    def __init__(self, action: Callable[[], None]) -> None:
        if not callable(action):
            raise TypeError(f"Action must be callable, got {action!r}")
        self.action = action
        self._fired = False

    @property
    def fired(self) -> bool:
        return self._fired

    def arm(self, now: float) -> None:
        self._fired = False

    def tick(self, now: float) -> bool:
        if not self._fired:
            self._fired = True
            self.action()
        return True


def _eased(action: Action, ease: str | Easing | None) -> Action:
    fn = resolve_easing(ease)
    if fn is linear:
        return action

    def step(t: float) -> None:
        action(fn(t))

    return step


__all__ = ["Action", "Step", "TimedStep", "DelayStep", "PredicateStep", "OneShotStep"]
