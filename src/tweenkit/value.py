"""Typed single-value animations.

:class:`ValueAnimation` wraps a :class:`ProgressSource` and a ``lerp(t)``
function and caches the last value it produced. :func:`lerp` and
:func:`distance` understand the value kinds a host usually animates:
numbers, ``pygame.math.Vector2``/``Vector3``, ``pygame.Color`` and plain
numeric tuples.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Callable, Generic, Iterator, Tuple, TypeVar, Union

import pygame

from .clock import Clock
from .easing import Easing, resolve_easing
from .progress import ProgressSource

T = TypeVar("T")

_VECTOR_TYPES = (pygame.math.Vector2, pygame.math.Vector3)


def _channel(value: float) -> int:
    return max(0, min(255, int(round(value))))


def lerp(start, end, t: float):
    """Interpolate between ``start`` and ``end``.

    ``t`` is not clamped so overshooting easings carry through. Colors are
    the exception: their channels are rounded and clamped to ``0..255``.
    """
    if isinstance(start, pygame.Color) or isinstance(end, pygame.Color):
        c0 = pygame.Color(start)
        c1 = pygame.Color(end)
        return pygame.Color(*(_channel(a + (b - a) * t) for a, b in zip(c0, c1)))
    if isinstance(start, _VECTOR_TYPES):
        end = type(start)(end)
        return start + (end - start) * t
    if isinstance(start, Real) and isinstance(end, Real):
        return start + (end - start) * t
    if isinstance(start, (tuple, list)) and isinstance(end, (tuple, list)):
        if len(start) != len(end):
            raise ValueError(f"Cannot interpolate {len(start)} values towards {len(end)}")
        return tuple(a + (b - a) * t for a, b in zip(start, end))
    raise TypeError(f"Cannot interpolate {type(start).__name__} values")


def distance(start, end) -> float:
    """Distance used by speed-based animations for the given value kind.

    Numbers use the absolute difference, vectors and tuples the Euclidean
    distance and colors the Manhattan distance over normalised RGBA.
    """
    if isinstance(start, pygame.Color) or isinstance(end, pygame.Color):
        c0 = pygame.Color(start)
        c1 = pygame.Color(end)
        return sum(abs(a - b) for a, b in zip(c0, c1)) / 255.0
    if isinstance(start, _VECTOR_TYPES):
        return start.distance_to(type(start)(end))
    if isinstance(start, Real) and isinstance(end, Real):
        return abs(end - start)
    if isinstance(start, (tuple, list)) and isinstance(end, (tuple, list)):
        if len(start) != len(end):
            raise ValueError(f"Cannot measure {len(start)} values against {len(end)}")
        return math.dist(start, end)
    raise TypeError(f"Cannot measure distance between {type(start).__name__} values")


class ValueAnimation(Generic[T]):
    """Pull-driven animation of one value."""

    def __init__(self, source: ProgressSource, lerp: Callable[[float], T],
                 ease: Union[str, Easing, None] = None) -> None:
        self.source = source
        self._lerp = lerp
        self._ease = resolve_easing(ease)
        self._finished = False
        self._current = self._value_for(1.0 if source.reversed else 0.0)

    @classmethod
    def over(cls, start: T, end: T, duration: float, ease: Union[str, Easing, None] = None,
             reversed: bool = False) -> "ValueAnimation[T]":
        """Animate from ``start`` to ``end`` in ``duration`` seconds."""
        source = ProgressSource.over(duration, reversed)
        return cls(source, lambda t: lerp(start, end, t), ease)

    @classmethod
    def at_speed(cls, start: T, end: T, speed: float, ease: Union[str, Easing, None] = None,
                 reversed: bool = False) -> "ValueAnimation[T]":
        """Animate from ``start`` to ``end`` covering ``speed`` units per second."""
        source = ProgressSource.at_speed(speed, distance(start, end), reversed)
        return cls(source, lambda t: lerp(start, end, t), ease)

    @property
    def current_value(self) -> T:
        """Value computed by the last :meth:`advance`."""
        return self._current

    @property
    def finished(self) -> bool:
        return self._finished

    def _value_for(self, t: float) -> T:
        return self._lerp(self._ease(t))

    def arm(self, now: float) -> None:
        self._finished = False
        self.source.arm(now)

    def advance(self, now: float) -> bool:
        """Recompute :attr:`current_value` for ``now`` and return ``True`` once finished."""
        t, finished = self.source.advance(now)
        self._current = self._value_for(t)
        self._finished = finished
        return finished

    def compute_and_advance(self, now: float) -> Tuple[T, bool]:
        """Advance and return ``(current_value, is_active)``.

        The call that completes the animation returns the final value with
        ``is_active`` false.
        """
        finished = self.advance(now)
        return self._current, not finished

    def reverse(self) -> None:
        """Flip direction. :meth:`arm` must be called before advancing again."""
        self.source.reverse()

    def produce_sequence(self, clock: Clock) -> Iterator[T]:
        """Push mode: yield one value per resumption until complete.

        :attr:`finished` is already true when the final value is yielded.
        """
        self._finished = False
        start = clock()
        while True:
            t, finished = self.source.progress_at(clock() - start)
            self._current = self._value_for(t)
            self._finished = finished
            yield self._current
            if finished:
                return


__all__ = ["ValueAnimation", "lerp", "distance"]
