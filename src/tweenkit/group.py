"""Simultaneous sub-animations sharing one duration."""

from __future__ import annotations

from typing import Any, Callable, Optional

from .easing import Easing, resolve_easing
from .progress import ProgressSource
from .steps import Action, TimedStep
from . import value as _value

Setter = Callable[[Any], None]
Interpolator = Callable[[Any, Any, float], Any]


class StepGroup(TimedStep):
    """Timed step whose actions all share a single duration-based ``t``.

    Actions run in registration order on every tick and therefore start and
    finish together. Registration is rejected once the group is sealed, which
    happens when it is built into a program or first armed/ticked.

    Example::

        group = (StepGroup(0.5)
                 .tween(0.0, 1.0, set_opacity, ease="smooth")
                 .tween(Vector2(0, 0), Vector2(40, 0), set_pos)
                 .custom(lambda t: print(t)))
    """

    def __init__(self, duration: float, reversed: bool = False) -> None:
        super().__init__(ProgressSource.over(duration, reversed))

    @property
    def duration(self) -> float:
        return self.source.policy.duration

    def tween(self, start: Any, end: Any, setter: Setter,
              ease: str | Easing | None = None,
              lerp: Optional[Interpolator] = None) -> "StepGroup":
        """Register ``setter(lerp(start, end, ease(t)))``."""
        if not callable(setter):
            raise TypeError(f"Setter must be callable, got {setter!r}")
        fn = resolve_easing(ease)
        interp = lerp or _value.lerp

        def action(t: float) -> None:
            setter(interp(start, end, fn(t)))

        self.add_action(action)
        return self

    def custom(self, action: Action) -> "StepGroup":
        """Register a raw ``(t) -> None`` action."""
        self.add_action(action)
        return self


__all__ = ["StepGroup"]
