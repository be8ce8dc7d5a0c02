from __future__ import annotations

import math
from typing import Callable, Dict, Optional, Union

Easing = Callable[[float], float]


def linear(t: float) -> float:
    """Linear easing."""
    return t


def smooth(t: float) -> float:
    """Smoothstep easing for gentle ease-in/out."""
    return t * t * (3 - 2 * t)


def ease_in_quad(t: float) -> float:
    return t * t


def ease_out_quad(t: float) -> float:
    return t * (2 - t)


def ease_in_out_quad(t: float) -> float:
    if t < 0.5:
        return 2 * t * t
    return 1 - (-2 * t + 2) ** 2 / 2


def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_out_cubic(t: float) -> float:
    """Cubic ease-out curve."""
    return 1 - (1 - t) ** 3


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return 1 - (-2 * t + 2) ** 3 / 2


def ease_out_bounce(t: float) -> float:
    """Bounce ease-out curve."""
    if t < 1 / 2.75:
        return 7.5625 * t * t
    if t < 2 / 2.75:
        t -= 1.5 / 2.75
        return 7.5625 * t * t + 0.75
    if t < 2.5 / 2.75:
        t -= 2.25 / 2.75
        return 7.5625 * t * t + 0.9375
    t -= 2.625 / 2.75
    return 7.5625 * t * t + 0.984375


def elastic(t: float) -> float:
    """Elastic ease-out curve. Overshoots past 1 before settling."""
    if t == 0 or t == 1:
        return t
    p = 0.3
    s = p / 4
    return math.pow(2, -10 * t) * math.sin((t - s) * (2 * math.pi) / p) + 1


EASING_FUNCTIONS: Dict[str, Easing] = {
    "linear": linear,
    "smooth": smooth,
    "ease-in-quad": ease_in_quad,
    "ease-out-quad": ease_out_quad,
    "ease-in-out-quad": ease_in_out_quad,
    "ease-in-cubic": ease_in_cubic,
    "ease-out-cubic": ease_out_cubic,
    "ease-in-out-cubic": ease_in_out_cubic,
    "bounce": ease_out_bounce,
    "elastic": elastic,
}


def register_easing(name: str, fn: Easing) -> None:
    """Make ``fn`` available under ``name`` for :func:`resolve_easing`."""
    if not callable(fn):
        raise TypeError(f"Easing '{name}' must be callable")
    EASING_FUNCTIONS[name] = fn


def resolve_easing(ease: Optional[Union[str, Easing]] = None) -> Easing:
    """Return the easing callable for a name, a callable or ``None``."""
    if ease is None:
        return linear
    if isinstance(ease, str):
        if ease not in EASING_FUNCTIONS:
            raise KeyError(f"Unknown easing '{ease}'")
        return EASING_FUNCTIONS[ease]
    if not callable(ease):
        raise TypeError(f"Easing must be a name or callable, got {ease!r}")
    return ease


__all__ = [
    "Easing",
    "linear",
    "smooth",
    "ease_in_quad",
    "ease_out_quad",
    "ease_in_out_quad",
    "ease_in_cubic",
    "ease_out_cubic",
    "ease_in_out_cubic",
    "ease_out_bounce",
    "elastic",
    "EASING_FUNCTIONS",
    "register_easing",
    "resolve_easing",
]
