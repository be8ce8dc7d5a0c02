"""Exceptions raised by the sequencing core.

Invalid numeric arguments use the built-in :class:`ValueError` and unknown
easing names :class:`KeyError`; the classes below cover misuse of the
arm/tick/start protocol.
"""

from __future__ import annotations


class TweenError(Exception):
    """Base class for protocol errors."""


class NotArmedError(TweenError, RuntimeError):
    """Raised when progress is requested before ``arm`` (or after ``reverse``)."""


class ProgramStateError(TweenError, RuntimeError):
    """Raised when a program is started or ticked from the wrong state."""


class SealedError(TweenError, RuntimeError):
    """Raised when actions are registered on a sealed step or builder."""


__all__ = ["TweenError", "NotArmedError", "ProgramStateError", "SealedError"]
