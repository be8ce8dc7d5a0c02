"""Ordered, runnable sequences of steps.

A :class:`Program` walks its steps one at a time. It is driven either by
calling :meth:`Program.tick` from the host's frame callback (pull mode) or by
draining the iterator returned from :meth:`Program.run` (push mode); the
iterator is a thin loop around ``tick`` so both modes share one state
machine::

    IDLE -> RUNNING -> FINISHED
    IDLE -> RUNNING -> STOPPED

``FINISHED`` and ``STOPPED`` are terminal. A program cannot be restarted;
build a new one instead. :class:`Timeline` is the builder that assembles a
program from tweens, groups, waits and one-shot callbacks.
"""

from __future__ import annotations

import logging
import time
from enum import Enum, auto
from typing import Any, Callable, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from .clock import Clock
from .easing import Easing
from .errors import ProgramStateError, SealedError
from .group import Interpolator, Setter, StepGroup
from .options import DEFAULT_OPTIONS
from .steps import DelayStep, OneShotStep, PredicateStep, Step, TimedStep
from . import value as _value

logger = logging.getLogger(__name__)

Listener = Callable[["Program"], None]


class ProgramState(Enum):
    """Lifecycle of a :class:`Program`."""

    IDLE = auto()
    RUNNING = auto()
    FINISHED = auto()
    STOPPED = auto()


class Program:
    """Run steps in order, once, a fixed number of times or forever."""

    def __init__(self, steps: Iterable[Step] = (), on_finish: Optional[Listener] = None,
                 on_stop: Optional[Listener] = None) -> None:
        steps = tuple(steps)
        for step in steps:
            if not isinstance(step, Step):
                raise TypeError(f"Program steps must be Step instances, got {step!r}")
            step.seal()
        self._steps: Tuple[Step, ...] = steps
        self._on_finish = on_finish
        self._on_stop = on_stop
        self._state = ProgramState.IDLE
        self._index = 0
        self._iteration = 0
        self._loops: Optional[int] = 1
        self._remaining: Optional[int] = 1
        self._pending_arm = True

    # Introspection ---------------------------------------------------
    @property
    def state(self) -> ProgramState:
        return self._state

    @property
    def steps(self) -> Tuple[Step, ...]:
        """The program's steps. Empty once the program has terminated."""
        return self._steps

    @property
    def index(self) -> int:
        """Index of the step currently being ticked."""
        return self._index

    @property
    def iteration(self) -> int:
        """Number of completed passes over the steps."""
        return self._iteration

    @property
    def loops(self) -> Optional[int]:
        """Requested passes; ``None`` means forever."""
        return self._loops

    @property
    def remaining_loops(self) -> Optional[int]:
        return self._remaining

    @property
    def is_running(self) -> bool:
        return self._state is ProgramState.RUNNING

    def __len__(self) -> int:
        return len(self._steps)

    # Lifecycle -------------------------------------------------------
    def start(self, loops: Optional[int] = 1) -> None:
        """Move from IDLE to RUNNING.

        ``loops`` is the number of passes over the steps; ``None`` repeats
        until :meth:`stop` is called.
        """
        if self._state is ProgramState.RUNNING:
            logger.warning("Rejected start(): program is already running")
            raise ProgramStateError("Program is already running")
        if self._state is not ProgramState.IDLE:
            logger.warning("Rejected start(): program is %s", self._state.name)
            raise ProgramStateError(
                f"Program is {self._state.name.lower()} and cannot be restarted"
            )
        if not self._steps:
            logger.warning("Rejected start(): program has no steps")
            raise ProgramStateError("Cannot start a program without steps")
        if loops is not None and (isinstance(loops, bool) or not isinstance(loops, int) or loops < 1):
            raise ValueError(f"loops must be a positive integer or None, got {loops!r}")

        self._loops = loops
        self._remaining = loops
        self._index = 0
        self._iteration = 0
        self._pending_arm = True
        self._state = ProgramState.RUNNING
        logger.info(
            "Program started: %d steps, loops=%s",
            len(self._steps), "infinite" if loops is None else loops,
        )

    def tick(self, now: float) -> bool:
        """Advance the current step and return whether the program is still running.

        A step that finishes hands over to the next one, which is armed at
        ``now`` and ticked for the first time on the following call.
        """
        if self._state is ProgramState.IDLE:
            raise ProgramStateError("Program.tick() called before start()")
        if self._state is not ProgramState.RUNNING:
            return False

        step = self._steps[self._index]
        if self._pending_arm:
            step.arm(now)
            self._pending_arm = False
        finished = step.tick(now)
        # An action may have stopped the program.
        if self._state is not ProgramState.RUNNING:
            return False
        if finished:
            self._next_step(now)
        return self._state is ProgramState.RUNNING

    def _next_step(self, now: float) -> None:
        self._index += 1
        if self._index >= len(self._steps):
            self._iteration += 1
            if self._remaining is not None:
                self._remaining -= 1
                if self._remaining <= 0:
                    self._finish()
                    return
            logger.debug("Program pass %d complete, restarting", self._iteration)
            self._index = 0
        self._steps[self._index].arm(now)

    def stop(self) -> None:
        """Stop the program for good. Calling it again has no effect."""
        if self._state in (ProgramState.STOPPED, ProgramState.FINISHED):
            return
        self._state = ProgramState.STOPPED
        logger.info("Program stopped at step %d (pass %d)", self._index, self._iteration)
        if self._on_stop is not None:
            self._on_stop(self)
        self._release()

    def _finish(self) -> None:
        self._state = ProgramState.FINISHED
        logger.info("Program finished after %d passes", self._iteration)
        if self._on_finish is not None:
            self._on_finish(self)
        self._release()

    def _release(self) -> None:
        self._steps = ()
        self._on_finish = None
        self._on_stop = None

    # Drivers ---------------------------------------------------------
    def run(self, clock: Clock, loops: Optional[int] = 1) -> Iterator[ProgramState]:
        """Start the program and return its push-mode iterator.

        Each resumption performs one :meth:`tick` at ``clock()`` and yields
        the resulting state; the iterator ends after the tick that leaves
        RUNNING, or on the next resumption after an external :meth:`stop`.
        """
        self.start(loops)

        def drive() -> Iterator[ProgramState]:
            while self._state is ProgramState.RUNNING:
                self.tick(clock())
                yield self._state

        return drive()

    def run_to_completion(self, clock: Clock, between_ticks: Optional[Callable[[], Any]] = None,
                          loops: Optional[int] = 1, fps: Optional[int] = None) -> ProgramState:
        """Tick until the program leaves RUNNING, calling ``between_ticks`` between frames.

        Without ``between_ticks`` one frame at ``fps`` is slept between ticks;
        ``fps`` falls back to the default options. Hosts that load an options
        file pass its ``fps`` here. Returns the terminal state.
        """
        if between_ticks is None:
            if fps is None:
                fps = DEFAULT_OPTIONS["fps"]
            if isinstance(fps, bool) or not isinstance(fps, int) or fps < 1:
                raise ValueError(f"fps must be a positive integer, got {fps!r}")
            interval = 1.0 / fps

            def between_ticks() -> None:
                time.sleep(interval)

        for state in self.run(clock, loops):
            if state is ProgramState.RUNNING:
                between_ticks()
        return self._state

    def __repr__(self) -> str:
        return f"<Program {self._state.name} step={self._index} steps={len(self._steps)}>"


class Timeline:
    """Builder that assembles a :class:`Program` step by step."""

    def __init__(self) -> None:
        self._steps: List[Step] = []
        self._built = False

    def __len__(self) -> int:
        return len(self._steps)

    def add(self, step: Step) -> "Timeline":
        """Append any :class:`Step`."""
        if self._built:
            raise SealedError("Timeline has already been built")
        if not isinstance(step, Step):
            raise TypeError(f"Expected a Step, got {step!r}")
        self._steps.append(step)
        return self

    def tween(self, start: Any, end: Any, duration: float, setter: Setter,
              ease: str | Easing | None = None,
              lerp: Optional[Interpolator] = None) -> "Timeline":
        """Animate one value over ``duration`` seconds."""
        return self.add(StepGroup(duration).tween(start, end, setter, ease, lerp))

    def tween_at_speed(self, start: Any, end: Any, speed: float, setter: Setter,
                       ease: str | Easing | None = None) -> "Timeline":
        """Animate one value at ``speed`` units per second."""

        def action(t: float) -> None:
            setter(_value.lerp(start, end, t))

        step = TimedStep.at_speed(speed, _value.distance(start, end), action, ease)
        return self.add(step)

    def group(self, duration: float, reversed: bool = False) -> StepGroup:
        """Append and return a :class:`StepGroup` to register simultaneous tweens on."""
        group = StepGroup(duration, reversed)
        self.add(group)
        return group

    def path(self, points: Sequence[Any], durations: Union[float, Sequence[float]],
             setter: Setter, ease: str | Easing | None = None) -> "Timeline":
        """Move through ``points`` one segment at a time.

        ``durations`` is either one duration per segment or a single value
        used for every segment. The easing applies per segment.
        """
        points = list(points)
        if len(points) < 2:
            raise ValueError("A path needs at least two points")
        segments = len(points) - 1
        if isinstance(durations, (int, float)):
            durations = [float(durations)] * segments
        else:
            durations = list(durations)
            if len(durations) != segments:
                raise ValueError(
                    f"Path has {segments} segments but {len(durations)} durations"
                )
        for start, end, duration in zip(points, points[1:], durations):
            self.tween(start, end, duration, setter, ease)
        return self

    def wait(self, duration: float) -> "Timeline":
        """Pause for ``duration`` seconds."""
        return self.add(DelayStep(duration))

    def wait_until(self, predicate: Callable[[float], bool]) -> "Timeline":
        """Pause until ``predicate(now)`` holds."""
        return self.add(PredicateStep(predicate))

    def then(self, action: Callable[[], None]) -> "Timeline":
        """Call ``action`` once after previous entries finish."""
        return self.add(OneShotStep(action))

    def build(self, on_finish: Optional[Listener] = None,
              on_stop: Optional[Listener] = None) -> Program:
        """Seal every step and return the program. The builder cannot be reused."""
        if self._built:
            raise SealedError("Timeline has already been built")
        self._built = True
        return Program(self._steps, on_finish=on_finish, on_stop=on_stop)


__all__ = ["ProgramState", "Program", "Timeline"]
