"""Tweening and step sequencing for frame-driven hosts."""

from .clock import ManualClock, monotonic_clock, pygame_clock
from .easing import EASING_FUNCTIONS, linear, register_easing, resolve_easing
from .errors import NotArmedError, ProgramStateError, SealedError, TweenError
from .group import StepGroup
from .logs import configure_logging, log_action, logger
from .options import DEFAULT_OPTIONS, OPTIONS_FILE, load_options, save_options
from .program import Program, ProgramState, Timeline
from .progress import DurationPolicy, ProgressSource, SpeedPolicy
from .scheduler import Scheduler
from .steps import DelayStep, OneShotStep, PredicateStep, Step, TimedStep
from .value import ValueAnimation, distance, lerp

__all__ = [
    'ManualClock', 'monotonic_clock', 'pygame_clock',
    'EASING_FUNCTIONS', 'linear', 'register_easing', 'resolve_easing',
    'TweenError', 'NotArmedError', 'ProgramStateError', 'SealedError',
    'StepGroup',
    'logger', 'configure_logging', 'log_action',
    'DEFAULT_OPTIONS', 'OPTIONS_FILE', 'load_options', 'save_options',
    'Program', 'ProgramState', 'Timeline',
    'DurationPolicy', 'SpeedPolicy', 'ProgressSource',
    'Scheduler',
    'Step', 'TimedStep', 'DelayStep', 'PredicateStep', 'OneShotStep',
    'ValueAnimation', 'lerp', 'distance',
]
