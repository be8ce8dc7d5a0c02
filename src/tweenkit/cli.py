"""Command line demo: print one animated value per frame."""

from __future__ import annotations

import argparse
from typing import Any, Dict, List, Optional

from .clock import ManualClock, monotonic_clock
from .easing import EASING_FUNCTIONS
from .group import StepGroup
from .logs import configure_logging, log_action
from .options import OPTIONS_FILE, load_options
from .program import Program
from .steps import TimedStep
from .value import lerp


def _positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def _positive_float(text: str) -> float:
    value = float(text)
    if not value > 0:
        raise argparse.ArgumentTypeError(f"expected a positive number, got {text}")
    return value


def _check_defaults(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    """Reject option-file values that argparse did not validate as defaults."""
    if args.easing not in EASING_FUNCTIONS:
        parser.error(f"unknown easing {args.easing!r} in options file")
    if isinstance(args.fps, bool) or not isinstance(args.fps, int) or args.fps < 1:
        parser.error(f"fps must be a positive integer, got {args.fps!r}")
    if isinstance(args.duration, bool) or not isinstance(args.duration, (int, float)) \
            or not args.duration > 0:
        parser.error(f"duration must be a positive number, got {args.duration!r}")


def create_parser(options: Optional[Dict[str, Any]] = None) -> argparse.ArgumentParser:
    """Return the argument parser with defaults taken from ``options``."""
    options = options or load_options()
    parser = argparse.ArgumentParser(description="Print an eased value frame by frame")
    parser.add_argument("--start", type=float, default=0.0, help="start value")
    parser.add_argument("--end", type=float, default=1.0, help="end value")
    parser.add_argument("--duration", type=_positive_float, default=options["duration"],
                        help="animation length in seconds")
    parser.add_argument("--speed", type=_positive_float, default=None,
                        help="units per second; replaces --duration")
    parser.add_argument("--easing", default=options["easing"], choices=sorted(EASING_FUNCTIONS),
                        help="easing curve")
    parser.add_argument("--loops", type=_positive_int, default=1, help="number of passes")
    parser.add_argument("--reverse", action="store_true", help="play from end to start")
    parser.add_argument("--fps", type=_positive_int, default=options["fps"], help="frames per second")
    parser.add_argument("--realtime", action="store_true",
                        help="run against the wall clock instead of a simulated one")
    parser.add_argument("--options", default=str(OPTIONS_FILE), help="options file to read")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the demo and return the process exit code."""
    pre = argparse.ArgumentParser(add_help=False)
    pre.add_argument("--options", default=str(OPTIONS_FILE))
    known, _ = pre.parse_known_args(argv)
    options = load_options(known.options)
    parser = create_parser(options)
    args = parser.parse_args(argv)
    _check_defaults(parser, args)
    configure_logging(options["log_file"], options["log_level"])
    log_action(
        f"demo start={args.start} end={args.end} easing={args.easing} loops={args.loops}"
    )

    clock = ManualClock() if not args.realtime else monotonic_clock
    origin = clock()
    frame = 1.0 / args.fps

    def show(value: float) -> None:
        print(f"{clock() - origin:8.3f}  {value:.4f}")

    if args.speed is not None:
        def action(t: float) -> None:
            show(lerp(args.start, args.end, t))

        step = TimedStep.at_speed(args.speed, abs(args.end - args.start), action,
                                  args.easing, reversed=args.reverse)
    else:
        step = StepGroup(args.duration, reversed=args.reverse).tween(
            args.start, args.end, show, args.easing
        )

    between_ticks = None
    if not args.realtime:
        def between_ticks() -> None:
            clock.advance(frame)

    Program([step]).run_to_completion(clock, between_ticks, loops=args.loops, fps=args.fps)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
