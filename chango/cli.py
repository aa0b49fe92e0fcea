"""Command line entry point choosing a demonstration to run."""

from __future__ import annotations

import argparse
import re
from decimal import Decimal
from typing import List, Optional

from chango.config import get_config
from chango.executions import UnknownPatternError, execution_factory
from chango.logs import Log, with_message
from chango.registry import Image

_UNIT_NANOS = {"ns": 1, "us": 10**3, "µs": 10**3, "μs": 10**3, "ms": 10**6,
               "s": 10**9, "m": 60 * 10**9, "h": 3600 * 10**9}
_DURATION = re.compile(r"((\d+\.?\d*|\.\d+)(ns|us|µs|μs|ms|s|m|h))+")
_PART = re.compile(r"(\d+\.?\d*|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def parse_duration(text: str) -> float:
    """Parse a duration such as "300ms", "1.5h" or "1m30s" into seconds."""
    sign = -1 if text.startswith("-") else 1
    rest = text[1:] if text[:1] in ("+", "-") else text
    if rest == "0":
        return 0.0
    if not _DURATION.fullmatch(rest):
        raise ValueError(f'time: invalid duration "{text}"')
    total = sum(Decimal(number) * _UNIT_NANOS[unit] for number, unit in _PART.findall(rest))
    return sign * float(total / 10**9)


def _duration_argument(text: str) -> float:
    try:
        return parse_duration(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


_FLAGS = (
    ("pattern", str, "observer", "start observer pattern"),
    ("filename", str, "data.json", "file name location"),
    ("name", str, "etzba/etz", "image name from docker registry"),
    ("tag", str, "latest", "image tag"),
    ("sha", str, "sha256:d135a04a2ac74466c7c01747daee7d4efae7d09e457b0e8d54bc510f2be1408a",
     "image sha digest"),
    ("workers", int, 20, "number of workers"),
    ("duration", _duration_argument, 20.0, "add duration to command execution"),
    ("interval", _duration_argument, 3.0, "add interval to command execution"),
)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse the command flags, accepting both -flag and --flag forms."""
    parser = argparse.ArgumentParser(prog="chango", allow_abbrev=False)
    for flag, kind, default, help_text in _FLAGS:
        parser.add_argument(f"-{flag}", f"--{flag}", type=kind, default=default, help=help_text)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the demonstration selected by -pattern."""
    args = parse_args(argv)
    logger = Log()
    config = get_config(args.filename, args.workers, args.duration)
    image = Image(name=args.name, tag=args.tag, sha=args.sha)
    with_message(logger).info("start executing pattern " + args.pattern)
    try:
        execution = execution_factory(logger, config, image, args.pattern)
    except UnknownPatternError as exc:
        print(exc)
        return 2
    execution.execute()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())