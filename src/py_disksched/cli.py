"""Command-line entry point: ``py-disksched``.

One-shot mode takes the five run inputs as arguments and prints the
formatted result::

    py-disksched scan --head 53 --requests "98,183,37,122,14,124,65,67" \
        --tracks 200 --direction right

Anything not given on the command line comes from the environment
(``DISKSCHED_*``, see ``py_disksched.config``) and then the defaults.
``--compare`` ranks all six algorithms instead, ``--random N`` replaces
the head and requests with a random draw, and ``--interactive`` starts
the shell.
"""

from __future__ import annotations

import argparse
import random
import sys
from typing import TYPE_CHECKING

from py_disksched import repl
from py_disksched.compare import compare
from py_disksched.config import SimulatorConfig
from py_disksched.engine import run
from py_disksched.formatting import format_comparison, format_result
from py_disksched.requests import format_requests, generate_random_requests, random_head
from py_disksched.types import Algorithm, Direction, InvalidConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence

EXIT_OK = 0
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for ``py-disksched``."""
    parser = argparse.ArgumentParser(
        prog="py-disksched",
        description="Compute disk head scheduling order and seek metrics.",
    )
    parser.add_argument(
        "algorithm",
        nargs="?",
        help=f"one of {', '.join(a.value for a in Algorithm)} (unknown names run fcfs)",
    )
    parser.add_argument("--head", help="initial head track")
    parser.add_argument("--requests", help='comma-separated tracks, e.g. "98,183,37"')
    parser.add_argument("--tracks", help="number of tracks on the disk")
    parser.add_argument(
        "--direction",
        choices=[d.value for d in Direction],
        help="initial sweep direction",
    )
    parser.add_argument("--compare", action="store_true", help="rank every algorithm")
    parser.add_argument("--random", type=int, metavar="N", help="use N random requests")
    parser.add_argument("--seed", type=int, help="seed for --random")
    parser.add_argument("--interactive", action="store_true", help="start the shell")
    return parser


def _load_config(args: argparse.Namespace) -> SimulatorConfig:
    config = SimulatorConfig.from_env()
    # Tracks before requests: requests are filtered against it.
    for key, value in (
        ("tracks", args.tracks),
        ("head", args.head),
        ("requests", args.requests),
        ("direction", args.direction),
    ):
        if value is not None:
            config = config.with_value(key, value)
    if args.random is not None:
        rng = random.Random(args.seed)  # noqa: S311
        requests = generate_random_requests(args.random, config.total_tracks, rng=rng)
        config = config.with_value("head", str(random_head(config.total_tracks, rng=rng)))
        config = config.with_value("requests", format_requests(requests))
    return config


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit code."""
    args = build_parser().parse_args(argv)
    try:
        config = _load_config(args)
    except InvalidConfigurationError as e:
        print(f"py-disksched: error: {e}", file=sys.stderr)  # noqa: T201
        return EXIT_USAGE

    if args.interactive:
        repl.run(config)
        return EXIT_OK

    if args.random is not None:
        print(f"head = {config.initial_head}")  # noqa: T201
        print(f"requests = {format_requests(config.requests)}")  # noqa: T201

    if args.compare:
        comparison = compare(
            config.initial_head, config.requests, config.total_tracks, config.direction
        )
        print(format_comparison(comparison))  # noqa: T201
        return EXIT_OK

    algorithm = args.algorithm if args.algorithm is not None else config.algorithm
    result = run(
        algorithm, config.initial_head, config.requests, config.total_tracks, config.direction
    )
    print(format_result(result))  # noqa: T201
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
