"""Scheduling engine — pick a strategy by tag and run it.

``run`` is the single entry point every front end goes through.  It
validates the numeric inputs, resolves the algorithm tag, and hands
off to one of the six pure strategy functions in
``py_disksched.algorithms``.

Validation policy:
    - ``total_tracks`` must be an integer of at least 1.
    - The head and every request must be integers.  Floats, NaN and
      bools are rejected rather than allowed to poison the arithmetic.
    - Ranges are *not* checked.  A request outside ``[0, total_tracks)``
      is scheduled as given; filtering belongs to whoever built the
      queue (see ``py_disksched.requests.parse_requests``).

An unknown algorithm tag is not an error: it falls back to FCFS.
"""

from __future__ import annotations

from numbers import Integral
from typing import TYPE_CHECKING

from py_disksched.algorithms import clook, cscan, fcfs, look, scan, sstf
from py_disksched.logging import LogLevel
from py_disksched.types import Algorithm, Direction, InvalidConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from py_disksched.logging import Logger
    from py_disksched.types import AlgorithmResult

DEFAULT_TOTAL_TRACKS = 200

_SOURCE = "engine"


def _is_integer(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def validate(initial_head: int, requests: Sequence[int], total_tracks: int) -> None:
    """Check that a run's numeric inputs are usable.

    Raises:
        InvalidConfigurationError: If ``total_tracks`` is not a positive
            integer, or the head or any request is not an integer.

    """
    if not _is_integer(total_tracks) or total_tracks < 1:
        msg = f"total_tracks must be a positive integer, got {total_tracks!r}"
        raise InvalidConfigurationError(msg)
    if not _is_integer(initial_head):
        msg = f"initial head must be an integer track, got {initial_head!r}"
        raise InvalidConfigurationError(msg)
    for request in requests:
        if not _is_integer(request):
            msg = f"requests must be integer tracks, got {request!r}"
            raise InvalidConfigurationError(msg)


def run(  # noqa: PLR0913
    algorithm: Algorithm | str,
    initial_head: int,
    requests: Sequence[int],
    total_tracks: int = DEFAULT_TOTAL_TRACKS,
    direction: Direction | str = Direction.RIGHT,
    *,
    logger: Logger | None = None,
) -> AlgorithmResult:
    """Schedule *requests* with the named algorithm.

    Args:
        algorithm: Strategy tag (``"fcfs"``, ``"c-scan"``, ``Algorithm.LOOK``...).
            Unrecognised tags run FCFS.
        initial_head: Starting track of the head.
        requests: Track numbers to service.  Not modified.
        total_tracks: Number of addressable tracks.
        direction: Initial sweep direction for the directional strategies.
            FCFS and SSTF ignore it, so it is only parsed for SCAN,
            C-SCAN, LOOK and C-LOOK.
        logger: Optional run log to record the outcome in.

    Returns:
        The run trace and its seek metrics.

    Raises:
        InvalidConfigurationError: If the inputs fail validation or the
            direction of a directional strategy is not ``left``/``right``.

    """
    validate(initial_head, requests, total_tracks)

    kind = Algorithm.parse(algorithm)
    if kind is None:
        if logger is not None:
            logger.log(
                LogLevel.WARNING,
                f"unknown algorithm '{algorithm}', falling back to fcfs",
                source=_SOURCE,
            )
        kind = Algorithm.FCFS

    queue = list(requests)
    match kind:
        case Algorithm.SSTF:
            result = sstf(initial_head, queue)
        case Algorithm.SCAN:
            result = scan(initial_head, queue, total_tracks, Direction.parse(direction))
        case Algorithm.CSCAN:
            result = cscan(initial_head, queue, total_tracks, Direction.parse(direction))
        case Algorithm.LOOK:
            result = look(initial_head, queue, Direction.parse(direction))
        case Algorithm.CLOOK:
            result = clook(initial_head, queue, Direction.parse(direction))
        case _:
            result = fcfs(initial_head, queue)

    if logger is not None:
        logger.log(
            LogLevel.DEBUG,
            f"{kind.value}: head={initial_head} requests={len(queue)} "
            f"steps={result.step_count} total={result.total_seek_time}",
            source=_SOURCE,
        )
    return result
