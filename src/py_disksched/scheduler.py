"""Disk scheduler — ties an algorithm to a queue of pending requests.

The engine is stateless: every call starts from scratch.  A real disk
is not.  Requests trickle in, get serviced in batches, and the head
stays wherever the last batch left it.  ``DiskScheduler`` models that:
it accepts requests one at a time, runs the selected algorithm over
the whole queue, then parks the head on the last visited track.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from py_disksched.engine import DEFAULT_TOTAL_TRACKS, run
from py_disksched.types import Algorithm, Direction

if TYPE_CHECKING:
    from py_disksched.logging import Logger
    from py_disksched.types import AlgorithmResult


class DiskScheduler:
    """A request queue with a persistent head position."""

    def __init__(
        self,
        *,
        algorithm: Algorithm | str = Algorithm.FCFS,
        head: int = 0,
        total_tracks: int = DEFAULT_TOTAL_TRACKS,
        direction: Direction | str = Direction.RIGHT,
        logger: Logger | None = None,
    ) -> None:
        """Create a disk scheduler with an algorithm and initial head position."""
        self.algorithm = algorithm
        self.direction = Direction.parse(direction)
        self._head = head
        self._total_tracks = total_tracks
        self._logger = logger
        self._queue: list[int] = []

    @property
    def head(self) -> int:
        """Return current head position."""
        return self._head

    @property
    def total_tracks(self) -> int:
        """Return the number of tracks on the disk."""
        return self._total_tracks

    @property
    def pending(self) -> list[int]:
        """Return a copy of the current request queue."""
        return list(self._queue)

    def add_request(self, track: int) -> None:
        """Queue an I/O request for *track*."""
        self._queue.append(track)

    def run(self) -> AlgorithmResult:
        """Service every queued request.

        The head moves to the last visited track (a boundary stop
        counts) and the queue is cleared.  An empty queue yields an
        empty result and leaves the head where it is.
        """
        result = run(
            self.algorithm,
            self._head,
            self._queue,
            self._total_tracks,
            self.direction,
            logger=self._logger,
        )
        self._head = result.sequence[-1]
        self._queue.clear()
        return result
