"""Helpers shared by every strategy: the seek accumulator and the partition."""

from __future__ import annotations

from typing import TYPE_CHECKING

from py_disksched.catalog import get_info
from py_disksched.types import AlgorithmResult, SeekStep

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from py_disksched.types import Algorithm


class SeekTrace:
    """Running record of one scheduling pass.

    Created fresh per call and discarded once the result is built, so
    nothing leaks between runs.
    """

    def __init__(self, head: int) -> None:
        """Start a trace with the head parked at *head*."""
        self._position = head
        self._sequence: list[int] = [head]
        self._steps: list[SeekStep] = []
        self._boundary: list[int] = []
        self._total = 0

    @property
    def position(self) -> int:
        """Return where the head is now."""
        return self._position

    def visit(self, track: int, *, boundary: bool = False) -> None:
        """Move the head to *track* and record the step.

        Args:
            track: Destination track.
            boundary: True for a synthetic stop at a disk edge that no
                request asked for.

        """
        distance = abs(track - self._position)
        index = len(self._steps)
        self._steps.append(
            SeekStep(
                from_track=self._position,
                to_track=track,
                distance=distance,
                step_index=index,
            )
        )
        if boundary:
            self._boundary.append(index)
        self._total += distance
        self._position = track
        self._sequence.append(track)

    def visit_all(self, tracks: Iterable[int]) -> None:
        """Visit each track in *tracks*, in order."""
        for track in tracks:
            self.visit(track)

    def result(self, algorithm: Algorithm, *, request_count: int) -> AlgorithmResult:
        """Freeze the trace into an ``AlgorithmResult``.

        Args:
            algorithm: Which strategy produced the trace (for its names).
            request_count: Number of original requests — the divisor for
                the average, which ignores boundary stops.

        """
        info = get_info(algorithm)
        average = self._total / request_count if request_count > 0 else 0.0
        return AlgorithmResult(
            name=info.name,
            full_name=info.full_name,
            sequence=tuple(self._sequence),
            steps=tuple(self._steps),
            total_seek_time=self._total,
            average_seek_time=average,
            boundary_stops=tuple(self._boundary),
        )


def partition(requests: Sequence[int], head: int) -> tuple[list[int], list[int]]:
    """Split sorted requests into those below the head and the rest.

    A request sitting exactly on the head belongs to the right-hand
    group.  Both lists come back in ascending order.
    """
    ordered = sorted(requests)
    left = [r for r in ordered if r < head]
    right = [r for r in ordered if r >= head]
    return left, right
