"""Side-by-side comparison of every strategy on the same input.

Running all six algorithms against one request queue is the quickest
way to see the trade-offs: FCFS as the baseline, SSTF greedily close
to the optimum, and the sweeping family in between.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from py_disksched.catalog import ALGORITHMS
from py_disksched.engine import DEFAULT_TOTAL_TRACKS, run
from py_disksched.types import Direction

if TYPE_CHECKING:
    from collections.abc import Sequence

    from py_disksched.logging import Logger
    from py_disksched.types import Algorithm, AlgorithmResult


@dataclass(frozen=True)
class Comparison:
    """Results of every algorithm for one input, in catalog order."""

    results: tuple[tuple[Algorithm, AlgorithmResult], ...]

    def ranked(self) -> list[tuple[Algorithm, AlgorithmResult]]:
        """Return the results ordered by total seek time, best first.

        Ties keep catalog order.
        """
        return sorted(self.results, key=lambda pair: pair[1].total_seek_time)

    @property
    def best(self) -> AlgorithmResult:
        """Return the result with the lowest total seek time."""
        return self.ranked()[0][1]

    def result_for(self, algorithm: Algorithm) -> AlgorithmResult:
        """Return the result produced by *algorithm*."""
        for kind, result in self.results:
            if kind is algorithm:
                return result
        msg = f"No result for {algorithm}"
        raise KeyError(msg)

    def overhead_percent(self, result: AlgorithmResult) -> float:
        """Return how much more seek time *result* needs than the best, in percent."""
        best_total = self.best.total_seek_time
        if best_total == 0:
            return 0.0
        return (result.total_seek_time - best_total) / best_total * 100


def compare(
    initial_head: int,
    requests: Sequence[int],
    total_tracks: int = DEFAULT_TOTAL_TRACKS,
    direction: Direction | str = Direction.RIGHT,
    *,
    logger: Logger | None = None,
) -> Comparison:
    """Run every catalog algorithm against the same input."""
    results = tuple(
        (
            info.algorithm,
            run(info.algorithm, initial_head, requests, total_tracks, direction, logger=logger),
        )
        for info in ALGORITHMS
    )
    return Comparison(results=results)
