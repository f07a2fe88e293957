"""SSTF — Shortest Seek Time First.

A greedy algorithm: from wherever the head is, go to the nearest
pending request.  Total movement is far lower than FCFS, but distant
requests can **starve** if new work keeps arriving near the head.

Real-world analogy: an elevator that always goes to the nearest floor
with a waiting passenger.

Each pick scans the whole pending list, so a run is O(n²) in the
number of requests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from py_disksched.algorithms._sweep import SeekTrace
from py_disksched.types import Algorithm

if TYPE_CHECKING:
    from collections.abc import Sequence

    from py_disksched.types import AlgorithmResult


def sstf(initial_head: int, requests: Sequence[int]) -> AlgorithmResult:
    """Schedule *requests* nearest-first from the current head position.

    Duplicates stay separate entries.  When two pending requests are
    equally close, the one that comes first in the pending list wins,
    so the output is reproducible for symmetric inputs.
    """
    trace = SeekTrace(initial_head)
    pending = list(requests)
    while pending:
        current = trace.position
        # min() keeps the first of equal keys: first-encountered wins ties.
        nearest = min(range(len(pending)), key=lambda i: abs(pending[i] - current))
        trace.visit(pending.pop(nearest))
    return trace.result(Algorithm.SSTF, request_count=len(requests))
