"""C-LOOK (Circular LOOK) — C-SCAN without the trips to the edges.

Sweep in the nominal direction up to the last request, then jump
directly to the furthest request on the other side and continue in
the same direction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from py_disksched.algorithms._sweep import SeekTrace, partition
from py_disksched.types import Algorithm, Direction

if TYPE_CHECKING:
    from collections.abc import Sequence

    from py_disksched.types import AlgorithmResult


def clook(initial_head: int, requests: Sequence[int], direction: Direction) -> AlgorithmResult:
    """Schedule *requests* in C-LOOK order."""
    left, right = partition(requests, initial_head)
    trace = SeekTrace(initial_head)

    if direction is Direction.RIGHT:
        trace.visit_all(right)
        trace.visit_all(left)
    else:
        trace.visit_all(reversed(left))
        trace.visit_all(reversed(right))

    return trace.result(Algorithm.CLOOK, request_count=len(requests))
