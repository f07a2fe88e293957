"""LOOK — SCAN that turns around at the last request, not the edge.

The head sweeps in one direction only as far as the furthest pending
request, then reverses.  No boundary stops at all.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from py_disksched.algorithms._sweep import SeekTrace, partition
from py_disksched.types import Algorithm, Direction

if TYPE_CHECKING:
    from collections.abc import Sequence

    from py_disksched.types import AlgorithmResult


def look(initial_head: int, requests: Sequence[int], direction: Direction) -> AlgorithmResult:
    """Schedule *requests* in LOOK order."""
    left, right = partition(requests, initial_head)
    trace = SeekTrace(initial_head)

    if direction is Direction.RIGHT:
        trace.visit_all(right)
        trace.visit_all(reversed(left))
    else:
        trace.visit_all(reversed(left))
        trace.visit_all(right)

    return trace.result(Algorithm.LOOK, request_count=len(requests))
