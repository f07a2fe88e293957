"""FCFS — First Come, First Served.

Service requests in exactly the order they arrived.  Fair (nobody
starves), but the arm zigzags wildly across the disk, which makes it
the baseline every other strategy is measured against.

Real-world analogy: an elevator that visits floors in the order the
buttons were pressed, regardless of direction.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from py_disksched.algorithms._sweep import SeekTrace
from py_disksched.types import Algorithm

if TYPE_CHECKING:
    from collections.abc import Sequence

    from py_disksched.types import AlgorithmResult


def fcfs(initial_head: int, requests: Sequence[int]) -> AlgorithmResult:
    """Schedule *requests* in arrival order."""
    trace = SeekTrace(initial_head)
    trace.visit_all(requests)
    return trace.result(Algorithm.FCFS, request_count=len(requests))
