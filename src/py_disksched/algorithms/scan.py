"""SCAN (Elevator algorithm) — sweep to the disk edge, then reverse.

The arm moves in one direction servicing every request along the way,
carries on to the last track, then turns around and services the rest
on the way back.  No request waits longer than two full sweeps.

The trip to the edge is a *boundary stop*: it costs seek time but
services nobody, which is exactly what LOOK removes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from py_disksched.algorithms._sweep import SeekTrace, partition
from py_disksched.types import Algorithm, Direction

if TYPE_CHECKING:
    from collections.abc import Sequence

    from py_disksched.types import AlgorithmResult


def scan(
    initial_head: int,
    requests: Sequence[int],
    total_tracks: int,
    direction: Direction,
) -> AlgorithmResult:
    """Schedule *requests* in SCAN order.

    Args:
        initial_head: Starting track of the head.
        requests: Track numbers to service.
        total_tracks: Number of tracks; the far edge is ``total_tracks - 1``.
        direction: Which way to sweep first.

    Returns:
        The run trace, including the boundary stop when the head was
        not already at the edge.  An empty queue goes nowhere.

    """
    left, right = partition(requests, initial_head)
    trace = SeekTrace(initial_head)
    if not requests:
        return trace.result(Algorithm.SCAN, request_count=0)

    if direction is Direction.RIGHT:
        trace.visit_all(right)
        if trace.position < total_tracks - 1:
            trace.visit(total_tracks - 1, boundary=True)
        trace.visit_all(reversed(left))
    else:
        trace.visit_all(reversed(left))
        if trace.position > 0:
            trace.visit(0, boundary=True)
        trace.visit_all(right)

    return trace.result(Algorithm.SCAN, request_count=len(requests))
