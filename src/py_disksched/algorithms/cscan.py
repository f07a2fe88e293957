"""C-SCAN (Circular SCAN) — sweep one way, jump back, sweep again.

Unlike SCAN, C-SCAN only services requests while moving in its
nominal direction.  After reaching the edge it jumps straight to the
opposite edge and keeps going the same way.

With plain SCAN, tracks in the middle of the disk are passed twice per
cycle and tracks at the edges once; C-SCAN gives every track the same
treatment, at the price of the return jump.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from py_disksched.algorithms._sweep import SeekTrace, partition
from py_disksched.types import Algorithm, Direction

if TYPE_CHECKING:
    from collections.abc import Sequence

    from py_disksched.types import AlgorithmResult


def cscan(
    initial_head: int,
    requests: Sequence[int],
    total_tracks: int,
    direction: Direction,
) -> AlgorithmResult:
    """Schedule *requests* in C-SCAN order.

    The run to the far edge is skipped when the head is already there,
    or when there is nothing to service.  The wrap-around jump is not:
    it happens whenever requests remain on the other side of the
    starting position.
    """
    left, right = partition(requests, initial_head)
    last_track = total_tracks - 1
    trace = SeekTrace(initial_head)
    if not requests:
        return trace.result(Algorithm.CSCAN, request_count=0)

    if direction is Direction.RIGHT:
        trace.visit_all(right)
        if trace.position < last_track:
            trace.visit(last_track, boundary=True)
        if left:
            trace.visit(0, boundary=True)
            trace.visit_all(left)
    else:
        trace.visit_all(reversed(left))
        if trace.position > 0:
            trace.visit(0, boundary=True)
        if right:
            trace.visit(last_track, boundary=True)
            trace.visit_all(reversed(right))

    return trace.result(Algorithm.CSCAN, request_count=len(requests))
