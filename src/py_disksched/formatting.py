"""Plain-text rendering of results, comparisons, and catalog entries.

Every function returns a string and never prints, so the shell, the
command line, and tests can all share them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from py_disksched.catalog import ALGORITHMS

if TYPE_CHECKING:
    from py_disksched.catalog import AlgorithmInfo
    from py_disksched.compare import Comparison
    from py_disksched.types import AlgorithmResult


def format_result(result: AlgorithmResult) -> str:
    """Render a run as a key-value summary followed by a step table.

    Boundary stops are flagged with ``*`` in the table.
    """
    boundary = set(result.boundary_stops)
    lines = [
        f"Algorithm:     {result.name} ({result.full_name})",
        f"Sequence:      {' -> '.join(str(t) for t in result.sequence)}",
        f"Total seek:    {result.total_seek_time}",
        f"Average seek:  {result.average_seek_time:.2f}",
        f"Steps:         {result.step_count}",
    ]
    if result.steps:
        lines.append("")
        lines.append("STEP   FROM   TO     DISTANCE")
        for step in result.steps:
            marker = " *" if step.step_index in boundary else ""
            lines.append(
                f"{step.step_index:<6} {step.from_track:<6} {step.to_track:<6} "
                f"{step.distance}{marker}"
            )
    if boundary:
        lines.append("(* boundary stop)")
    return "\n".join(lines)


def format_comparison(comparison: Comparison) -> str:
    """Render a ranked table of every algorithm's seek metrics."""
    lines = ["RANK  ALGORITHM  TOTAL   AVERAGE   OVERHEAD"]
    for rank, (_kind, result) in enumerate(comparison.ranked(), start=1):
        overhead = comparison.overhead_percent(result)
        label = "best" if rank == 1 else f"+{overhead:.1f}%"
        lines.append(
            f"{rank:<5} {result.name:<10} {result.total_seek_time:<7} "
            f"{result.average_seek_time:<9.2f} {label}"
        )
    return "\n".join(lines)


def format_info(info: AlgorithmInfo) -> str:
    """Render one catalog entry in full."""
    lines = [
        f"{info.name}: {info.full_name}",
        f"  {info.description}",
        f"  Complexity: {info.complexity}",
        "  Pros:",
        *(f"    + {p}" for p in info.pros),
        "  Cons:",
        *(f"    - {c}" for c in info.cons),
    ]
    return "\n".join(lines)


def format_catalog() -> str:
    """Render a one-line summary of every algorithm."""
    return "\n".join(
        f"{info.algorithm.value:<6} {info.name:<7} {info.full_name}" for info in ALGORITHMS
    )
