"""Shared types for the disk scheduling engine.

Every strategy speaks the same vocabulary:

- **Direction** — which way a sweeping algorithm moves first.
- **Algorithm** — the closed set of strategy tags the dispatcher knows.
- **SeekStep** — one head movement, from one track to another.
- **AlgorithmResult** — the full trace of one run: the order tracks were
  visited, each individual move, and the aggregate seek metrics.

Design choices:
    - **Frozen dataclasses with tuples** — a result is a snapshot.  Callers
      (shell, web API, comparison tables) read it but can never mutate it.
    - **StrEnum for tags** — values are plain strings, so they round-trip
      through JSON, argparse, and the shell without conversion tables.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class InvalidConfigurationError(ValueError):
    """Raise when a run is configured with values the engine cannot use."""


class Direction(StrEnum):
    """Initial sweep direction for SCAN, C-SCAN, LOOK, and C-LOOK.

    ``LEFT`` moves toward track 0, ``RIGHT`` toward the last track.
    FCFS and SSTF ignore it.
    """

    LEFT = "left"
    RIGHT = "right"

    @classmethod
    def parse(cls, value: Direction | str) -> Direction:
        """Return the direction named by *value* (case-insensitive).

        Raises:
            InvalidConfigurationError: If *value* names no direction.

        """
        if isinstance(value, Direction):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            msg = f"Unknown direction '{value}' (expected 'left' or 'right')"
            raise InvalidConfigurationError(msg) from None


class Algorithm(StrEnum):
    """Tags for the six scheduling strategies."""

    FCFS = "fcfs"
    SSTF = "sstf"
    SCAN = "scan"
    CSCAN = "cscan"
    LOOK = "look"
    CLOOK = "clook"

    @classmethod
    def parse(cls, tag: Algorithm | str) -> Algorithm | None:
        """Return the algorithm for *tag*, or None if it is not recognised.

        Matching ignores case and dashes, so ``"C-SCAN"`` and ``"cscan"``
        name the same strategy.
        """
        if isinstance(tag, Algorithm):
            return tag
        key = str(tag).strip().lower().replace("-", "")
        try:
            return cls(key)
        except ValueError:
            return None


@dataclass(frozen=True)
class SeekStep:
    """A single head movement.

    Attributes:
        from_track: Where the head was before the move.
        to_track: Where the head ended up.
        distance: ``abs(to_track - from_track)`` — the seek cost.
        step_index: Position of this move in the run, starting at 0.

    """

    from_track: int
    to_track: int
    distance: int
    step_index: int

    def to_dict(self) -> dict[str, int]:
        """Return the step in the camelCase wire shape."""
        return {
            "from": self.from_track,
            "to": self.to_track,
            "distance": self.distance,
            "stepIndex": self.step_index,
        }


@dataclass(frozen=True)
class AlgorithmResult:
    """The outcome of scheduling one request queue.

    ``sequence`` starts with the initial head position and lists every
    visited track in service order, including synthetic boundary stops.
    ``steps[i]`` moves the head from ``sequence[i]`` to ``sequence[i + 1]``.

    ``average_seek_time`` divides by the number of *original* requests,
    not by the number of steps — SCAN and C-SCAN add boundary steps
    that nobody asked for.

    Attributes:
        name: Short label, e.g. ``"C-SCAN"``.
        full_name: Long label, e.g. ``"Circular SCAN"``.
        sequence: Visited tracks, head first.
        steps: One entry per move.
        total_seek_time: Sum of all step distances.
        average_seek_time: Total divided by the original request count.
        boundary_stops: Indexes into ``steps`` of the synthetic moves.

    """

    name: str
    full_name: str
    sequence: tuple[int, ...]
    steps: tuple[SeekStep, ...]
    total_seek_time: int
    average_seek_time: float
    boundary_stops: tuple[int, ...] = ()

    @property
    def step_count(self) -> int:
        """Return the number of head movements."""
        return len(self.steps)

    @property
    def serviced(self) -> tuple[int, ...]:
        """Return the serviced tracks in order, without boundary stops."""
        synthetic = set(self.boundary_stops)
        return tuple(s.to_track for s in self.steps if s.step_index not in synthetic)

    def to_dict(self) -> dict[str, Any]:
        """Return the result as a JSON-ready dict (camelCase keys)."""
        return {
            "name": self.name,
            "fullName": self.full_name,
            "sequence": list(self.sequence),
            "steps": [s.to_dict() for s in self.steps],
            "totalSeekTime": self.total_seek_time,
            "averageSeekTime": self.average_seek_time,
        }
