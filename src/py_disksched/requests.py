"""Building request queues: parsing typed input and generating random ones.

The engine schedules whatever it is given.  This module is where a
queue gets *made*: from a line of text the user typed, or from a
random source for demos and test fixtures.

The random helpers take an explicit ``random.Random`` so a seeded
generator gives the same queue every time.  Pass nothing and a fresh,
unseeded generator is used.
"""

from __future__ import annotations

import random
import re
from typing import TYPE_CHECKING

from py_disksched.types import InvalidConfigurationError

if TYPE_CHECKING:
    from collections.abc import Iterable

_SEPARATORS = re.compile(r"[,\s]+")


def parse_requests(text: str, total_tracks: int) -> list[int]:
    """Parse a comma-separated list of tracks.

    Tokens that are not integers, or that fall outside
    ``[0, total_tracks)``, are dropped without complaint.

    Args:
        text: Input such as ``"98, 183, 37"``.
        total_tracks: Number of tracks on the disk.

    Returns:
        The valid tracks, in the order they were typed.

    """
    tracks: list[int] = []
    for token in _SEPARATORS.split(text.strip()):
        try:
            track = int(token)
        except ValueError:
            continue
        if 0 <= track < total_tracks:
            tracks.append(track)
    return tracks


def format_requests(requests: Iterable[int]) -> str:
    """Render a request queue the way ``parse_requests`` reads it."""
    return ", ".join(str(r) for r in requests)


def generate_random_requests(
    count: int,
    max_track: int,
    *,
    rng: random.Random | None = None,
) -> list[int]:
    """Draw *count* tracks uniformly from ``[0, max_track)``.

    Draws are independent, so duplicates are possible.

    Raises:
        InvalidConfigurationError: If *count* is negative or *max_track*
            is less than 1.

    """
    if count < 0:
        msg = f"count must not be negative, got {count}"
        raise InvalidConfigurationError(msg)
    if max_track < 1:
        msg = f"max_track must be at least 1, got {max_track}"
        raise InvalidConfigurationError(msg)
    source = rng if rng is not None else random.Random()  # noqa: S311
    return [source.randrange(max_track) for _ in range(count)]


def random_head(total_tracks: int, *, rng: random.Random | None = None) -> int:
    """Pick a random starting track in ``[0, total_tracks)``."""
    (head,) = generate_random_requests(1, total_tracks, rng=rng)
    return head
