"""Simulator configuration — defaults plus environment overrides.

A ``SimulatorConfig`` bundles the five inputs of a scheduling run with
the size of generated random queues.  The defaults are the classic
textbook example: head at 53, eight requests, a 200-track disk.

Any field can be overridden from the environment::

    DISKSCHED_ALGORITHM=look DISKSCHED_HEAD=100 py-disksched

Values are plain strings, parsed and validated on load; a bad value
raises ``InvalidConfigurationError`` naming the variable.
"""

from __future__ import annotations

import dataclasses
import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from py_disksched.engine import DEFAULT_TOTAL_TRACKS
from py_disksched.requests import format_requests, parse_requests
from py_disksched.types import Algorithm, Direction, InvalidConfigurationError

DEFAULT_HEAD = 53
DEFAULT_REQUESTS: tuple[int, ...] = (98, 183, 37, 122, 14, 124, 65, 67)
DEFAULT_RANDOM_COUNT = 8

ENV_PREFIX = "DISKSCHED_"

# Keys accepted by ``with_value`` (and the shell's ``set`` command).
SETTINGS: tuple[str, ...] = ("algorithm", "head", "requests", "tracks", "direction", "count")


def _parse_int(key: str, text: str, *, minimum: int) -> int:
    try:
        value = int(text)
    except ValueError:
        msg = f"{key}: '{text}' is not an integer"
        raise InvalidConfigurationError(msg) from None
    if value < minimum:
        msg = f"{key}: must be at least {minimum}, got {value}"
        raise InvalidConfigurationError(msg)
    return value


@dataclass(frozen=True)
class SimulatorConfig:
    """Inputs for a scheduling run.

    ``request_text`` keeps the requests as last typed, before filtering,
    so a later track change can re-filter them.  When it is ``None`` the
    stored ``requests`` are the text.
    """

    algorithm: Algorithm = Algorithm.FCFS
    initial_head: int = DEFAULT_HEAD
    requests: tuple[int, ...] = DEFAULT_REQUESTS
    total_tracks: int = DEFAULT_TOTAL_TRACKS
    direction: Direction = Direction.RIGHT
    random_count: int = DEFAULT_RANDOM_COUNT
    request_text: str | None = field(default=None, compare=False, repr=False)

    def with_value(self, key: str, text: str) -> SimulatorConfig:
        """Return a copy with setting *key* parsed from *text*.

        Requests are filtered against the current track count, the same
        way typed input is.  Changing the track count re-filters the last
        request text, so growing the disk brings dropped tracks back.

        Raises:
            InvalidConfigurationError: If *key* is unknown or *text*
                does not parse.

        """
        match key:
            case "algorithm":
                algorithm = Algorithm.parse(text)
                if algorithm is None:
                    msg = f"algorithm: unknown algorithm '{text}'"
                    raise InvalidConfigurationError(msg)
                return dataclasses.replace(self, algorithm=algorithm)
            case "head":
                return dataclasses.replace(self, initial_head=_parse_int(key, text, minimum=0))
            case "requests":
                requests = parse_requests(text, self.total_tracks)
                return dataclasses.replace(self, requests=tuple(requests), request_text=text)
            case "tracks":
                total_tracks = _parse_int(key, text, minimum=1)
                source = self.request_text
                if source is None:
                    source = format_requests(self.requests)
                return dataclasses.replace(
                    self,
                    total_tracks=total_tracks,
                    requests=tuple(parse_requests(source, total_tracks)),
                    request_text=source,
                )
            case "direction":
                return dataclasses.replace(self, direction=Direction.parse(text))
            case "count":
                return dataclasses.replace(self, random_count=_parse_int(key, text, minimum=0))
            case _:
                msg = f"unknown setting '{key}' (expected one of: {', '.join(SETTINGS)})"
                raise InvalidConfigurationError(msg)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> SimulatorConfig:
        """Build a config from ``DISKSCHED_*`` variables.

        Args:
            environ: Variables to read; defaults to ``os.environ``.

        """
        env = os.environ if environ is None else environ
        config = cls()
        # Tracks first: requests are filtered against it.
        for key in ("tracks", "algorithm", "head", "requests", "direction", "count"):
            name = f"{ENV_PREFIX}{key.upper()}"
            text = env.get(name)
            if text is None:
                continue
            try:
                config = config.with_value(key, text)
            except InvalidConfigurationError as exc:
                msg = f"{name}: {exc}"
                raise InvalidConfigurationError(msg) from exc
        return config
