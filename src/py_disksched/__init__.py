"""py-disksched — disk head scheduling, computed and explained.

Six classic algorithms (FCFS, SSTF, SCAN, C-SCAN, LOOK, C-LOOK) behind
one dispatcher::

    from py_disksched import run

    result = run("scan", 53, [98, 183, 37, 122, 14, 124, 65, 67], 200, "right")
    result.total_seek_time  # 331

Every run is a pure function of its inputs and returns an immutable
``AlgorithmResult``.
"""

from py_disksched.catalog import ALGORITHMS, AlgorithmInfo, get_info
from py_disksched.compare import Comparison, compare
from py_disksched.engine import run
from py_disksched.requests import generate_random_requests, parse_requests
from py_disksched.scheduler import DiskScheduler
from py_disksched.types import (
    Algorithm,
    AlgorithmResult,
    Direction,
    InvalidConfigurationError,
    SeekStep,
)

__all__ = [
    "ALGORITHMS",
    "Algorithm",
    "AlgorithmInfo",
    "AlgorithmResult",
    "Comparison",
    "Direction",
    "DiskScheduler",
    "InvalidConfigurationError",
    "SeekStep",
    "compare",
    "generate_random_requests",
    "get_info",
    "parse_requests",
    "run",
]
