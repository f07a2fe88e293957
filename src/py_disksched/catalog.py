"""Algorithm catalog — display metadata for every scheduling strategy.

The engine only needs a short name and a full name per strategy, but
anything that *explains* the algorithms (the shell's ``info`` command,
the web API, comparison tables) wants more: a one-line description,
the time complexity, and the usual trade-offs.

Keeping all of it in one table means the names printed by the engine
and the names shown in the catalog can never drift apart.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from py_disksched.types import Algorithm


@dataclass(frozen=True)
class AlgorithmInfo:
    """Descriptive metadata for one scheduling strategy."""

    algorithm: Algorithm
    name: str
    full_name: str
    description: str
    complexity: str
    pros: tuple[str, ...]
    cons: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        """Return the entry as a JSON-ready dict (camelCase keys)."""
        return {
            "id": self.algorithm.value,
            "name": self.name,
            "fullName": self.full_name,
            "description": self.description,
            "complexity": self.complexity,
            "pros": list(self.pros),
            "cons": list(self.cons),
        }


ALGORITHMS: tuple[AlgorithmInfo, ...] = (
    AlgorithmInfo(
        algorithm=Algorithm.FCFS,
        name="FCFS",
        full_name="First Come First Serve",
        description="Processes requests in the order they arrive in the queue",
        complexity="O(n)",
        pros=("Simple implementation", "Fair - no starvation", "Predictable behavior"),
        cons=("High seek time", "No optimization", "Wild head movements"),
    ),
    AlgorithmInfo(
        algorithm=Algorithm.SSTF,
        name="SSTF",
        full_name="Shortest Seek Time First",
        description="Selects the request closest to current head position",
        complexity="O(n²)",
        pros=("Low seek time", "Better throughput", "Efficient for clustered requests"),
        cons=("Starvation possible", "Not optimal", "Higher overhead"),
    ),
    AlgorithmInfo(
        algorithm=Algorithm.SCAN,
        name="SCAN",
        full_name="Elevator Algorithm",
        description="Moves in one direction until the end, then reverses",
        complexity="O(n log n)",
        pros=("No starvation", "Better than FCFS", "Uniform wait time"),
        cons=("Goes to disk end", "Long wait for edge requests", "Medium seek time"),
    ),
    AlgorithmInfo(
        algorithm=Algorithm.CSCAN,
        name="C-SCAN",
        full_name="Circular SCAN",
        description="Like SCAN but only services in one direction, then jumps back",
        complexity="O(n log n)",
        pros=("More uniform wait", "No starvation", "Better for heavy loads"),
        cons=("Extra head movement", "Jump overhead", "Complex implementation"),
    ),
    AlgorithmInfo(
        algorithm=Algorithm.LOOK,
        name="LOOK",
        full_name="LOOK Algorithm",
        description="Like SCAN but reverses at last request instead of disk end",
        complexity="O(n log n)",
        pros=("No wasted movement", "Better than SCAN", "No starvation"),
        cons=("Edge case overhead", "Variable wait time", "Medium complexity"),
    ),
    AlgorithmInfo(
        algorithm=Algorithm.CLOOK,
        name="C-LOOK",
        full_name="Circular LOOK",
        description="Combines C-SCAN and LOOK optimizations",
        complexity="O(n log n)",
        pros=("Most efficient", "Uniform service", "No wasted movement"),
        cons=("Jump overhead", "Complex logic", "Not always optimal"),
    ),
)

_BY_ALGORITHM: dict[Algorithm, AlgorithmInfo] = {info.algorithm: info for info in ALGORITHMS}


def get_info(tag: Algorithm | str) -> AlgorithmInfo:
    """Return the catalog entry for *tag*.

    Unknown tags resolve to FCFS, the same fallback the dispatcher uses.
    """
    algorithm = Algorithm.parse(tag) or Algorithm.FCFS
    return _BY_ALGORITHM[algorithm]
