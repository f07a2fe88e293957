"""Tab completion for the simulator shell.

The completer separates **what to complete** (pure logic, fully
testable) from **how to wire it** (readline integration in the REPL).
``complete(text, state)`` is the readline callback; it delegates to
``completions(text, line)``.
"""

from __future__ import annotations

import readline
from typing import TYPE_CHECKING

from py_disksched.config import SETTINGS
from py_disksched.types import Algorithm, Direction

if TYPE_CHECKING:
    from py_disksched.shell import Shell

_ALGORITHM_NAMES: list[str] = [a.value for a in Algorithm]

# Second-word candidates per command.
_SUBCOMMANDS: dict[str, list[str]] = {
    "run": _ALGORITHM_NAMES,
    "info": _ALGORITHM_NAMES,
    "set": list(SETTINGS),
    "queue": ["add", "run", "show"],
    "log": ["clear"],
}

# Third-word candidates for ``set <key>``.
_SET_VALUES: dict[str, list[str]] = {
    "algorithm": _ALGORITHM_NAMES,
    "direction": [d.value for d in Direction],
}


class Completer:
    """Context-aware tab completer for the shell."""

    def __init__(self, shell: Shell) -> None:
        """Create a completer attached to *shell*."""
        self._shell = shell
        self._matches: list[str] = []

    def complete(self, text: str, state: int) -> str | None:
        """Readline callback — return the *state*-th candidate for *text*."""
        if state == 0:
            self._matches = self.completions(text, readline.get_line_buffer())
        if state < len(self._matches):
            return self._matches[state]
        return None

    def completions(self, text: str, line: str) -> list[str]:
        """Return the candidates for the word *text* within *line*."""
        words = line.split()
        # Completing a new word after trailing whitespace.
        if line.endswith(" "):
            words.append("")
        if len(words) <= 1:
            candidates = self._shell.commands
        elif len(words) == 2:  # noqa: PLR2004
            candidates = _SUBCOMMANDS.get(words[0], [])
        elif len(words) == 3 and words[0] == "set":  # noqa: PLR2004
            candidates = _SET_VALUES.get(words[1], [])
        else:
            candidates = []
        return [c for c in candidates if c.startswith(text)]
