"""The shell — command interpreter for the disk scheduling simulator.

The shell reads a command string, splits it into a command name and
arguments, dispatches to the matching handler, and returns a string.

Design choices:
    - **Returns strings, not prints.**  The shell is fully testable;
      the REPL decides how to display output.
    - **Command dispatch via a dict.**  Adding a command means writing
      one method and adding one dict entry.
    - **A session is a config.**  ``set`` replaces the current
      ``SimulatorConfig`` with an updated copy; ``run`` and ``compare``
      read from it.  Only the ``queue`` commands carry a head position
      from one run to the next.
"""

from __future__ import annotations

import random
import shlex
from collections.abc import Callable
from typing import TypeAlias

from py_disksched.catalog import get_info
from py_disksched.compare import compare
from py_disksched.config import SETTINGS, SimulatorConfig
from py_disksched.engine import run
from py_disksched.formatting import format_catalog, format_comparison, format_info, format_result
from py_disksched.logging import Logger, LogLevel
from py_disksched.requests import format_requests, generate_random_requests, random_head
from py_disksched.scheduler import DiskScheduler
from py_disksched.types import Algorithm, InvalidConfigurationError

# Type alias for a command handler: takes a list of args, returns output.
_Handler: TypeAlias = Callable[[list[str]], str]

_SOURCE = "shell"


class Shell:
    """Command interpreter holding one simulator session."""

    EXIT_SENTINEL = "__EXIT__"

    def __init__(self, *, config: SimulatorConfig | None = None, logger: Logger | None = None) -> None:
        """Create a shell.

        Args:
            config: Starting settings; defaults to the textbook example.
            logger: Run log to write to; a fresh one is created if omitted.

        """
        self._config = config if config is not None else SimulatorConfig()
        self._logger = logger if logger is not None else Logger()
        self._history: list[str] = []
        self._queue = self._new_queue()

        self._commands: dict[str, _Handler] = {
            "help": self._cmd_help,
            "algorithms": self._cmd_algorithms,
            "info": self._cmd_info,
            "show": self._cmd_show,
            "set": self._cmd_set,
            "run": self._cmd_run,
            "compare": self._cmd_compare,
            "random": self._cmd_random,
            "queue": self._cmd_queue,
            "log": self._cmd_log,
            "history": self._cmd_history,
            "exit": self._cmd_exit,
        }

    @property
    def config(self) -> SimulatorConfig:
        """Return the current session settings."""
        return self._config

    @property
    def logger(self) -> Logger:
        """Return the session's run log."""
        return self._logger

    @property
    def commands(self) -> list[str]:
        """Return the names of all commands, sorted."""
        return sorted(self._commands)

    def execute(self, command: str) -> str:
        """Parse and execute one command line.

        Args:
            command: The raw command string (e.g. ``"run look"``).

        Returns:
            The command output, ``Error: ...`` on failure, or
            ``EXIT_SENTINEL`` for ``exit``.

        """
        stripped = command.strip()
        if not stripped:
            return ""
        self._history.append(stripped)

        try:
            parts = shlex.split(stripped)
        except ValueError as e:
            return f"Error: {e}"
        name, args = parts[0], parts[1:]

        handler = self._commands.get(name)
        if handler is None:
            return f"Unknown command: {name}"

        try:
            return handler(args)
        except InvalidConfigurationError as e:
            self._logger.log(LogLevel.ERROR, f"{name}: {e}", source=_SOURCE)
            return f"Error: {e}"

    def _new_queue(self) -> DiskScheduler:
        return DiskScheduler(
            algorithm=self._config.algorithm,
            head=self._config.initial_head,
            total_tracks=self._config.total_tracks,
            direction=self._config.direction,
            logger=self._logger,
        )

    # -- Command handlers ------------------------------------------------

    def _cmd_help(self, _args: list[str]) -> str:
        """List available commands."""
        return "Available commands: " + ", ".join(self.commands)

    def _cmd_algorithms(self, _args: list[str]) -> str:
        """List every scheduling algorithm."""
        return format_catalog()

    def _cmd_info(self, args: list[str]) -> str:
        """Describe one algorithm (the current one if none is named)."""
        if args and Algorithm.parse(args[0]) is None:
            return f"Error: unknown algorithm '{args[0]}'"
        return format_info(get_info(args[0] if args else self._config.algorithm))

    def _cmd_show(self, _args: list[str]) -> str:
        """Show the current session settings."""
        cfg = self._config
        return "\n".join(
            [
                f"algorithm  {cfg.algorithm.value}",
                f"head       {cfg.initial_head}",
                f"requests   {format_requests(cfg.requests)}",
                f"tracks     {cfg.total_tracks}",
                f"direction  {cfg.direction.value}",
                f"count      {cfg.random_count}",
            ]
        )

    def _cmd_set(self, args: list[str]) -> str:
        """Change one setting: ``set <key> <value>``."""
        if len(args) < 2:  # noqa: PLR2004
            return f"Usage: set <{'|'.join(SETTINGS)}> <value>"
        key, text = args[0], " ".join(args[1:])
        self._config = self._config.with_value(key, text)
        self._queue = self._new_queue()
        self._logger.log(LogLevel.INFO, f"set {key}={text}", source=_SOURCE)
        return f"{key} = {text}"

    def _cmd_run(self, args: list[str]) -> str:
        """Run one algorithm on the current settings."""
        cfg = self._config
        if args and Algorithm.parse(args[0]) is None:
            return f"Error: unknown algorithm '{args[0]}'"
        algorithm = args[0] if args else cfg.algorithm
        result = run(
            algorithm,
            cfg.initial_head,
            cfg.requests,
            cfg.total_tracks,
            cfg.direction,
            logger=self._logger,
        )
        return format_result(result)

    def _cmd_compare(self, _args: list[str]) -> str:
        """Run every algorithm on the current settings and rank them."""
        cfg = self._config
        if not cfg.requests:
            return "No requests to compare."
        comparison = compare(
            cfg.initial_head,
            cfg.requests,
            cfg.total_tracks,
            cfg.direction,
            logger=self._logger,
        )
        return format_comparison(comparison)

    def _cmd_random(self, args: list[str]) -> str:
        """Replace the head and requests with random values.

        ``random [count] [seed]`` — a seed makes the draw repeatable.
        """
        count = self._config.random_count
        rng = random.Random()  # noqa: S311
        try:
            if args:
                count = int(args[0])
            if len(args) >= 2:  # noqa: PLR2004
                rng = random.Random(int(args[1]))  # noqa: S311
        except ValueError:
            return "Usage: random [count] [seed]"
        tracks = self._config.total_tracks
        requests = generate_random_requests(count, tracks, rng=rng)
        head = random_head(tracks, rng=rng)
        self._config = self._config.with_value("head", str(head)).with_value(
            "requests", format_requests(requests)
        )
        self._queue = self._new_queue()
        self._logger.log(LogLevel.INFO, f"random: {count} requests", source=_SOURCE)
        return f"head = {head}\nrequests = {format_requests(requests)}"

    def _cmd_queue(self, args: list[str]) -> str:
        """Manage the persistent request queue: ``queue <add|run|show>``."""
        if not args or args[0] not in {"add", "run", "show"}:
            return "Usage: queue <add|run|show> [tracks...]"
        match args[0]:
            case "add":
                return self._cmd_queue_add(args[1:])
            case "run":
                return format_result(self._queue.run())
            case _:
                pending = self._queue.pending
                listed = format_requests(pending) if pending else "(empty)"
                return f"head = {self._queue.head}\npending = {listed}"

    def _cmd_queue_add(self, args: list[str]) -> str:
        """Append tracks to the persistent queue."""
        if not args:
            return "Usage: queue add <track> [track...]"
        tracks: list[int] = []
        for arg in args:
            try:
                tracks.append(int(arg))
            except ValueError:
                return f"Error: invalid track '{arg}'"
        for track in tracks:
            self._queue.add_request(track)
        return f"queued {len(tracks)} request(s), {len(self._queue.pending)} pending"

    def _cmd_log(self, args: list[str]) -> str:
        """Show log entries: ``log [clear]``."""
        if args and args[0] == "clear":
            self._logger.clear()
            return ""
        entries = self._logger.entries
        return "\n".join(str(e) for e in entries) if entries else "No log entries."

    def _cmd_history(self, _args: list[str]) -> str:
        """Show command history."""
        if not self._history:
            return "No history."
        lines = [f"  {i + 1}  {cmd}" for i, cmd in enumerate(self._history)]
        return "\n".join(lines)

    def _cmd_exit(self, _args: list[str]) -> str:
        """Signal the REPL to stop."""
        return self.EXIT_SENTINEL
