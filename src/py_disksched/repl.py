"""Interactive REPL (Read-Eval-Print Loop) for the simulator shell.

The REPL is the thin I/O wrapper around ``Shell``:

    1. **Read** — display a prompt and read user input.
    2. **Eval** — pass the command to ``shell.execute()``.
    3. **Print** — display the result.
    4. **Loop** — repeat until the shell returns the exit sentinel.

``build_prompt`` and ``format_banner`` are pure and testable.  ``run()``
is the I/O entrypoint.
"""

import readline

from py_disksched.completer import Completer
from py_disksched.config import SimulatorConfig
from py_disksched.shell import Shell

_BANNER_WIDTH = 38


def format_banner(config: SimulatorConfig) -> str:
    """Return the start-up banner, including the initial settings."""
    border = "=" * _BANNER_WIDTH
    return (
        f"\n  {border}\n         py-disksched v0.1.0\n    Disk head scheduling simulator\n"
        f"  {border}\n\n"
        f"  {config.total_tracks} tracks, head at {config.initial_head}, "
        f"{len(config.requests)} requests queued.\n"
        "Type 'help' for commands, 'exit' to quit.\n"
    )


def build_prompt(shell: Shell) -> str:
    """Return a prompt naming the current algorithm, e.g. ``sstf $ ``."""
    return f"{shell.config.algorithm.value} $ "


def run(config: SimulatorConfig | None = None) -> None:
    """Start a shell session on stdin/stdout.

    Ctrl+D and Ctrl+C end the session cleanly.
    """
    shell = Shell(config=config)

    completer = Completer(shell)
    readline.set_completer(completer.complete)
    readline.set_completer_delims(" \t")
    readline.parse_and_bind("tab: complete")

    print(format_banner(shell.config))  # noqa: T201

    try:
        while True:
            try:
                command = input(build_prompt(shell))
            except EOFError:
                # Ctrl+D
                print()  # noqa: T201
                break

            result = shell.execute(command)
            if result == Shell.EXIT_SENTINEL:
                break
            if result:
                print(result)  # noqa: T201

    except KeyboardInterrupt:
        print("\nInterrupted.")  # noqa: T201
