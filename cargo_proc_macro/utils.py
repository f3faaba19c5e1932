"""Shared utility functions for cargo-proc-macro.

Provides blocking command execution and Rich-based console helpers.  Output
mimics Cargo's own status lines so the subcommand blends in with the rest of
``cargo``.
"""

from __future__ import annotations

import os
import subprocess
from pathlib import Path

from rich.console import Console
from rich.text import Text

err_console = Console(stderr=True)

# Status verbs such as ``Created`` are indented by four columns.
STATUS_INDENT = "    "

COLOR_CHOICES: tuple[str, ...] = ("auto", "always", "never")


# ---------------------------------------------------------------------------
# Command execution
# ---------------------------------------------------------------------------


def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: int = 120,
    env: dict[str, str] | None = None,
) -> tuple[int, str, str]:
    """Run a command and wait for it to finish.

    Args:
        cmd: Program and arguments.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
        env: Optional extra environment variables merged on top of ``os.environ``.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  A timeout is reported as
        return code ``-1`` with an explanatory stderr.

    Raises:
        OSError: If the program cannot be started at all.
    """
    merged_env: dict[str, str] | None = None
    if env:
        merged_env = {**os.environ, **env}

    try:
        completed = subprocess.run(
            cmd,
            cwd=str(cwd) if cwd else None,
            env=merged_env,
            capture_output=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired:
        return (-1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}")

    stdout_str = (completed.stdout or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (completed.stderr or b"").decode("utf-8", errors="replace").strip()
    return (completed.returncode, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def make_console(color: str = "auto", stderr: bool = False) -> Console:
    """Create a console honouring a Cargo-style colour choice.

    ``auto`` lets Rich detect a terminal, ``always`` forces ANSI output even
    when piped and ``never`` strips all styling.
    """
    if color not in COLOR_CHOICES:
        raise ValueError(f"Unknown color choice: {color!r}")
    if color == "always":
        return Console(stderr=stderr, force_terminal=True)
    if color == "never":
        return Console(stderr=stderr, no_color=True, color_system=None)
    return Console(stderr=stderr)


def print_status(
    target: Console,
    label: str,
    message: str,
    style: str = "bold green",
) -> None:
    """Print a status line such as ``    Created workspace ...``."""
    line = Text(STATUS_INDENT)
    line.append(label, style=style)
    line.append(f" {message}")
    target.print(line, soft_wrap=True)


def print_error(message: str, target: Console | None = None) -> None:
    """Print a red ``error:`` line to stderr."""
    line = Text()
    line.append("error", style="bold red")
    line.append(f": {message}")
    (target or err_console).print(line, soft_wrap=True)
