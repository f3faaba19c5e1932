"""Errors raised while scaffolding a proc-macro workspace.

Every error carries the path it concerns.  Nothing is retried or rolled back:
a failed run may leave a partially created workspace behind.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(message)


class NameResolutionError(ScaffoldError):
    """Raised when no package name can be derived from the target path."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(
            f"Could not resolve a package name for the directory `{path}`.", path
        )


class CargoError(ScaffoldError):
    """Raised when ``cargo new``/``cargo init`` cannot create a crate."""

    def __init__(
        self,
        message: str,
        path: str | Path,
        command: str = "",
        stderr: str = "",
    ) -> None:
        self.command = command
        self.stderr = stderr
        super().__init__(message, path)


class ReadError(ScaffoldError):
    """Raised when a generated file cannot be read back."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        message = f"Reading from {path} failed."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message, path)


class WriteError(ScaffoldError):
    """Raised when a file cannot be written."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        message = f"Writing to {path} failed."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message, path)
