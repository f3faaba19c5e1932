"""Thin wrapper around ``cargo new`` / ``cargo init``.

Cargo creates the bare crates (manifest, ``src/lib.rs``, optional VCS files);
the generator then overwrites the sources and patches the manifests.
"""

from __future__ import annotations

from pathlib import Path

from cargo_proc_macro.utils import run_command

from .errors import CargoError


class CargoRunner:
    """Creates library crates by shelling out to Cargo."""

    def __init__(self, executable: str = "cargo", timeout: int = 120) -> None:
        self.executable = executable
        self.timeout = timeout

    def build_command(
        self,
        path: Path,
        name: str,
        vcs: str | None = None,
        init: bool = False,
    ) -> list[str]:
        """Return the argument list used to create the crate at *path*."""
        cmd = [self.executable, "init" if init else "new", "--lib", str(path), "--name", name]
        if vcs is not None:
            cmd += ["--vcs", vcs]
        return cmd

    def new_lib(
        self,
        path: str | Path,
        name: str,
        vcs: str | None = None,
        init: bool = False,
    ) -> Path:
        """Create a library crate called *name* at *path*.

        Args:
            path: Crate directory.
            name: Package name written into the manifest.
            vcs: Value for ``--vcs`` (e.g. ``"none"``), Cargo's default if omitted.
            init: Use ``cargo init`` (existing directory) instead of ``cargo new``.

        Returns:
            Path to the created ``Cargo.toml``.

        Raises:
            CargoError: If a manifest already exists, Cargo cannot be started,
                times out, or exits with a non-zero status.
        """
        path = Path(path)
        manifest = path / "Cargo.toml"
        if manifest.exists():
            raise CargoError(
                f"Cargo.toml already exists at {manifest}.", manifest
            )

        cmd = self.build_command(path, name, vcs=vcs, init=init)
        cmd_str = " ".join(cmd)
        try:
            returncode, _stdout, stderr = run_command(cmd, timeout=self.timeout)
        except OSError as exc:
            raise CargoError(
                f"Running `{cmd_str}` failed: {exc}", path, command=cmd_str
            ) from exc

        if returncode != 0:
            detail = stderr.splitlines()[-1] if stderr else f"exit code {returncode}"
            raise CargoError(
                f"Running `{cmd_str}` failed: {detail}",
                path,
                command=cmd_str,
                stderr=stderr,
            )
        return manifest
