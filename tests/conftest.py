"""Shared pytest fixtures for the cargo-proc-macro test suite.

Provides reusable fixtures for:
- A fake ``cargo new``/``cargo init`` so no Rust toolchain is needed
- Default settings and a template renderer
- A plain-text Rich console for asserting on printed output
- A clean ``cargo proc-macro`` environment for CLI tests
"""

from __future__ import annotations

import io
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from rich.console import Console

from cargo_proc_macro.config import Settings
from cargo_proc_macro.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Fake cargo
# ---------------------------------------------------------------------------

CARGO_MANIFEST = """\
[package]
name = "{name}"
version = "0.1.0"
edition = "2021"

# See more keys and their definitions at https://doc.rust-lang.org/cargo/reference/manifest.html

[dependencies]
"""

CARGO_LIB_RS = """\
pub fn add(left: u64, right: u64) -> u64 {
    left + right
}
"""


def fake_cargo_new(cmd: list[str], cwd=None, timeout: int = 120, env=None) -> tuple[int, str, str]:
    """Stand-in for ``run_command`` that lays out a crate like ``cargo new --lib``."""
    path = Path(cmd[3])
    name = cmd[cmd.index("--name") + 1]
    (path / "src").mkdir(parents=True, exist_ok=True)
    (path / "Cargo.toml").write_text(CARGO_MANIFEST.format(name=name), encoding="utf-8")
    (path / "src" / "lib.rs").write_text(CARGO_LIB_RS, encoding="utf-8")
    return (0, "", f"     Created library `{name}` package")


@pytest.fixture
def fake_cargo():
    """Patch the cargo runner's command execution with :func:`fake_cargo_new`.

    Yields the mock so tests can inspect the issued commands.
    """
    mock = MagicMock(side_effect=fake_cargo_new)
    with patch("cargo_proc_macro.scaffolder.cargo.run_command", mock):
        yield mock


# ---------------------------------------------------------------------------
# Settings, renderer, console
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> Settings:
    """Default settings."""
    return Settings()


@pytest.fixture
def renderer() -> TemplateRenderer:
    """Renderer over the packaged templates."""
    return TemplateRenderer()


@pytest.fixture
def text_console() -> Console:
    """A Rich console writing plain text into an in-memory buffer.

    Read the output with ``text_console.file.getvalue()``.
    """
    return Console(file=io.StringIO(), no_color=True, color_system=None, width=200)


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

_ENV_VARS = (
    "CARGO",
    "CARGO_TERM_COLOR",
    "CARGO_PROC_MACRO_TIMEOUT",
    "CARGO_PROC_MACRO_CRATE_VERSION",
    "CARGO_PROC_MACRO_SYN_VERSION",
    "CARGO_PROC_MACRO_QUOTE_VERSION",
    "CARGO_PROC_MACRO_PROC_MACRO2_VERSION",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every variable the tool reads from the environment."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


@pytest.fixture
def cargo_env(clean_env: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Environment as seen when Cargo runs the subcommand, colours disabled."""
    clean_env.setenv("CARGO", "cargo")
    clean_env.setenv("CARGO_TERM_COLOR", "never")
    return clean_env
