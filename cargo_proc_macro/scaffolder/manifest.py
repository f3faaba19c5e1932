"""Structured editing of the ``Cargo.toml`` files Cargo generates.

Manifests are parsed with tomlkit so Cargo's own formatting and comments are
preserved.  Every patch assigns keys rather than appending text, which makes
it safe to apply the same patch twice.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import TOMLKitError
from tomlkit.items import InlineTable, Table
from tomlkit.toml_document import TOMLDocument

from cargo_proc_macro.config import DependencyVersions

from .errors import ReadError, WriteError

SYN_FEATURES: list[str] = ["full", "extra-traits"]

WORKSPACE_MEMBERS: list[str] = [".", "impl", "macro"]
WORKSPACE_DEFAULT_MEMBERS: list[str] = [".", "impl"]


# ---------------------------------------------------------------------------
# I/O
# ---------------------------------------------------------------------------


def read_manifest(path: str | Path) -> TOMLDocument:
    """Load and parse a manifest.

    Raises:
        ReadError: If the file cannot be read or is not valid TOML.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(path, str(exc)) from exc
    try:
        return tomlkit.parse(raw)
    except TOMLKitError as exc:
        raise ReadError(path, f"Invalid TOML: {exc}") from exc


def write_manifest(path: str | Path, doc: TOMLDocument) -> Path:
    """Serialise *doc* back to *path*.

    Raises:
        WriteError: If the file cannot be written.
    """
    path = Path(path)
    try:
        path.write_text(tomlkit.dumps(doc), encoding="utf-8")
    except OSError as exc:
        raise WriteError(path, str(exc)) from exc
    return path


# ---------------------------------------------------------------------------
# Patches
# ---------------------------------------------------------------------------


def patch_root_manifest(
    doc: TOMLDocument, name: str, versions: DependencyVersions
) -> TOMLDocument:
    """Make the facade crate depend on the macro crate and declare the workspace."""
    deps = _table(doc, "dependencies")
    deps[f"{name}-macro"] = _inline(
        {"version": f"={versions.crate_version}", "path": "macro"}
    )

    workspace = _table(doc, "workspace")
    workspace["members"] = list(WORKSPACE_MEMBERS)
    workspace["default-members"] = list(WORKSPACE_DEFAULT_MEMBERS)
    return doc


def patch_impl_manifest(doc: TOMLDocument, versions: DependencyVersions) -> TOMLDocument:
    """Add the parsing/quoting dependencies to the implementation crate."""
    _add_macro_deps(_table(doc, "dependencies"), versions)
    return doc


def patch_macro_manifest(
    doc: TOMLDocument, name: str, versions: DependencyVersions
) -> TOMLDocument:
    """Turn the shim crate into a ``proc-macro`` crate wired to the implementation."""
    lib = _table(doc, "lib")
    lib["proc-macro"] = True

    deps = _table(doc, "dependencies")
    deps[f"{name}-impl"] = _inline(
        {"version": f"={versions.crate_version}", "path": "../impl"}
    )
    _add_macro_deps(deps, versions)
    return doc


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _table(doc: TOMLDocument, key: str) -> Table:
    if key not in doc:
        doc[key] = tomlkit.table()
    return doc[key]


def _inline(values: dict[str, Any]) -> InlineTable:
    table = tomlkit.inline_table()
    table.update(values)
    return table


def _add_macro_deps(deps: Table, versions: DependencyVersions) -> None:
    deps["syn"] = _inline({"version": versions.syn, "features": list(SYN_FEATURES)})
    deps["quote"] = versions.quote
    deps["proc-macro2"] = versions.proc_macro2
