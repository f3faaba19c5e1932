"""cargo-proc-macro scaffolder -- generates proc-macro crate workspaces.

Quick usage::

    from cargo_proc_macro.scaffolder import MacroKind, WorkspaceConfig, WorkspaceGenerator

    config = WorkspaceConfig(path="my-thing", kind=MacroKind.DERIVE)
    workspace = WorkspaceGenerator(config).generate()
"""

from cargo_proc_macro.scaffolder.errors import (
    CargoError,
    NameResolutionError,
    ReadError,
    ScaffoldError,
    WriteError,
)
from cargo_proc_macro.scaffolder.generator import (
    GeneratedWorkspace,
    WorkspaceConfig,
    WorkspaceGenerator,
)
from cargo_proc_macro.scaffolder.kinds import MacroKind
from cargo_proc_macro.scaffolder.naming import resolve_name
from cargo_proc_macro.scaffolder.templates import TemplateRenderer

__all__ = [
    "CargoError",
    "GeneratedWorkspace",
    "MacroKind",
    "NameResolutionError",
    "ReadError",
    "ScaffoldError",
    "TemplateRenderer",
    "WorkspaceConfig",
    "WorkspaceGenerator",
    "WriteError",
    "resolve_name",
]
