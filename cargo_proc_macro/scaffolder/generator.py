"""Main scaffolding orchestrator.

Takes a ``WorkspaceConfig`` and generates a three-crate proc-macro workspace:
the facade crate at the workspace root, ``impl/`` holding the macro logic and
``macro/`` holding the ``proc-macro = true`` shim.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

from cargo_proc_macro.config import Settings

from .cargo import CargoRunner
from .kinds import MacroKind
from .manifest import (
    patch_impl_manifest,
    patch_macro_manifest,
    patch_root_manifest,
    read_manifest,
    write_manifest,
)
from .naming import resolve_name, template_names
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------


class WorkspaceConfig(BaseModel):
    """Pydantic model describing the workspace to scaffold."""

    path: Path = Field(..., description="Workspace root directory")
    name: Optional[str] = Field(
        default=None, description="Base crate name, defaults to the directory name"
    )
    kind: MacroKind = Field(default=MacroKind.ATTRIBUTE)
    init: bool = Field(
        default=False, description="Initialise an existing directory instead of creating one"
    )


@dataclass
class GeneratedWorkspace:
    """Result of a successful generation run."""

    name: str
    path: Path
    kind: MacroKind
    files: list[Path] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class WorkspaceGenerator:
    """Creates the facade, implementation and macro crates in order.

    Each step blocks until finished.  The first failure propagates as a
    ``ScaffoldError`` and whatever was already written stays on disk.
    """

    def __init__(
        self,
        config: WorkspaceConfig,
        settings: Settings | None = None,
        cargo: CargoRunner | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.settings = settings or Settings()
        self.cargo = cargo or CargoRunner(
            self.settings.cargo, timeout=self.settings.command_timeout
        )
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def generate(self) -> GeneratedWorkspace:
        """Generate the workspace and return what was created."""
        root = self.config.path
        name = resolve_name(root, self.config.name)
        context = self.build_context(name)
        result = GeneratedWorkspace(name=name, path=root, kind=self.config.kind)

        # 1. Workspace root / facade crate
        result.files += self._create_root(root, name, context)

        # 2. Implementation crate
        result.files += self._create_impl(root / "impl", name, context)

        # 3. Macro shim crate
        result.files += self._create_macro(root / "macro", name, context)

        return result

    # -- Context building --------------------------------------------------

    def build_context(self, name: str) -> dict[str, Any]:
        """Build the Jinja2 template context for *name*."""
        return {**template_names(name), **self.settings.template_context()}

    # -- Crates ------------------------------------------------------------

    def _create_root(self, root: Path, name: str, ctx: dict[str, Any]) -> list[Path]:
        manifest = self.cargo.new_lib(root, name, init=self.config.init)
        lib_rs = self._render_source(root, "lib.rs", ctx)

        doc = read_manifest(manifest)
        patch_root_manifest(doc, name, self.settings.versions)
        write_manifest(manifest, doc)
        return [manifest, lib_rs]

    def _create_impl(self, path: Path, name: str, ctx: dict[str, Any]) -> list[Path]:
        manifest = self.cargo.new_lib(path, f"{name}-impl", vcs="none")
        lib_rs = self._render_source(path, "impl.rs", ctx)

        doc = read_manifest(manifest)
        patch_impl_manifest(doc, self.settings.versions)
        write_manifest(manifest, doc)
        return [manifest, lib_rs]

    def _create_macro(self, path: Path, name: str, ctx: dict[str, Any]) -> list[Path]:
        manifest = self.cargo.new_lib(path, f"{name}-macro", vcs="none")
        lib_rs = self._render_source(path, "macro.rs", ctx)

        doc = read_manifest(manifest)
        patch_macro_manifest(doc, name, self.settings.versions)
        write_manifest(manifest, doc)
        return [manifest, lib_rs]

    def _render_source(self, crate_dir: Path, part: str, ctx: dict[str, Any]) -> Path:
        """Overwrite ``src/lib.rs`` of *crate_dir* with the kind's *part* template."""
        template = f"{self.config.kind.value}/{part}.j2"
        return self.renderer.render_to_file(
            template, crate_dir / "src" / "lib.rs", ctx
        )
