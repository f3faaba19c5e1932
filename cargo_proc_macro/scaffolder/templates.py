"""Jinja2 template rendering for proc-macro scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``cargo_proc_macro/scaffolder/templates/`` directory and fills them with the
workspace naming context.  Each macro kind has its own template set:

- ``<kind>/lib.rs.j2``      facade crate, re-exports the macro
- ``<kind>/macro.rs.j2``    ``proc-macro = true`` shim
- ``<kind>/impl.rs.j2``     placeholder implementation
- ``<kind>/example.txt.j2`` usage snippet shown after generation

Rendering is strict: a placeholder without a value raises instead of being
silently dropped.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .errors import WriteError
from .kinds import MacroKind


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

# Template parts every macro kind provides.
TEMPLATE_PARTS: tuple[str, ...] = ("lib.rs", "macro.rs", "impl.rs", "example.txt")


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for proc-macro workspaces.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Templates are rendered with a context dictionary that
    contains the workspace names (``name``, ``snake_name``, ``struct_name``)
    and the dependency versions.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"derive/lib.rs.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_kind(self, kind: MacroKind, part: str, context: dict[str, Any]) -> str:
        """Render one part (see ``TEMPLATE_PARTS``) of a macro kind's template set."""
        if part not in TEMPLATE_PARTS:
            raise ValueError(f"Unknown template part: {part!r}")
        return self.render(f"{kind.value}/{part}.j2", context)

    # -- File-based rendering ----------------------------------------------

    def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Parent directories are created automatically.  Returns the output
        path.

        Raises:
            WriteError: If the file cannot be written.
        """
        content = self.render(template_path, context)
        out = Path(output_path)
        _write_file(out, content)
        return out


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _write_file(path: Path, content: str) -> None:
    """Create parent dirs and write content."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise WriteError(path, str(exc)) from exc
