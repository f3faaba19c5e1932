"""Post-generation usage hint, printed Cargo style."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.text import Text

from cargo_proc_macro.utils import print_status

from .kinds import MacroKind
from .naming import template_names
from .templates import TemplateRenderer


def print_workspace_message(
    console: Console,
    path: Path,
    name: str,
    kind: MacroKind,
    renderer: TemplateRenderer | None = None,
) -> None:
    """Tell the user what was created and how to use the new macro.

    Template output is printed as plain text: Rust attributes such as
    ``#[derive(...)]`` would otherwise be read as console markup.
    """
    renderer = renderer or TemplateRenderer()
    ctx = template_names(name)

    header = renderer.render("message/header.txt.j2", ctx).rstrip("\n")
    example = renderer.render_kind(kind, "example.txt", ctx).rstrip("\n")
    footer = renderer.render("message/footer.txt.j2", ctx).rstrip("\n")

    print_status(
        console,
        "Created",
        f"workspace `{path}` with members `impl` and `macro`",
    )

    help_line = Text()
    help_line.append("help", style="bold cyan")
    help_line.append(f": {header}")
    console.print(help_line, soft_wrap=True)

    for line in example.split("\n"):
        out = Text("    ", style="bold blue")
        out.append(line)
        console.print(out, soft_wrap=True)

    console.print(Text(footer), soft_wrap=True)
