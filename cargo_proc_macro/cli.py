"""Command line entry point for ``cargo proc-macro``.

Cargo runs ``cargo-proc-macro proc-macro <args>`` for ``cargo proc-macro
<args>`` and exports ``CARGO`` pointing at its own executable.

Usage::

    cargo proc-macro new my-macro --kind derive
    cargo proc-macro init --name my-macro -k f
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from rich.text import Text

from cargo_proc_macro import __version__
from cargo_proc_macro.config import Settings
from cargo_proc_macro.scaffolder import (
    MacroKind,
    ScaffoldError,
    WorkspaceConfig,
    WorkspaceGenerator,
)
from cargo_proc_macro.scaffolder.kinds import KIND_HELP
from cargo_proc_macro.scaffolder.message import print_workspace_message
from cargo_proc_macro.utils import err_console, make_console, print_error

PROG = "cargo proc-macro"
SUBCOMMAND = "proc-macro"

NOT_UNDER_CARGO = "This binary may only be called via `cargo proc-macro`."


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _parse_kind(text: str) -> MacroKind:
    try:
        return MacroKind.parse(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"unknown kind {exc}, expected one of: a, attr, attribute, d, derive, f, function"
        ) from exc


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--name",
        default=None,
        help="Set the resulting base crate name, defaults to the directory name",
    )
    parser.add_argument(
        "-k", "--kind",
        type=_parse_kind,
        default=MacroKind.ATTRIBUTE,
        help=KIND_HELP,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the ``cargo proc-macro`` argument parser."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="cargo-proc-macro -- Manage proc-macro crates with Cargo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  cargo proc-macro new my-macro\n"
            "  cargo proc-macro new my-derive --kind derive\n"
            "  cargo proc-macro init --name my-macro -k function\n"
        ),
    )
    parser.add_argument(
        "-V", "--version",
        action="version",
        version=f"cargo-proc-macro {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="SUBCOMMAND")

    new = subparsers.add_parser(
        "new",
        help="Create a new set of proc-macro crates at given path",
        description="Create a new set of proc-macro crates at <path>",
    )
    new.add_argument("path", type=Path, help="Create a new proc-macro crate set at <path>")
    _add_common_options(new)

    init = subparsers.add_parser(
        "init",
        help="Create a new set of proc-macro crates in an existing directory",
        description="Create a new set of proc-macro crates in an existing directory",
    )
    init.add_argument(
        "path",
        type=Path,
        nargs="?",
        default=None,
        help="Directory to initialise (default: the current directory)",
    )
    _add_common_options(init)

    return parser


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``cargo-proc-macro`` executable."""
    if not os.environ.get("CARGO"):
        err_console.print(Text(NOT_UNDER_CARGO), soft_wrap=True)
        sys.exit(1)

    args_list = list(sys.argv[1:] if argv is None else argv)
    if args_list and args_list[0] == SUBCOMMAND:
        args_list = args_list[1:]

    parser = build_parser()
    args = parser.parse_args(args_list)

    if args.command is None:
        parser.print_help()
        sys.exit(2)

    try:
        settings = Settings.from_env()
    except ValueError as exc:
        print_error(f"Invalid configuration: {exc}")
        sys.exit(1)

    stdout = make_console(settings.color)
    stderr = make_console(settings.color, stderr=True)

    path = args.path if args.path is not None else Path.cwd()
    config = WorkspaceConfig(
        path=path,
        name=args.name,
        kind=args.kind,
        init=args.command == "init",
    )
    generator = WorkspaceGenerator(config, settings)

    try:
        workspace = generator.generate()
    except ScaffoldError as exc:
        print_error(str(exc), target=stderr)
        sys.exit(1)

    print_workspace_message(
        stdout, workspace.path, workspace.name, workspace.kind, generator.renderer
    )


if __name__ == "__main__":
    main()
