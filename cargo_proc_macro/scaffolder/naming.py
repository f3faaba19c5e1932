"""Package name derivation and case conversion.

The generated crates are all named after a single base name:

- ``<name>``        facade crate (the workspace root)
- ``<name>-impl``   implementation crate
- ``<name>-macro``  ``proc-macro = true`` shim crate

Rust code refers to those crates through their snake-case identifiers, and the
derive macro is named after the upper camel case form of the base name.
"""

from __future__ import annotations

import re
from pathlib import Path

from .errors import NameResolutionError


def split_words(value: str) -> list[str]:
    """Split ``SomeThing``, ``some-thing`` or ``some thing`` into lower-case words.

    Any Unicode letter or digit belongs to a word; everything else separates
    words.  Inside a run, a new word starts at an upper-case letter that
    follows a lower-case letter or digit, or that ends an acronym
    (``HTTPServer`` -> ``http``, ``server``).
    """
    words: list[str] = []
    for chunk in re.split(r"[\W_]+", value):
        start = 0
        for i in range(1, len(chunk)):
            prev, char = chunk[i - 1], chunk[i]
            nxt = chunk[i + 1] if i + 1 < len(chunk) else ""
            if char.isupper() and (
                prev.islower() or prev.isdigit() or (prev.isupper() and nxt.islower())
            ):
                words.append(chunk[start:i])
                start = i
        if chunk:
            words.append(chunk[start:])
    return [word.lower() for word in words]


def to_kebab_case(value: str) -> str:
    """Convert ``SomeThing`` or ``some thing`` to ``some-thing``."""
    return "-".join(split_words(value))


def snake_name(name: str) -> str:
    """Crate identifier as seen from Rust code (``my-thing`` -> ``my_thing``)."""
    return name.replace("-", "_")


def struct_name(name: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``."""
    return "".join(word.capitalize() for word in split_words(name))


def resolve_name(path: str | Path, explicit_name: str | None = None) -> str:
    """Resolve the base package name for a workspace at *path*.

    A user-supplied name is returned untouched.  Otherwise the final path
    segment is used: CamelCase or spaced names are converted to kebab case,
    names that already contain an underscore are left alone.

    Raises:
        NameResolutionError: If *path* has no usable final segment.
    """
    if explicit_name is not None:
        return explicit_name

    segment = Path(path).name
    if segment in ("", ".", ".."):
        raise NameResolutionError(path)

    if "_" in segment:
        return segment

    name = to_kebab_case(segment)
    if not name:
        raise NameResolutionError(path)
    return name


def template_names(name: str) -> dict[str, str]:
    """Naming variables shared by every template."""
    return {
        "name": name,
        "snake_name": snake_name(name),
        "struct_name": struct_name(name),
    }
