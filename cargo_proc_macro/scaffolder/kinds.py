"""Procedural macro kinds supported by the scaffolder."""

from __future__ import annotations

from enum import Enum


class MacroKind(str, Enum):
    """Flavour of proc-macro entry point to generate."""
    ATTRIBUTE = "attribute"
    DERIVE = "derive"
    FUNCTION = "function"

    @classmethod
    def parse(cls, text: str) -> "MacroKind":
        """Parse a ``--kind`` value, accepting the short aliases.

        Raises:
            ValueError: If *text* names no known kind.
        """
        try:
            return _ALIASES[text]
        except KeyError:
            raise ValueError(f"`{text}`") from None


_ALIASES: dict[str, MacroKind] = {
    "a": MacroKind.ATTRIBUTE,
    "attr": MacroKind.ATTRIBUTE,
    "attribute": MacroKind.ATTRIBUTE,
    "d": MacroKind.DERIVE,
    "derive": MacroKind.DERIVE,
    "f": MacroKind.FUNCTION,
    "function": MacroKind.FUNCTION,
}

KIND_HELP = (
    "proc-macro kind: attribute (a, attr, attribute), "
    "derive (d, derive), function-like (f, function). Default: attribute"
)
