"""cargo-proc-macro configuration.

Typed settings for a single invocation.  All settings use Pydantic v2 models
so they are validated at construction time and can be built from environment
variables without boiler-plate.
"""

from __future__ import annotations

import os
from typing import Any, Literal

from pydantic import BaseModel, Field


class DependencyVersions(BaseModel):
    """Version requirements written into the generated manifests."""

    crate_version: str = Field(
        default="0.1.0", description="Version pinned (with `=`) between sibling crates"
    )
    syn: str = Field(default="1")
    quote: str = Field(default="1")
    proc_macro2: str = Field(default="1")


class Settings(BaseModel):
    """Global cargo-proc-macro settings.

    Instances are created once by the CLI entry point (usually through
    :meth:`from_env`) and passed to the generator.
    """

    cargo: str = Field(default="cargo", description="Cargo executable to run")
    color: Literal["auto", "always", "never"] = Field(default="auto")
    command_timeout: int = Field(
        default=120, ge=1, description="Per-command timeout in seconds"
    )
    versions: DependencyVersions = Field(default_factory=DependencyVersions)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            CARGO (set by Cargo itself for subcommands), CARGO_TERM_COLOR,
            CARGO_PROC_MACRO_TIMEOUT, CARGO_PROC_MACRO_CRATE_VERSION,
            CARGO_PROC_MACRO_SYN_VERSION, CARGO_PROC_MACRO_QUOTE_VERSION,
            CARGO_PROC_MACRO_PROC_MACRO2_VERSION.
        """
        version_kwargs: dict[str, Any] = {}
        if os.environ.get("CARGO_PROC_MACRO_CRATE_VERSION"):
            version_kwargs["crate_version"] = os.environ["CARGO_PROC_MACRO_CRATE_VERSION"]
        if os.environ.get("CARGO_PROC_MACRO_SYN_VERSION"):
            version_kwargs["syn"] = os.environ["CARGO_PROC_MACRO_SYN_VERSION"]
        if os.environ.get("CARGO_PROC_MACRO_QUOTE_VERSION"):
            version_kwargs["quote"] = os.environ["CARGO_PROC_MACRO_QUOTE_VERSION"]
        if os.environ.get("CARGO_PROC_MACRO_PROC_MACRO2_VERSION"):
            version_kwargs["proc_macro2"] = os.environ["CARGO_PROC_MACRO_PROC_MACRO2_VERSION"]

        kwargs: dict[str, Any] = {"versions": DependencyVersions(**version_kwargs)}
        if os.environ.get("CARGO"):
            kwargs["cargo"] = os.environ["CARGO"]
        if os.environ.get("CARGO_TERM_COLOR"):
            kwargs["color"] = os.environ["CARGO_TERM_COLOR"].strip().lower()
        if os.environ.get("CARGO_PROC_MACRO_TIMEOUT"):
            kwargs["command_timeout"] = int(os.environ["CARGO_PROC_MACRO_TIMEOUT"])

        return cls(**kwargs)

    def template_context(self) -> dict[str, str]:
        """Version variables made available to every template."""
        return {
            "crate_version": self.versions.crate_version,
            "syn_version": self.versions.syn,
            "quote_version": self.versions.quote,
            "proc_macro2_version": self.versions.proc_macro2,
        }
