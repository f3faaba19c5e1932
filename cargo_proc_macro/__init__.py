"""cargo-proc-macro -- manage proc-macro crates with Cargo."""

__version__ = "0.3.0"
