"""Text, path and temporary-file helpers for Rust code-completion tooling."""

__version__ = "0.1.0"
__all__ = ["textutil", "srcpath", "tmpfiles", "typeinf"]