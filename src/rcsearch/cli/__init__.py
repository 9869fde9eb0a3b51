"""CLI for rcsearch."""

from rcsearch.cli.main import app, main


__all__ = ["app", "main"]
