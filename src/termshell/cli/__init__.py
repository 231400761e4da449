"""Command-line entry point for termshell."""

from termshell.cli.main import app

__all__ = ["app"]
