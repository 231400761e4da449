"""Allow running as ``python -m termshell``."""

from termshell.cli.main import app

app(prog_name="termshell")
