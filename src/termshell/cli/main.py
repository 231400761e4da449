"""termshell CLI - print aligned, colored status lines from scripts.

Builds a Shell from flags (falling back to TERMSHELL_* environment
variables) and prints one message kind per invocation.
"""

from typing import Annotated

import typer

from termshell.color import ColorMode
from termshell.config import get_settings
from termshell.exceptions import ParseFailure
from termshell.logging import configure_logging, get_logger
from termshell.shell import Shell, ShellOptions

LOG = get_logger(__name__)

app = typer.Typer(
    name="termshell",
    help="""
    Print aligned, colored status lines.

    \b
    Quick start:
      termshell status Compiling "foo v1.0"
      termshell warn "unused variable"
      termshell --color never error "disk full"
    """,
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _shell(ctx: typer.Context) -> Shell:
    return ctx.ensure_object(dict)["shell"]


@app.callback()
def main_callback(
    ctx: typer.Context,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Suppress status, header and warning lines"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Use verbose output"),
    ] = False,
    color: Annotated[
        str | None,
        typer.Option("--color", help="Coloring: auto, always, never"),
    ] = None,
) -> None:
    """termshell - aligned, colored status lines for scripts."""
    settings = get_settings()
    configure_logging(level=settings.log_level, json_output=settings.log_format == "json")

    try:
        color_mode = ColorMode.parse(color if color is not None else settings.color)
    except ParseFailure as exc:
        raise typer.BadParameter(str(exc), param_hint="'--color'") from exc

    options = ShellOptions(
        quiet=quiet or settings.quiet,
        verbose=verbose or settings.verbose,
        color_mode=color_mode,
    )
    LOG.debug(
        "cli_options_resolved",
        quiet=options.quiet,
        verbose=options.verbose,
        color=str(color_mode),
    )
    ctx.ensure_object(dict)["shell"] = Shell(options)


@app.command("status")
def status(
    ctx: typer.Context,
    status: Annotated[str, typer.Argument(help="Status token, e.g. Compiling")],
    message: Annotated[str, typer.Argument(help="Message printed after the status")],
) -> None:
    """Print a green, right-aligned status line."""
    _shell(ctx).status(status, message)


@app.command("header")
def header(
    ctx: typer.Context,
    status: Annotated[str, typer.Argument(help="Header token")],
) -> None:
    """Print a cyan status with no message and no newline."""
    _shell(ctx).status_header(status)


@app.command("warn")
def warn(
    ctx: typer.Context,
    message: Annotated[str, typer.Argument(help="Warning text")],
) -> None:
    """Print a yellow (warning) line."""
    _shell(ctx).warn(message)


@app.command("error")
def error(
    ctx: typer.Context,
    message: Annotated[str, typer.Argument(help="Error text")],
) -> None:
    """Print a red (error) line to stderr, even when quiet."""
    _shell(ctx).error(message)


@app.command("note")
def note(
    ctx: typer.Context,
    message: Annotated[str, typer.Argument(help="Note text")],
) -> None:
    """Print a cyan (note) line, even when quiet."""
    _shell(ctx).note(message)


@app.command("info")
def info(ctx: typer.Context) -> None:
    """Show how output is being rendered."""
    shell = _shell(ctx)
    supported = "yes" if shell.supports_color() else "no"
    shell.status("Verbosity", shell.verbosity)
    shell.status("Color", f"{shell.color_mode()} (supported: {supported})")
