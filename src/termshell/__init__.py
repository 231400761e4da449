"""termshell - aligned, colored status lines for command-line tools.

This package provides:
- A thread-safe Shell writing status, warning, error and note lines
- Color mode resolution (auto/always/never) against terminal detection
- Right-justified status tokens and message wrapping to the terminal width
- Plain byte sinks for scripting and tests

Example:
    >>> from termshell import ColorMode, Shell, ShellOptions
    >>> shell = Shell(ShellOptions(color_mode=ColorMode.parse("auto")))
    >>> shell.status("Compiling", "foo v1.0")
    >>> shell.warn("unused variable `x`")
"""

import structlog

from termshell.color import ColorChoice, ColorMode
from termshell.config import ShellSettings, get_settings
from termshell.exceptions import GuardPoisonedError, OutputError, ParseFailure, TermshellError
from termshell.logging import configure_logging
from termshell.shell import Shell, ShellOptions, Verbosity
from termshell.sink import JUSTIFY_STATUS_LEN, PlainSink, StreamSink
from termshell.terminal import Stream

__version__ = "1.1.3"

# Keep debug diagnostics off stdout unless the host configures structlog itself
if not structlog.is_configured():
    configure_logging()

__all__ = [
    # Version
    "__version__",
    # Shell
    "Shell",
    "ShellOptions",
    "Verbosity",
    # Color
    "ColorMode",
    "ColorChoice",
    # Sinks
    "JUSTIFY_STATUS_LEN",
    "PlainSink",
    "StreamSink",
    "Stream",
    # Configuration
    "ShellSettings",
    "get_settings",
    "configure_logging",
    # Exceptions
    "TermshellError",
    "ParseFailure",
    "OutputError",
    "GuardPoisonedError",
]
