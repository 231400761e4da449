"""Color mode parsing and resolution against terminal capability."""

from __future__ import annotations

from enum import StrEnum

from termshell.exceptions import ParseFailure
from termshell.terminal import Stream


class ColorChoice(StrEnum):
    """Effective coloring decision for one stream."""

    ALWAYS = "always"
    NEVER = "never"
    AUTO = "auto"


class ColorMode(StrEnum):
    """Color mode requested by the user.

    - AUTO: color only when the stream is an interactive terminal
    - ALWAYS: color even when output is redirected
    - NEVER: no color
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    @classmethod
    def parse(cls, value: str) -> ColorMode:
        """Parse a case-insensitive color mode token.

        Args:
            value: One of "auto", "always", "never" in any case.

        Returns:
            The matching ColorMode.

        Raises:
            ParseFailure: If the token is not a known color mode.
        """
        try:
            return cls(value.lower())
        except ValueError:
            raise ParseFailure("color mode", value) from None

    def resolve(self, stream: Stream) -> ColorChoice:
        """Resolve this mode to an effective choice for ``stream``."""
        if self is ColorMode.ALWAYS:
            return ColorChoice.ALWAYS
        if self is ColorMode.NEVER:
            return ColorChoice.NEVER
        return ColorChoice.AUTO if stream.is_terminal() else ColorChoice.NEVER
