"""Custom exceptions for termshell package."""


class TermshellError(Exception):
    """Base exception class for all termshell errors."""


class ParseFailure(TermshellError, ValueError):
    """Raised when a settings value cannot be parsed.

    This is a configuration error and is reported before any Shell exists.

    Attributes:
        field: Human-readable name of the setting (e.g., 'color mode').
        value: The offending input, exactly as given.
    """

    def __init__(self, field: str, value: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"invalid {field}: {value!r}")


class OutputError(TermshellError):
    """Raised when writing to an output sink fails.

    The originating OSError is chained as ``__cause__``.
    """


class GuardPoisonedError(TermshellError, RuntimeError):
    """Raised when acquiring a channel guard that a failed writer left poisoned.

    The channel may hold partially written output, so this is never
    recovered from.
    """

    def __init__(self, channel: str) -> None:
        self.channel = channel
        super().__init__(f"Could not acquire {channel} guard: guard poisoned")
