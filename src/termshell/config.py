"""Configuration management with pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from termshell.color import ColorMode
from termshell.shell import ShellOptions


class ShellSettings(BaseSettings):
    """termshell settings loaded from environment variables.

    All settings use the TERMSHELL_ prefix for environment variables.
    The color mode is kept as the raw token so that an invalid value is
    reported as a ParseFailure by ``to_options`` rather than at load time.
    """

    # Output configuration
    quiet: bool = Field(default=False, description="Suppress status and warning lines")
    verbose: bool = Field(default=False, description="Enable verbose output")
    color: str = Field(default="auto", description="Color mode: auto, always, never")

    # Logging configuration
    log_level: str = Field(default="WARNING", description="Logging level")
    log_format: str = Field(default="console", description="Log format: console or json")

    model_config = SettingsConfigDict(
        env_prefix="TERMSHELL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def to_options(self) -> ShellOptions:
        """Resolve these settings into the options a Shell is built from.

        Raises:
            ParseFailure: If ``color`` is not a known color mode.
        """
        return ShellOptions(
            quiet=self.quiet,
            verbose=self.verbose,
            color_mode=ColorMode.parse(self.color),
        )


# Global settings instance
_settings: ShellSettings | None = None


def get_settings() -> ShellSettings:
    """Get or create the global settings instance."""
    global _settings
    if _settings is None:
        _settings = ShellSettings()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance (useful for testing)."""
    global _settings
    _settings = None
