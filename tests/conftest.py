"""Pytest configuration for termshell tests."""

import sys
from pathlib import Path

import pytest
import structlog
from structlog._config import BoundLoggerLazyProxy

# Add src directory to sys.path for test imports
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Isolate each test from the caller's TERMSHELL_* environment.

    This fixture:
    - Removes any TERMSHELL_ environment variables
    - Resets the global settings instance before each test
    """
    import os

    for name in list(os.environ):
        if name.startswith("TERMSHELL_"):
            monkeypatch.delenv(name)

    from termshell.config import reset_settings

    reset_settings()


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Keep debug diagnostics quiet during a test and reset structlog afterwards.

    CliRunner captures stderr with a temporary stream. When configure_logging()
    runs inside CliRunner, structlog binds loggers to that stream, so the
    configuration is reset once the test is done.
    """
    from termshell.logging import configure_logging

    configure_logging()
    yield
    structlog.reset_defaults()
    for module in list(sys.modules.values()):
        for attr in getattr(module, "__dict__", {}).values():
            if isinstance(attr, BoundLoggerLazyProxy):
                attr.__dict__.pop("bind", None)
