"""Tests for logging utilities."""

from __future__ import annotations

import logging

import pytest

from iocbox.core import ServiceContainer
from iocbox.core.config import LoggingSettings
from iocbox.core.logging import configure_logging


def test_configure_logging_sets_root_level() -> None:
    """configure_logging should set the root logger level according to settings."""

    settings = LoggingSettings(level="DEBUG", structured=False)
    configure_logging(settings)
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("iocbox").level == logging.DEBUG


def test_registration_and_resolution_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    """Registrations, replacements and resolutions should emit debug records."""

    container = ServiceContainer(log_resolutions=True)

    with caplog.at_level(logging.DEBUG, logger="iocbox"):
        container.put("name", "Fred")
        container.put("name", "Barney")
        container.get("name")

    messages = [record.getMessage() for record in caplog.records]
    assert "Registered fixed service 'name'" in messages
    assert "Registered fixed service 'name' (replaced)" in messages
    assert "Resolving service 'name'" in messages


def test_structured_format_keeps_message_verbatim() -> None:
    """Structured output should carry quotes and backslashes through unaltered."""

    configure_logging(LoggingSettings(level="DEBUG", structured=True))
    console = next(
        handler for handler in logging.getLogger().handlers if handler.name == "console"
    )
    assert console.formatter is not None

    key = 'db "primary"\\replica'
    record = logging.LogRecord(
        "iocbox.core.container",
        logging.DEBUG,
        __file__,
        1,
        "Service '%s' is not registered",
        (key,),
        None,
    )
    output = console.formatter.format(record)

    assert output.endswith(
        f" DEBUG iocbox.core.container Service '{key}' is not registered"
    )
    assert "{" not in output
