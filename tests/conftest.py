"""Shared fixtures for container tests."""

from __future__ import annotations

import pytest

from iocbox.core import ServiceContainer


@pytest.fixture
def container() -> ServiceContainer:
    """Provide a fresh, isolated container per test."""

    return ServiceContainer()
