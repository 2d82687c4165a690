"""Service container core: registry, singleton memoization, config and logging."""

from .config import AppSettings, ContainerSettings, LoggingSettings, load_app_settings
from .container import NotFoundError, ServiceContainer
from .logging import configure_logging
from .memo import MemoState, SingletonFactory

__all__ = [
    "AppSettings",
    "ContainerSettings",
    "LoggingSettings",
    "MemoState",
    "NotFoundError",
    "ServiceContainer",
    "SingletonFactory",
    "configure_logging",
    "load_app_settings",
]
