"""Service container mapping string keys to factories."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from contextlib import nullcontext
from typing import Any, ContextManager, TypeVar

from .config import ContainerSettings
from .memo import SingletonFactory

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

Factory = Callable[[Any], Any]


class NotFoundError(KeyError):
    """Raised when resolving a key that has no registered factory."""

    def __init__(self, key: str) -> None:
        """Store the missing key for diagnostics."""
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        """Name the missing key in the error message."""
        return f'Key "{self.key}" is not defined.'


def _check_key(key: str) -> None:
    """Reject keys that are not non-empty strings."""
    if not isinstance(key, str):
        msg = f"Service key must be a string, got {type(key).__name__}"
        raise TypeError(msg)
    if not key:
        raise ValueError("Service key must not be empty")


def _check_factory(key: str, factory: Any) -> None:
    """Reject factories that cannot be invoked."""
    if not callable(factory):
        msg = f"Factory for '{key}' must be callable, got {type(factory).__name__}"
        raise TypeError(msg)


class ServiceContainer:
    """Registry of transient, fixed and singleton service factories.

    Every factory receives a single positional argument, the parameter
    bundle passed to :meth:`get`, which defaults to an empty tuple.
    Registering a key that already exists replaces the previous entry.
    """

    def __init__(
        self, *, thread_safe: bool = True, log_resolutions: bool = False
    ) -> None:
        """Initialise an empty registry."""
        self._factories: dict[str, Factory] = {}
        self._thread_safe = thread_safe
        self._log_resolutions = log_resolutions
        self._lock: ContextManager[Any] = (
            threading.Lock() if thread_safe else nullcontext()
        )

    @classmethod
    def from_settings(cls, settings: ContainerSettings) -> ServiceContainer:
        """Build a container configured from ``settings``."""
        return cls(
            thread_safe=settings.thread_safe,
            log_resolutions=settings.log_resolutions,
        )

    def set(self, key: str, factory: Callable[[Any], T]) -> None:
        """Register a factory invoked afresh on every resolution."""
        _check_key(key)
        _check_factory(key, factory)
        self._store(key, factory, "transient")

    def put(self, key: str, value: Any) -> None:
        """Register a value returned unchanged on every resolution."""
        _check_key(key)

        def fixed(_params: Any) -> Any:
            """Return the captured value, ignoring parameters."""
            return value

        self._store(key, fixed, "fixed")

    def fix(self, key: str, factory: Callable[[Any], T]) -> None:
        """Register a factory whose first result is reused for all resolutions."""
        _check_key(key)
        _check_factory(key, factory)
        wrapper = SingletonFactory(factory, key=key, thread_safe=self._thread_safe)
        self._store(key, wrapper, "singleton")

    register_transient = set
    register_fixed = put
    register_singleton = fix

    def _store(self, key: str, factory: Factory, kind: str) -> None:
        """Atomically store or replace the factory for ``key``."""
        with self._lock:
            replaced = key in self._factories
            self._factories[key] = factory
        LOGGER.debug(
            "Registered %s service '%s'%s", kind, key, " (replaced)" if replaced else ""
        )

    def get(self, key: str, params: Any = ()) -> Any:
        """Resolve ``key``, passing ``params`` through to its factory."""
        with self._lock:
            factory = self._factories.get(key)
        if factory is None:
            LOGGER.debug("Service '%s' is not registered", key)
            raise NotFoundError(key)
        if self._log_resolutions:
            LOGGER.debug("Resolving service '%s'", key)
        # Invoked outside the lock so factories can resolve nested services.
        return factory(params)

    resolve = get

    def try_resolve(self, key: str, params: Any = ()) -> Any | None:
        """Resolve a dependency if available; return None otherwise."""
        try:
            return self.get(key, params)
        except NotFoundError as exc:
            # Only swallow the lookup failure for ``key`` itself, not a
            # missing nested dependency raised from inside its factory.
            if exc.key != key:
                raise
            return None

    def has(self, key: str) -> bool:
        """Return whether ``key`` has a registered factory."""
        with self._lock:
            return key in self._factories

    def keys(self) -> tuple[str, ...]:
        """Return registered keys in registration order."""
        with self._lock:
            return tuple(self._factories)

    def __contains__(self, key: object) -> bool:
        """Support ``key in container`` for string keys."""
        return isinstance(key, str) and self.has(key)

    def __len__(self) -> int:
        """Return the number of registered keys."""
        with self._lock:
            return len(self._factories)

    def __repr__(self) -> str:
        """Show the registered keys."""
        return f"ServiceContainer(keys={list(self.keys())!r})"


__all__ = ["NotFoundError", "ServiceContainer"]
