"""Memoizing wrapper backing singleton registrations."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from contextlib import nullcontext
from enum import Enum
from typing import Any, ContextManager

LOGGER = logging.getLogger(__name__)

_EMPTY = object()


class MemoState(str, Enum):
    """Lifecycle of a singleton memo cell."""

    UNREALIZED = "unrealized"
    REALIZED = "realized"


class SingletonFactory:
    """Wrap a factory so that it runs at most once and caches its result.

    The parameters of the first successful call are handed to the wrapped
    factory; parameters passed on any later call are ignored and the cached
    value is returned instead. A failing factory leaves the cell unrealized.
    """

    def __init__(
        self,
        factory: Callable[[Any], Any],
        *,
        key: str | None = None,
        thread_safe: bool = True,
    ) -> None:
        """Wrap ``factory``; ``key`` is only used for log messages."""
        self._factory = factory
        self._key = key
        self._value: Any = _EMPTY
        self._lock: ContextManager[Any] = (
            threading.Lock() if thread_safe else nullcontext()
        )

    @property
    def state(self) -> MemoState:
        """Current lifecycle state of the memo cell."""
        if self._value is _EMPTY:
            return MemoState.UNREALIZED
        return MemoState.REALIZED

    @property
    def realized(self) -> bool:
        """Whether the wrapped factory has produced its value."""
        return self._value is not _EMPTY

    @property
    def value(self) -> Any:
        """Return the memoized value, failing if it was never produced."""
        value = self._value
        if value is _EMPTY:
            msg = f"Singleton '{self._key}' has not been realized"
            raise LookupError(msg)
        return value

    def __call__(self, params: Any = ()) -> Any:
        """Return the memoized value, producing it on the first call."""
        value = self._value
        if value is not _EMPTY:
            return value
        with self._lock:
            # Another caller may have realized the cell while we waited.
            if self._value is _EMPTY:
                self._value = self._factory(params)
                LOGGER.debug("Realized singleton '%s'", self._key)
            return self._value

    def __repr__(self) -> str:
        """Show the key and lifecycle state."""
        return f"SingletonFactory(key={self._key!r}, state={self.state.value})"


__all__ = ["MemoState", "SingletonFactory"]
