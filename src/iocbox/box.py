"""Process-wide default container with a static-style facade.

Applications that prefer a single shared registry can use the module
functions (or the equivalent ``Box`` static methods) instead of passing a
:class:`~iocbox.core.ServiceContainer` around::

    from iocbox import box

    box.put("name", "Fred")
    box.set("greeter", lambda params: Greeter(box.get("name")))
    box.fix("clock", lambda params: SystemClock())

    greeter = box.get("greeter")

The shared container is created on first use from :func:`load_app_settings`
and lives for the rest of the process.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

from iocbox.core.config import load_app_settings
from iocbox.core.container import ServiceContainer

_default: ServiceContainer | None = None
_default_lock = threading.Lock()


def default_container() -> ServiceContainer:
    """Return the process-wide container, creating it on first use."""
    global _default  # pylint: disable=global-statement
    if _default is None:
        with _default_lock:
            if _default is None:
                settings = load_app_settings()
                _default = ServiceContainer.from_settings(settings.container)
    return _default


def set(key: str, factory: Callable[[Any], Any]) -> None:  # pylint: disable=redefined-builtin
    """Register a transient factory on the shared container."""
    default_container().set(key, factory)


def put(key: str, value: Any) -> None:
    """Register a fixed value on the shared container."""
    default_container().put(key, value)


def fix(key: str, factory: Callable[[Any], Any]) -> None:
    """Register a singleton factory on the shared container."""
    default_container().fix(key, factory)


def get(key: str, params: Any = ()) -> Any:
    """Resolve ``key`` from the shared container."""
    return default_container().get(key, params)


class Box:
    """Static facade over the shared container."""

    set = staticmethod(set)
    put = staticmethod(put)
    fix = staticmethod(fix)
    get = staticmethod(get)


__all__ = ["Box", "default_container", "fix", "get", "put", "set"]
