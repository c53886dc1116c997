"""Compute-once descriptor for per-instance data sources."""

from __future__ import annotations

import threading
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

# Guards creation of the per-instance locks below
_lock_registry_guard = threading.Lock()


class cached_source(Generic[T]):
    """Property whose value is computed on first access and then kept.

    Works like ``functools.cached_property``, but the first computation is
    serialized with a lock per instance and attribute, so concurrent first
    readers of a shared instance still trigger exactly one computation.
    The value is stored in the instance ``__dict__`` under the attribute
    name; later lookups bypass the descriptor entirely.
    """

    def __init__(self, func: Callable[[Any], T]) -> None:
        self.func = func
        self.attrname: str | None = None
        self.__doc__ = func.__doc__

    def __set_name__(self, owner: type, name: str) -> None:
        self.attrname = name

    def _lock_for(self, instance: Any) -> threading.Lock:
        key = f"_{self.attrname}_lock"
        with _lock_registry_guard:
            return instance.__dict__.setdefault(key, threading.Lock())

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        if self.attrname is None:
            raise TypeError("cached_source must be assigned to a class attribute")
        cache = instance.__dict__
        if self.attrname in cache:
            return cache[self.attrname]
        with self._lock_for(instance):
            # Another thread may have finished while we waited
            if self.attrname not in cache:
                cache[self.attrname] = self.func(instance)
            return cache[self.attrname]


def is_loaded(instance: Any, name: str) -> bool:
    """Return whether a cached_source attribute has already been computed."""
    return name in instance.__dict__
