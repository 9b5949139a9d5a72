"""Transcript cache: the two-operation cache contract and an in-memory store.

Any object exposing ``get(key)`` and ``set(key, value, ttl)`` can be
handed to the pipeline (Redis wrapper, disk store, ...). ``InMemoryCache``
is the reference implementation: entries expire lazily on read and there
is no capacity bound.
"""

from __future__ import annotations

import threading
import time
from typing import Callable, Protocol, runtime_checkable

from ytt.core.config import DEFAULT_CACHE_TTL


@runtime_checkable
class CacheStrategy(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str, ttl: int | None = None) -> None: ...


def cache_key(video_id: str, lang: str | None = None) -> str:
    """Key under which a transcript for ``video_id`` / ``lang`` is stored."""
    return f"transcript:{video_id}:{lang or ''}"


def _monotonic_ms() -> float:
    return time.monotonic() * 1000


class InMemoryCache:
    """Thread-safe in-process TTL map.

    Args:
        default_ttl: Lifetime in milliseconds for entries stored without
            an explicit ttl.
        clock: Millisecond clock, replaceable for tests.
    """

    def __init__(
        self,
        default_ttl: int = DEFAULT_CACHE_TTL,
        clock: Callable[[], float] = _monotonic_ms,
    ) -> None:
        self.default_ttl = default_ttl
        self._clock = clock
        self._entries: dict[str, tuple[str, float]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> str | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and entry[1] > self._clock():
                return entry[0]
            # Expired or missing
            self._entries.pop(key, None)
            return None

    def set(self, key: str, value: str, ttl: int | None = None) -> None:
        expires_at = self._clock() + (ttl if ttl is not None else self.default_ttl)
        with self._lock:
            self._entries[key] = (value, expires_at)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
