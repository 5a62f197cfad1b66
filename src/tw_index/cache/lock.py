"""In-process registry of builds in flight, keyed by cache directory."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path


class BuildInProgressError(Exception):
    """Raised when a build is requested for a cache directory already being built."""

    def __init__(self, cache_dir: Path) -> None:
        super().__init__(f"A build is already in progress for {cache_dir}")
        self.cache_dir = cache_dir


class BuildRegistry:
    """Rejects overlapping builds that would write the same cache directory."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._in_flight: set[Path] = set()

    @contextmanager
    def claim(self, cache_dir: Path) -> Iterator[Path]:
        """Hold the build slot for cache_dir until the block exits."""
        key = cache_dir.resolve()
        with self._lock:
            if key in self._in_flight:
                raise BuildInProgressError(key)
            self._in_flight.add(key)
        try:
            yield key
        finally:
            with self._lock:
                self._in_flight.discard(key)

    def in_flight(self) -> tuple[Path, ...]:
        with self._lock:
            return tuple(sorted(self._in_flight))


DEFAULT_BUILD_REGISTRY = BuildRegistry()
