"""Structured JSONL build log utilities."""

from __future__ import annotations

import json
from collections import deque
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from pathlib import Path

BUILD_LOG_FILE = "builds.jsonl"


@dataclass(slots=True, frozen=True)
class BuildEvent:
    """Outcome of a single index build."""

    timestamp: str
    project_root: str
    cache_dir: str
    ok: bool
    compiled: bool
    source: str | None
    class_count: int
    duration_ms: int
    error: str | None


def utc_timestamp() -> str:
    """Return an ISO-8601 UTC timestamp."""
    return datetime.now(tz=UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class JsonlAuditLogger:
    """Append-only JSONL build logger and bounded reader."""

    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    @classmethod
    def for_cache_root(cls, cache_root: Path) -> JsonlAuditLogger:
        return cls(path=cache_root / BUILD_LOG_FILE)

    @property
    def path(self) -> Path:
        """Return on-disk JSONL path."""
        return self._path

    def append(self, event: BuildEvent) -> None:
        """Append an event as one JSON object per line."""
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(asdict(event), sort_keys=True))
            handle.write("\n")

    def read(self, since: str | None = None, limit: int = 50) -> list[dict[str, object]]:
        """Return up to ``limit`` most recent events at or after ``since``."""
        if limit < 1 or not self._path.exists():
            return []
        recent: deque[dict[str, object]] = deque(maxlen=limit)
        with self._path.open("r", encoding="utf-8") as handle:
            for line in handle:
                record = _parse_line(line)
                if record is None:
                    continue
                if since is not None and str(record.get("timestamp", "")) < since:
                    continue
                recent.append(record)
        return list(recent)


def _parse_line(line: str) -> dict[str, object] | None:
    stripped = line.strip()
    if not stripped:
        return None
    try:
        record = json.loads(stripped)
    except json.JSONDecodeError:
        return None
    return record if isinstance(record, dict) else None
