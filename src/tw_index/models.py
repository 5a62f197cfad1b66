"""Typed models shared across the build pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, frozen=True)
class ProjectContext:
    """Project root and the Tailwind config used to build its index."""

    root: Path
    config_path: Path

    @classmethod
    def from_paths(cls, root: Path | str, config_path: Path | str) -> ProjectContext:
        return cls(root=Path(root).resolve(), config_path=Path(config_path).resolve())


@dataclass(slots=True, frozen=True)
class Built:
    """Build finished and the cache was written."""

    compiled: bool
    class_count: int
    source: str
    cache_dir: Path
    collisions: tuple[str, ...] = ()
    compile_error: str | None = None

    ok = True


@dataclass(slots=True, frozen=True)
class Failed:
    """Build aborted without a usable cache."""

    reason: str

    ok = False


BuildOutcome = Built | Failed
