"""Tailwind config discovery for single-root and monorepo layouts."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from tw_index.models import ProjectContext

CONFIG_FILE_NAMES = (
    "tailwind.config.js",
    "tailwind.config.cjs",
    "tailwind.config.mjs",
    "tailwind.config.ts",
)
IGNORED_DIR_NAMES = frozenset({".git", "node_modules", "dist", "build"})


@dataclass(slots=True, frozen=True)
class ResolutionError(Exception):
    """Raised when no single Tailwind config can be chosen."""

    reason: str
    candidates: tuple[Path, ...] = ()

    def __str__(self) -> str:
        return self.reason


def find_nearest_config(start: Path) -> Path | None:
    """Return the closest config file at or above start."""
    resolved = start.resolve()
    directory = resolved if resolved.is_dir() else resolved.parent
    for candidate_dir in (directory, *directory.parents):
        for name in CONFIG_FILE_NAMES:
            candidate = candidate_dir / name
            if candidate.is_file():
                return candidate
    return None


def scan_workspace_configs(cwd: Path, max_depth: int) -> list[Path]:
    """Return config files under cwd down to max_depth directory levels."""
    results: list[Path] = []

    def scan(directory: Path, depth: int) -> None:
        if depth > max_depth:
            return
        try:
            with os.scandir(directory) as iterator:
                entries = sorted(iterator, key=lambda entry: entry.name)
        except OSError:
            return
        for entry in entries:
            if entry.is_file(follow_symlinks=False):
                if entry.name in CONFIG_FILE_NAMES:
                    results.append(Path(entry.path))
            elif entry.is_dir(follow_symlinks=False) and entry.name not in IGNORED_DIR_NAMES:
                scan(Path(entry.path), depth + 1)

    scan(cwd.resolve(), 1)
    return sorted(results)


def resolve_project_and_config(
    cwd: Path, start: Path | None = None, scan_depth: int = 4
) -> ProjectContext:
    """Pick the config nearest to start, else the only config under cwd."""
    nearest = find_nearest_config(start if start is not None else cwd)
    if nearest is not None:
        return ProjectContext.from_paths(nearest.parent, nearest)
    found = scan_workspace_configs(cwd, scan_depth)
    if not found:
        raise ResolutionError(reason="no tailwind.config.* found")
    if len(found) > 1:
        raise ResolutionError(
            reason=f"{len(found)} tailwind configs found; pick one with --config",
            candidates=tuple(found),
        )
    return ProjectContext.from_paths(found[0].parent, found[0])


def context_for_config(config_path: Path) -> ProjectContext:
    """Build a context from an explicitly chosen config file."""
    if not config_path.is_file():
        raise ResolutionError(reason=f"config file not found: {config_path}")
    resolved = config_path.resolve()
    return ProjectContext.from_paths(resolved.parent, resolved)
