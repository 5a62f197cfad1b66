"""Per-project cache directories under a shared cache root."""

from __future__ import annotations

import hashlib
import json
import re
from dataclasses import dataclass
from pathlib import Path

from tw_index.cache.models import (
    CLASS_LIST_FILE,
    META_FILE,
    NAME_MAP_FILE,
    CachedIndex,
    CacheIOError,
    IndexMeta,
    PickerItem,
)

PREVIEW_MAX_CHARS = 300
_WHITESPACE_RUN = re.compile(r"\s+")


@dataclass(slots=True, frozen=True)
class CacheStatus:
    """Cache status snapshot for one project."""

    cache_dir: Path
    stale: bool
    compiled: bool | None
    class_count: int

    def to_dict(self) -> dict[str, object]:
        return {
            "cache_dir": str(self.cache_dir),
            "stale": self.stale,
            "compiled": self.compiled,
            "class_count": self.class_count,
        }


def is_cache_stale(config_path: Path, cache_dir: Path) -> bool:
    """Return True when the cache must be rebuilt.

    Missing class list or name map means stale; otherwise the cache is stale
    only when the config file is strictly newer than the class list.
    """
    class_list = cache_dir / CLASS_LIST_FILE
    name_map = cache_dir / NAME_MAP_FILE
    if not (class_list.exists() and name_map.exists()):
        return True
    try:
        config_mtime_ns = config_path.stat().st_mtime_ns
        class_list_mtime_ns = class_list.stat().st_mtime_ns
    except OSError:
        return True
    return config_mtime_ns > class_list_mtime_ns


def project_cache_key(project_root: Path) -> str:
    """Return the deterministic directory key for a project root."""
    return hashlib.sha256(str(project_root.resolve()).encode("utf-8")).hexdigest()


class CacheManager:
    """Owns the cache root and the project-root to directory mapping."""

    def __init__(self, cache_root: Path) -> None:
        self._cache_root = cache_root.resolve()

    @property
    def cache_root(self) -> Path:
        return self._cache_root

    def cache_dir_for(self, project_root: Path) -> Path:
        """Return the cache directory for a project without creating it."""
        return self._cache_root / project_cache_key(project_root)

    def create(self, project_root: Path) -> Path:
        """Create and return the cache directory for a project."""
        cache_dir = self.cache_dir_for(project_root)
        try:
            cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as error:
            raise CacheIOError(
                reason=f"Unable to create cache directory: {error}", path=cache_dir
            ) from error
        return cache_dir

    def is_stale(self, project_root: Path, config_path: Path) -> bool:
        return is_cache_stale(config_path, self.cache_dir_for(project_root))

    def invalidate(self, project_root: Path) -> bool:
        """Force the next staleness check to report stale.

        Only the class list is removed; rule files stay until the next build
        overwrites them. Returns False when there was nothing to invalidate.
        """
        class_list = self.cache_dir_for(project_root) / CLASS_LIST_FILE
        if not class_list.exists():
            return False
        try:
            class_list.unlink()
        except OSError as error:
            raise CacheIOError(
                reason=f"Unable to invalidate cache: {error}", path=class_list
            ) from error
        return True

    def read(self, project_root: Path) -> CachedIndex:
        return read_index(self.cache_dir_for(project_root))

    def picker_items(self, project_root: Path) -> list[PickerItem]:
        return load_picker_items(self.cache_dir_for(project_root))

    def status(self, project_root: Path, config_path: Path) -> CacheStatus:
        """Return staleness and compile status without raising for a missing cache."""
        cache_dir = self.cache_dir_for(project_root)
        stale = is_cache_stale(config_path, cache_dir)
        try:
            cached = read_index(cache_dir)
        except CacheIOError:
            return CacheStatus(cache_dir=cache_dir, stale=stale, compiled=None, class_count=0)
        return CacheStatus(
            cache_dir=cache_dir,
            stale=stale,
            compiled=cached.meta.compiled,
            class_count=len(cached.classes),
        )


def read_index(cache_dir: Path) -> CachedIndex:
    """Read class list, name map, and metadata back from a cache directory."""
    raw_classes = _read_json(cache_dir / CLASS_LIST_FILE)
    if not isinstance(raw_classes, list) or not all(isinstance(c, str) for c in raw_classes):
        raise CacheIOError(reason="Class list must be a JSON array of strings", path=cache_dir)
    raw_map = _read_json(cache_dir / NAME_MAP_FILE)
    if not isinstance(raw_map, dict) or not all(isinstance(v, str) for v in raw_map.values()):
        raise CacheIOError(reason="Name map must be a JSON object of strings", path=cache_dir)
    meta = IndexMeta(compiled=False, source="unknown")
    meta_path = cache_dir / META_FILE
    if meta_path.exists():
        raw_meta = _read_json(meta_path)
        if isinstance(raw_meta, dict):
            version = raw_meta.get("tailwind_version")
            source = raw_meta.get("source")
            meta = IndexMeta(
                compiled=raw_meta.get("compiled") is True,
                source=source if isinstance(source, str) else "unknown",
                tailwind_version=version if isinstance(version, str) else None,
            )
    return CachedIndex(
        cache_dir=cache_dir,
        classes=tuple(raw_classes),
        filename_map=dict(raw_map),
        meta=meta,
    )


def load_picker_items(cache_dir: Path) -> list[PickerItem]:
    """Return picker entries for every mapped class whose rule file exists."""
    cached = read_index(cache_dir)
    items: list[PickerItem] = []
    for stem, name in cached.filename_map.items():
        path = cached.rule_path(stem)
        if not path.exists():
            continue
        try:
            content = path.read_text(encoding="utf-8", errors="replace")
        except OSError:
            content = ""
        items.append(PickerItem(label=name, preview=preview_text(content), path=path))
    items.sort(key=lambda item: item.text)
    return items


def preview_text(content: str) -> str:
    """Collapse whitespace and cap the preview length."""
    collapsed = _WHITESPACE_RUN.sub(" ", content).strip()
    return collapsed[:PREVIEW_MAX_CHARS]


def _read_json(path: Path) -> object:
    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except FileNotFoundError as error:
        raise CacheIOError(reason="Cache missing", path=path) from error
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as error:
        raise CacheIOError(reason=f"Cache unreadable: {error}", path=path) from error
