"""Typed models for the persisted utility index."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

CACHE_SCHEMA_VERSION = 1
CLASS_LIST_FILE = "classes.json"
NAME_MAP_FILE = "filename-map.json"
META_FILE = "meta.json"
RULE_FILE_SUFFIX = ".css"


class CacheIOError(Exception):
    """Raised when the cache directory cannot be written or read back."""

    def __init__(self, reason: str, path: Path) -> None:
        super().__init__(f"{reason} ({path})")
        self.reason = reason
        self.path = path


@dataclass(slots=True, frozen=True)
class IndexMeta:
    """Compile status recorded next to the class list."""

    compiled: bool
    source: str
    tailwind_version: str | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "compiled": self.compiled,
            "schema_version": CACHE_SCHEMA_VERSION,
            "source": self.source,
            "tailwind_version": self.tailwind_version,
        }


@dataclass(slots=True, frozen=True)
class IndexWriteResult:
    """Summary of one cache write."""

    class_count: int
    collisions: tuple[str, ...]
    removed_rule_files: int


@dataclass(slots=True, frozen=True)
class CachedIndex:
    """Index artifacts read back from a cache directory."""

    cache_dir: Path
    classes: tuple[str, ...]
    filename_map: dict[str, str]
    meta: IndexMeta

    def rule_path(self, stem: str) -> Path:
        return self.cache_dir / f"{stem}{RULE_FILE_SUFFIX}"


@dataclass(slots=True, frozen=True)
class PickerItem:
    """One selectable entry: a class label and a one-line rule preview."""

    label: str
    preview: str
    path: Path

    @property
    def text(self) -> str:
        return f"{self.label} {self.preview}"

    def to_dict(self) -> dict[str, object]:
        return {"label": self.label, "preview": self.preview, "file": str(self.path)}
