"""Cache directory serialization for one build."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping, Sequence
from pathlib import Path

from tw_index.cache.models import (
    CLASS_LIST_FILE,
    META_FILE,
    NAME_MAP_FILE,
    RULE_FILE_SUFFIX,
    CacheIOError,
    IndexMeta,
    IndexWriteResult,
)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def sanitize_class_to_filename(name: str) -> str:
    """Replace every character outside ``[A-Za-z0-9._-]`` with ``_``."""
    return _UNSAFE_FILENAME_CHARS.sub("_", name)


def write_index(
    cache_dir: Path,
    classes: Sequence[str],
    rules: Mapping[str, str],
    meta: IndexMeta,
) -> IndexWriteResult:
    """Overwrite every cache artifact for the given classes.

    Rule files listed in the previous name map but not in the new one are
    removed; other files in the directory are left alone. When two classes
    sanitize to the same stem, the lexicographically later class wins both the
    rule file and the name-map entry.
    """
    ordered = sorted(set(classes))
    name_map: dict[str, str] = {}
    collisions: list[str] = []
    try:
        cache_dir.mkdir(parents=True, exist_ok=True)
        previous_stems = _previous_rule_stems(cache_dir)
        for name in ordered:
            stem = sanitize_class_to_filename(name)
            if stem in name_map:
                collisions.append(name)
            name_map[stem] = name
            body = rules.get(name, "").strip()
            _atomic_write_text(cache_dir / f"{stem}{RULE_FILE_SUFFIX}", body + "\n")
        removed = _remove_orphaned_rule_files(cache_dir, previous_stems, name_map)
        _atomic_write_json(cache_dir / NAME_MAP_FILE, name_map)
        _atomic_write_json(cache_dir / META_FILE, meta.to_dict())
        # Class list last: its mtime is what staleness is judged against.
        _atomic_write_json(cache_dir / CLASS_LIST_FILE, ordered)
    except OSError as error:
        raise CacheIOError(
            reason=f"Unable to write index cache: {error}", path=cache_dir
        ) from error
    return IndexWriteResult(
        class_count=len(ordered),
        collisions=tuple(collisions),
        removed_rule_files=removed,
    )


def _previous_rule_stems(cache_dir: Path) -> set[str]:
    try:
        payload = json.loads((cache_dir / NAME_MAP_FILE).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return set()
    if not isinstance(payload, dict):
        return set()
    return {stem for stem in payload if isinstance(stem, str)}


def _remove_orphaned_rule_files(
    cache_dir: Path, previous_stems: set[str], name_map: Mapping[str, str]
) -> int:
    removed = 0
    for stem in sorted(previous_stems - name_map.keys()):
        if sanitize_class_to_filename(stem) != stem:
            continue
        path = cache_dir / f"{stem}{RULE_FILE_SUFFIX}"
        if path.is_file():
            path.unlink()
            removed += 1
    return removed


def _atomic_write_text(path: Path, text: str) -> None:
    tmp = path.with_name(path.name + ".tmp")
    with tmp.open("w", encoding="utf-8", newline="\n") as handle:
        handle.write(text)
    tmp.replace(path)


def _atomic_write_json(path: Path, payload: object) -> None:
    _atomic_write_text(path, json.dumps(payload, indent=2, sort_keys=True) + "\n")
