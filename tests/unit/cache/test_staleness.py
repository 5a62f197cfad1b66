from __future__ import annotations

import os
from pathlib import Path

from tw_index.cache import IndexMeta, is_cache_stale, write_index
from tw_index.cache.models import CLASS_LIST_FILE, NAME_MAP_FILE

_BASE_NS = 1_700_000_000 * 1_000_000_000


def _built_cache(tmp_path: Path) -> tuple[Path, Path]:
    config_path = tmp_path / "tailwind.config.js"
    config_path.write_text("module.exports = {};\n", encoding="utf-8")
    cache_dir = tmp_path / "cache"
    write_index(cache_dir, ["p-0"], {}, IndexMeta(compiled=False, source="fallback"))
    return config_path, cache_dir


def _set_mtimes(config_path: Path, cache_dir: Path, config_ns: int, class_list_ns: int) -> None:
    os.utime(config_path, ns=(config_ns, config_ns))
    os.utime(cache_dir / CLASS_LIST_FILE, ns=(class_list_ns, class_list_ns))


def test_missing_cache_is_stale(tmp_path: Path) -> None:
    config_path = tmp_path / "tailwind.config.js"
    config_path.write_text("", encoding="utf-8")

    assert is_cache_stale(config_path, tmp_path / "cache") is True


def test_config_newer_than_class_list_is_stale(tmp_path: Path) -> None:
    config_path, cache_dir = _built_cache(tmp_path)

    _set_mtimes(config_path, cache_dir, _BASE_NS + 1_000_000_000, _BASE_NS)

    assert is_cache_stale(config_path, cache_dir) is True


def test_config_older_or_equal_is_fresh(tmp_path: Path) -> None:
    config_path, cache_dir = _built_cache(tmp_path)

    _set_mtimes(config_path, cache_dir, _BASE_NS - 1_000_000_000, _BASE_NS)
    assert is_cache_stale(config_path, cache_dir) is False

    _set_mtimes(config_path, cache_dir, _BASE_NS, _BASE_NS)
    assert is_cache_stale(config_path, cache_dir) is False


def test_missing_name_map_or_config_is_stale(tmp_path: Path) -> None:
    config_path, cache_dir = _built_cache(tmp_path)
    _set_mtimes(config_path, cache_dir, _BASE_NS - 1_000_000_000, _BASE_NS)

    assert is_cache_stale(tmp_path / "missing.config.js", cache_dir) is True

    (cache_dir / NAME_MAP_FILE).unlink()
    assert is_cache_stale(config_path, cache_dir) is True
