from __future__ import annotations

import hashlib
import json
from pathlib import Path

import pytest

from tw_index.cache import CacheIOError, CacheManager, IndexMeta, write_index
from tw_index.cache.manager import PREVIEW_MAX_CHARS, preview_text, project_cache_key
from tw_index.cache.models import CLASS_LIST_FILE, META_FILE


def _project(tmp_path: Path) -> tuple[Path, Path]:
    root = tmp_path / "app"
    root.mkdir()
    config_path = root / "tailwind.config.js"
    config_path.write_text("module.exports = {};\n", encoding="utf-8")
    return root, config_path


def test_cache_key_is_sha256_of_resolved_root(tmp_path: Path) -> None:
    root = tmp_path / "app"
    root.mkdir()
    expected = hashlib.sha256(str(root.resolve()).encode("utf-8")).hexdigest()

    assert project_cache_key(root) == expected
    assert project_cache_key(root / "sub" / "..") == expected


def test_create_returns_stable_directory_under_root(tmp_path: Path) -> None:
    root, _ = _project(tmp_path)
    manager = CacheManager(tmp_path / "cache-root")

    first = manager.create(root)
    second = manager.create(root)

    assert first == second
    assert first.is_dir()
    assert first.parent == (tmp_path / "cache-root").resolve()


def test_create_reports_unusable_cache_root(tmp_path: Path) -> None:
    root, _ = _project(tmp_path)
    blocker = tmp_path / "cache-root"
    blocker.write_text("", encoding="utf-8")

    with pytest.raises(CacheIOError):
        CacheManager(blocker).create(root)


def test_invalidate_removes_only_class_list(tmp_path: Path) -> None:
    root, config_path = _project(tmp_path)
    manager = CacheManager(tmp_path / "cache-root")
    cache_dir = manager.create(root)
    write_index(cache_dir, ["p-0"], {"p-0": "padding:0"}, IndexMeta(True, "fallback"))
    assert manager.is_stale(root, config_path) is False

    assert manager.invalidate(root) is True

    assert not (cache_dir / CLASS_LIST_FILE).exists()
    assert (cache_dir / "p-0.css").exists()
    assert manager.is_stale(root, config_path) is True
    assert manager.invalidate(root) is False


def test_read_missing_cache_raises(tmp_path: Path) -> None:
    root, _ = _project(tmp_path)

    with pytest.raises(CacheIOError) as error:
        CacheManager(tmp_path / "cache-root").read(root)

    assert error.value.reason == "Cache missing"


def test_read_rejects_malformed_class_list(tmp_path: Path) -> None:
    root, _ = _project(tmp_path)
    manager = CacheManager(tmp_path / "cache-root")
    cache_dir = manager.create(root)
    write_index(cache_dir, ["p-0"], {}, IndexMeta(True, "fallback"))
    (cache_dir / CLASS_LIST_FILE).write_text(json.dumps({"p-0": 1}), encoding="utf-8")

    with pytest.raises(CacheIOError):
        manager.read(root)


def test_read_without_meta_reports_not_compiled(tmp_path: Path) -> None:
    root, _ = _project(tmp_path)
    manager = CacheManager(tmp_path / "cache-root")
    cache_dir = manager.create(root)
    write_index(cache_dir, ["p-0"], {}, IndexMeta(True, "introspected", "3.4.1"))
    (cache_dir / META_FILE).unlink()

    cached = manager.read(root)

    assert cached.classes == ("p-0",)
    assert cached.meta.compiled is False
    assert cached.meta.source == "unknown"


def test_picker_items_are_sorted_and_previewed(tmp_path: Path) -> None:
    root, _ = _project(tmp_path)
    manager = CacheManager(tmp_path / "cache-root")
    cache_dir = manager.create(root)
    write_index(
        cache_dir,
        ["p-1", "hover:bg-red-500", "m-0"],
        {"p-1": "padding:\n   0.25rem;", "hover:bg-red-500": "background-color:  red;"},
        IndexMeta(True, "fallback"),
    )
    (cache_dir / "m-0.css").unlink()

    items = manager.picker_items(root)

    assert [item.label for item in items] == ["hover:bg-red-500", "p-1"]
    assert items[0].preview == "background-color: red;"
    assert items[1].preview == "padding: 0.25rem;"
    assert items[0].path == cache_dir / "hover_bg-red-500.css"
    assert items[1].to_dict() == {
        "label": "p-1",
        "preview": "padding: 0.25rem;",
        "file": str(cache_dir / "p-1.css"),
    }


def test_preview_is_collapsed_and_truncated() -> None:
    long_body = "color: red;\n" * 100

    preview = preview_text(long_body)

    assert len(preview) == PREVIEW_MAX_CHARS
    assert "\n" not in preview
    assert preview_text("  \n\t ") == ""


def test_status_reports_missing_then_built_cache(tmp_path: Path) -> None:
    root, config_path = _project(tmp_path)
    manager = CacheManager(tmp_path / "cache-root")

    before = manager.status(root, config_path)
    write_index(manager.create(root), ["p-0", "p-1"], {}, IndexMeta(False, "fallback"))
    after = manager.status(root, config_path)

    assert before.stale is True
    assert before.compiled is None
    assert before.class_count == 0
    assert after.stale is False
    assert after.compiled is False
    assert after.class_count == 2
    assert after.to_dict()["cache_dir"] == str(manager.cache_dir_for(root))
