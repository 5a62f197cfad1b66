from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from tw_index.compiler import resolve_package_dir
from tw_index.compiler.node import CommandResult, node_modules_search_paths


def test_package_resolves_from_project_node_modules(
    tmp_path: Path, package_installer: Callable[..., Path]
) -> None:
    installed = package_installer(tmp_path, "tailwindcss", {"version": "3.4.1"})

    assert resolve_package_dir(tmp_path, "tailwindcss") == installed.resolve()


def test_package_resolves_from_ancestor_node_modules(
    tmp_path: Path, package_installer: Callable[..., Path]
) -> None:
    installed = package_installer(tmp_path, "tailwindcss", {"version": "3.4.1"})
    nested = tmp_path / "apps" / "site"
    nested.mkdir(parents=True)

    assert resolve_package_dir(nested, "tailwindcss") == installed.resolve()


def test_nearest_install_wins(tmp_path: Path, package_installer: Callable[..., Path]) -> None:
    package_installer(tmp_path, "tailwindcss", {"version": "3.0.0"})
    nested = tmp_path / "apps" / "site"
    nearest = package_installer(nested, "tailwindcss", {"version": "3.4.1"})

    assert resolve_package_dir(nested, "tailwindcss") == nearest.resolve()


def test_directory_without_manifest_is_not_a_package(tmp_path: Path) -> None:
    (tmp_path / "node_modules" / "tailwindcss").mkdir(parents=True)

    assert resolve_package_dir(tmp_path, "tailwindcss") is None


def test_search_paths_skip_node_modules_segments(tmp_path: Path) -> None:
    start = tmp_path / "node_modules" / "pkg"
    start.mkdir(parents=True)

    paths = node_modules_search_paths(start)

    assert paths[0] == start.resolve() / "node_modules"
    assert tmp_path.resolve() / "node_modules" / "node_modules" not in paths
    assert tmp_path.resolve() / "node_modules" in paths


def test_command_result_diagnostics_prefer_stderr() -> None:
    assert CommandResult(1, "out", "err").diagnostics == "err"
    assert CommandResult(1, "out", "  \n").diagnostics == "out"
