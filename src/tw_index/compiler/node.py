"""Node.js package resolution and command execution helpers."""

from __future__ import annotations

import subprocess
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, frozen=True)
class CommandResult:
    """Captured outcome of one external command."""

    returncode: int
    stdout: str
    stderr: str

    @property
    def diagnostics(self) -> str:
        """Return stderr when non-empty, else stdout."""
        return self.stderr if self.stderr.strip() else self.stdout


CommandRunner = Callable[[Sequence[str], Path, float | None], CommandResult]


def run_command(argv: Sequence[str], cwd: Path, timeout_seconds: float | None) -> CommandResult:
    """Run a command to completion and capture text output.

    Raises OSError when the executable cannot be spawned and
    subprocess.TimeoutExpired when the timeout elapses; the child is killed
    before TimeoutExpired propagates.
    """
    completed = subprocess.run(
        list(argv),
        cwd=cwd,
        check=False,
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="replace",
        stdin=subprocess.DEVNULL,
        timeout=timeout_seconds,
    )
    return CommandResult(
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )


def node_modules_search_paths(start: Path) -> list[Path]:
    """Return node_modules directories in Node's lookup order from start upward."""
    resolved = start.resolve()
    paths: list[Path] = []
    for directory in (resolved, *resolved.parents):
        if directory.name == "node_modules":
            continue
        paths.append(directory / "node_modules")
    return paths


def resolve_package_dir(project_root: Path, package_name: str) -> Path | None:
    """Resolve an installed package directory the way require.resolve would."""
    for node_modules in node_modules_search_paths(project_root):
        manifest = node_modules / package_name / "package.json"
        if manifest.is_file():
            return manifest.parent
    return None
