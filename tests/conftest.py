from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from tw_index.compiler import CommandResult
from tw_index.models import ProjectContext


class ScriptedRunner:
    """Stands in for node: answers introspection and writes canned CSS to -o."""

    def __init__(
        self,
        css: str = "",
        returncode: int = 0,
        stdout: str = "",
        stderr: str = "",
        introspected: object = None,
        introspection_returncode: int = 0,
        raise_error: BaseException | None = None,
    ) -> None:
        self.css = css
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.introspected = introspected
        self.introspection_returncode = introspection_returncode
        self.raise_error = raise_error
        self.calls: list[tuple[list[str], Path, float | None]] = []
        self.workspaces: list[Path] = []
        self.markup: list[str] = []

    def __call__(self, argv: Sequence[str], cwd: Path, timeout: float | None) -> CommandResult:
        self.calls.append((list(argv), cwd, timeout))
        if self.raise_error is not None:
            raise self.raise_error
        if len(argv) > 1 and argv[1] == "-e":
            if self.introspection_returncode != 0:
                return CommandResult(self.introspection_returncode, "", "language service broke")
            return CommandResult(0, json.dumps(self.introspected), "")
        output = Path(argv[argv.index("-o") + 1])
        content = Path(argv[argv.index("--content") + 1])
        self.workspaces.append(output.parent)
        self.markup.append(content.read_text(encoding="utf-8"))
        if self.returncode == 0:
            output.write_text(self.css, encoding="utf-8")
        return CommandResult(self.returncode, self.stdout, self.stderr)

    @property
    def compile_calls(self) -> list[list[str]]:
        return [argv for argv, _, _ in self.calls if "-o" in argv]


def install_node_package(root: Path, name: str, manifest: dict[str, object]) -> Path:
    package_dir = root / "node_modules" / name
    package_dir.mkdir(parents=True, exist_ok=True)
    (package_dir / "package.json").write_text(json.dumps(manifest), encoding="utf-8")
    return package_dir


def make_project(root: Path, tailwind_version: str | None = "3.4.1") -> ProjectContext:
    root.mkdir(parents=True, exist_ok=True)
    config_path = root / "tailwind.config.js"
    config_path.write_text("module.exports = { content: [] };\n", encoding="utf-8")
    if tailwind_version is not None:
        package_dir = install_node_package(root, "tailwindcss", {"version": tailwind_version})
        (package_dir / "lib").mkdir()
        (package_dir / "lib" / "cli.js").write_text("// cli\n", encoding="utf-8")
    return ProjectContext.from_paths(root, config_path)


@pytest.fixture
def runner_factory() -> Callable[..., ScriptedRunner]:
    return ScriptedRunner


@pytest.fixture
def project_factory() -> Callable[..., ProjectContext]:
    return make_project


@pytest.fixture
def package_installer() -> Callable[[Path, str, dict[str, object]], Path]:
    return install_node_package


@pytest.fixture
def tailwind_project(tmp_path: Path) -> ProjectContext:
    return make_project(tmp_path / "app")
