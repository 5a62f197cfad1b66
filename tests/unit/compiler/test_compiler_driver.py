from __future__ import annotations

import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest

from tw_index.compiler import CompileError, CompilerDriver, check_tailwind_version
from tw_index.compiler.workspace import UTILITIES_DIRECTIVE, WORKSPACE_PREFIX, scratch_workspace
from tw_index.config import CompilerConfig
from tw_index.models import ProjectContext


def _compile(
    context: ProjectContext, runner: object, classes: list[str], timeout: float | None = None
) -> str:
    driver = CompilerDriver(CompilerConfig(timeout_seconds=timeout), runner=runner)
    install = check_tailwind_version(context.root)
    return driver.compile(context.root, context.config_path, install, classes)


def test_compile_invokes_project_cli_in_project_root(
    tailwind_project: ProjectContext, runner_factory: Callable[..., object]
) -> None:
    runner = runner_factory(css=".p-0{padding:0}")

    css = _compile(tailwind_project, runner, ["p-0", "p-1"], timeout=30)

    assert css == ".p-0{padding:0}"
    argv, cwd, timeout = runner.calls[0]
    assert cwd == tailwind_project.root
    assert timeout == 30
    assert argv[0] == "node"
    assert argv[1] == str(tailwind_project.root / "node_modules" / "tailwindcss" / "lib" / "cli.js")
    assert argv[argv.index("--config") + 1] == str(tailwind_project.config_path)
    assert runner.markup == ['<div class="p-0 p-1"></div>']


def test_scratch_workspace_is_unique_and_removed(
    tailwind_project: ProjectContext, runner_factory: Callable[..., object]
) -> None:
    runner = runner_factory(css="")

    _compile(tailwind_project, runner, ["p-0"])
    _compile(tailwind_project, runner, ["p-0"])

    first, second = runner.workspaces
    assert first != second
    assert first.name.startswith(WORKSPACE_PREFIX)
    assert not first.exists()
    assert not second.exists()


def test_non_zero_exit_reports_stderr_and_removes_workspace(
    tailwind_project: ProjectContext, runner_factory: Callable[..., object]
) -> None:
    runner = runner_factory(returncode=1, stdout="ignored", stderr="SyntaxError: bad config\n")

    with pytest.raises(CompileError) as error:
        _compile(tailwind_project, runner, ["p-0"])

    assert error.value.message == "SyntaxError: bad config"
    assert error.value.diagnostics == "SyntaxError: bad config\n"
    assert not runner.workspaces[0].exists()


def test_non_zero_exit_falls_back_to_stdout_then_generic_message(
    tailwind_project: ProjectContext, runner_factory: Callable[..., object]
) -> None:
    with pytest.raises(CompileError) as from_stdout:
        _compile(tailwind_project, runner_factory(returncode=1, stdout="boom"), ["p-0"])
    with pytest.raises(CompileError) as generic:
        _compile(tailwind_project, runner_factory(returncode=1), ["p-0"])

    assert from_stdout.value.message == "boom"
    assert generic.value.message == "tailwind build failed"


def test_spawn_failure_and_timeout_become_compile_errors(
    tailwind_project: ProjectContext, runner_factory: Callable[..., object]
) -> None:
    missing = runner_factory(raise_error=FileNotFoundError("No such file: node"))
    slow = runner_factory(raise_error=subprocess.TimeoutExpired(["node"], 5))

    with pytest.raises(CompileError) as spawn_error:
        _compile(tailwind_project, missing, ["p-0"])
    with pytest.raises(CompileError) as timeout_error:
        _compile(tailwind_project, slow, ["p-0"], timeout=5)

    assert spawn_error.value.message.startswith("Unable to spawn node")
    assert timeout_error.value.message == "tailwind build timed out after 5s"


def test_scratch_workspace_writes_inputs() -> None:
    with scratch_workspace(["a", "b"]) as workspace:
        assert workspace.input_css.read_text(encoding="utf-8") == UTILITIES_DIRECTIVE
        assert workspace.content_html.read_text(encoding="utf-8") == '<div class="a b"></div>'
        root = workspace.root

    assert not root.exists()
