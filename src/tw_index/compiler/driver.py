"""External Tailwind CLI invocation against a synthetic safelist."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from pathlib import Path

from tw_index.compiler.node import CommandRunner, run_command
from tw_index.compiler.version import TailwindInstall
from tw_index.compiler.workspace import scratch_workspace
from tw_index.config import CompilerConfig


class CompileError(Exception):
    """Raised when the compiler cannot be spawned or exits non-zero."""

    def __init__(self, message: str, diagnostics: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.diagnostics = diagnostics


class CompilerDriver:
    """Runs the project's Tailwind CLI to materialize CSS for candidate classes."""

    def __init__(self, config: CompilerConfig, runner: CommandRunner | None = None) -> None:
        self._config = config
        self._runner = runner or run_command

    def build_argv(
        self,
        install: TailwindInstall,
        config_path: Path,
        input_css: Path,
        output_css: Path,
        content_html: Path,
    ) -> list[str]:
        """Return the compiler argv for one scratch workspace."""
        return [
            self._config.node_executable,
            str(install.cli_path),
            "-i",
            str(input_css),
            "-o",
            str(output_css),
            "--config",
            str(config_path),
            "--content",
            str(content_html),
        ]

    def compile(
        self,
        project_root: Path,
        config_path: Path,
        install: TailwindInstall,
        classes: Sequence[str],
    ) -> str:
        """Return compiled stylesheet text, or raise CompileError."""
        with scratch_workspace(classes) as workspace:
            argv = self.build_argv(
                install,
                config_path,
                workspace.input_css,
                workspace.output_css,
                workspace.content_html,
            )
            try:
                result = self._runner(argv, project_root, self._config.timeout_seconds)
            except subprocess.TimeoutExpired as error:
                raise CompileError(
                    f"tailwind build timed out after {error.timeout:g}s"
                ) from error
            except OSError as error:
                raise CompileError(
                    f"Unable to spawn {self._config.node_executable}: {error}"
                ) from error
            if result.returncode != 0:
                diagnostics = result.diagnostics
                raise CompileError(
                    diagnostics.strip() or "tailwind build failed",
                    diagnostics=diagnostics,
                )
            try:
                return workspace.output_css.read_text(encoding="utf-8")
            except OSError as error:
                raise CompileError(f"Unable to read compiler output: {error}") from error
