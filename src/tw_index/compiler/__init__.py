"""Tailwind compiler orchestration."""

from .driver import CompileError, CompilerDriver
from .node import CommandResult, CommandRunner, resolve_package_dir, run_command
from .version import (
    ACCEPTED_MAJOR_VERSION,
    TailwindInstall,
    VersionMismatchError,
    check_tailwind_version,
)
from .workspace import ScratchWorkspace, safelist_markup, scratch_workspace

__all__ = [
    "ACCEPTED_MAJOR_VERSION",
    "CommandResult",
    "CommandRunner",
    "CompileError",
    "CompilerDriver",
    "ScratchWorkspace",
    "TailwindInstall",
    "VersionMismatchError",
    "check_tailwind_version",
    "resolve_package_dir",
    "run_command",
    "safelist_markup",
    "scratch_workspace",
]
