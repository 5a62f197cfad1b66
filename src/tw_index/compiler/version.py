"""Installed Tailwind CSS version gate."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from tw_index.compiler.node import resolve_package_dir

TAILWIND_PACKAGE = "tailwindcss"
ACCEPTED_MAJOR_VERSION = 3


@dataclass(slots=True, frozen=True)
class TailwindInstall:
    """Resolved project-local Tailwind CSS package."""

    version: str
    package_dir: Path

    @property
    def cli_path(self) -> Path:
        return self.package_dir / "lib" / "cli.js"


class VersionMismatchError(Exception):
    """Raised when Tailwind is absent, unreadable, or not the accepted major line."""

    def __init__(self, detail: str) -> None:
        message = (
            f"Unable to resolve {TAILWIND_PACKAGE} in project "
            f"(v{ACCEPTED_MAJOR_VERSION} required): {detail}"
        )
        super().__init__(message)
        self.message = message


def check_tailwind_version(project_root: Path) -> TailwindInstall:
    """Return the installed Tailwind package when it is an accepted version."""
    package_dir = resolve_package_dir(project_root, TAILWIND_PACKAGE)
    if package_dir is None:
        raise VersionMismatchError(f"Cannot find module '{TAILWIND_PACKAGE}/package.json'")
    manifest_path = package_dir / "package.json"
    try:
        payload = json.loads(manifest_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as error:
        raise VersionMismatchError(f"Cannot read {manifest_path}: {error}") from error
    version = payload.get("version") if isinstance(payload, dict) else None
    if not isinstance(version, str) or not version:
        raise VersionMismatchError(f"{manifest_path} has no version field")
    if not version.startswith(f"{ACCEPTED_MAJOR_VERSION}."):
        raise VersionMismatchError(
            f"Tailwind v{ACCEPTED_MAJOR_VERSION} required. Found v{version}"
        )
    return TailwindInstall(version=version, package_dir=package_dir)
