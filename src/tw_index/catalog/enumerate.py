"""Candidate utility class enumeration."""

from __future__ import annotations

import json
import subprocess
from dataclasses import dataclass
from pathlib import Path

from tw_index.catalog.static import fallback_catalog
from tw_index.catalog.variants import expand_variants
from tw_index.compiler.node import CommandRunner, resolve_package_dir, run_command
from tw_index.config import CatalogConfig, CompilerConfig

INTROSPECTION_PACKAGE = "tailwindcss-language-service"
INTROSPECTION_SCRIPT = """\
const tls = require(require.resolve(process.argv[1], { paths: [process.argv[2]] }));
if (typeof tls.getDefaultState !== 'function' || typeof tls.getClassNames !== 'function') {
  process.stderr.write('unexpected language-service API');
  process.exit(3);
}
const names = Array.from(new Set(tls.getClassNames(tls.getDefaultState())));
process.stdout.write(JSON.stringify(names));
"""


@dataclass(slots=True, frozen=True)
class Introspected:
    """Class names reported by the project's language-service library."""

    names: tuple[str, ...]

    source = "introspected"


@dataclass(slots=True, frozen=True)
class FallbackCatalog:
    """Bundled catalog used because introspection was unavailable."""

    reason: str

    source = "fallback"


EnumerationSource = Introspected | FallbackCatalog


@dataclass(slots=True, frozen=True)
class CandidateSet:
    """Sorted, deduplicated candidate classes and where they came from."""

    classes: tuple[str, ...]
    origin: EnumerationSource

    @property
    def source(self) -> str:
        return self.origin.source

    def __len__(self) -> int:
        return len(self.classes)


class ClassEnumerator:
    """Produces the candidate set for one project; never raises for introspection."""

    def __init__(
        self,
        catalog: CatalogConfig,
        compiler: CompilerConfig,
        runner: CommandRunner | None = None,
    ) -> None:
        self._catalog = catalog
        self._compiler = compiler
        self._runner = runner or run_command

    def introspect(self, project_root: Path) -> EnumerationSource:
        """Ask the project-local language service for class names."""
        if not self._catalog.introspection_enabled:
            return FallbackCatalog(reason="introspection disabled by configuration")
        if resolve_package_dir(project_root, INTROSPECTION_PACKAGE) is None:
            return FallbackCatalog(reason=f"{INTROSPECTION_PACKAGE} is not installed")
        argv = [
            self._compiler.node_executable,
            "-e",
            INTROSPECTION_SCRIPT,
            INTROSPECTION_PACKAGE,
            str(project_root),
        ]
        try:
            result = self._runner(argv, project_root, self._compiler.timeout_seconds)
        except subprocess.TimeoutExpired:
            return FallbackCatalog(reason="language service timed out")
        except OSError as error:
            return FallbackCatalog(reason=f"unable to spawn node: {error}")
        if result.returncode != 0:
            detail = result.diagnostics.strip() or f"exit code {result.returncode}"
            return FallbackCatalog(reason=f"language service failed: {detail}")
        return _parse_introspected_names(result.stdout)

    def enumerate(self, project_root: Path) -> CandidateSet:
        """Return expanded, sorted, deduplicated candidates; always non-empty."""
        origin = self.introspect(project_root)
        base = origin.names if isinstance(origin, Introspected) else fallback_catalog()
        names = expand_variants([*base, *self._catalog.extra_classes])
        return CandidateSet(classes=tuple(sorted(names)), origin=origin)


def _parse_introspected_names(stdout: str) -> EnumerationSource:
    try:
        payload = json.loads(stdout)
    except json.JSONDecodeError:
        return FallbackCatalog(reason="language service returned invalid JSON")
    if not isinstance(payload, list):
        return FallbackCatalog(reason="language service returned an unexpected shape")
    names: list[str] = []
    for item in payload:
        if not isinstance(item, str):
            return FallbackCatalog(reason="language service returned non-string class names")
        stripped = item.strip()
        if stripped:
            names.append(stripped)
    if not names:
        return FallbackCatalog(reason="language service returned no class names")
    return Introspected(names=tuple(dict.fromkeys(names)))
