"""Index build orchestration: enumerate, compile, extract, persist."""

from __future__ import annotations

import asyncio
import sys
import time
from pathlib import Path
from typing import TextIO

from tw_index.cache import (
    DEFAULT_BUILD_REGISTRY,
    BuildInProgressError,
    BuildRegistry,
    CacheIOError,
    IndexMeta,
    write_index,
)
from tw_index.catalog import CandidateSet, ClassEnumerator
from tw_index.compiler import (
    CommandRunner,
    CompileError,
    CompilerDriver,
    VersionMismatchError,
    check_tailwind_version,
)
from tw_index.config import IndexerConfig
from tw_index.css import extract_rules_for_classes
from tw_index.logging import BuildEvent, JsonlAuditLogger, utc_timestamp
from tw_index.models import BuildOutcome, Built, Failed, ProjectContext


class IndexBuilder:
    """Builds one project's utility index into a cache directory.

    Enumeration and compilation failures degrade the result to an
    enumerated-but-not-compiled cache; only cache I/O failures and
    overlapping builds produce ``Failed``.
    """

    def __init__(
        self,
        config: IndexerConfig,
        runner: CommandRunner | None = None,
        registry: BuildRegistry | None = None,
        audit_logger: JsonlAuditLogger | None = None,
        verbose: bool = False,
        diagnostics: TextIO | None = None,
    ) -> None:
        self._config = config
        self._enumerator = ClassEnumerator(config.catalog, config.compiler, runner=runner)
        self._driver = CompilerDriver(config.compiler, runner=runner)
        self._registry = registry or DEFAULT_BUILD_REGISTRY
        self._audit_logger = audit_logger
        self._verbose = verbose
        self._diagnostics = diagnostics

    def build(self, context: ProjectContext, cache_dir: Path) -> BuildOutcome:
        """Run the full pipeline and return a tagged outcome."""
        started = time.perf_counter()
        candidates: CandidateSet | None = None
        try:
            with self._registry.claim(cache_dir):
                candidates = self._enumerator.enumerate(context.root)
                css, compile_error, version = self._compile(context, candidates)
                rules = extract_rules_for_classes(css, candidates.classes)
                written = write_index(
                    cache_dir,
                    candidates.classes,
                    rules,
                    IndexMeta(
                        compiled=bool(css),
                        source=candidates.source,
                        tailwind_version=version,
                    ),
                )
        except (BuildInProgressError, CacheIOError) as error:
            outcome: BuildOutcome = Failed(reason=str(error))
        else:
            outcome = Built(
                compiled=bool(css),
                class_count=written.class_count,
                source=candidates.source,
                cache_dir=cache_dir,
                collisions=written.collisions,
                compile_error=compile_error,
            )
        self._log(context, cache_dir, outcome, candidates, started)
        return outcome

    async def abuild(self, context: ProjectContext, cache_dir: Path) -> BuildOutcome:
        """Awaitable build; the pipeline itself stays sequential."""
        return await asyncio.to_thread(self.build, context, cache_dir)

    def _compile(
        self, context: ProjectContext, candidates: CandidateSet
    ) -> tuple[str, str | None, str | None]:
        try:
            install = check_tailwind_version(context.root)
        except VersionMismatchError as error:
            self._report(f"Compile failed: {error.message}")
            return "", error.message, None
        try:
            css = self._driver.compile(
                context.root, context.config_path, install, candidates.classes
            )
        except CompileError as error:
            self._report(f"Compile failed: {error.message}")
            return "", error.message, install.version
        return css, None, install.version

    def _report(self, message: str) -> None:
        if not self._verbose:
            return
        stream = self._diagnostics or sys.stderr
        stream.write(f"{message}\n")

    def _log(
        self,
        context: ProjectContext,
        cache_dir: Path,
        outcome: BuildOutcome,
        candidates: CandidateSet | None,
        started: float,
    ) -> None:
        if self._audit_logger is None:
            return
        event = BuildEvent(
            timestamp=utc_timestamp(),
            project_root=str(context.root),
            cache_dir=str(cache_dir),
            ok=outcome.ok,
            compiled=isinstance(outcome, Built) and outcome.compiled,
            source=candidates.source if candidates is not None else None,
            class_count=outcome.class_count if isinstance(outcome, Built) else 0,
            duration_ms=int((time.perf_counter() - started) * 1000),
            error=outcome.reason if isinstance(outcome, Failed) else outcome.compile_error,
        )
        # Log failures never change the outcome.
        try:
            self._audit_logger.append(event)
        except OSError as error:
            self._report(f"Build log unavailable: {error}")
