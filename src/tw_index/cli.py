"""Command-line entrypoint for building and reading utility indexes."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import TextIO

from tw_index.cache import CacheIOError, CacheManager
from tw_index.compiler import CommandRunner
from tw_index.config import CliOverrides, IndexerConfig, load_effective_config
from tw_index.logging import BUILD_LOG_FILE, JsonlAuditLogger
from tw_index.models import Built, Failed, ProjectContext
from tw_index.pipeline import IndexBuilder
from tw_index.resolve import ResolutionError, context_for_config, resolve_project_and_config

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_INVOCATION = 2


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for all subcommands."""
    parser = argparse.ArgumentParser(prog="tw-index")
    subparsers = parser.add_subparsers(dest="command", required=True)

    index = subparsers.add_parser("index", help="Build the utility index for one project.")
    index.add_argument("--project", required=True, help="Project root directory.")
    index.add_argument("--config", required=True, help="Tailwind config file.")
    index.add_argument("--out", required=True, help="Output cache directory.")
    index.add_argument("--debug", "--verbose", dest="verbose", action="store_true")
    _add_common_arguments(index)

    status = subparsers.add_parser("status", help="Show cache status for the resolved project.")
    status.add_argument("--path", default=None, help="Start directory for config lookup.")
    status.add_argument("--config", default=None, help="Use this Tailwind config file.")
    _add_common_arguments(status)

    list_items = subparsers.add_parser(
        "list", help="Print picker items, rebuilding the index when stale."
    )
    list_items.add_argument("--path", default=None, help="Start directory for config lookup.")
    list_items.add_argument("--config", default=None, help="Use this Tailwind config file.")
    list_items.add_argument("--refresh", action="store_true", help="Always rebuild first.")
    list_items.add_argument("--debug", "--verbose", dest="verbose", action="store_true")
    _add_common_arguments(list_items)

    log = subparsers.add_parser("log", help="Print recent build log events.")
    log.add_argument("--since", default=None, help="ISO-8601 UTC lower bound.")
    log.add_argument("--limit", type=int, default=50)
    _add_common_arguments(log)
    return parser


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--cache-root", default=None)
    parser.add_argument("--node", dest="node_executable", default=None)
    parser.add_argument("--timeout-seconds", type=float, default=None)
    parser.add_argument("--scan-depth", type=int, default=None)


def main(
    argv: list[str] | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    runner: CommandRunner | None = None,
) -> int:
    """Entrypoint for the tw-index process."""
    out = stdout or sys.stdout
    err = stderr or sys.stderr
    parser = build_arg_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as error:
        return error.code if isinstance(error.code, int) else EXIT_INVALID_INVOCATION

    overrides = CliOverrides(
        cache_root=Path(args.cache_root).expanduser() if args.cache_root else None,
        node_executable=args.node_executable,
        timeout_seconds=args.timeout_seconds,
        scan_depth=args.scan_depth,
    )
    if args.command == "index":
        return _run_index(args, overrides, err, runner)
    if args.command == "log":
        return _run_log(args, overrides, out, err)
    try:
        context = _resolve_context(args, overrides)
    except ResolutionError as error:
        err.write(f"tw-index: {error}\n")
        for candidate in error.candidates:
            err.write(f"  {candidate}\n")
        return EXIT_FAILURE
    except ValueError as error:
        err.write(f"tw-index: {error}\n")
        return EXIT_INVALID_INVOCATION
    try:
        config = load_effective_config(context.root, overrides)
    except ValueError as error:
        err.write(f"tw-index: {error}\n")
        return EXIT_FAILURE
    if args.command == "status":
        return _run_status(context, config, out)
    return _run_list(args, context, config, out, err, runner)


def _run_index(
    args: argparse.Namespace,
    overrides: CliOverrides,
    err: TextIO,
    runner: CommandRunner | None,
) -> int:
    project = Path(args.project)
    config_path = Path(args.config)
    if not project.is_dir():
        err.write(f"tw-index: --project must be an existing directory: {project}\n")
        return EXIT_INVALID_INVOCATION
    if not config_path.is_file():
        err.write(f"tw-index: --config must be an existing file: {config_path}\n")
        return EXIT_INVALID_INVOCATION
    context = ProjectContext.from_paths(project, config_path)
    try:
        config = load_effective_config(context.root, overrides)
    except ValueError as error:
        err.write(f"tw-index: {error}\n")
        return EXIT_FAILURE
    outcome = _build(config, context, Path(args.out).resolve(), args.verbose, err, runner)
    if isinstance(outcome, Failed):
        err.write(f"tw-index: index failed: {outcome.reason}\n")
        return EXIT_FAILURE
    if args.verbose:
        err.write(
            f"tw-index: indexed {outcome.class_count} classes "
            f"(source={outcome.source}, compiled={str(outcome.compiled).lower()})\n"
        )
    return EXIT_OK


def _run_status(context: ProjectContext, config: IndexerConfig, out: TextIO) -> int:
    manager = CacheManager(config.cache_root)
    status = manager.status(context.root, context.config_path)
    payload: dict[str, object] = {
        "project_root": str(context.root),
        "config_path": str(context.config_path),
        **status.to_dict(),
        "effective_config": config.to_public_dict(),
    }
    out.write(json.dumps(payload, sort_keys=True))
    out.write("\n")
    return EXIT_OK


def _run_list(
    args: argparse.Namespace,
    context: ProjectContext,
    config: IndexerConfig,
    out: TextIO,
    err: TextIO,
    runner: CommandRunner | None,
) -> int:
    manager = CacheManager(config.cache_root)
    try:
        cache_dir = manager.create(context.root)
    except CacheIOError as error:
        err.write(f"tw-index: cannot open picker: {error}\n")
        return EXIT_FAILURE
    if args.refresh or manager.is_stale(context.root, context.config_path):
        outcome = _build(config, context, cache_dir, args.verbose, err, runner)
        if isinstance(outcome, Failed):
            err.write(f"tw-index: index failed: {outcome.reason}\n")
            return EXIT_FAILURE
    try:
        items = manager.picker_items(context.root)
    except CacheIOError as error:
        err.write(f"tw-index: cannot open picker: {error}\n")
        return EXIT_FAILURE
    for item in items:
        out.write(json.dumps(item.to_dict(), sort_keys=True))
        out.write("\n")
    return EXIT_OK


def _run_log(
    args: argparse.Namespace, overrides: CliOverrides, out: TextIO, err: TextIO
) -> int:
    try:
        config = load_effective_config(None, overrides)
    except ValueError as error:
        err.write(f"tw-index: {error}\n")
        return EXIT_INVALID_INVOCATION
    log_path = config.cache_root / BUILD_LOG_FILE
    if not log_path.is_file():
        return EXIT_OK
    try:
        events = JsonlAuditLogger(log_path).read(since=args.since, limit=args.limit)
    except OSError as error:
        err.write(f"tw-index: cannot read build log: {error}\n")
        return EXIT_FAILURE
    for event in events:
        out.write(json.dumps(event, sort_keys=True))
        out.write("\n")
    return EXIT_OK


def _resolve_context(args: argparse.Namespace, overrides: CliOverrides) -> ProjectContext:
    if args.config is not None:
        return context_for_config(Path(args.config))
    cwd = Path.cwd()
    start = Path(args.path) if args.path is not None else None
    # Scan depth can only come from overrides here; the project is not known yet.
    scan_depth = load_effective_config(None, overrides).resolver.scan_depth
    return resolve_project_and_config(cwd, start=start, scan_depth=scan_depth)


def _build(
    config: IndexerConfig,
    context: ProjectContext,
    cache_dir: Path,
    verbose: bool,
    err: TextIO,
    runner: CommandRunner | None,
) -> Built | Failed:
    audit_logger: JsonlAuditLogger | None = None
    try:
        audit_logger = JsonlAuditLogger.for_cache_root(config.cache_root)
    except OSError as error:
        if verbose:
            err.write(f"Build log unavailable: {error}\n")
    builder = IndexBuilder(
        config,
        runner=runner,
        audit_logger=audit_logger,
        verbose=verbose,
        diagnostics=err,
    )
    return builder.build(context, cache_dir)


if __name__ == "__main__":
    raise SystemExit(main())
