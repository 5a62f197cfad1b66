"""Configuration loading and deterministic merge order."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

CONFIG_FILE_NAME = "tw_index.toml"
CACHE_DIR_NAME = "tailwind-picker"
DEFAULT_NODE_EXECUTABLE = "node"
DEFAULT_SCAN_DEPTH = 4
MAX_SCAN_DEPTH_CAP = 32


@dataclass(slots=True, frozen=True)
class CompilerConfig:
    """External compiler invocation settings."""

    node_executable: str = DEFAULT_NODE_EXECUTABLE
    timeout_seconds: float | None = None


@dataclass(slots=True, frozen=True)
class CatalogConfig:
    """Candidate class enumeration settings."""

    introspection_enabled: bool = True
    extra_classes: tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class ResolverConfig:
    """Project config discovery settings."""

    scan_depth: int = DEFAULT_SCAN_DEPTH


@dataclass(slots=True, frozen=True)
class IndexerConfig:
    """Fully merged indexer configuration."""

    cache_root: Path
    compiler: CompilerConfig
    catalog: CatalogConfig
    resolver: ResolverConfig

    def to_public_dict(self) -> dict[str, object]:
        """Return serializable config snapshot for status output."""
        return {
            "cache_root": str(self.cache_root),
            "compiler": {
                "node_executable": self.compiler.node_executable,
                "timeout_seconds": self.compiler.timeout_seconds,
            },
            "catalog": {
                "introspection_enabled": self.catalog.introspection_enabled,
                "extra_classes": list(self.catalog.extra_classes),
            },
            "resolver": {
                "scan_depth": self.resolver.scan_depth,
            },
        }


@dataclass(slots=True, frozen=True)
class CliOverrides:
    """Optional startup overrides applied at highest precedence."""

    cache_root: Path | None = None
    node_executable: str | None = None
    timeout_seconds: float | None = None
    scan_depth: int | None = None


def default_cache_root() -> Path:
    """Return the per-user cache root shared by every project."""
    xdg_cache = os.environ.get("XDG_CACHE_HOME")
    base = Path(xdg_cache) if xdg_cache else Path.home() / ".cache"
    return base / CACHE_DIR_NAME


def default_config() -> IndexerConfig:
    """Build the built-in default config."""
    return IndexerConfig(
        cache_root=default_cache_root().resolve(),
        compiler=CompilerConfig(),
        catalog=CatalogConfig(),
        resolver=ResolverConfig(),
    )


def load_project_config_file(project_root: Path) -> dict[str, object]:
    """Load optional tw_index.toml from the project root."""
    config_path = project_root / CONFIG_FILE_NAME
    if not config_path.exists():
        return {}
    with config_path.open("rb") as handle:
        payload = tomllib.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"{CONFIG_FILE_NAME} must contain a top-level table.")
    return payload


def _get_table(payload: dict[str, object], key: str) -> dict[str, object]:
    value = payload.get(key, {})
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{key}' must be a table.")
    return value


def _tuple_of_strings(value: object, section: str, field: str) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise ValueError(f"Config field '{section}.{field}' must be a list of strings.")
    output: list[str] = []
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise ValueError(
                f"Config field '{section}.{field}' must contain only non-empty strings."
            )
        output.append(item.strip())
    return tuple(output)


def merge_config(
    base: IndexerConfig, project_payload: dict[str, object], overrides: CliOverrides
) -> IndexerConfig:
    """Merge defaults, project config, then CLI/startup overrides."""
    cache_payload = _get_table(project_payload, "cache")
    compiler_payload = _get_table(project_payload, "compiler")
    catalog_payload = _get_table(project_payload, "catalog")
    resolver_payload = _get_table(project_payload, "resolver")

    cache_root = base.cache_root
    if "root" in cache_payload:
        raw_root = cache_payload["root"]
        if not isinstance(raw_root, str) or not raw_root.strip():
            raise ValueError("Config field 'cache.root' must be a non-empty string.")
        cache_root = Path(raw_root).expanduser()

    node_executable = base.compiler.node_executable
    if "node_executable" in compiler_payload:
        node_executable = _non_empty_string(
            compiler_payload["node_executable"], "compiler.node_executable"
        )
    timeout_seconds = _optional_positive_number(
        compiler_payload.get("timeout_seconds"),
        "compiler.timeout_seconds",
        base.compiler.timeout_seconds,
    )

    introspection_enabled = base.catalog.introspection_enabled
    if "introspection_enabled" in catalog_payload:
        raw_enabled = catalog_payload["introspection_enabled"]
        if not isinstance(raw_enabled, bool):
            raise ValueError("Config field 'catalog.introspection_enabled' must be a boolean.")
        introspection_enabled = raw_enabled
    extra_classes = base.catalog.extra_classes
    if "extra_classes" in catalog_payload:
        extra_classes = _tuple_of_strings(
            catalog_payload["extra_classes"], "catalog", "extra_classes"
        )

    scan_depth = _optional_positive_int_with_cap(
        resolver_payload.get("scan_depth"),
        "resolver.scan_depth",
        base.resolver.scan_depth,
        MAX_SCAN_DEPTH_CAP,
    )

    merged = IndexerConfig(
        cache_root=cache_root,
        compiler=CompilerConfig(node_executable=node_executable, timeout_seconds=timeout_seconds),
        catalog=CatalogConfig(
            introspection_enabled=introspection_enabled,
            extra_classes=extra_classes,
        ),
        resolver=ResolverConfig(scan_depth=scan_depth),
    )
    return apply_cli_overrides(merged, overrides)


def apply_cli_overrides(config: IndexerConfig, overrides: CliOverrides) -> IndexerConfig:
    """Apply startup overrides at highest precedence."""
    node_executable = config.compiler.node_executable
    if overrides.node_executable is not None:
        node_executable = _non_empty_string(overrides.node_executable, "overrides.node_executable")
    timeout_seconds = _optional_positive_number(
        overrides.timeout_seconds,
        "overrides.timeout_seconds",
        config.compiler.timeout_seconds,
    )
    scan_depth = _optional_positive_int_with_cap(
        overrides.scan_depth,
        "overrides.scan_depth",
        config.resolver.scan_depth,
        MAX_SCAN_DEPTH_CAP,
    )
    cache_root = overrides.cache_root or config.cache_root
    return IndexerConfig(
        cache_root=cache_root.resolve(),
        compiler=CompilerConfig(node_executable=node_executable, timeout_seconds=timeout_seconds),
        catalog=config.catalog,
        resolver=ResolverConfig(scan_depth=scan_depth),
    )


def load_effective_config(
    project_root: Path | None = None, overrides: CliOverrides | None = None
) -> IndexerConfig:
    """Load effective config using merge order defaults -> project config -> overrides."""
    base = default_config()
    payload: dict[str, object] = {}
    if project_root is not None:
        payload = load_project_config_file(project_root.resolve())
    return merge_config(base, payload, overrides or CliOverrides())


def _non_empty_string(value: object, name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Config field '{name}' must be a non-empty string.")
    return value


def _optional_positive_number(value: object, name: str, default: float | None) -> float | None:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ValueError(f"Config field '{name}' must be a positive number.")
    return float(value)


def _optional_positive_int_with_cap(
    value: object,
    name: str,
    default: int,
    cap: int | None,
) -> int:
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"Config field '{name}' must be a positive integer.")
    if cap is not None and value > cap:
        raise ValueError(f"Config field '{name}' must be <= {cap}.")
    return value
