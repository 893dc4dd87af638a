"""Configuration loading and deterministic merge order."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from refrepo.rules import DEFAULT_OVERRIDE_TABLE, CollectionIgnores, build_override_table

ROOT_ENV_VAR = "REFREPO_ROOT"
CONFIG_FILE_NAME = "refrepo.toml"
DEFAULT_ROOT = Path.home() / "code" / "Reference Repos"

DEFAULT_MAX_FILE_SIZE_BYTES = 1 * 1024 * 1024
MAX_FILE_SIZE_BYTES_CAP = 64 * 1024 * 1024

DEFAULT_WARNING_BYTES = 15 * 1024 * 1024
DEFAULT_ERROR_BYTES = 50 * 1024 * 1024
DEFAULT_WARNING_COUNT = 2_500
DEFAULT_ERROR_COUNT = 10_000


@dataclass(slots=True, frozen=True)
class PlanThresholds:
    """Warning and error limits for planned byte totals and file counts."""

    warning_bytes: int = DEFAULT_WARNING_BYTES
    error_bytes: int = DEFAULT_ERROR_BYTES
    warning_count: int = DEFAULT_WARNING_COUNT
    error_count: int = DEFAULT_ERROR_COUNT

    def __post_init__(self) -> None:
        for name in ("warning_bytes", "error_bytes", "warning_count", "error_count"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ValueError(f"Config field 'thresholds.{name}' must be a positive integer.")
        if self.error_bytes <= self.warning_bytes:
            raise ValueError(
                "Config field 'thresholds.error_bytes' must be greater than "
                "'thresholds.warning_bytes'."
            )
        if self.error_count <= self.warning_count:
            raise ValueError(
                "Config field 'thresholds.error_count' must be greater than "
                "'thresholds.warning_count'."
            )


@dataclass(slots=True, frozen=True)
class IgnoreConfig:
    """Rule inputs layered on top of the global patterns."""

    custom_patterns: tuple[str, ...]
    collections: Mapping[str, CollectionIgnores]


@dataclass(slots=True, frozen=True)
class PlannerConfig:
    """Fully merged planner configuration."""

    root: Path
    data_dir: Path
    max_file_size_bytes: int
    thresholds: PlanThresholds
    ignore: IgnoreConfig

    def to_public_dict(self) -> dict[str, object]:
        """Return serializable config snapshot."""
        return {
            "root": str(self.root),
            "data_dir": str(self.data_dir),
            "max_file_size_bytes": self.max_file_size_bytes,
            "thresholds": {
                "warning_bytes": self.thresholds.warning_bytes,
                "error_bytes": self.thresholds.error_bytes,
                "warning_count": self.thresholds.warning_count,
                "error_count": self.thresholds.error_count,
            },
            "ignore": {
                "custom_patterns": list(self.ignore.custom_patterns),
                "collections": sorted(self.ignore.collections.keys()),
            },
        }


@dataclass(slots=True, frozen=True)
class ConfigOverrides:
    """Optional caller overrides applied at highest precedence."""

    data_dir: Path | None = None
    max_file_size_bytes: int | None = None
    warning_bytes: int | None = None
    error_bytes: int | None = None
    warning_count: int | None = None
    error_count: int | None = None


def resolve_root(override: str | Path | None = None) -> Path:
    """Resolve the collection root: explicit override, then environment, then default."""
    if override:
        return Path(override).expanduser().resolve()
    from_env = os.getenv(ROOT_ENV_VAR, "").strip()
    if from_env:
        return Path(from_env).expanduser().resolve()
    return DEFAULT_ROOT


def default_config(root: Path) -> PlannerConfig:
    """Build default config for a given collection root."""
    resolved_root = root.resolve()
    return PlannerConfig(
        root=resolved_root,
        data_dir=resolved_root,
        max_file_size_bytes=DEFAULT_MAX_FILE_SIZE_BYTES,
        thresholds=PlanThresholds(),
        ignore=IgnoreConfig(
            custom_patterns=(),
            collections=DEFAULT_OVERRIDE_TABLE,
        ),
    )


def load_config_file(root: Path) -> dict[str, object]:
    """Load optional refrepo.toml from the collection root."""
    config_path = root / CONFIG_FILE_NAME
    if not config_path.exists():
        return {}
    with config_path.open("rb") as handle:
        payload = tomllib.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"{CONFIG_FILE_NAME} must contain a top-level table.")
    return payload


def _get_table(payload: Mapping[str, object], key: str) -> dict[str, object]:
    value = payload.get(key, {})
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{key}' must be a table.")
    return value


def _tuple_of_strings(value: object, section: str, field: str) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise ValueError(f"Config field '{section}.{field}' must be a list of strings.")
    output: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise ValueError(f"Config field '{section}.{field}' must contain only strings.")
        output.append(item)
    return tuple(output)


def _collection_entries(payload: dict[str, object]) -> list[CollectionIgnores]:
    entries: list[CollectionIgnores] = []
    for collection_id in sorted(payload.keys()):
        section = f"collections.{collection_id}"
        table = payload[collection_id]
        if not isinstance(table, dict):
            raise ValueError(f"Config section '{section}' must be a table.")
        if "drop_paths" not in table:
            raise ValueError(f"Config field '{section}.drop_paths' is required.")
        drop_paths = _tuple_of_strings(table["drop_paths"], section, "drop_paths")
        notes = table.get("notes")
        if notes is not None and not isinstance(notes, str):
            raise ValueError(f"Config field '{section}.notes' must be a string.")
        entries.append(
            CollectionIgnores(collection_id=collection_id, drop_paths=drop_paths, notes=notes)
        )
    return entries


def merge_config(
    base: PlannerConfig, payload: dict[str, object], overrides: ConfigOverrides
) -> PlannerConfig:
    """Merge defaults, refrepo.toml, then caller overrides."""
    plan_payload = _get_table(payload, "plan")
    thresholds_payload = _get_table(payload, "thresholds")
    ignore_payload = _get_table(payload, "ignore")
    collections_payload = _get_table(payload, "collections")

    max_file_size_bytes = _optional_positive_int_with_cap(
        plan_payload.get("max_file_size_bytes"),
        "plan.max_file_size_bytes",
        base.max_file_size_bytes,
        MAX_FILE_SIZE_BYTES_CAP,
    )
    data_dir = base.data_dir
    if "data_dir" in plan_payload:
        raw_data_dir = plan_payload["data_dir"]
        if not isinstance(raw_data_dir, str) or not raw_data_dir.strip():
            raise ValueError("Config field 'plan.data_dir' must be a non-empty string.")
        data_dir = (base.root / raw_data_dir).resolve()

    thresholds = PlanThresholds(
        warning_bytes=_optional_positive_int(
            thresholds_payload.get("warning_bytes"),
            "thresholds.warning_bytes",
            base.thresholds.warning_bytes,
        ),
        error_bytes=_optional_positive_int(
            thresholds_payload.get("error_bytes"),
            "thresholds.error_bytes",
            base.thresholds.error_bytes,
        ),
        warning_count=_optional_positive_int(
            thresholds_payload.get("warning_count"),
            "thresholds.warning_count",
            base.thresholds.warning_count,
        ),
        error_count=_optional_positive_int(
            thresholds_payload.get("error_count"),
            "thresholds.error_count",
            base.thresholds.error_count,
        ),
    )

    custom_patterns = base.ignore.custom_patterns
    if "custom_patterns" in ignore_payload:
        custom_patterns = _tuple_of_strings(
            ignore_payload["custom_patterns"], "ignore", "custom_patterns"
        )
    collections = base.ignore.collections
    if collections_payload:
        collections = build_override_table(
            [*collections.values(), *_collection_entries(collections_payload)]
        )

    merged = PlannerConfig(
        root=base.root,
        data_dir=data_dir,
        max_file_size_bytes=max_file_size_bytes,
        thresholds=thresholds,
        ignore=IgnoreConfig(custom_patterns=custom_patterns, collections=collections),
    )
    return apply_overrides(merged, overrides)


def apply_overrides(config: PlannerConfig, overrides: ConfigOverrides) -> PlannerConfig:
    """Apply caller overrides at highest precedence."""
    max_file_size_bytes = _optional_positive_int_with_cap(
        overrides.max_file_size_bytes,
        "overrides.max_file_size_bytes",
        config.max_file_size_bytes,
        MAX_FILE_SIZE_BYTES_CAP,
    )
    thresholds = PlanThresholds(
        warning_bytes=_optional_positive_int(
            overrides.warning_bytes, "overrides.warning_bytes", config.thresholds.warning_bytes
        ),
        error_bytes=_optional_positive_int(
            overrides.error_bytes, "overrides.error_bytes", config.thresholds.error_bytes
        ),
        warning_count=_optional_positive_int(
            overrides.warning_count, "overrides.warning_count", config.thresholds.warning_count
        ),
        error_count=_optional_positive_int(
            overrides.error_count, "overrides.error_count", config.thresholds.error_count
        ),
    )
    data_dir = overrides.data_dir or config.data_dir
    return PlannerConfig(
        root=config.root,
        data_dir=data_dir.resolve(),
        max_file_size_bytes=max_file_size_bytes,
        thresholds=thresholds,
        ignore=config.ignore,
    )


def load_effective_config(
    root: str | Path | None = None, overrides: ConfigOverrides | None = None
) -> PlannerConfig:
    """Load effective config using merge order defaults -> refrepo.toml -> overrides."""
    resolved_root = resolve_root(root)
    base = default_config(resolved_root)
    payload = load_config_file(resolved_root)
    return merge_config(base, payload, overrides or ConfigOverrides())


def _optional_positive_int(value: object, name: str, default: int) -> int:
    return _optional_positive_int_with_cap(value, name, default, cap=None)


def _optional_positive_int_with_cap(
    value: object,
    name: str,
    default: int,
    cap: int | None,
) -> int:
    if value is None:
        return default
    if not isinstance(value, int) or isinstance(value, bool) or value < 1:
        raise ValueError(f"Config field '{name}' must be a positive integer.")
    if cap is not None and value > cap:
        raise ValueError(f"Config field '{name}' must be <= {cap}.")
    return value
