from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from SearchSieve.config.runtime import RuntimeConfig, check_runtime, load_runtime
from SearchSieve.config.schema import check_schema, load_schema
from SearchSieve.config.sieve import SieveConfig, check_sieve, load_sieve
from SearchSieve.core.attribute import Schema


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)
    sieve: SieveConfig = field(default_factory=SieveConfig)
    schema: Schema | None = None


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    sieve = load_sieve(raw)
    schema = load_schema(raw)

    check_runtime(runtime)
    check_sieve(sieve)
    check_schema(schema)

    return AppConfig(runtime=runtime, sieve=sieve, schema=schema)


def load_config(path: Path) -> AppConfig:
    """Load YAML config file without default merge."""
    return load_config_with_defaults(path, default_path=path)


def load_config_with_defaults(
    config_path: Path, default_path: Path = Path("config/default.yml")
) -> AppConfig:
    """Load config by merging defaults and optional override."""
    base = parse_yaml(default_path.read_text(encoding="utf-8"))
    if config_path == default_path:
        return parse_config_dict(base)
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    merged = merge_config_dicts(base, override)
    return parse_config_dict(merged)


def parse_yaml(text: str, *, label: str = "Config") -> dict[str, Any]:
    """Parse raw YAML text into a mapping.

    Args:
        text: YAML document.
        label: What the document is, used in the error message.

    Raises:
        ValueError: If the document root is not a mapping.
    """
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{label} root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
