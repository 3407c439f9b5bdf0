from __future__ import annotations

"""Public configuration API for SearchSieve."""

from SearchSieve.config.app import (
    AppConfig,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
    parse_yaml,
)
from SearchSieve.config.runtime import RuntimeConfig
from SearchSieve.config.sieve import SieveConfig

__all__ = [
    "RuntimeConfig",
    "SieveConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
    "parse_yaml",
]
