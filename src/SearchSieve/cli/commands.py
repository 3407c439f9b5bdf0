"""Command implementations for SearchSieve CLI.

Encapsulates extraction logic for each command, separated from CLI parameter
handling. Every command returns the text to print.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

from SearchSieve.config import AppConfig, parse_yaml
from SearchSieve.core.attribute import Schema, SchemaAttributeResolver
from SearchSieve.core.condition import Condition, extract_condition, extract_conditions
from SearchSieve.core.predicate import DEFAULT_CATALOG, search_list, select_candidates
from SearchSieve.renderers import render_conditions, render_text
from SearchSieve.utils.log import log

OUTPUT_FORMATS = ("json", "text")


def _require_schema(config: AppConfig) -> Schema:
    if config.schema is None:
        raise ValueError("Missing required config: schema")
    return config.schema


def _render(conditions: list[Condition], output_format: str) -> str:
    if output_format == "text":
        return render_text(conditions).rstrip("\n")
    return json.dumps(render_conditions(conditions), ensure_ascii=False, indent=2)


@dataclass(slots=True)
class ExtractCommand:
    """Extract a single condition from a key and its command-line values.

    One value is passed through as a scalar, several as a list.
    """

    config: AppConfig
    key: str
    values: Sequence[str]
    output_format: str = "json"

    def execute(self) -> str:
        schema = _require_schema(self.config)
        raw: Any = self.values[0] if len(self.values) == 1 else list(self.values)
        condition = extract_condition(
            self.key,
            raw,
            schema,
            self.config.sieve,
            resolver=SchemaAttributeResolver(max_depth=self.config.sieve.max_depth),
        )
        return _render([condition], self.output_format)


@dataclass(slots=True)
class ParamsCommand:
    """Extract conditions from every item of a YAML key/value mapping file."""

    config: AppConfig
    params_path: Path
    output_format: str = "json"

    def execute(self) -> str:
        schema = _require_schema(self.config)
        params = parse_yaml(self.params_path.read_text(encoding="utf-8"), label="Params file")
        log.debug("Extracting %d search keys from %s", len(params), self.params_path)
        conditions = extract_conditions(
            params,
            schema,
            self.config.sieve,
            resolver=SchemaAttributeResolver(max_depth=self.config.sieve.max_depth),
        )
        log.info("Extracted %d of %d conditions", len(conditions), len(params))
        return _render(conditions, self.output_format)


@dataclass(slots=True)
class PredicatesCommand:
    """List the predicate names a key may end with, longest first."""

    config: AppConfig

    def execute(self) -> str:
        candidates = select_candidates(
            DEFAULT_CATALOG,
            self.config.sieve.only_predicates,
            self.config.sieve.except_predicates,
        )
        lines = []
        for name, predicate in search_list(candidates, DEFAULT_CATALOG):
            if name == predicate.value:
                lines.append(name)
            else:
                lines.append(f"{name} -> {predicate.value}")
        return "\n".join(lines)
