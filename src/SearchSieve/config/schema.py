"""Schema section: the data model search keys are resolved against."""

from __future__ import annotations

from typing import Any, Mapping

from SearchSieve.core.attribute import Schema


def load_schema(raw: Mapping[str, Any]) -> Schema | None:
    """Load the optional ``schema`` section.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed schema, or None when the section is absent.

    Raises:
        TypeError: If the schema shape is invalid.
    """
    section = raw.get("schema")
    if section is None:
        return None
    return Schema.from_mapping(section, config_key="schema")


def check_schema(schema: Schema | None) -> None:
    """Validate that every schema level exposes something to filter on.

    Raises:
        ValueError: If a schema has neither fields nor associations.
    """
    if schema is None:
        return
    _check_level(schema, "schema")


def _check_level(schema: Schema, config_key: str) -> None:
    if not schema.fields and not schema.associations:
        raise ValueError(f"{config_key} must declare fields or associations")
    for name, assoc in schema.associations.items():
        _check_level(assoc, f"{config_key}.associations.{name}")
