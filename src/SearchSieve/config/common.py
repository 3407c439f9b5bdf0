from __future__ import annotations

"""Shared helpers for configuration loading and validation."""

from typing import Any, Mapping


def get_section(raw: Mapping[str, Any], key: str, *, required: bool) -> Mapping[str, Any]:
    """Return a mapping section from root config.

    Args:
        raw: Root configuration mapping.
        key: Section name.
        required: Whether the section must exist.

    Returns:
        Section mapping, or empty mapping for optional missing sections.

    Raises:
        ValueError: If section is required but missing.
        TypeError: If section is not a mapping.
    """
    section = raw.get(key)
    if section is None:
        if required:
            raise ValueError(f"Missing required config: {key}")
        return {}
    if not isinstance(section, Mapping):
        raise TypeError(f"{key} must be an object")
    return section


def expect_str(value: Any, config_key: str) -> str:
    """Validate and return string value."""
    if not isinstance(value, str):
        raise TypeError(f"{config_key} must be a string")
    return value


def expect_bool(value: Any, config_key: str) -> bool:
    """Validate and return boolean value."""
    if not isinstance(value, bool):
        raise TypeError(f"{config_key} must be a boolean")
    return value


def expect_optional_int(value: Any, config_key: str) -> int | None:
    """Validate and return integer value (excluding bool), or None."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{config_key} must be an integer or null")
    return value


def expect_name_list(value: Any, config_key: str) -> tuple[str, ...] | None:
    """Validate a list of names, accepting a bare string as one name.

    Names are stripped and lowercased; blank names are dropped.

    Returns:
        Normalized names, or None when the value is null.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        raise TypeError(f"{config_key} must be a list of strings or null")
    out: list[str] = []
    for idx, item in enumerate(value):
        name = expect_str(item, f"{config_key}[{idx}]").strip().lower()
        if name:
            out.append(name)
    return tuple(out)
