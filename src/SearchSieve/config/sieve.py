"""Predicate filtering configuration for condition extraction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from SearchSieve.config.common import expect_bool, expect_name_list, expect_optional_int, get_section
from SearchSieve.core.predicate import DEFAULT_CATALOG, PredicateCatalog, PredicateGroup
from SearchSieve.utils.log import log

_GROUP_NAMES = frozenset(group.value for group in PredicateGroup)
_GROUP_SHORTCUTS = frozenset((group.value,) for group in PredicateGroup)


@dataclass(frozen=True, slots=True)
class SieveConfig:
    """Store validated predicate filtering settings.

    Attributes:
        only_predicates: Allowed group/predicate/alias names, or None.
        except_predicates: Excluded group/predicate/alias names, or None.
            A bare ``basic``/``composite`` group here still applies when
            ``only_predicates`` is an explicit list; otherwise it is ignored
            whenever ``only_predicates`` is not None.
        ignore_errors: Skip failing keys in bulk extraction instead of raising.
        max_depth: Maximum association hops in attribute paths, or None.
    """

    only_predicates: tuple[str, ...] | None = None
    except_predicates: tuple[str, ...] | None = None
    ignore_errors: bool = False
    max_depth: int | None = None


def load_sieve(raw: Mapping[str, Any]) -> SieveConfig:
    """Load sieve configuration from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed sieve configuration.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "sieve", required=False)
    return SieveConfig(
        only_predicates=expect_name_list(section.get("only_predicates"), "sieve.only_predicates"),
        except_predicates=expect_name_list(section.get("except_predicates"), "sieve.except_predicates"),
        ignore_errors=expect_bool(section.get("ignore_errors", False), "sieve.ignore_errors"),
        max_depth=expect_optional_int(section.get("max_depth"), "sieve.max_depth"),
    )


def check_sieve(config: SieveConfig, catalog: PredicateCatalog = DEFAULT_CATALOG) -> None:
    """Validate sieve domain constraints.

    Setting both predicate lists is accepted, but only one of them takes
    effect, so a warning naming the ignored one is logged.

    Args:
        config: Parsed sieve configuration.
        catalog: Catalog the predicate names must belong to.

    Raises:
        ValueError: If values violate sieve constraints.
    """
    for config_key, names in (
        ("sieve.only_predicates", config.only_predicates),
        ("sieve.except_predicates", config.except_predicates),
    ):
        for name in names or ():
            if name not in _GROUP_NAMES and catalog.resolve_name(name) is None:
                raise ValueError(f"{config_key} has unknown predicate: {name}")

    if config.only_predicates is not None and config.except_predicates is not None:
        if config.except_predicates in _GROUP_SHORTCUTS and config.only_predicates not in _GROUP_SHORTCUTS:
            log.warning("sieve.except_predicates is a bare group; sieve.only_predicates is ignored")
        else:
            log.warning("sieve.only_predicates is set; sieve.except_predicates is ignored")

    if config.max_depth is not None and config.max_depth < 0:
        raise ValueError("sieve.max_depth must be null or >= 0")
