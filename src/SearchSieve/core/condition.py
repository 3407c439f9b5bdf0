"""Condition extraction from flat search keys.

A search key packs attributes, combinator and predicate into one string::

    first_name _or_ last_name _cont
    attribute  comb attribute predicate

`extract_condition` splits the key on ``_and_``/``_or_``, resolves every
segment through an `AttributeResolver`, resolves the longest predicate suffix
from the active `PredicateCatalog` candidates, and normalizes the value(s).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Sequence

from SearchSieve.config.sieve import SieveConfig
from SearchSieve.core.attribute import Attribute, AttributeResolver, SchemaAttributeResolver
from SearchSieve.core.errors import ConditionError, ValueIsEmptyError
from SearchSieve.core.predicate import DEFAULT_CATALOG, Predicate, PredicateCatalog, find_predicate, select_candidates
from SearchSieve.utils.log import log

Scalar = str | int | float | bool | None
RawValues = Scalar | Sequence[Scalar]

_SEGMENT_DELIMITER = re.compile(r"_(?:and|or)_")


class Combinator(str, Enum):
    AND = "and"
    OR = "or"


@dataclass(frozen=True, slots=True)
class Condition:
    """One filter condition extracted from a key/value pair.

    Attributes:
        values: Non-empty value tokens, in input order.
        attributes: Resolved attributes, one per key segment, in key order.
        predicate: Canonical predicate (never an alias).
        combinator: How multiple attributes combine.
    """

    values: tuple[Scalar, ...]
    attributes: tuple[Attribute, ...]
    predicate: Predicate
    combinator: Combinator = Combinator.AND


def extract_condition(
    key: str,
    values: RawValues,
    schema: Any,
    config: SieveConfig | None = None,
    *,
    resolver: AttributeResolver | None = None,
    catalog: PredicateCatalog = DEFAULT_CATALOG,
) -> Condition:
    """Extract a condition from one search key and its value(s).

    Args:
        key: Search key, e.g. ``name_or_email_cont``.
        values: Scalar value or sequence of values.
        schema: Schema handle passed through to the resolver.
        config: Predicate filtering config; defaults to ``SieveConfig()``.
        resolver: Attribute resolver; defaults to `SchemaAttributeResolver`
            honoring ``config.max_depth``.
        catalog: Predicate catalog.

    Returns:
        The extracted condition.

    Raises:
        AttributeNotFoundError: If a key segment does not resolve.
        PredicateNotFoundError: If no active predicate ends the key.
        ValueIsEmptyError: If the value, or any element of it, is empty.
    """
    config = config or SieveConfig()
    resolver = resolver or SchemaAttributeResolver(max_depth=config.max_depth)

    attributes = _extract_attributes(key, schema, resolver)
    candidates = select_candidates(catalog, config.only_predicates, config.except_predicates)
    predicate = find_predicate(key, candidates, catalog)
    normalized = _prepare_values(values, key)

    condition = Condition(
        values=normalized,
        attributes=attributes,
        predicate=predicate,
        combinator=get_combinator(key),
    )
    log.debug(
        "Extracted key=%s attributes=%s predicate=%s combinator=%s values=%s",
        key,
        [attribute.path for attribute in attributes],
        predicate.value,
        condition.combinator.value,
        list(normalized),
    )
    return condition


def extract_conditions(
    params: Mapping[str, RawValues],
    schema: Any,
    config: SieveConfig | None = None,
    *,
    resolver: AttributeResolver | None = None,
    catalog: PredicateCatalog = DEFAULT_CATALOG,
) -> list[Condition]:
    """Extract one condition per item of a key/value mapping.

    With ``config.ignore_errors`` set, items that fail extraction are logged
    and skipped; otherwise the first failure propagates.

    Args:
        params: Search keys mapped to their values, in the order to keep.
        schema: Schema handle passed through to the resolver.
        config: Predicate filtering config.
        resolver: Attribute resolver.
        catalog: Predicate catalog.

    Returns:
        Extracted conditions, in ``params`` order.

    Raises:
        ConditionError: On the first failing item unless errors are ignored.
    """
    config = config or SieveConfig()
    conditions: list[Condition] = []
    for key, values in params.items():
        try:
            condition = extract_condition(key, values, schema, config, resolver=resolver, catalog=catalog)
        except ConditionError as e:
            if not config.ignore_errors:
                raise
            log.warning("Skipping search key %s: %s", key, e)
            continue
        conditions.append(condition)
    return conditions


def get_combinator(key: str) -> Combinator:
    """Return OR if the key contains ``_or_`` anywhere, AND otherwise."""
    if "_or_" in key:
        return Combinator.OR
    return Combinator.AND


def _extract_attributes(key: str, schema: Any, resolver: AttributeResolver) -> tuple[Attribute, ...]:
    """Resolve every ``_and_``/``_or_`` separated segment of a key, in order."""
    return tuple(resolver.resolve(segment, schema) for segment in _SEGMENT_DELIMITER.split(key))


def _prepare_values(values: RawValues, key: str) -> tuple[Scalar, ...]:
    """Validate values and normalize them into a non-empty tuple.

    A single empty element rejects the whole sequence.
    """
    if isinstance(values, (list, tuple)):
        if not values or any(_is_empty(value) for value in values):
            raise ValueIsEmptyError(key)
        return tuple(values)
    if _is_empty(values):
        raise ValueIsEmptyError(key)
    return (values,)


def _is_empty(value: Scalar) -> bool:
    return isinstance(value, str) and value == ""
