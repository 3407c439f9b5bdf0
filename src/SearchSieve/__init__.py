"""SearchSieve: extract structured filter conditions from flat search keys.

Example::

    from SearchSieve import Schema, extract_condition

    schema = Schema("user", fields={"first_name": "string", "last_name": "string"})
    condition = extract_condition("first_name_or_last_name_cont", "Jo", schema)
"""

from __future__ import annotations

from SearchSieve.config.sieve import SieveConfig
from SearchSieve.core.attribute import Attribute, AttributeResolver, Schema, SchemaAttributeResolver
from SearchSieve.core.condition import Combinator, Condition, extract_condition, extract_conditions
from SearchSieve.core.errors import (
    AttributeNotFoundError,
    AttributeTooDeepError,
    ConditionError,
    PredicateNotFoundError,
    ValueIsEmptyError,
)
from SearchSieve.core.predicate import DEFAULT_CATALOG, Predicate, PredicateCatalog, PredicateGroup

__version__ = "0.1.0"

__all__ = [
    "Attribute",
    "AttributeNotFoundError",
    "AttributeResolver",
    "AttributeTooDeepError",
    "Combinator",
    "Condition",
    "ConditionError",
    "DEFAULT_CATALOG",
    "Predicate",
    "PredicateCatalog",
    "PredicateGroup",
    "PredicateNotFoundError",
    "Schema",
    "SchemaAttributeResolver",
    "SieveConfig",
    "ValueIsEmptyError",
    "extract_condition",
    "extract_conditions",
]
