"""Errors raised while extracting a condition from a search key.

All of them derive from `ConditionError` and carry the offending key, so the
caller can report which part of its input was rejected.
"""

from __future__ import annotations


class ConditionError(ValueError):
    """Base class for data-dependent extraction failures.

    Attributes:
        key: The search key (or key segment) that could not be extracted.
    """

    reason = "invalid condition"

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"{self.reason}: {key}")


class AttributeNotFoundError(ConditionError):
    """A key segment does not resolve to a known attribute."""

    reason = "attribute not found"


class AttributeTooDeepError(AttributeNotFoundError):
    """A key segment walks more associations than allowed."""

    reason = "attribute path too deep"


class PredicateNotFoundError(ConditionError):
    """No active predicate or alias is a suffix of the key."""

    reason = "predicate not found"


class ValueIsEmptyError(ConditionError):
    """The value, or one element of a value list, is empty."""

    reason = "value is empty"
