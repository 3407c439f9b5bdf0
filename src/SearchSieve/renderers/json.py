"""JSON output renderers.

Renders conditions into JSON-serializable objects for the query-building
side or for display.
"""

from __future__ import annotations

from typing import Any, Iterable

from SearchSieve.core.attribute import Attribute
from SearchSieve.core.condition import Condition


def render_condition(condition: Condition) -> dict[str, Any]:
    """Render one condition into a JSON-serializable dict.

    Args:
        condition: Extracted condition.

    Returns:
        Dict with ``attributes``, ``predicate``, ``combinator`` and ``values``.
    """
    return {
        "attributes": [_attribute_payload(attribute) for attribute in condition.attributes],
        "predicate": condition.predicate.value,
        "combinator": condition.combinator.value,
        "values": list(condition.values),
    }


def render_conditions(conditions: Iterable[Condition]) -> list[dict[str, Any]]:
    """Render conditions in order."""
    return [render_condition(condition) for condition in conditions]


def _attribute_payload(attribute: Attribute) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "name": attribute.name,
        "parent": list(attribute.parent),
    }
    # Only include the type when the resolver knows it
    if attribute.type is not None:
        payload["type"] = attribute.type
    return payload
