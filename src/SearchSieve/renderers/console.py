"""Console text output renderers."""

from __future__ import annotations

from typing import Iterable

from SearchSieve.core.condition import Condition


def render_text(conditions: Iterable[Condition]) -> str:
    """Render conditions into a human-readable text block.

    Args:
        conditions: Iterable of conditions.

    Returns:
        A formatted string ready to be printed.
    """
    lines: list[str] = []
    for idx, condition in enumerate(conditions, start=1):
        joiner = f" {condition.combinator.value.upper()} "
        paths = joiner.join(attribute.path for attribute in condition.attributes)
        values = ", ".join(repr(value) for value in condition.values)
        lines.append(f"{idx}. {paths} {condition.predicate.value} [{values}]")
    if not lines:
        return "(no conditions)\n"
    return "\n".join(lines) + "\n"
