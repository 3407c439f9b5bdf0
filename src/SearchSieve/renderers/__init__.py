"""Output renderers for extracted conditions.

JSON payloads are meant for machine consumers, text for terminals.
"""

from __future__ import annotations

from SearchSieve.renderers.console import render_text
from SearchSieve.renderers.json import render_condition, render_conditions

__all__ = [
    "render_condition",
    "render_conditions",
    "render_text",
]
