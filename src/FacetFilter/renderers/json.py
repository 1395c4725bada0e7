"""JSON output renderers.

Turns derived clauses back into JSON-serializable objects via their
canonical form, optionally wrapped in a ``bool.filter`` query body.
"""

from __future__ import annotations

import json
from typing import Iterable

from FacetFilter.core.clause import Clause


def render_filters(filters: Iterable[Clause]) -> list[dict]:
    """Render clauses into JSON-serializable Python objects.

    Args:
        filters: Derived clauses.

    Returns:
        One decoded mapping per clause, in order.
    """
    return [json.loads(clause.canonical()) for clause in filters]


def render_query(filters: Iterable[Clause]) -> dict:
    """Wrap clauses as the filter context of a bool query."""
    return {"query": {"bool": {"filter": render_filters(filters)}}}


def dump_filters(filters: Iterable[Clause], *, wrap_query: bool = True, indent: int = 2) -> str:
    """Serialize clauses to a JSON document.

    Args:
        filters: Derived clauses.
        wrap_query: Emit a full query body instead of a bare clause list.
        indent: JSON indentation; 0 gives a single line.
    """
    payload = render_query(filters) if wrap_query else render_filters(filters)
    return json.dumps(payload, ensure_ascii=False, indent=indent or None)
