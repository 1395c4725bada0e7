"""Output renderers for derived filter clauses."""

from __future__ import annotations

from FacetFilter.renderers.json import dump_filters, render_filters, render_query

__all__ = [
    "dump_filters",
    "render_filters",
    "render_query",
]
