"""Service layer for FacetFilter.

Provides the stateful ``FilterDeriver`` and a factory that wires it from
application configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from FacetFilter.core.selection import MappingSelectionExtractor, NamedCallbackExtractor, SelectionExtractor
from FacetFilter.services.deriver import FilterDeriver

if TYPE_CHECKING:
    from FacetFilter.config import AppConfig


def create_filter_deriver(config: AppConfig, callbacks: Any = None) -> FilterDeriver:
    """Create a filter deriver from configuration.

    Args:
        config: Application configuration.
        callbacks: Optional callback holder with terms/dates slots named by
            ``selection.terms_slot`` and ``selection.dates_slot``. Without
            it, selections are read as plain JSON/YAML values.

    Returns:
        Configured FilterDeriver with an empty published list.
    """
    extractor: SelectionExtractor
    if callbacks is not None:
        extractor = NamedCallbackExtractor(
            callbacks,
            terms_name=config.selection.terms_slot,
            dates_name=config.selection.dates_slot,
        )
    else:
        extractor = MappingSelectionExtractor(parse_dates=config.selection.parse_dates)
    return FilterDeriver(field_configs=config.fields.fields, extractor=extractor)


__all__ = [
    "FilterDeriver",
    "create_filter_deriver",
]
