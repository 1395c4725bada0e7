"""Stateful filter derivation bound to one set of field mappings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from FacetFilter.core.clause import Clause, ClauseFactory, build_filter
from FacetFilter.core.derive import derive_filters
from FacetFilter.core.selection import FieldConfig, SelectionExtractor
from FacetFilter.utils.log import log


@dataclass(slots=True)
class FilterDeriver:
    """Keep the published filter list in sync with changing selections.

    Call ``update`` whenever the selection data changes. ``filters`` keeps
    the same list object across updates that derive equal clauses, so
    consumers can skip work by comparing identity.

    Instances are not thread-safe; run one ``update`` at a time.
    """

    field_configs: Mapping[str, FieldConfig] | None
    extractor: SelectionExtractor | None
    clause_factory: ClauseFactory = build_filter
    filters: Sequence[Clause] = field(default_factory=list)
    changed: bool = False

    def update(self, selection_data: Mapping[str, Any] | None) -> Sequence[Clause]:
        """Re-derive filters for new selection data.

        Args:
            selection_data: Mapping of logical key to selection object.

        Returns:
            The published filter list.
        """
        derived = derive_filters(
            self.filters,
            self.field_configs,
            selection_data,
            self.extractor,
            self.clause_factory,
        )
        self.changed = derived is not self.filters
        if self.changed:
            log.debug("Filters changed: %d -> %d clauses", len(self.filters), len(derived))
            self.filters = derived
        return self.filters
