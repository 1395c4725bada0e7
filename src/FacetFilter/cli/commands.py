"""Command implementations for FacetFilter CLI.

Keeps the derive logic apart from click parameter handling so it can be
driven directly in tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Sequence

from FacetFilter.config import AppConfig
from FacetFilter.renderers.json import dump_filters
from FacetFilter.services.deriver import FilterDeriver
from FacetFilter.utils.log import log


@dataclass(slots=True)
class DeriveCommand:
    """Feed selection snapshots through one deriver and emit changed filters.

    Every snapshot is derived against the list published for the previous
    one. Output is only emitted when the filters actually changed, except
    for the first snapshot, which is always emitted.
    """

    config: AppConfig
    deriver: FilterDeriver
    emit: Callable[[str], Any]

    def execute(self, snapshots: Sequence[Mapping[str, Any]]) -> int:
        """Derive filters for each snapshot in order.

        Args:
            snapshots: Selection data mappings, oldest first.

        Returns:
            Number of documents emitted.
        """
        emitted = 0
        multiple = len(snapshots) > 1
        for idx, selection_data in enumerate(snapshots, start=1):
            if multiple:
                log.info("=== Snapshot %d/%d ===", idx, len(snapshots))
            log.debug("selection keys=%s", list(selection_data.keys()))

            filters = self.deriver.update(selection_data)
            if idx > 1 and not self.deriver.changed:
                log.info("Filters unchanged (%d clauses)", len(filters))
                continue

            log.info("Derived %d filter clauses", len(filters))
            self.emit(
                dump_filters(
                    filters,
                    wrap_query=self.config.output.wrap_query,
                    indent=self.config.output.indent,
                )
            )
            emitted += 1
        return emitted


def parse_snapshots(data: Any) -> list[Mapping[str, Any]]:
    """Normalize loaded selection data into a snapshot list.

    Args:
        data: A single selection mapping, a list of them, or None.

    Returns:
        Snapshot mappings in file order.

    Raises:
        TypeError: If the data or any list item is not a mapping.
    """
    if data is None:
        return [{}]
    if isinstance(data, Mapping):
        return [data]
    if not isinstance(data, list):
        raise TypeError("selection data must be an object or a list of objects")
    for idx, item in enumerate(data):
        if not isinstance(item, Mapping):
            raise TypeError(f"selection data[{idx}] must be an object")
    return list(data)
