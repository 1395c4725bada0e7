"""Derive search filter clauses from UI selections.

Rules
- Output order follows the selection data, not the field configuration.
- A key contributes a clause only when it has a configured field, a selection
  value, and extracted values that make a usable filter. Everything else is
  skipped silently.
- Fields typed ``date`` become range clauses, every other type becomes a
  terms clause.
- When the derived list equals the previous one clause for clause, the
  previous list object is returned so consumers can compare by identity.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from FacetFilter.core.clause import Clause, ClauseFactory, build_filter
from FacetFilter.core.selection import FieldConfig, SelectionExtractor
from FacetFilter.utils.log import log


def derive_filters(
    previous: Sequence[Clause] | None,
    field_configs: Mapping[str, FieldConfig] | None,
    selection_data: Mapping[str, Any] | None,
    extractor: SelectionExtractor | None,
    clause_factory: ClauseFactory = build_filter,
) -> Sequence[Clause]:
    """Build the filter list for the current selections.

    Args:
        previous: The list published by the last derivation.
        field_configs: Mapping of logical key to ``FieldConfig``.
        selection_data: Mapping of logical key to a selection object.
        extractor: Pulls terms and date bounds out of selection objects.
        clause_factory: Builds one clause from the derived values.

    Returns:
        ``previous`` itself when nothing changed, otherwise a new list.
    """
    candidate: list[Clause] = []
    if field_configs and selection_data:
        for key, selection in selection_data.items():
            config = field_configs.get(key)
            if config is None or not config.field or selection is None:
                log.debug("Skipping key=%s: no field mapping or selection", key)
                continue

            if config.type != "date":
                clause = build_terms_clause(key, config.field, selection, extractor, clause_factory)
            else:
                clause = build_date_range_clause(key, config.field, selection, extractor, clause_factory)

            if clause is None:
                log.debug("Skipping key=%s: empty selection", key)
                continue
            candidate.append(clause)

    if previous is not None and filters_equal(candidate, previous):
        return previous
    return candidate


def build_terms_clause(
    key: str,
    field: str,
    selection: Any,
    extractor: SelectionExtractor | None,
    clause_factory: ClauseFactory = build_filter,
) -> Clause | None:
    """Build a terms clause from the ``must`` and ``should`` terms.

    ``must`` terms come first. Negated terms are not supported and are
    dropped.
    """
    terms_selection = extractor.extract_terms(selection) if extractor is not None else None
    if terms_selection is None:
        return None

    negated = _bucket(terms_selection.must_not)
    if negated:
        log.debug("Ignoring %d negated terms for key=%s", len(negated), key)

    terms = [*_bucket(terms_selection.must), *_bucket(terms_selection.should)]
    if not terms:
        return None
    return clause_factory("terms", False, key, field, terms)


def build_date_range_clause(
    key: str,
    field: str,
    selection: Any,
    extractor: SelectionExtractor | None,
    clause_factory: ClauseFactory = build_filter,
) -> Clause | None:
    """Build a range clause from a ``[start, end]`` pair.

    Returns None unless the pair has exactly two items and at least one
    bound is truthy. Blank strings count as missing.
    """
    bounds = extractor.extract_dates(selection) if extractor is not None else None
    if bounds is None:
        bounds = [None, None]

    if not isinstance(bounds, (list, tuple)) or len(bounds) != 2:
        return None
    start, end = bounds
    if _is_absent(start) and _is_absent(end):
        return None
    return clause_factory("range", False, key, field, [start, end])


def filters_equal(left: Sequence[Clause], right: Sequence[Clause]) -> bool:
    """Compare two clause lists by length and canonical form, in order."""
    if len(left) != len(right):
        return False
    return all(a.canonical() == b.canonical() for a, b in zip(left, right))


def _bucket(value: Any) -> Sequence[Any]:
    return value if isinstance(value, (list, tuple)) else ()


def _is_absent(value: Any) -> bool:
    if isinstance(value, str):
        return not value.strip()
    return not value
