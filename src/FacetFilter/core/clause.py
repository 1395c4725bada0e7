"""Filter clauses and the default Elasticsearch clause factory.

Derivation treats clauses as opaque values. The only thing it needs from
a clause is ``canonical()``, a deterministic string used to decide whether
two derived lists are equal.

The default factory builds Elasticsearch query DSL:

- terms -> ``{"terms": {<field>: [...], "_name": <key>}}``
- range -> ``{"range": {<field>: {"gte": start, "lte": end, "_name": <key>}}}``

A negated clause is wrapped as ``{"bool": {"must_not": [<clause>]}}``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Literal, Protocol, Sequence

ClauseKind = Literal["terms", "range"]

_KINDS: frozenset[str] = frozenset({"terms", "range"})


class Clause(Protocol):
    """Opaque filter clause that can be compared by canonical form."""

    def canonical(self) -> str:
        """Return a deterministic serialization of the clause."""
        raise NotImplementedError


class ClauseFactory(Protocol):
    """Callable that builds one clause from the derived values."""

    def __call__(
        self,
        kind: ClauseKind,
        negate: bool,
        key: str,
        field: str,
        values: Sequence[Any],
    ) -> Clause:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class FilterClause:
    """Elasticsearch filter clause.

    Attributes:
        kind: ``terms`` or ``range``.
        negate: Whether the clause is wrapped in ``bool.must_not``.
        key: Logical selection key, emitted as the ``_name`` of the clause.
        field: Index field the clause applies to.
        values: Term values, or the ``(start, end)`` pair of a range.
    """

    kind: ClauseKind
    negate: bool
    key: str
    field: str
    values: tuple[Any, ...]

    def to_dsl(self) -> dict[str, Any]:
        """Return the clause as an Elasticsearch query DSL mapping."""
        if self.kind == "terms":
            body: dict[str, Any] = {"terms": {self.field: list(self.values), "_name": self.key}}
        else:
            start, end = self.values
            bounds: dict[str, Any] = {}
            if start is not None:
                bounds["gte"] = start
            if end is not None:
                bounds["lte"] = end
            bounds["_name"] = self.key
            body = {"range": {self.field: bounds}}
        if self.negate:
            return {"bool": {"must_not": [body]}}
        return body

    def canonical(self) -> str:
        return json.dumps(self.to_dsl(), sort_keys=True, ensure_ascii=False, default=_json_default)


def build_filter(
    kind: ClauseKind,
    negate: bool,
    key: str,
    field: str,
    values: Sequence[Any],
) -> FilterClause:
    """Build an Elasticsearch filter clause.

    Args:
        kind: ``terms`` or ``range``.
        negate: Wrap the clause in ``bool.must_not``.
        key: Logical selection key.
        field: Index field name.
        values: Term values, or a two-item ``[start, end]`` sequence for ranges.

    Returns:
        The built clause.

    Raises:
        ValueError: If ``kind`` is unknown or a range does not get two values.
    """
    if kind not in _KINDS:
        raise ValueError(f"Unsupported clause kind: {kind}")
    values = tuple(values)
    if kind == "range" and len(values) != 2:
        raise ValueError(f"range clause needs [start, end], got {len(values)} values")
    return FilterClause(kind=kind, negate=negate, key=key, field=field, values=values)


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    return {"__type__": type(value).__qualname__, "repr": repr(value)}
