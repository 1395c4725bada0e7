from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Literal, Protocol, Sequence

from dateutil import parser as dt_parser

FieldType = Literal["string", "date"]


@dataclass(frozen=True, slots=True)
class FieldConfig:
    """How one logical selection key maps to an index field.

    Attributes:
        field: Index field name. Keys without a field are skipped.
        type: ``date`` builds a range clause; anything else builds terms.
    """

    field: str | None
    type: FieldType = "string"


@dataclass(frozen=True, slots=True)
class TermsSelection:
    """Term buckets extracted from one selection object.

    - `must`: terms the user required
    - `should`: terms the user allowed
    - `must_not`: excluded terms, kept for completeness but never applied

    Negated terms filters are not supported; `must_not` never reaches a clause.
    """

    must: Sequence[Any] = ()
    should: Sequence[Any] = ()
    must_not: Sequence[Any] = ()


class SelectionExtractor(Protocol):
    """Pulls raw values out of caller-defined selection objects.

    Returning ``None`` means the selection carries nothing for that kind of
    filter; the key then produces no clause.
    """

    def extract_terms(self, selection: Any) -> TermsSelection | None:
        raise NotImplementedError

    def extract_dates(self, selection: Any) -> Sequence[Any] | None:
        raise NotImplementedError


class NamedCallbackExtractor:
    """Adapt a callback holder with named slots to ``SelectionExtractor``.

    The holder is either a mapping or an object with attributes. The terms
    callback returns a mapping with ``must``/``should``/``not`` lists, the
    dates callback returns ``[start, end]``. One holder can serve several
    roles by pointing both slot names at different attributes.
    """

    def __init__(self, callbacks: Any, *, terms_name: str = "terms", dates_name: str = "dates") -> None:
        self.callbacks = callbacks
        self.terms_name = terms_name
        self.dates_name = dates_name

    def extract_terms(self, selection: Any) -> TermsSelection | None:
        func = self._resolve(self.terms_name)
        if func is None:
            return None
        result = func(selection)
        if not isinstance(result, Mapping):
            return None
        return TermsSelection(
            must=_as_sequence(result.get("must")),
            should=_as_sequence(result.get("should")),
            must_not=_as_sequence(result.get("not")),
        )

    def extract_dates(self, selection: Any) -> Sequence[Any] | None:
        func = self._resolve(self.dates_name)
        if func is None:
            return None
        result = func(selection)
        if not isinstance(result, (list, tuple)):
            return None
        return result

    def _resolve(self, name: str) -> Callable[[Any], Any] | None:
        if self.callbacks is None or not name:
            return None
        if isinstance(self.callbacks, Mapping):
            func = self.callbacks.get(name)
        else:
            func = getattr(self.callbacks, name, None)
        return func if callable(func) else None


class MappingSelectionExtractor:
    """Extract values from plain JSON/YAML selection objects.

    Terms selections are either a list (all ``must``) or a mapping with
    ``must``/``should``/``not`` lists. Date selections are a ``[start, end]``
    list or a mapping with ``start``/``end``.
    """

    def __init__(self, *, parse_dates: bool = False) -> None:
        self.parse_dates = parse_dates

    def extract_terms(self, selection: Any) -> TermsSelection | None:
        if isinstance(selection, (list, tuple)):
            return TermsSelection(must=tuple(selection))
        if isinstance(selection, Mapping):
            return TermsSelection(
                must=_as_sequence(selection.get("must")),
                should=_as_sequence(selection.get("should")),
                must_not=_as_sequence(selection.get("not")),
            )
        return None

    def extract_dates(self, selection: Any) -> Sequence[Any] | None:
        if isinstance(selection, (list, tuple)):
            bounds = list(selection)
        elif isinstance(selection, Mapping):
            bounds = [selection.get("start"), selection.get("end")]
        else:
            return None
        if self.parse_dates:
            bounds = [_parse_date(value) for value in bounds]
        return bounds


def _as_sequence(value: Any) -> tuple[Any, ...]:
    """Return list/tuple values as a tuple, anything else as empty."""
    if isinstance(value, (list, tuple)):
        return tuple(value)
    return ()


def _parse_date(value: Any) -> Any:
    if not isinstance(value, str) or not value.strip():
        return value
    try:
        return dt_parser.parse(value)
    except (ValueError, OverflowError):
        return value
