"""Tests for filter derivation from selection data."""

import sys
import unittest
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Any

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from FacetFilter.core.clause import build_filter
from FacetFilter.core.derive import (
    build_date_range_clause,
    build_terms_clause,
    derive_filters,
    filters_equal,
)
from FacetFilter.core.selection import FieldConfig, NamedCallbackExtractor, TermsSelection


@dataclass(frozen=True)
class _Recorded:
    kind: str
    negate: bool
    key: str
    field: str
    values: tuple

    def canonical(self) -> str:
        return repr((self.kind, self.negate, self.key, self.field, self.values))


def _recording_factory(kind: str, negate: bool, key: str, field: str, values: Any) -> _Recorded:
    return _Recorded(kind, negate, key, field, tuple(values))


def _extractor() -> NamedCallbackExtractor:
    return NamedCallbackExtractor(
        {
            "terms": lambda o: {"must": o["v"], "should": o.get("s", [])},
            "dates": lambda o: o["v"],
        }
    )


_CONFIGS = {
    "k1": FieldConfig(field="f1", type="string"),
    "k2": FieldConfig(field="f2", type="date"),
}


class _StaticExtractor:
    def __init__(self, terms: Any = None, dates: Any = None) -> None:
        self.terms = terms
        self.dates = dates

    def extract_terms(self, selection: Any) -> Any:
        return self.terms

    def extract_dates(self, selection: Any) -> Any:
        return self.dates


class TestDeriveFilters(unittest.TestCase):
    def test_example_scenario(self) -> None:
        data = {"k1": {"v": ["x"]}, "k2": {"v": ["2020-01-01", "2020-02-01"]}}
        result = derive_filters([], _CONFIGS, data, _extractor(), _recording_factory)
        self.assertEqual(
            list(result),
            [
                _Recorded("terms", False, "k1", "f1", ("x",)),
                _Recorded("range", False, "k2", "f2", ("2020-01-01", "2020-02-01")),
            ],
        )

    def test_empty_configs_give_empty_list(self) -> None:
        data = {"k1": {"v": ["x"]}}
        self.assertEqual(list(derive_filters([], {}, data, _extractor())), [])
        self.assertEqual(list(derive_filters(None, None, data, _extractor())), [])

    def test_keys_missing_from_either_side_are_skipped(self) -> None:
        configs = {"k1": FieldConfig(field="f1"), "only_config": FieldConfig(field="f9")}
        data = {"k1": {"v": ["x"]}, "only_data": {"v": ["y"]}}
        result = derive_filters([], configs, data, _extractor(), _recording_factory)
        self.assertEqual([c.key for c in result], ["k1"])

    def test_key_without_field_is_skipped(self) -> None:
        configs = {"k1": FieldConfig(field=None), "k2": FieldConfig(field="")}
        data = {"k1": {"v": ["x"]}, "k2": {"v": ["y"]}}
        self.assertEqual(list(derive_filters([], configs, data, _extractor(), _recording_factory)), [])

    def test_none_selection_is_skipped(self) -> None:
        data = {"k1": None, "k2": {"v": ["2020-01-01", None]}}
        result = derive_filters([], _CONFIGS, data, _extractor(), _recording_factory)
        self.assertEqual([c.key for c in result], ["k2"])

    def test_output_follows_selection_order(self) -> None:
        data = {"k2": {"v": ["2020-01-01", None]}, "k1": {"v": ["x"]}}
        result = derive_filters([], _CONFIGS, data, _extractor(), _recording_factory)
        self.assertEqual([c.key for c in result], ["k2", "k1"])

    def test_unset_type_builds_terms(self) -> None:
        configs = {"k": FieldConfig(field="f")}
        result = derive_filters([], configs, {"k": {"v": ["x"]}}, _extractor(), _recording_factory)
        self.assertEqual(result[0].kind, "terms")

    def test_unchanged_result_returns_previous_list(self) -> None:
        first = derive_filters([], _CONFIGS, {"k1": {"v": ["x"]}}, _extractor())
        second = derive_filters(first, _CONFIGS, {"k1": {"v": ["x"]}}, _extractor())
        self.assertIs(second, first)

    def test_decimal_terms_keep_identity_across_updates(self) -> None:
        configs = {"k": FieldConfig(field="f")}
        extractor = NamedCallbackExtractor({"terms": lambda o: {"must": o}})
        first = derive_filters([], configs, {"k": [Decimal("1.5")]}, extractor)
        second = derive_filters(first, configs, {"k": [Decimal("1.5")]}, extractor)
        third = derive_filters(second, configs, {"k": [Decimal("2.5")]}, extractor)
        self.assertIs(second, first)
        self.assertIsNot(third, first)

    def test_changed_result_returns_new_list(self) -> None:
        first = derive_filters([], _CONFIGS, {"k1": {"v": ["x"]}}, _extractor())
        second = derive_filters(first, _CONFIGS, {"k1": {"v": ["x", "y"]}}, _extractor())
        self.assertIsNot(second, first)
        self.assertEqual(len(first), 1)
        self.assertEqual(second[0].values, ("x", "y"))

    def test_previous_list_is_not_mutated(self) -> None:
        previous = derive_filters([], _CONFIGS, {"k1": {"v": ["x"]}}, _extractor())
        snapshot = list(previous)
        derive_filters(previous, _CONFIGS, {"k1": {"v": ["z"]}, "k2": {"v": ["a", "b"]}}, _extractor())
        self.assertEqual(previous, snapshot)

    def test_no_extractor_gives_no_clauses(self) -> None:
        data = {"k1": {"v": ["x"]}, "k2": {"v": ["a", "b"]}}
        self.assertEqual(list(derive_filters([], _CONFIGS, data, None)), [])


class TestBuildTermsClause(unittest.TestCase):
    def test_must_terms_come_before_should(self) -> None:
        extractor = _StaticExtractor(terms=TermsSelection(must=["a", "b"], should=["c"]))
        clause = build_terms_clause("k", "f", {}, extractor, _recording_factory)
        self.assertEqual(clause, _Recorded("terms", False, "k", "f", ("a", "b", "c")))

    def test_empty_buckets_give_no_clause(self) -> None:
        extractor = _StaticExtractor(terms=TermsSelection(must=[], should=[]))
        self.assertIsNone(build_terms_clause("k", "f", {}, extractor, _recording_factory))

    def test_absent_terms_give_no_clause(self) -> None:
        self.assertIsNone(build_terms_clause("k", "f", {}, _StaticExtractor(), _recording_factory))

    def test_negated_terms_are_not_applied(self) -> None:
        extractor = _StaticExtractor(terms=TermsSelection(must=["a"], must_not=["b"]))
        clause = build_terms_clause("k", "f", {}, extractor, _recording_factory)
        self.assertEqual(clause.values, ("a",))
        self.assertFalse(clause.negate)

    def test_only_negated_terms_give_no_clause(self) -> None:
        extractor = _StaticExtractor(terms=TermsSelection(must_not=["b"]))
        self.assertIsNone(build_terms_clause("k", "f", {}, extractor, _recording_factory))

    def test_malformed_buckets_are_treated_as_empty(self) -> None:
        extractor = _StaticExtractor(terms=TermsSelection(must=None, should=42))
        self.assertIsNone(build_terms_clause("k", "f", {}, extractor, _recording_factory))


class TestBuildDateRangeClause(unittest.TestCase):
    def test_both_bounds_absent_gives_no_clause(self) -> None:
        extractor = _StaticExtractor(dates=[None, None])
        self.assertIsNone(build_date_range_clause("k", "f", {}, extractor, _recording_factory))

    def test_blank_string_bounds_count_as_absent(self) -> None:
        extractor = _StaticExtractor(dates=["", " "])
        self.assertIsNone(build_date_range_clause("k", "f", {}, extractor, _recording_factory))

    def test_falsy_bounds_count_as_absent(self) -> None:
        for dates in ([0, None], [0, 0], [False, False], ("", 0)):
            with self.subTest(dates=dates):
                extractor = _StaticExtractor(dates=dates)
                self.assertIsNone(build_date_range_clause("k", "f", {}, extractor, _recording_factory))

    def test_one_truthy_bound_next_to_falsy_bound(self) -> None:
        extractor = _StaticExtractor(dates=[0, 1700000000])
        clause = build_date_range_clause("k", "f", {}, extractor, _recording_factory)
        self.assertEqual(clause.values, (0, 1700000000))

    def test_start_only(self) -> None:
        extractor = _StaticExtractor(dates=["2020-01-01", None])
        clause = build_date_range_clause("k", "f", {}, extractor, _recording_factory)
        self.assertEqual(clause, _Recorded("range", False, "k", "f", ("2020-01-01", None)))

    def test_end_only(self) -> None:
        extractor = _StaticExtractor(dates=[None, "2020-02-01"])
        clause = build_date_range_clause("k", "f", {}, extractor, _recording_factory)
        self.assertEqual(clause.values, (None, "2020-02-01"))

    def test_wrong_length_gives_no_clause(self) -> None:
        for dates in (["2020-01-01"], ["a", "b", "c"], []):
            with self.subTest(dates=dates):
                extractor = _StaticExtractor(dates=dates)
                self.assertIsNone(build_date_range_clause("k", "f", {}, extractor, _recording_factory))

    def test_non_sequence_gives_no_clause(self) -> None:
        extractor = _StaticExtractor(dates=12)
        self.assertIsNone(build_date_range_clause("k", "f", {}, extractor, _recording_factory))

    def test_absent_dates_give_no_clause(self) -> None:
        self.assertIsNone(build_date_range_clause("k", "f", {}, _StaticExtractor(), _recording_factory))
        self.assertIsNone(build_date_range_clause("k", "f", {}, None, _recording_factory))


class TestFiltersEqual(unittest.TestCase):
    def test_length_mismatch(self) -> None:
        a = build_filter("terms", False, "k", "f", ["x"])
        self.assertFalse(filters_equal([a], [a, a]))

    def test_equal_by_canonical_form(self) -> None:
        a = build_filter("terms", False, "k", "f", ["x"])
        b = build_filter("terms", False, "k", "f", ["x"])
        self.assertTrue(filters_equal([a], [b]))

    def test_order_sensitive(self) -> None:
        a = build_filter("terms", False, "k", "f", ["x"])
        b = build_filter("range", False, "d", "g", ["2020-01-01", None])
        self.assertFalse(filters_equal([a, b], [b, a]))

    def test_empty_lists_are_equal(self) -> None:
        self.assertTrue(filters_equal([], []))


if __name__ == "__main__":
    unittest.main()
