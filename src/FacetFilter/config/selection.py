"""Selection extraction configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from FacetFilter.config.common import expect_bool, expect_str, get_optional_value, get_section


@dataclass(frozen=True, slots=True)
class SelectionConfig:
    """Callback slot names and default-extractor behavior."""

    terms_slot: str
    dates_slot: str
    parse_dates: bool


def load_selection(raw: Mapping[str, Any]) -> SelectionConfig:
    """Load selection config; every key is optional."""
    section = get_section(raw, "selection", required=False)
    return SelectionConfig(
        terms_slot=expect_str(get_optional_value(section, "terms_slot", "terms"), "selection.terms_slot").strip(),
        dates_slot=expect_str(get_optional_value(section, "dates_slot", "dates"), "selection.dates_slot").strip(),
        parse_dates=expect_bool(get_optional_value(section, "parse_dates", False), "selection.parse_dates"),
    )


def check_selection(config: SelectionConfig) -> None:
    """Validate selection constraints."""
    if not config.terms_slot:
        raise ValueError("selection.terms_slot must not be empty")
    if not config.dates_slot:
        raise ValueError("selection.dates_slot must not be empty")
