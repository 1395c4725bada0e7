"""Output domain configuration for rendering derived filters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from FacetFilter.config.common import expect_bool, expect_int, get_optional_value, get_section


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Output configuration.

    Attributes:
        wrap_query: Wrap the clauses in a ``bool.filter`` query body.
        indent: JSON indentation; 0 prints compact single-line JSON.
    """

    wrap_query: bool
    indent: int


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load output domain config from raw mapping.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "output", required=False)
    return OutputConfig(
        wrap_query=expect_bool(get_optional_value(section, "wrap_query", True), "output.wrap_query"),
        indent=expect_int(get_optional_value(section, "indent", 2), "output.indent"),
    )


def check_output(config: OutputConfig) -> None:
    """Validate output domain constraints."""
    if config.indent < 0:
        raise ValueError("output.indent must be >= 0")
