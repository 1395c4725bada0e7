from __future__ import annotations

"""Public configuration API for FacetFilter."""

from FacetFilter.config.app import (
    AppConfig,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
)
from FacetFilter.config.fields import FieldsConfig
from FacetFilter.config.output import OutputConfig
from FacetFilter.config.runtime import RuntimeConfig
from FacetFilter.config.selection import SelectionConfig

__all__ = [
    "RuntimeConfig",
    "FieldsConfig",
    "SelectionConfig",
    "OutputConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "parse_config_dict",
]
