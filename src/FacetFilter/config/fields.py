"""Field mapping configuration.

Each entry under ``fields`` maps a logical selection key to an index field:

    fields:
      status:
        field: status.keyword
      created:
        field: created_at
        type: date

``type`` defaults to ``string``. An entry without ``field`` is accepted; its
key is skipped during derivation.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from FacetFilter.config.common import expect_optional_str, expect_str, get_optional_value, get_section
from FacetFilter.core.selection import FieldConfig

_ALLOWED_TYPES = {"string", "date"}
_ALLOWED_KEYS = {"field", "type"}


@dataclass(frozen=True, slots=True)
class FieldsConfig:
    """Validated field mappings keyed by logical selection key."""

    fields: Mapping[str, FieldConfig]

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))


def load_fields(raw: Mapping[str, Any]) -> FieldsConfig:
    """Load field mappings from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed field mappings. Missing ``fields`` section gives no mappings.

    Raises:
        TypeError: If an entry or its values have the wrong type.
        ValueError: If an entry has unknown keys.
    """
    section = get_section(raw, "fields", required=False)
    fields: dict[str, FieldConfig] = {}
    for key, value in section.items():
        if not isinstance(key, str):
            raise TypeError("fields keys must be strings")
        fields[key] = parse_field_config(value, f"fields.{key}")
    return FieldsConfig(fields=fields)


def check_fields(config: FieldsConfig) -> None:
    """Validate field mapping constraints.

    Raises:
        ValueError: If a field type is unsupported.
    """
    for key, field_config in config.fields.items():
        if field_config.type not in _ALLOWED_TYPES:
            raise ValueError(f"fields.{key}.type must be one of {sorted(_ALLOWED_TYPES)}")


def parse_field_config(value: Any, config_key: str) -> FieldConfig:
    """Parse one field mapping entry.

    A bare string is shorthand for ``{field: <string>}``.
    """
    if isinstance(value, str):
        return FieldConfig(field=value.strip() or None)
    if not isinstance(value, Mapping):
        raise TypeError(f"{config_key} must be an object or a field name")

    unknown = {str(k) for k in value.keys()} - _ALLOWED_KEYS
    if unknown:
        raise ValueError(f"{config_key} has unknown keys: {sorted(unknown)}")

    field = expect_optional_str(value.get("field"), f"{config_key}.field")
    field_type = expect_str(get_optional_value(value, "type", "string"), f"{config_key}.type").strip().lower()
    return FieldConfig(field=(field or "").strip() or None, type=field_type)
