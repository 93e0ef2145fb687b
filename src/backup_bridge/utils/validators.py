"""
Validation utilities for Backup Bridge.

Provides checks for required fields in raw backup blocks and the explicit
option merge used by the source mappers.
"""

from collections.abc import Mapping
from typing import Any, Optional

from ..exceptions import ConfigurationError, MissingKeyError


def is_blank(value: Any) -> bool:
    """Check if a value counts as not configured (None or empty)."""
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict)) and not value:
        return True
    return False


def validate_required_fields(
    block: Mapping[str, Any], fields: tuple[str, ...]
) -> tuple[bool, Optional[str]]:
    """
    Validate that a block holds non-blank values for the given fields.

    Args:
        block: Raw configuration block
        fields: Field names that must be present and non-blank

    Returns:
        Tuple of (is_valid, name of the first missing field)
    """
    for field in fields:
        if is_blank(block.get(field)):
            return False, field
    return True, None


def require_mapping(value: Any, path: str) -> Mapping[str, Any]:
    """
    Ensure a raw value is a mapping.

    Raises:
        ConfigurationError: If the value is not a mapping
    """
    if not isinstance(value, Mapping):
        raise ConfigurationError(
            f"Configuration at '{path}' must be a mapping, got {type(value).__name__}"
        )
    return value


def require_key(block: Mapping[str, Any], key: str, path: str) -> Any:
    """
    Get a required key from a raw block.

    Args:
        block: Raw configuration block
        key: Key to read
        path: Dotted path of the block, used in error messages

    Raises:
        MissingKeyError: If the key is absent
    """
    if key not in block:
        raise MissingKeyError(f"{path}.{key}")
    return block[key]


def merge_options(
    defaults: Mapping[str, Any], overrides: Optional[Mapping[str, Any]]
) -> dict[str, Any]:
    """
    Merge caller supplied options over computed defaults.

    Every default key is copied first, then every override key is laid on
    top, so the caller wins for overlapping keys.
    """
    merged = dict(defaults)
    for key, value in (overrides or {}).items():
        merged[key] = value
    return merged
