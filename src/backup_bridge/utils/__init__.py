"""Utility functions for Backup Bridge."""

from .validators import (
    is_blank,
    merge_options,
    require_key,
    require_mapping,
    validate_required_fields,
)

__all__ = [
    "is_blank",
    "merge_options",
    "require_key",
    "require_mapping",
    "validate_required_fields",
]
