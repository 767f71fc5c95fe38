"""Theme schema models."""

from bltheme.themes.schema.models import (
    REQUIRED_FIELDS,
    RegistryEntry,
    RegistryLockEntry,
    ThemeMetadata,
    ThemeTag,
    ValidationResult,
    is_valid_theme_id,
    is_valid_version,
)

__all__ = [
    "REQUIRED_FIELDS",
    "RegistryEntry",
    "RegistryLockEntry",
    "ThemeMetadata",
    "ThemeTag",
    "ValidationResult",
    "is_valid_theme_id",
    "is_valid_version",
]
