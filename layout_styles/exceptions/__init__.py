"""Exceptions raised by layout_styles.

Lookups (get/update/delete/duplicate) never raise; they return None or False.
Exceptions are reserved for caller mistakes and failed imports.
"""

from layout_styles.exceptions.base import (
    LayoutStylesError,
    ValidationError,
    ResourceNotFoundError,
    ConfigurationError,
)
from layout_styles.exceptions.style import (
    StyleNotFoundError,
    UnknownCategoryError,
    PropertyValidationError,
    UnknownEditModeError,
)
from layout_styles.exceptions.transfer import StyleImportError

__all__ = [
    "LayoutStylesError",
    "ValidationError",
    "ResourceNotFoundError",
    "ConfigurationError",
    "StyleNotFoundError",
    "UnknownCategoryError",
    "PropertyValidationError",
    "UnknownEditModeError",
    "StyleImportError",
]
