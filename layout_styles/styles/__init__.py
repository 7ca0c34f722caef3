"""Style registry package."""
from layout_styles.styles.categories import StyleCategory
from layout_styles.styles.models import StyleDefinition, StyleListItem
from layout_styles.styles.namespace import StyleNamespace, generate_style_id, utc_now
from layout_styles.styles.properties import (
    BUILT_IN_DEFAULTS,
    PROPERTY_SCHEMAS,
    BorderProperties,
    FillProperties,
    ParagraphProperties,
    TextProperties,
    built_in_defaults,
    validate_properties,
)
from layout_styles.styles.registry import StyleRegistry

__all__ = [
    "StyleCategory",
    "StyleDefinition",
    "StyleListItem",
    "StyleNamespace",
    "StyleRegistry",
    "generate_style_id",
    "utc_now",
    "BUILT_IN_DEFAULTS",
    "PROPERTY_SCHEMAS",
    "TextProperties",
    "ParagraphProperties",
    "BorderProperties",
    "FillProperties",
    "built_in_defaults",
    "validate_properties",
]
