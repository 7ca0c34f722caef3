"""Conflict detection and the edit protocol."""
from layout_styles.editing.confirmation import (
    CallbackConfirmation,
    ConfirmationProvider,
    StaticConfirmation,
)
from layout_styles.editing.outcomes import (
    ConflictInfo,
    EditAction,
    EditingMode,
    EditMode,
    EditOutcome,
)
from layout_styles.editing.property_map import (
    PROPERTY_CATEGORY_MAP,
    PropertyTarget,
    lookup_property,
    properties_for,
)
from layout_styles.editing.protocol import EditProtocol

__all__ = [
    "CallbackConfirmation",
    "ConfirmationProvider",
    "StaticConfirmation",
    "ConflictInfo",
    "EditAction",
    "EditingMode",
    "EditMode",
    "EditOutcome",
    "PROPERTY_CATEGORY_MAP",
    "PropertyTarget",
    "lookup_property",
    "properties_for",
    "EditProtocol",
]
