"""Style related exceptions."""
from typing import Any, Dict, List, Optional

from layout_styles.exceptions.base import ResourceNotFoundError, ValidationError


class StyleNotFoundError(ResourceNotFoundError):
    """Raised when a style cannot be found."""

    def __init__(self, style_id: str, category: Optional[str] = None,
                 available_styles: Optional[List[str]] = None):
        """
        Args:
            style_id: ID of the style that was not found
            category: Category namespace where the style was expected
            available_styles: List of available style ids
        """
        category_text = f" in category '{category}'" if category else ""

        available_text = ""
        if available_styles:
            style_list = ", ".join(available_styles)
            available_text = f" Available styles{category_text}: {style_list}."

        super().__init__(
            code="STYLE_NOT_FOUND",
            message=f"Style '{style_id}' not found{category_text}.{available_text}",
            details={"style_id": style_id, "category": category},
        )
        self.style_id = style_id


class UnknownCategoryError(ValidationError):
    """Raised when a category name is not one of text, paragraph, border, fill."""

    def __init__(self, category: Any, valid: List[str]):
        super().__init__(
            code="UNKNOWN_CATEGORY",
            message=f"Unknown style category '{category}'. Valid categories: {', '.join(valid)}.",
            details={"category": str(category), "valid": valid},
        )


class PropertyValidationError(ValidationError):
    """Raised when property values violate a category schema."""

    def __init__(self, category: str, errors: List[Dict[str, Any]]):
        summary = "; ".join(f"{e.get('field')}: {e.get('message')}" for e in errors)
        super().__init__(
            code="INVALID_PROPERTIES",
            message=f"Invalid {category} style properties: {summary}",
            details={"category": category, "errors": errors},
        )
        self.errors = errors


class UnknownEditModeError(ValidationError):
    """Raised when an edit mode name is not recognised."""

    def __init__(self, mode: Any, valid: List[str]):
        super().__init__(
            code="UNKNOWN_EDIT_MODE",
            message=f"Unknown edit mode '{mode}'. Valid modes: {', '.join(valid)}.",
            details={"mode": str(mode), "valid": valid},
        )
