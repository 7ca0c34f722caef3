"""Data models for stored style definitions."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from layout_styles.styles.categories import StyleCategory


class StyleDefinition(BaseModel):
    """A named, reusable set of properties for one category.

    ``id`` is unique within its category's namespace. Predefined definitions
    (``is_custom=False``) are seeded at registry initialisation and are never
    garbage collected.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    category: StyleCategory
    name: str
    properties: Dict[str, Any] = Field(default_factory=dict)
    is_custom: bool = True
    group: Optional[str] = None  # UI grouping, e.g. "headings", "basic"
    created_at: datetime
    updated_at: Optional[datetime] = None
    duplicated_from: Optional[str] = None
    imported_at: Optional[datetime] = None

    @field_validator("created_at", "updated_at", "imported_at")
    @classmethod
    def ensure_timezone(cls, value: Optional[datetime]) -> Optional[datetime]:
        # Naive timestamps (e.g. from older snapshots) are taken as UTC.
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def to_export_dict(self) -> Dict[str, Any]:
        """JSON-ready camelCase representation used in snapshots."""
        return self.model_dump(mode="json", by_alias=True)


class StyleListItem(BaseModel):
    """A summary item for listing available styles."""

    id: str
    category: StyleCategory
    name: str
    is_custom: bool
    group: Optional[str] = None

    @classmethod
    def from_definition(cls, definition: StyleDefinition) -> "StyleListItem":
        return cls(
            id=definition.id,
            category=definition.category,
            name=definition.name,
            is_custom=definition.is_custom,
            group=definition.group,
        )
