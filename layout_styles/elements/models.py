"""Elements and their per-category style bindings."""

import uuid
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from layout_styles.styles.categories import CategoryLike, StyleCategory


class ElementStyleBinding(BaseModel):
    """An element's link to a stored style plus its local overrides.

    ``local_override`` may be non-empty while ``style_id`` is set; the
    resolver ignores it until the binding is unlinked.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    style_id: Optional[str] = None
    local_override: Dict[str, Any] = Field(default_factory=dict)

    @property
    def is_linked(self) -> bool:
        return self.style_id is not None


def _empty_bindings() -> Dict[StyleCategory, ElementStyleBinding]:
    return {category: ElementStyleBinding() for category in StyleCategory}


# Editor-facing names of the category-free attributes, mapped to field names.
CATEGORY_FREE_ATTRIBUTES: Dict[str, str] = {
    "x": "x",
    "y": "y",
    "width": "width",
    "height": "height",
    "rotation": "rotation",
    "scale": "scale",
    "zIndex": "z_index",
    "z_index": "z_index",
    "visible": "visible",
    "locked": "locked",
}


class Element(BaseModel):
    """A visual element on the layout canvas.

    Elements are created by the layout engine with empty bindings and only
    hold style ids, never the definitions themselves.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    element_type: str = Field(default="text", alias="type")
    x: float = 0
    y: float = 0
    width: float = 100
    height: float = 50
    rotation: float = 0
    scale: float = 1.0
    z_index: int = 0
    opacity: float = 1.0  # set by the layout engine; edits to "opacity" go to the fill style
    visible: bool = True
    locked: bool = False
    bindings: Dict[StyleCategory, ElementStyleBinding] = Field(default_factory=_empty_bindings)
    extra_attributes: Dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def fill_missing_bindings(self) -> "Element":
        for category in StyleCategory:
            if category not in self.bindings:
                self.bindings[category] = ElementStyleBinding()
        return self

    def binding(self, category: CategoryLike) -> ElementStyleBinding:
        return self.bindings[StyleCategory.parse(category)]

    def linked_styles(self) -> Dict[StyleCategory, str]:
        """Style ids currently referenced, keyed by category."""
        return {
            category: binding.style_id
            for category, binding in self.bindings.items()
            if binding.style_id is not None
        }

    def set_attribute(self, name: str, value: Any) -> None:
        """Write a category-free attribute; unknown names go to ``extra_attributes``."""
        field_name = CATEGORY_FREE_ATTRIBUTES.get(name)
        if field_name is not None:
            setattr(self, field_name, value)
        else:
            self.extra_attributes[name] = value

    def get_attribute(self, name: str, default: Any = None) -> Any:
        field_name = CATEGORY_FREE_ATTRIBUTES.get(name)
        if field_name is not None:
            return getattr(self, field_name)
        return self.extra_attributes.get(name, default)
