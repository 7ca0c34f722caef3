"""Which editor properties belong to which style category.

Border and fill editor names carry a prefix the stored schema key does not
(``borderWidth`` is stored as ``width``), so every entry maps a property to a
category and a schema key. Properties absent from the map are
category-free and are written straight onto the element.
"""

from typing import Dict, List, NamedTuple, Optional

from layout_styles.styles.categories import CategoryLike, StyleCategory


class PropertyTarget(NamedTuple):
    category: StyleCategory
    key: str


def _same(category: StyleCategory, *names: str) -> Dict[str, PropertyTarget]:
    return {name: PropertyTarget(category, name) for name in names}


PROPERTY_CATEGORY_MAP: Dict[str, PropertyTarget] = {
    **_same(
        StyleCategory.TEXT,
        "fontFamily",
        "fontSize",
        "color",
        "bold",
        "italic",
        "underline",
        "strikethrough",
        "link",
    ),
    **_same(
        StyleCategory.PARAGRAPH,
        "alignment",
        "verticalAlign",
        "lineHeight",
        "letterSpacing",
        "indent",
        "spaceBefore",
        "spaceAfter",
        "leftSpacing",
        "rightSpacing",
        "firstLineIndent",
        "wordWrap",
        "wordBreak",
    ),
    "borderWidth": PropertyTarget(StyleCategory.BORDER, "width"),
    "borderStyle": PropertyTarget(StyleCategory.BORDER, "style"),
    "borderColor": PropertyTarget(StyleCategory.BORDER, "color"),
    "borderRadius": PropertyTarget(StyleCategory.BORDER, "radius"),
    "borderSides": PropertyTarget(StyleCategory.BORDER, "sides"),
    **_same(
        StyleCategory.BORDER,
        "radiusType",
        "topLeftRadius",
        "topRightRadius",
        "bottomLeftRadius",
        "bottomRightRadius",
    ),
    "fillColor": PropertyTarget(StyleCategory.FILL, "backgroundColor"),
    **_same(
        StyleCategory.FILL,
        "backgroundColor",
        "opacity",
        "gradient",
        "gradientEnabled",
        "gradientType",
        "gradientDirection",
        "gradientStops",
        "pattern",
        "shadow",
    ),
}


def lookup_property(name: str) -> Optional[PropertyTarget]:
    """Category and schema key for an editor property, or None if category-free."""
    return PROPERTY_CATEGORY_MAP.get(name)


def properties_for(category: CategoryLike) -> List[str]:
    """Editor property names that belong to a category."""
    category = StyleCategory.parse(category)
    return [name for name, target in PROPERTY_CATEGORY_MAP.items() if target.category == category]
