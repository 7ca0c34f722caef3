"""Tests for the editor property to category map."""

from layout_styles.editing import PROPERTY_CATEGORY_MAP, PropertyTarget, lookup_property, properties_for
from layout_styles.elements import CATEGORY_FREE_ATTRIBUTES
from layout_styles.styles import StyleCategory
from layout_styles.styles.properties import schema_keys


def test_prefixed_border_and_fill_names():
    assert lookup_property("borderWidth") == PropertyTarget(StyleCategory.BORDER, "width")
    assert lookup_property("borderSides") == PropertyTarget(StyleCategory.BORDER, "sides")
    assert lookup_property("fillColor") == PropertyTarget(StyleCategory.FILL, "backgroundColor")


def test_plain_names_map_to_same_key():
    assert lookup_property("fontSize") == (StyleCategory.TEXT, "fontSize")
    assert lookup_property("lineHeight") == (StyleCategory.PARAGRAPH, "lineHeight")
    assert lookup_property("opacity") == (StyleCategory.FILL, "opacity")


def test_category_free_names_are_absent():
    for name in ("x", "y", "width", "height", "rotation", "zIndex", "content"):
        assert lookup_property(name) is None


def test_element_attributes_do_not_shadow_style_properties():
    assert not set(CATEGORY_FREE_ATTRIBUTES) & set(PROPERTY_CATEGORY_MAP)



def test_every_target_is_a_schema_key():
    for name, target in PROPERTY_CATEGORY_MAP.items():
        assert target.key in schema_keys(target.category), name


def test_properties_for_category():
    fill = properties_for("fill")
    assert "fillColor" in fill
    assert "opacity" in fill
    assert "fontSize" not in fill
