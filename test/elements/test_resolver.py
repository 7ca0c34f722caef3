"""Tests for effective style resolution."""
from __future__ import annotations

from layout_styles.elements import (
    BindingState,
    Element,
    ElementStyleBinding,
    binding_state,
    resolve,
    resolve_element,
)
from layout_styles.styles import StyleCategory, StyleRegistry, built_in_defaults


def test_unlinked_resolves_to_defaults_plus_overrides(registry: StyleRegistry) -> None:
    binding = ElementStyleBinding(local_override={"fontSize": 22, "bold": True})

    resolved = resolve("text", binding, registry)

    expected = built_in_defaults("text")
    expected.update(fontSize=22, bold=True)
    assert resolved == expected


def test_empty_binding_resolves_to_defaults(registry: StyleRegistry) -> None:
    assert resolve("paragraph", ElementStyleBinding(), registry) == built_in_defaults("paragraph")


def test_linked_ignores_local_overrides(registry: StyleRegistry) -> None:
    binding = ElementStyleBinding(style_id="heading1", local_override={"fontSize": 99, "color": "#ff0000"})

    resolved = resolve(StyleCategory.TEXT, binding, registry)

    assert resolved == registry.get("text", "heading1").properties
    assert resolved["fontSize"] == 24


def test_linked_does_not_merge_defaults(registry: StyleRegistry) -> None:
    resolved = resolve("fill", ElementStyleBinding(style_id="primary"), registry)
    assert "gradientEnabled" not in resolved


def test_dangling_link_falls_back(registry: StyleRegistry) -> None:
    style_id = registry.create("border", {"width": 5}, "Thick")
    binding = ElementStyleBinding(style_id=style_id, local_override={"color": "#123456"})
    registry.delete("border", style_id)

    resolved = resolve("border", binding, registry)

    assert resolved["width"] == 1
    assert resolved["color"] == "#123456"
    assert binding.style_id == style_id


def test_binding_states(registry: StyleRegistry) -> None:
    assert binding_state("fill", ElementStyleBinding(), registry) == BindingState.UNLINKED
    assert binding_state("fill", ElementStyleBinding(style_id="light"), registry) == BindingState.LINKED
    assert binding_state("fill", ElementStyleBinding(style_id="gone"), registry) == BindingState.DANGLING


def test_resolved_map_is_a_copy(registry: StyleRegistry) -> None:
    resolved = resolve("border", ElementStyleBinding(style_id="simple"), registry)
    resolved["sides"].append("extra")
    resolved["width"] = 100

    simple = registry.get("border", "simple").properties
    assert simple["width"] == 1
    assert simple["sides"] == ["top", "right", "bottom", "left"]


def test_override_values_are_copied(registry: StyleRegistry) -> None:
    binding = ElementStyleBinding(local_override={"sides": ["top"]})
    resolve("border", binding, registry)["sides"].append("left")
    assert binding.local_override["sides"] == ["top"]


def test_custom_defaults_provider(registry: StyleRegistry) -> None:
    resolved = resolve("text", ElementStyleBinding(), registry, defaults=lambda category: {"fontSize": 9})
    assert resolved == {"fontSize": 9}


def test_resolve_element_covers_every_category(registry: StyleRegistry) -> None:
    element = Element()
    element.bindings[StyleCategory.FILL].style_id = "light"

    resolved = resolve_element(element, registry)

    assert set(resolved) == set(StyleCategory)
    assert resolved[StyleCategory.FILL]["backgroundColor"] == "#f9fafb"
    assert resolved[StyleCategory.TEXT] == built_in_defaults("text")


def test_resolution_is_repeatable(registry: StyleRegistry) -> None:
    binding = ElementStyleBinding(style_id="centered")
    assert resolve("paragraph", binding, registry) == resolve("paragraph", binding, registry)


def test_snake_case_style_properties_resolve_without_duplicates(registry: StyleRegistry) -> None:
    style_id = registry.create("text", {"font_size": 30, "font_family": "Inter"}, "Snake")

    resolved = resolve("text", ElementStyleBinding(style_id=style_id), registry)

    assert resolved == {"fontSize": 30, "fontFamily": "Inter"}
