"""Effective style resolution.

The renderer calls ``resolve`` for every element and category on each
layout update, so it stays side-effect free and linear in the number of
properties.
"""

from copy import deepcopy
from enum import Enum
from typing import Any, Callable, Dict, Mapping

from layout_styles.elements.models import Element, ElementStyleBinding
from layout_styles.styles.categories import CategoryLike, StyleCategory
from layout_styles.styles.properties import built_in_defaults
from layout_styles.styles.registry import StyleRegistry

DefaultsProvider = Callable[[StyleCategory], Mapping[str, Any]]


class BindingState(str, Enum):
    UNLINKED = "unlinked"
    LINKED = "linked"
    DANGLING = "dangling"  # linked to an id the registry no longer holds


def binding_state(
    category: CategoryLike, binding: ElementStyleBinding, registry: StyleRegistry
) -> BindingState:
    if binding.style_id is None:
        return BindingState.UNLINKED
    if registry.exists(category, binding.style_id):
        return BindingState.LINKED
    return BindingState.DANGLING


def resolve(
    category: CategoryLike,
    binding: ElementStyleBinding,
    registry: StyleRegistry,
    defaults: DefaultsProvider = built_in_defaults,
) -> Dict[str, Any]:
    """
    Compute the effective property map of one binding.

    A binding linked to an existing definition resolves to that
    definition's properties verbatim; local overrides are ignored. An
    unlinked binding, or one whose style id no longer resolves, resolves
    to the category defaults overlaid with the local overrides.

    Returns:
        A new dict the caller may modify freely
    """
    category = StyleCategory.parse(category)
    if binding.style_id is not None:
        definition = registry.get(category, binding.style_id)
        if definition is not None:
            return deepcopy(definition.properties)

    merged = dict(defaults(category))
    merged.update(binding.local_override)
    return deepcopy(merged)


def resolve_element(
    element: Element,
    registry: StyleRegistry,
    defaults: DefaultsProvider = built_in_defaults,
) -> Dict[StyleCategory, Dict[str, Any]]:
    """Effective properties of every category of an element."""
    return {
        category: resolve(category, element.bindings[category], registry, defaults)
        for category in StyleCategory
    }
