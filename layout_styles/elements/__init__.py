"""Elements, style bindings and effective style resolution."""
from layout_styles.elements.models import CATEGORY_FREE_ATTRIBUTES, Element, ElementStyleBinding
from layout_styles.elements.resolver import BindingState, binding_state, resolve, resolve_element

__all__ = [
    "CATEGORY_FREE_ATTRIBUTES",
    "Element",
    "ElementStyleBinding",
    "BindingState",
    "binding_state",
    "resolve",
    "resolve_element",
]
