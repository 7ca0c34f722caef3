"""Style session: one registry plus the elements that link to it."""

from typing import Any, Dict, List, Mapping, Optional, Union

from layout_styles.collection import cleanup_unused, find_unused
from layout_styles.config import Config
from layout_styles.editing import (
    ConfirmationProvider,
    EditingMode,
    EditMode,
    EditOutcome,
    EditProtocol,
)
from layout_styles.elements import Element, resolve, resolve_element
from layout_styles.elements.resolver import DefaultsProvider
from layout_styles.logger import Logger
from layout_styles.styles import StyleCategory, StyleRegistry, built_in_defaults
from layout_styles.styles.categories import CategoryLike
from layout_styles.transfer import StyleSnapshot, export_snapshot, import_snapshot


class StyleSession:
    """Application context of one editing session.

    Owns the style registry, the element set and the edit protocol, and
    exposes element-id based operations for the UI layer. Element ids
    that are not in the session produce None or False and a warning.
    """

    def __init__(
        self,
        registry: StyleRegistry,
        logger: Optional[Logger] = None,
        confirmation: Optional[ConfirmationProvider] = None,
        default_mode: Optional[Union[EditMode, str]] = None,
        defaults: DefaultsProvider = built_in_defaults,
    ) -> None:
        """
        Initialize the style session.

        Args:
            registry: Style registry owned by this session
            logger: Logger instance
            confirmation: Dialog provider for interactive edits
            default_mode: Edit mode used when none is given (default: from Config)
            defaults: Built-in defaults used by the resolver
        """
        self.registry = registry
        self.logger = logger or registry.logger
        self.defaults = defaults
        self.editor = EditProtocol(
            registry,
            logger=self.logger,
            confirmation=confirmation,
            default_mode=default_mode or Config.get_edit_mode(self.logger),
        )
        self._elements: Dict[str, Element] = {}

    # ------------------------------------------------------------------
    # Elements
    # ------------------------------------------------------------------

    def add_element(self, element: Optional[Element] = None, **attributes: Any) -> Element:
        """Register an element; builds one from ``attributes`` if none is given."""
        if element is None:
            element = Element(**attributes)
        self._elements[element.id] = element
        self.logger.debug("Element added", element_id=element.id, type=element.element_type)
        return element

    def get_element(self, element_id: str) -> Optional[Element]:
        return self._elements.get(element_id)

    def _require_element(self, element_id: str, operation: str) -> Optional[Element]:
        element = self._elements.get(element_id)
        if element is None:
            self.logger.warning("Element not found", element_id=element_id, operation=operation)
        return element

    def remove_element(self, element_id: str) -> bool:
        """Remove an element. Styles it linked to are left for ``cleanup_unused``."""
        if self._require_element(element_id, "remove") is None:
            return False
        del self._elements[element_id]
        return True

    def list_elements(self) -> List[Element]:
        return list(self._elements.values())

    # ------------------------------------------------------------------
    # Linking and editing
    # ------------------------------------------------------------------

    def apply_style(self, element_id: str, category: CategoryLike, style_id: str) -> bool:
        element = self._require_element(element_id, "apply_style")
        if element is None:
            return False
        return self.editor.apply_style(element, category, style_id)

    def unlink_style(self, element_id: str, category: CategoryLike) -> bool:
        element = self._require_element(element_id, "unlink_style")
        if element is None:
            return False
        return self.editor.unlink(element, category)

    def unlink_all(self, element_id: str) -> List[StyleCategory]:
        element = self._require_element(element_id, "unlink_all")
        if element is None:
            return []
        return self.editor.unlink_all(element)

    def edit_property(
        self,
        element_id: str,
        property_name: str,
        value: Any,
        mode: Optional[Union[EditMode, str]] = None,
    ) -> Optional[EditOutcome]:
        """Run the edit protocol for one property. None if the element is unknown."""
        element = self._require_element(element_id, "edit_property")
        if element is None:
            return None
        return self.editor.edit(element, property_name, value, mode=mode)

    def editing_mode(self, element_id: str) -> Optional[EditingMode]:
        element = self._require_element(element_id, "editing_mode")
        if element is None:
            return None
        return self.editor.editing_mode(element)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve(self, element_id: str, category: CategoryLike) -> Optional[Dict[str, Any]]:
        element = self._require_element(element_id, "resolve")
        if element is None:
            return None
        return resolve(category, element.binding(category), self.registry, self.defaults)

    def resolve_element(self, element_id: str) -> Optional[Dict[StyleCategory, Dict[str, Any]]]:
        element = self._require_element(element_id, "resolve_element")
        if element is None:
            return None
        return resolve_element(element, self.registry, self.defaults)

    # ------------------------------------------------------------------
    # Style operations
    # ------------------------------------------------------------------

    def create_style_from_element(
        self,
        element_id: str,
        category: CategoryLike,
        name: Optional[str] = None,
        group: Optional[str] = None,
    ) -> Optional[str]:
        """
        Save an element's current look for one category as a new custom style.

        The element's effective properties are copied into the new
        definition and the element is linked to it.

        Returns:
            The new style id, or None if the element is unknown
        """
        element = self._require_element(element_id, "create_style_from_element")
        if element is None:
            return None
        category = StyleCategory.parse(category)
        properties = resolve(category, element.binding(category), self.registry, self.defaults)
        style_id = self.registry.create(
            category,
            properties,
            name or f"{category.label} style",
            group=group,
        )
        self.editor.apply_style(element, category, style_id)
        return style_id

    def delete_style(self, category: CategoryLike, style_id: str) -> bool:
        """Delete a style. Elements still linked to it fall back to their overrides."""
        in_use = self.elements_using_style(category, style_id)
        if in_use:
            self.logger.warning(
                "Deleting style that is still linked",
                category=StyleCategory.parse(category).value,
                style_id=style_id,
                elements=len(in_use),
            )
        return self.registry.delete(category, style_id)

    def duplicate_style(
        self, category: CategoryLike, style_id: str, new_name: Optional[str] = None
    ) -> Optional[str]:
        return self.registry.duplicate(category, style_id, new_name)

    def find_unused(self) -> Dict[StyleCategory, List[str]]:
        return find_unused(self.registry, self._elements.values())

    def cleanup_unused(self) -> int:
        return cleanup_unused(self.registry, self._elements.values(), self.logger)

    def is_style_in_use(self, category: CategoryLike, style_id: str) -> bool:
        return bool(self.elements_using_style(category, style_id))

    def elements_using_style(self, category: CategoryLike, style_id: str) -> List[Element]:
        category = StyleCategory.parse(category)
        return [e for e in self._elements.values() if e.bindings[category].style_id == style_id]

    # ------------------------------------------------------------------
    # Transfer
    # ------------------------------------------------------------------

    def export_styles(self) -> StyleSnapshot:
        return export_snapshot(self.registry)

    def import_styles(self, data: Union[str, bytes, Mapping[str, Any]]) -> int:
        return import_snapshot(self.registry, data, self.logger)

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    def element_stats(self) -> Dict[str, Any]:
        """Per-category count of linked elements plus the editing mode breakdown."""
        linked = {category.value: 0 for category in StyleCategory}
        modes = {mode.value: 0 for mode in EditingMode}
        for element in self._elements.values():
            for category in element.linked_styles():
                linked[category.value] += 1
            modes[self.editor.editing_mode(element).value] += 1
        return {
            "total_elements": len(self._elements),
            "linked_by_category": linked,
            "editing_modes": modes,
        }
