"""Edit protocol: routes a property write to the element, its local
overrides or the shared style definition it is linked to.

Per category binding the states are Unlinked and Linked:

    Unlinked --edit--------------------------> Unlinked
    Linked   --edit(auto_unlink | accepted)--> Unlinked
    Linked   --edit(update_shared)-----------> Linked
    Linked   --edit(cancelled | silent)------> Linked   (no mutation)
    Linked   --unlink------------------------> Unlinked
    Unlinked --apply_style-------------------> Linked
"""

from typing import Any, List, Optional, Union

from layout_styles.editing.confirmation import ConfirmationProvider
from layout_styles.editing.outcomes import (
    ConflictInfo,
    EditAction,
    EditingMode,
    EditMode,
    EditOutcome,
)
from layout_styles.editing.property_map import PROPERTY_CATEGORY_MAP, lookup_property
from layout_styles.elements.models import Element, ElementStyleBinding
from layout_styles.exceptions import ConfigurationError
from layout_styles.logger import DefaultLogger, Logger
from layout_styles.styles.categories import CategoryLike, StyleCategory
from layout_styles.styles.properties import validate_properties
from layout_styles.styles.registry import StyleRegistry


class EditProtocol:
    """Applies UI edits to elements while keeping style links consistent."""

    def __init__(
        self,
        registry: StyleRegistry,
        logger: Optional[Logger] = None,
        confirmation: Optional[ConfirmationProvider] = None,
        default_mode: Union[EditMode, str] = EditMode.INTERACTIVE,
    ) -> None:
        """
        Args:
            registry: Registry holding the linked style definitions
            logger: Logger instance
            confirmation: Dialog provider used by interactive edits
            default_mode: Mode used when ``edit`` is called without one
        """
        self.registry = registry
        self.logger = logger or DefaultLogger()
        self.confirmation = confirmation
        self.default_mode = EditMode.parse(default_mode)

    # ------------------------------------------------------------------
    # Conflict detection
    # ------------------------------------------------------------------

    def _describe(self, category: StyleCategory, style_id: str) -> ConflictInfo:
        definition = self.registry.get(category, style_id)
        return ConflictInfo(
            category=category,
            style_id=style_id,
            style_name=definition.name if definition else None,
            is_custom=definition.is_custom if definition else None,
        )

    def conflict_info(self, element: Element, property_name: str) -> Optional[ConflictInfo]:
        """Describe the linked style a write to ``property_name`` would touch, if any."""
        target = lookup_property(property_name)
        if target is None:
            return None
        style_id = element.bindings[target.category].style_id
        if style_id is None:
            return None
        return self._describe(target.category, style_id)

    def has_conflict(self, element: Element, property_name: str) -> bool:
        return self.conflict_info(element, property_name) is not None

    def conflicting_properties(self, element: Element) -> List[str]:
        """Editor properties whose category is currently linked on this element."""
        return [
            name
            for name, target in PROPERTY_CATEGORY_MAP.items()
            if element.bindings[target.category].is_linked
        ]

    def applied_styles(self, element: Element) -> List[ConflictInfo]:
        return [
            self._describe(category, style_id)
            for category, style_id in element.linked_styles().items()
        ]

    def editing_mode(self, element: Element) -> EditingMode:
        applied = self.applied_styles(element)
        if not applied:
            return EditingMode.MANUAL
        if any(info.is_custom for info in applied):
            return EditingMode.SMART
        return EditingMode.PROTECTED

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    def edit(
        self,
        element: Element,
        property_name: str,
        value: Any,
        mode: Optional[Union[EditMode, str]] = None,
    ) -> EditOutcome:
        """
        Write one property of an element.

        Args:
            element: Element being edited
            property_name: Editor property name (e.g. "fontSize", "borderWidth", "x")
            value: New value
            mode: Conflict resolution for linked categories (default: ``default_mode``)

        Returns:
            EditOutcome describing what happened

        Raises:
            PropertyValidationError: If the value violates the category schema
            ConfigurationError: If an interactive edit has no confirmation provider
        """
        target = lookup_property(property_name)
        if target is None:
            element.set_attribute(property_name, value)
            self.logger.debug("Direct edit", element_id=element.id, property=property_name)
            return EditOutcome(action=EditAction.DIRECT, property_name=property_name, value=value)

        category, key = target
        value = validate_properties(category, {key: value})[key]
        binding = element.bindings[category]

        if binding.style_id is None:
            binding.local_override[key] = value
            self.logger.debug(
                "Local override written",
                element_id=element.id,
                category=category.value,
                key=key,
            )
            return EditOutcome(
                action=EditAction.LOCAL_OVERRIDE, property_name=property_name, value=value
            )

        conflict = self._describe(category, binding.style_id)
        mode = EditMode.parse(mode) if mode is not None else self.default_mode

        if mode == EditMode.SILENT:
            return EditOutcome(
                action=EditAction.CONFLICT_DETECTED,
                property_name=property_name,
                value=value,
                conflict=conflict,
            )

        if mode == EditMode.AUTO_UNLINK:
            self._unlink_and_write(element, binding, conflict, key, value)
            return EditOutcome(
                action=EditAction.AUTO_UNLINK,
                property_name=property_name,
                value=value,
                conflict=conflict,
            )

        if mode == EditMode.INTERACTIVE:
            if self.confirmation is None:
                raise ConfigurationError(
                    "Interactive edit requires a confirmation provider",
                    details={"property": property_name, "style_id": conflict.style_id},
                )
            if not self.confirmation.confirm(conflict, property_name, value):
                self.logger.info(
                    "Edit cancelled to keep linked style",
                    element_id=element.id,
                    category=category.value,
                    style_id=conflict.style_id,
                )
                return EditOutcome(
                    action=EditAction.CANCELLED,
                    property_name=property_name,
                    value=value,
                    conflict=conflict,
                )
            self._unlink_and_write(element, binding, conflict, key, value)
            return EditOutcome(
                action=EditAction.USER_UNLINK,
                property_name=property_name,
                value=value,
                conflict=conflict,
            )

        # EditMode.UPDATE_SHARED: every element linked to the style sees the change.
        if not self.registry.update(category, binding.style_id, {key: value}):
            return EditOutcome(
                action=EditAction.STYLE_NOT_FOUND,
                property_name=property_name,
                value=value,
                conflict=conflict,
            )
        self.logger.info(
            "Shared style updated from element edit",
            element_id=element.id,
            category=category.value,
            style_id=binding.style_id,
            key=key,
        )
        return EditOutcome(
            action=EditAction.STYLE_UPDATED,
            property_name=property_name,
            value=value,
            conflict=conflict,
        )

    def _unlink_and_write(
        self,
        element: Element,
        binding: ElementStyleBinding,
        conflict: ConflictInfo,
        key: str,
        value: Any,
    ) -> None:
        binding.style_id = None
        binding.local_override[key] = value
        self.logger.info(
            "Style unlinked for manual edit",
            element_id=element.id,
            category=conflict.category.value,
            style_id=conflict.style_id,
        )

    # ------------------------------------------------------------------
    # Linking
    # ------------------------------------------------------------------

    def apply_style(self, element: Element, category: CategoryLike, style_id: str) -> bool:
        """Link a category of the element to a stored style. False if the style is unknown."""
        category = StyleCategory.parse(category)
        if not self.registry.exists(category, style_id):
            self.logger.warning(
                "Cannot apply unknown style",
                element_id=element.id,
                category=category.value,
                style_id=style_id,
            )
            return False
        element.bindings[category].style_id = style_id
        self.logger.debug(
            "Style applied", element_id=element.id, category=category.value, style_id=style_id
        )
        return True

    def unlink(self, element: Element, category: CategoryLike) -> bool:
        """Clear one category's link. Returns False if it was not linked."""
        binding = element.bindings[StyleCategory.parse(category)]
        if binding.style_id is None:
            return False
        binding.style_id = None
        return True

    def unlink_all(self, element: Element) -> List[StyleCategory]:
        """
        Clear every link of the element.

        The former linked values are NOT copied into the local overrides:
        afterwards each category resolves to defaults plus whatever
        overrides the element already had.

        Returns:
            Categories that were linked before the call
        """
        unlinked = [category for category in StyleCategory if self.unlink(element, category)]
        if unlinked:
            self.logger.info(
                "All styles unlinked",
                element_id=element.id,
                categories=[c.value for c in unlinked],
            )
        return unlinked
