"""Per-category CRUD store for style definitions."""

import itertools
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional

from layout_styles.logger import DefaultLogger, Logger
from layout_styles.styles.categories import StyleCategory
from layout_styles.styles.models import StyleDefinition
from layout_styles.styles.properties import validate_properties

Clock = Callable[[], datetime]
IdFactory = Callable[[str], str]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def generate_style_id(prefix: str) -> str:
    """Return ``{prefix}_{uuid4 hex}``."""
    return f"{prefix}_{uuid.uuid4().hex}"


class StyleNamespace:
    """Stores the style definitions of a single category.

    Every stored definition is replaced, never mutated in place, so a
    definition object handed out by ``get`` is a consistent snapshot.
    """

    def __init__(
        self,
        category: StyleCategory,
        logger: Optional[Logger] = None,
        clock: Clock = utc_now,
        id_factory: IdFactory = generate_style_id,
    ) -> None:
        """
        Args:
            category: Category this namespace holds
            logger: Logger instance
            clock: Source of creation/update timestamps
            id_factory: Builds a new id from a prefix
        """
        self.category = category
        self.logger = logger or DefaultLogger()
        self._clock = clock
        self._id_factory = id_factory
        self._styles: Dict[str, StyleDefinition] = {}
        # Insertion sequence: stable order for predefined styles and a
        # tie-breaker for custom styles created at the same instant.
        self._sequence: Dict[str, int] = {}
        self._counter = itertools.count()

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __contains__(self, style_id: object) -> bool:
        return style_id in self._styles

    def __len__(self) -> int:
        return len(self._styles)

    def __iter__(self) -> Iterator[StyleDefinition]:
        return iter(list(self._styles.values()))

    def ids(self) -> List[str]:
        return list(self._styles)

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def generate_id(self, prefix: Optional[str] = None) -> str:
        """Generate an id that is not used in this namespace yet."""
        prefix = prefix or self.category.value
        style_id = self._id_factory(prefix)
        while style_id in self._styles:
            style_id = self._id_factory(prefix)
        return style_id

    def create(
        self,
        properties: Mapping[str, Any],
        name: str,
        is_custom: bool = True,
        group: Optional[str] = None,
    ) -> str:
        """
        Create a new style definition.

        Args:
            properties: Property map, validated against the category schema
            name: Display name
            is_custom: False only for predefined styles
            group: Optional UI grouping

        Returns:
            The generated style id

        Raises:
            PropertyValidationError: If a property value is invalid
        """
        validated = validate_properties(self.category, properties)
        style_id = self.generate_id()
        definition = StyleDefinition(
            id=style_id,
            category=self.category,
            name=name,
            properties=validated,
            is_custom=is_custom,
            group=group,
            created_at=self._clock(),
        )
        self.put(definition)
        self.logger.info(
            "Style created",
            category=self.category.value,
            style_id=style_id,
            style_name=name,
            custom=is_custom,
        )
        return style_id

    def put(self, definition: StyleDefinition) -> None:
        """Store a definition verbatim, replacing any definition with the same id."""
        if definition.id not in self._sequence:
            self._sequence[definition.id] = next(self._counter)
        self._styles[definition.id] = definition

    def get(self, style_id: Optional[str]) -> Optional[StyleDefinition]:
        """Return the definition for ``style_id`` or None."""
        if style_id is None:
            return None
        return self._styles.get(style_id)

    def update(
        self,
        style_id: str,
        properties: Optional[Mapping[str, Any]] = None,
        name: Optional[str] = None,
    ) -> bool:
        """
        Merge partial properties (and optionally a new name) into a definition.

        Returns:
            True if updated, False if the id is unknown

        Raises:
            PropertyValidationError: If a property value is invalid
        """
        current = self._styles.get(style_id)
        if current is None:
            self.logger.warning(
                "Style not found for update", category=self.category.value, style_id=style_id
            )
            return False

        changes: Dict[str, Any] = {"updated_at": self._clock()}
        if properties:
            merged = dict(current.properties)
            merged.update(validate_properties(self.category, properties))
            changes["properties"] = merged
        if name is not None:
            changes["name"] = name

        self._styles[style_id] = current.model_copy(update=changes)
        self.logger.info(
            "Style updated",
            category=self.category.value,
            style_id=style_id,
            keys=sorted(properties or {}),
        )
        return True

    def delete(self, style_id: str) -> bool:
        """Remove a definition regardless of whether elements still reference it."""
        if style_id not in self._styles:
            self.logger.warning(
                "Style not found for delete", category=self.category.value, style_id=style_id
            )
            return False
        del self._styles[style_id]
        del self._sequence[style_id]
        self.logger.info("Style deleted", category=self.category.value, style_id=style_id)
        return True

    def duplicate(self, style_id: str, new_name: Optional[str] = None) -> Optional[str]:
        """
        Copy a definition into a new custom style.

        Args:
            style_id: Source style
            new_name: Name of the copy (default: "<original name> (copy)")

        Returns:
            The new style id, or None if the source is unknown
        """
        original = self._styles.get(style_id)
        if original is None:
            self.logger.warning(
                "Style not found for duplicate", category=self.category.value, style_id=style_id
            )
            return None

        new_id = self.generate_id()
        copy = StyleDefinition(
            id=new_id,
            category=self.category,
            name=new_name if new_name is not None else f"{original.name} (copy)",
            properties=original.model_copy(deep=True).properties,
            is_custom=True,
            group=original.group,
            created_at=self._clock(),
            duplicated_from=style_id,
        )
        self.put(copy)
        self.logger.info(
            "Style duplicated", category=self.category.value, source=style_id, style_id=new_id
        )
        return new_id

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def list_all(self) -> List[StyleDefinition]:
        """Predefined styles in insertion order, then custom styles newest first."""
        predefined = [s for s in self._styles.values() if not s.is_custom]
        predefined.sort(key=lambda s: self._sequence[s.id])

        custom = [s for s in self._styles.values() if s.is_custom]
        custom.sort(key=lambda s: (s.created_at, self._sequence[s.id]), reverse=True)

        return predefined + custom

    def list_by_group(self, group: str) -> List[StyleDefinition]:
        return [s for s in self.list_all() if s.group == group]

    def find_by_name(self, term: str) -> List[StyleDefinition]:
        """Case-insensitive substring search on style names."""
        needle = term.lower()
        return [s for s in self.list_all() if needle in s.name.lower()]

    def custom_ids(self) -> List[str]:
        return [style_id for style_id, s in self._styles.items() if s.is_custom]
