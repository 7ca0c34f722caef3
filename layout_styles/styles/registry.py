"""Style registry: four category namespaces plus the custom font list."""

from collections import Counter
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional

import yaml

from layout_styles.config import Config
from layout_styles.exceptions import ConfigurationError, LayoutStylesError, StyleNotFoundError
from layout_styles.logger import DefaultLogger, Logger
from layout_styles.styles.categories import CategoryLike, StyleCategory
from layout_styles.styles.models import StyleDefinition, StyleListItem
from layout_styles.styles.namespace import (
    Clock,
    IdFactory,
    StyleNamespace,
    generate_style_id,
    utc_now,
)
from layout_styles.styles.properties import validate_properties

SYSTEM_FONTS = [
    "Arial, sans-serif",
    "Times, serif",
    "Courier, monospace",
    "Georgia, serif",
    "Verdana, sans-serif",
    "Helvetica, sans-serif",
    "Tahoma, sans-serif",
    "Trebuchet MS, sans-serif",
]


class StyleRegistry:
    """Owns every style definition of an editing session.

    The registry is constructed explicitly and handed to whoever needs it;
    there is no module level instance. Lookups never raise: unknown ids
    produce None or False.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        clock: Clock = utc_now,
        id_factory: IdFactory = generate_style_id,
        predefined_file: Optional[Path] = None,
        seed_predefined: bool = True,
    ) -> None:
        """
        Initialize the style registry.

        Args:
            logger: Logger instance
            clock: Source of timestamps (injectable for tests)
            id_factory: Builds new style ids from a prefix
            predefined_file: YAML seed file (default: from Config)
            seed_predefined: Load predefined styles on construction
        """
        self.logger = logger or DefaultLogger()
        self._clock = clock
        self._namespaces: Dict[StyleCategory, StyleNamespace] = {
            category: StyleNamespace(category, self.logger, clock, id_factory)
            for category in StyleCategory
        }
        # dict used as an insertion ordered set
        self._custom_fonts: Dict[str, None] = {}

        if seed_predefined:
            self.load_predefined(predefined_file or Config.get_predefined_styles_file())

    @classmethod
    def from_config(cls, logger: Optional[Logger] = None) -> "StyleRegistry":
        """Build a registry using the environment configuration."""
        logger = logger or DefaultLogger(level=Config.get_log_level())
        return cls(logger=logger, predefined_file=Config.get_predefined_styles_file())

    @property
    def clock(self) -> Clock:
        return self._clock

    # ------------------------------------------------------------------
    # Seeding
    # ------------------------------------------------------------------

    def load_predefined(self, path: Path) -> int:
        """
        Seed predefined styles from a YAML file.

        Entries that fail validation are logged and skipped.

        Returns:
            Number of styles loaded

        Raises:
            ConfigurationError: If the file is missing or is not a mapping
        """
        path = Path(path)
        if not path.exists():
            raise ConfigurationError(
                f"Predefined styles file not found: {path}", details={"path": str(path)}
            )
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Failed to parse predefined styles {path}: {e}", details={"path": str(path)}
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Predefined styles file must contain a mapping of categories: {path}",
                details={"path": str(path)},
            )

        loaded = 0
        for section, entries in data.items():
            try:
                category = StyleCategory.parse(section)
            except LayoutStylesError as e:
                self.logger.error(f"Skipping predefined section '{section}': {e}")
                continue

            for entry in entries or []:
                try:
                    definition = StyleDefinition(
                        id=entry["id"],
                        category=category,
                        name=entry.get("name", entry["id"]),
                        properties=validate_properties(category, entry.get("properties") or {}),
                        is_custom=False,
                        group=entry.get("group"),
                        created_at=self._clock(),
                    )
                except (KeyError, TypeError, ValueError, LayoutStylesError) as e:
                    self.logger.error(f"Failed to load predefined {category.value} style: {e}")
                    continue
                self._namespaces[category].put(definition)
                loaded += 1

        self.logger.info("Predefined styles loaded", path=str(path), count=loaded)
        return loaded

    # ------------------------------------------------------------------
    # Per-category operations
    # ------------------------------------------------------------------

    def namespace(self, category: CategoryLike) -> StyleNamespace:
        return self._namespaces[StyleCategory.parse(category)]

    def create(
        self,
        category: CategoryLike,
        properties: Mapping[str, Any],
        name: str,
        is_custom: bool = True,
        group: Optional[str] = None,
    ) -> str:
        return self.namespace(category).create(properties, name, is_custom=is_custom, group=group)

    def get(self, category: CategoryLike, style_id: Optional[str]) -> Optional[StyleDefinition]:
        return self.namespace(category).get(style_id)

    def require(self, category: CategoryLike, style_id: str) -> StyleDefinition:
        """Like ``get`` but raises StyleNotFoundError for unknown ids."""
        namespace = self.namespace(category)
        definition = namespace.get(style_id)
        if definition is None:
            raise StyleNotFoundError(
                style_id, category=namespace.category.value, available_styles=namespace.ids()
            )
        return definition

    def exists(self, category: CategoryLike, style_id: Optional[str]) -> bool:
        return style_id is not None and style_id in self.namespace(category)

    def update(
        self,
        category: CategoryLike,
        style_id: str,
        properties: Optional[Mapping[str, Any]] = None,
        name: Optional[str] = None,
    ) -> bool:
        return self.namespace(category).update(style_id, properties, name=name)

    def delete(self, category: CategoryLike, style_id: str) -> bool:
        return self.namespace(category).delete(style_id)

    def duplicate(
        self, category: CategoryLike, style_id: str, new_name: Optional[str] = None
    ) -> Optional[str]:
        return self.namespace(category).duplicate(style_id, new_name)

    def list_all(self, category: CategoryLike) -> List[StyleDefinition]:
        return self.namespace(category).list_all()

    def generate_id(self, category: CategoryLike) -> str:
        return self.namespace(category).generate_id()

    # ------------------------------------------------------------------
    # Cross-category queries
    # ------------------------------------------------------------------

    def all_definitions(self) -> Iterator[StyleDefinition]:
        for category in StyleCategory:
            yield from self._namespaces[category].list_all()

    def list_items(self, category: Optional[CategoryLike] = None) -> List[StyleListItem]:
        """Summaries of stored styles, optionally for one category only."""
        if category is not None:
            definitions: Iterable[StyleDefinition] = self.list_all(category)
        else:
            definitions = self.all_definitions()
        return [StyleListItem.from_definition(d) for d in definitions]

    def list_by_group(self, category: CategoryLike, group: str) -> List[StyleDefinition]:
        return self.namespace(category).list_by_group(group)

    def find_by_name(
        self, term: str, category: Optional[CategoryLike] = None
    ) -> Dict[StyleCategory, List[StyleDefinition]]:
        """Case-insensitive name search across one or all categories."""
        categories = [StyleCategory.parse(category)] if category is not None else list(StyleCategory)
        return {c: self._namespaces[c].find_by_name(term) for c in categories}

    def create_batch(self, entries: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
        """
        Create several styles, possibly of different categories.

        Each entry is ``{"category": ..., "name": ..., "properties": {...}}``.
        A failing entry does not stop the batch; its result carries the error.
        """
        results = []
        for entry in entries:
            category = entry.get("category")
            try:
                style_id = self.create(
                    category,
                    entry.get("properties") or {},
                    entry.get("name") or "Untitled",
                    group=entry.get("group"),
                )
                results.append({"category": category, "success": True, "style_id": style_id})
            except LayoutStylesError as e:
                self.logger.warning("Batch entry rejected", category=category, error=str(e))
                results.append({"category": category, "success": False, "error": str(e)})
        return results

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------

    @property
    def custom_fonts(self) -> List[str]:
        return list(self._custom_fonts)

    def add_custom_font(self, font_name: str) -> bool:
        """Register a custom font family name. Returns False if empty or already known."""
        name = (font_name or "").strip()
        if not name or name in self._custom_fonts:
            return False
        self._custom_fonts[name] = None
        self.logger.info("Custom font added", font=name)
        return True

    def available_fonts(self) -> List[str]:
        """System fonts followed by custom fonts with a sans-serif fallback."""
        return SYSTEM_FONTS + [f"{font}, sans-serif" for font in self._custom_fonts]

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    def stats(self) -> Dict[str, Any]:
        definitions = list(self.all_definitions())
        custom = sum(1 for d in definitions if d.is_custom)
        recently_modified = sorted(
            (d for d in definitions if d.updated_at is not None),
            key=lambda d: d.updated_at,
            reverse=True,
        )[:5]
        return {
            "total": len(definitions),
            "by_category": {c.value: len(self._namespaces[c]) for c in StyleCategory},
            "by_custom_status": {"custom": custom, "predefined": len(definitions) - custom},
            "by_group": dict(Counter(d.group or "uncategorized" for d in definitions)),
            "recently_modified": [
                {"category": d.category.value, "id": d.id, "updated_at": d.updated_at.isoformat()}
                for d in recently_modified
            ],
            "custom_fonts": len(self._custom_fonts),
        }
