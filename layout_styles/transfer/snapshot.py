"""Style snapshot export and import.

A snapshot is a JSON document::

    {
      "textStyles":      {"<id>": StyleDefinition, ...},
      "paragraphStyles": {...},
      "borderStyles":    {...},
      "fillStyles":      {...},
      "customFonts":     ["..."],
      "metadata": {"exportedAt": ..., "version": "1.0.0",
                   "totalStyles": N, "customStylesCount": M}
    }

Import merges entries by id (overwriting on collision) and is
all-or-nothing: every entry is validated before the first write.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from layout_styles.exceptions import LayoutStylesError, StyleImportError, UnknownCategoryError
from layout_styles.logger import Logger
from layout_styles.styles.categories import StyleCategory
from layout_styles.styles.models import StyleDefinition
from layout_styles.styles.properties import validate_properties
from layout_styles.styles.registry import StyleRegistry

SNAPSHOT_VERSION = "1.0.0"

# Keys of a StyleDefinition entry that are not style properties, in both
# spellings. Anything else in a flat (legacy) entry is a property.
_DEFINITION_KEYS = {
    "id",
    "category",
    "name",
    "properties",
    "group",
    "isCustom",
    "is_custom",
    "createdAt",
    "created_at",
    "updatedAt",
    "updated_at",
    "duplicatedFrom",
    "duplicated_from",
    "importedAt",
    "imported_at",
}


class SnapshotMetadata(BaseModel):
    """Informational block written on export. Import never depends on it."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    exported_at: Optional[datetime] = None
    version: str = SNAPSHOT_VERSION
    total_styles: Optional[int] = None
    custom_styles_count: Optional[int] = None


class StyleSnapshot(BaseModel):
    """Serialized registry content. Unknown top-level keys are ignored."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    text_styles: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    paragraph_styles: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    border_styles: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    fill_styles: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    custom_fonts: List[str] = Field(default_factory=list)
    metadata: Optional[SnapshotMetadata] = None

    @field_validator("text_styles", "paragraph_styles", "border_styles", "fill_styles", mode="before")
    @classmethod
    def empty_null_section(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("custom_fonts", mode="before")
    @classmethod
    def empty_null_fonts(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("metadata", mode="before")
    @classmethod
    def drop_invalid_metadata(cls, value: Any) -> Any:
        # A metadata block that does not validate is dropped, not fatal.
        if value is None or isinstance(value, SnapshotMetadata):
            return value
        try:
            return SnapshotMetadata.model_validate(value)
        except PydanticValidationError:
            return None

    def section(self, category: StyleCategory) -> Dict[str, Dict[str, Any]]:
        return getattr(self, f"{category.value}_styles")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)


# ----------------------------------------------------------------------
# Export
# ----------------------------------------------------------------------


def export_snapshot(registry: StyleRegistry) -> StyleSnapshot:
    """Capture every definition and custom font of the registry."""
    sections: Dict[str, Dict[str, Dict[str, Any]]] = {}
    total = 0
    custom = 0
    for category in StyleCategory:
        definitions = registry.list_all(category)
        sections[category.export_key] = {d.id: d.to_export_dict() for d in definitions}
        total += len(definitions)
        custom += sum(1 for d in definitions if d.is_custom)

    snapshot = StyleSnapshot(
        **sections,
        custom_fonts=registry.custom_fonts,
        metadata=SnapshotMetadata(
            exported_at=registry.clock(),
            total_styles=total,
            custom_styles_count=custom,
        ),
    )
    registry.logger.info("Styles exported", total_styles=total, custom_styles=custom)
    return snapshot


def export_filename(exported_at: datetime) -> str:
    """Download file name for a snapshot."""
    return f"layout-styles-{exported_at.strftime('%Y%m%dT%H%M%S')}.json"


def write_snapshot(registry: StyleRegistry, output: Path) -> Path:
    """
    Export the registry as a JSON document.

    Args:
        registry: Registry to export
        output: Target file, or a directory to create a timestamped file in

    Returns:
        Path of the written file
    """
    snapshot = export_snapshot(registry)
    output = Path(output)
    if output.is_dir():
        output = output / export_filename(snapshot.metadata.exported_at)
    output.write_text(snapshot.to_json(), encoding="utf-8")
    return output


# ----------------------------------------------------------------------
# Import
# ----------------------------------------------------------------------


def parse_snapshot(data: Union[str, bytes, Mapping[str, Any]]) -> StyleSnapshot:
    """
    Parse and shape-check a snapshot without touching any registry.

    Raises:
        StyleImportError: If the JSON is malformed or the shape is wrong
    """
    if isinstance(data, (str, bytes, bytearray)):
        try:
            payload = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StyleImportError(f"Malformed style snapshot JSON: {e}") from e
    else:
        payload = data

    if not isinstance(payload, Mapping):
        raise StyleImportError("Style snapshot must be a JSON object")

    try:
        return StyleSnapshot.model_validate(dict(payload))
    except PydanticValidationError as e:
        problems = [
            {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        raise StyleImportError("Style snapshot has an invalid shape", problems) from e


def _definition_from_entry(
    category: StyleCategory, style_id: str, entry: Mapping[str, Any], imported_at: datetime
) -> StyleDefinition:
    if "properties" in entry:
        payload = dict(entry)
        properties = payload.pop("properties") or {}
    else:
        # Flat entry: properties spread next to the metadata keys.
        payload = {k: v for k, v in entry.items() if k in _DEFINITION_KEYS}
        properties = {k: v for k, v in entry.items() if k not in _DEFINITION_KEYS}

    raw_category = payload.pop("category", None)
    if raw_category is not None and "group" not in payload:
        try:
            StyleCategory.parse(raw_category)
        except UnknownCategoryError:
            # Flat entries used "category" for the UI grouping.
            payload["group"] = raw_category

    payload.setdefault("name", style_id)
    if "createdAt" not in payload and "created_at" not in payload:
        payload["createdAt"] = imported_at
    payload.pop("imported_at", None)
    payload.update(
        id=style_id,
        category=category,
        properties=validate_properties(category, properties),
        importedAt=imported_at,
    )
    return StyleDefinition.model_validate(payload)


def import_snapshot(
    registry: StyleRegistry,
    data: Union[str, bytes, Mapping[str, Any]],
    logger: Optional[Logger] = None,
) -> int:
    """
    Merge a snapshot into the registry.

    Args:
        registry: Target registry
        data: JSON text or an already decoded mapping
        logger: Logger instance

    Returns:
        Number of styles imported

    Raises:
        StyleImportError: If anything in the snapshot is invalid. The
            registry is left unmodified in that case.
    """
    logger = logger or registry.logger
    try:
        snapshot = parse_snapshot(data)
    except StyleImportError as e:
        logger.error("Style import rejected", error=str(e))
        raise

    imported_at = registry.clock()
    staged: List[StyleDefinition] = []
    problems: List[Dict[str, Any]] = []

    for category in StyleCategory:
        for style_id, entry in snapshot.section(category).items():
            try:
                staged.append(_definition_from_entry(category, style_id, entry, imported_at))
            except (LayoutStylesError, PydanticValidationError, TypeError, ValueError) as e:
                problems.append(
                    {"category": category.value, "style_id": style_id, "error": str(e)}
                )

    if problems:
        logger.error("Style import rejected", problems=len(problems))
        raise StyleImportError(
            f"Style snapshot contains {len(problems)} invalid style(s); nothing was imported",
            problems,
        )

    for definition in staged:
        registry.namespace(definition.category).put(definition)
    for font in snapshot.custom_fonts:
        registry.add_custom_font(font)

    logger.info("Styles imported", count=len(staged), fonts=len(snapshot.custom_fonts))
    return len(staged)


def read_snapshot_file(registry: StyleRegistry, path: Path) -> int:
    """Import a snapshot from a JSON file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise StyleImportError(f"Cannot read style snapshot {path}: {e}") from e
    return import_snapshot(registry, text)
