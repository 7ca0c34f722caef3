"""Tests for snapshot export and all-or-nothing import."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from layout_styles.exceptions import StyleImportError
from layout_styles.styles import StyleRegistry
from layout_styles.transfer import (
    SNAPSHOT_VERSION,
    export_snapshot,
    import_snapshot,
    parse_snapshot,
    read_snapshot_file,
    write_snapshot,
)


def registry_state(registry: StyleRegistry):
    return [d.model_dump() for d in registry.all_definitions()], registry.custom_fonts


class TestExport:
    def test_export_shape(self, registry: StyleRegistry) -> None:
        registry.create("text", {"fontSize": 11}, "Small")
        registry.add_custom_font("Inter")

        data = json.loads(export_snapshot(registry).to_json())

        assert set(data) == {
            "textStyles",
            "paragraphStyles",
            "borderStyles",
            "fillStyles",
            "customFonts",
            "metadata",
        }
        assert list(data["borderStyles"]) == ["none", "simple", "rounded"]
        assert data["fillStyles"]["primary"]["properties"]["opacity"] == 0.8
        assert data["fillStyles"]["primary"]["isCustom"] is False
        assert data["customFonts"] == ["Inter"]
        assert data["metadata"]["version"] == SNAPSHOT_VERSION
        assert data["metadata"]["totalStyles"] == 12
        assert data["metadata"]["customStylesCount"] == 1
        assert "exportedAt" in data["metadata"]

    def test_write_snapshot_into_directory(self, registry: StyleRegistry, tmp_path: Path) -> None:
        path = write_snapshot(registry, tmp_path)

        assert path.parent == tmp_path
        assert path.name.startswith("layout-styles-")
        assert path.suffix == ".json"
        assert json.loads(path.read_text())["metadata"]["totalStyles"] == 11

    def test_write_snapshot_to_file(self, registry: StyleRegistry, tmp_path: Path) -> None:
        target = tmp_path / "styles.json"
        assert write_snapshot(registry, target) == target
        assert target.exists()


class TestImport:
    def test_round_trip_into_empty_registry(self, registry: StyleRegistry, empty_registry: StyleRegistry) -> None:
        custom = registry.create("border", {"width": 6, "color": "#101010"}, "Heavy", group="mine")
        registry.add_custom_font("Inter")

        count = import_snapshot(empty_registry, export_snapshot(registry).to_json())

        assert count == 12
        imported = empty_registry.get("border", custom)
        assert imported.name == "Heavy"
        assert imported.group == "mine"
        assert imported.is_custom is True
        assert imported.properties == {"width": 6, "color": "#101010"}
        assert imported.imported_at is not None
        assert empty_registry.get("fill", "primary").is_custom is False
        assert empty_registry.custom_fonts == ["Inter"]

    def test_collision_overwrites(self, registry: StyleRegistry) -> None:
        snapshot = {
            "borderStyles": {
                "simple": {"name": "Simple Border", "properties": {"width": 9, "color": "#000"}, "isCustom": False}
            }
        }

        assert import_snapshot(registry, snapshot) == 1
        assert registry.get("border", "simple").properties == {"width": 9, "color": "#000"}
        assert [d.id for d in registry.list_all("border")] == ["none", "simple", "rounded"]

    def test_imported_at_comes_from_clock(self, registry: StyleRegistry, clock) -> None:
        clock.set(500)
        import_snapshot(registry, {"textStyles": {"t1": {"name": "T", "properties": {}}}})
        assert registry.get("text", "t1").imported_at.isoformat() == "2024-01-01T00:08:20+00:00"

    def test_unknown_top_level_keys_ignored(self, registry: StyleRegistry) -> None:
        data = {"somethingElse": [1, 2], "fillStyles": {"f": {"name": "F", "properties": {"opacity": 0.4}}}}
        assert import_snapshot(registry, json.dumps(data)) == 1

    def test_malformed_json_changes_nothing(self, registry: StyleRegistry) -> None:
        before = registry_state(registry)
        with pytest.raises(StyleImportError):
            import_snapshot(registry, '{"textStyles": {')
        assert registry_state(registry) == before

    def test_top_level_must_be_object(self, registry: StyleRegistry) -> None:
        with pytest.raises(StyleImportError):
            import_snapshot(registry, "[1, 2, 3]")

    def test_wrong_section_shape_rejected(self, registry: StyleRegistry) -> None:
        with pytest.raises(StyleImportError) as exc_info:
            parse_snapshot({"textStyles": ["not", "a", "map"]})
        assert exc_info.value.problems

    def test_one_bad_entry_aborts_everything(self, registry: StyleRegistry) -> None:
        before = registry_state(registry)
        data = {
            "textStyles": {"good": {"name": "Good", "properties": {"fontSize": 10}}},
            "fillStyles": {"bad": {"name": "Bad", "properties": {"opacity": 3}}},
            "customFonts": ["Roboto"],
        }

        with pytest.raises(StyleImportError) as exc_info:
            import_snapshot(registry, data)

        assert registry_state(registry) == before
        assert registry.get("text", "good") is None
        problems = exc_info.value.details["problems"]
        assert [(p["category"], p["style_id"]) for p in problems] == [("fill", "bad")]

    def test_legacy_flat_entries(self, registry: StyleRegistry) -> None:
        data = {
            "textStyles": {
                "legacy": {
                    "id": "legacy",
                    "name": "Old Heading",
                    "category": "headings",
                    "fontSize": 20,
                    "color": "#112233",
                    "isCustom": True,
                    "createdAt": "2023-06-01T10:00:00",
                }
            }
        }

        assert import_snapshot(registry, data) == 1
        legacy = registry.get("text", "legacy")
        assert legacy.properties == {"fontSize": 20, "color": "#112233"}
        assert legacy.group == "headings"
        assert legacy.created_at.tzinfo is not None

    def test_section_decides_category(self, registry: StyleRegistry) -> None:
        import_snapshot(registry, {"fillStyles": {"x": {"category": "text", "properties": {}}}})
        assert registry.get("fill", "x") is not None
        assert registry.get("text", "x") is None

    def test_fonts_merge_as_set(self, registry: StyleRegistry) -> None:
        registry.add_custom_font("Inter")
        import_snapshot(registry, {"customFonts": ["Inter", "Roboto"]})
        assert registry.custom_fonts == ["Inter", "Roboto"]

    def test_read_missing_file(self, registry: StyleRegistry, tmp_path: Path) -> None:
        with pytest.raises(StyleImportError):
            read_snapshot_file(registry, tmp_path / "nope.json")

    def test_read_file(self, registry: StyleRegistry, empty_registry: StyleRegistry, tmp_path: Path) -> None:
        path = write_snapshot(registry, tmp_path / "out.json")
        assert read_snapshot_file(empty_registry, path) == 11

    def test_invalid_utf8_bytes_rejected(self, registry: StyleRegistry) -> None:
        before = registry_state(registry)
        with pytest.raises(StyleImportError):
            import_snapshot(registry, b'{"textStyles": "\x80\x81"}')
        assert registry_state(registry) == before

    def test_read_file_with_invalid_utf8(self, registry: StyleRegistry, tmp_path: Path) -> None:
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"customFonts": ["Caf\xe9"]}')

        with pytest.raises(StyleImportError):
            read_snapshot_file(registry, path)
        assert "Caf\xe9" not in registry.custom_fonts

    def test_null_sections_treated_as_empty(self, registry: StyleRegistry) -> None:
        data = {"textStyles": None, "fillStyles": None, "customFonts": ["Roboto"]}

        assert import_snapshot(registry, json.dumps(data)) == 0
        assert "Roboto" in registry.custom_fonts

    def test_partial_metadata_does_not_block_import(self, registry: StyleRegistry) -> None:
        data = {
            "metadata": {"exportedAt": "2024-03-01T12:00:00Z"},
            "textStyles": {"note": {"name": "Note", "properties": {"fontSize": 9}}},
        }

        assert import_snapshot(registry, data) == 1
        assert registry.get("text", "note").properties == {"fontSize": 9}

    def test_unreadable_metadata_is_dropped(self) -> None:
        snapshot = parse_snapshot({"metadata": "exported yesterday", "customFonts": ["Inter"]})

        assert snapshot.metadata is None
        assert snapshot.custom_fonts == ["Inter"]
