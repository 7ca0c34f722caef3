"""Tests for the layout-styles command-line tool."""

import json

import pytest

from layout_styles.management.style_manager import main


@pytest.fixture
def snapshot_file(tmp_path):
    path = tmp_path / "incoming.json"
    path.write_text(
        json.dumps(
            {
                "textStyles": {"callout": {"name": "Callout", "properties": {"fontSize": 16}}},
                "borderStyles": {"simple": {"name": "Simple", "isCustom": False, "properties": {"width": 3}}},
                "customFonts": ["Inter"],
            }
        )
    )
    return path


def test_no_command_prints_help():
    assert main([]) == 1


@pytest.mark.parametrize(
    "argv",
    [
        ["list"],
        ["list", "--verbose"],
        ["list", "--category", "border"],
        ["show", "fill", "primary"],
        ["stats"],
    ],
)
def test_read_only_commands_succeed(argv):
    assert main(argv) == 0


def test_show_unknown_style_fails():
    assert main(["show", "fill", "missing"]) == 1


def test_invalid_category_is_rejected_by_argparse():
    with pytest.raises(SystemExit):
        main(["list", "--category", "shadow"])


def test_export_to_file(tmp_path):
    output = tmp_path / "styles.json"

    assert main(["export", "--output", str(output)]) == 0

    data = json.loads(output.read_text())
    assert data["metadata"]["totalStyles"] == 11


def test_export_uses_configured_directory(tmp_path, monkeypatch):
    monkeypatch.setenv("LAYOUT_STYLES_EXPORT_DIR", str(tmp_path))

    assert main(["export"]) == 0
    assert len(list(tmp_path.glob("layout-styles-*.json"))) == 1


def test_import_writes_merged_snapshot(snapshot_file, tmp_path):
    merged = tmp_path / "merged.json"

    assert main(["import", str(snapshot_file), "--output", str(merged)]) == 0

    data = json.loads(merged.read_text())
    assert data["textStyles"]["callout"]["name"] == "Callout"
    assert data["borderStyles"]["simple"]["properties"] == {"width": 3}
    assert data["customFonts"] == ["Inter"]
    assert data["metadata"]["totalStyles"] == 12


def test_import_invalid_snapshot_fails(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"fillStyles": {"x": {"properties": {"opacity": 4}}}}))
    assert main(["import", str(bad)]) == 1


def test_import_missing_file_fails(tmp_path):
    assert main(["import", str(tmp_path / "missing.json")]) == 1


def test_import_non_utf8_file_fails(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_bytes(b'{"textStyles": "\x80\x81"}')
    assert main(["import", str(bad)]) == 1



def test_snapshot_option_loads_before_command(snapshot_file, tmp_path):
    output = tmp_path / "out.json"

    assert main(["--snapshot", str(snapshot_file), "export", "-o", str(output)]) == 0
    assert "callout" in json.loads(output.read_text())["textStyles"]


def test_predefined_option(tmp_path):
    seed = tmp_path / "seed.yaml"
    seed.write_text("text:\n  - id: solo\n    properties: {}\n")
    output = tmp_path / "out.json"

    assert main(["--predefined", str(seed), "export", "-o", str(output)]) == 0
    assert json.loads(output.read_text())["metadata"]["totalStyles"] == 1


def test_missing_predefined_file_fails(tmp_path):
    assert main(["--predefined", str(tmp_path / "nope.yaml"), "stats"]) == 1
