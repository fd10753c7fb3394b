"""Tests for configuration loading and merging."""

from pathlib import Path

import pytest
import yaml

from tagdocs.load_config import DEFAULT_CONFIG, load_config, merge_config


def test_merge_config_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}, "keep": True}
    update = {"nested": {"y": 3, "z": 4}}
    merged = merge_config(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}, "keep": True}


def test_merge_config_does_not_mutate_base() -> None:
    """Verify that the base mapping is left untouched."""
    base = {"nested": {"x": 1}}
    merge_config(base, {"nested": {"x": 2}})
    assert base == {"nested": {"x": 1}}


def test_load_config_defaults() -> None:
    """Verify that defaults are returned when no path is provided."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    assert config["documentation"]["extension"] == ".xml"


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that a missing file falls back to defaults."""
    assert load_config(str(tmp_path / "absent.yml")) == DEFAULT_CONFIG


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config overrides defaults."""
    config_file = tmp_path / "tagdocs.yml"
    config_file.write_text(
        yaml.dump({"documentation": {"culture": "de-DE", "raise_on_parse_error": True}})
    )

    loaded = load_config(str(config_file))
    assert loaded["documentation"]["culture"] == "de-DE"
    assert loaded["documentation"]["raise_on_parse_error"] is True
    assert loaded["documentation"]["extension"] == ".xml"


def test_load_config_empty_file(tmp_path: Path) -> None:
    """Verify that an empty file counts as no overrides."""
    config_file = tmp_path / "tagdocs.yml"
    config_file.write_text("")
    assert load_config(str(config_file)) == DEFAULT_CONFIG


def test_load_config_accepts_path_objects(tmp_path: Path) -> None:
    """Verify that pathlib paths are accepted."""
    config_file = tmp_path / "tagdocs.yml"
    config_file.write_text("documentation:\n  extension: .doc.xml\n")
    assert load_config(config_file)["documentation"]["extension"] == ".doc.xml"


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    """Verify that a top-level list is reported."""
    config_file = tmp_path / "tagdocs.yml"
    config_file.write_text("- culture\n- extension\n")
    with pytest.raises(ValueError, match="mapping"):
        load_config(str(config_file))
