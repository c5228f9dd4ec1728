"""Tests for configuration loading and merging."""

from pathlib import Path

import yaml

from docmodel.context import context_from_config
from docmodel.deep_merge import deep_merge
from docmodel.load_config import DEFAULT_CONFIG, load_config


def test_deep_merge_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    merged = deep_merge(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}
    assert base == {"nested": {"x": 1, "y": 2}}


def test_deep_merge_arrays_replace() -> None:
    """Verify that arrays are replaced rather than concatenated."""
    assert deep_merge({"arr": [1, 2]}, {"arr": [3]}) == {"arr": [3]}


def test_deep_merge_none_keeps_base() -> None:
    """Verify that an empty YAML value does not wipe out a default."""
    assert deep_merge({"a": {"b": 1}}, {"a": None}) == {"a": {"b": 1}}


def test_load_config_defaults() -> None:
    """Verify that the defaults are returned when no path is given."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    config["store"]["path"] = "changed"
    assert DEFAULT_CONFIG["store"]["path"] == "docstore"


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config overrides defaults and builds a context."""
    config_file = tmp_path / "config.yml"
    config_file.write_text(
        yaml.dump({"crate": {"name": "mycrate"}, "store": {"path": "out"}})
    )

    config = load_config(str(config_file))
    assert config["crate"] == {"name": "mycrate", "version": ""}
    assert config["render"]["api_root"] == "/api"
    assert config["store"]["register_ancestor_paths"] is False

    context = context_from_config(config)
    assert context.store_path == Path("out")
    assert context.crate_info.package_name == "mycrate"
    assert str(context.crate_info) == "mycrate"


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that a missing config file falls back to defaults."""
    assert load_config(str(tmp_path / "absent.yml")) == DEFAULT_CONFIG
