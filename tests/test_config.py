"""Tests for the configuration module."""

import pytest

from colorlizer.config import Config, load_config


def test_config_defaults():
    cfg = Config()
    assert cfg.timezone is None
    assert cfg.on_error == "fail"


def test_load_without_file():
    assert load_config() == Config()


def test_load_from_yaml(tmp_path):
    path = tmp_path / "colorlizer.yaml"
    path.write_text("description: test\ntimezone: Asia/Tokyo\non_error: skip\n", encoding="utf-8")
    cfg = load_config(path)
    assert cfg.description == "test"
    assert cfg.timezone == "Asia/Tokyo"
    assert cfg.on_error == "skip"


def test_empty_yaml(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == Config()


def test_overrides_replace_file_values(tmp_path):
    path = tmp_path / "colorlizer.yaml"
    path.write_text("timezone: Asia/Tokyo\n", encoding="utf-8")
    cfg = load_config(path, timezone="UTC", on_error=None)
    assert cfg.timezone == "UTC"
    assert cfg.on_error == "fail"


def test_invalid_on_error():
    with pytest.raises(ValueError):
        load_config(on_error="retry")


def test_unknown_timezone():
    with pytest.raises(ValueError, match="unknown timezone"):
        load_config(timezone="Mars/Olympus_Mons")


def test_non_mapping_yaml(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)
