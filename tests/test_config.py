"""Tests for .dotenvmap.toml config loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from dotenvmap.config import DotenvmapConfig, find_config_file, load_config


def test_load_config_defaults():
    cfg = load_config(path=None)
    assert cfg.files == [".env"]
    assert cfg.expand is True
    assert cfg.override is False
    assert cfg.config_path is None
    assert cfg.resolve_files() == [Path(".env")]


def test_load_config_from_file(tmp_path):
    toml = tmp_path / ".dotenvmap.toml"
    toml.write_text("""\
[dotenvmap]
files = [".env", "conf/.env.local"]
expand = false
override = true
""")
    cfg = load_config(toml)
    assert cfg.files == [".env", "conf/.env.local"]
    assert cfg.expand is False
    assert cfg.override is True
    assert cfg.config_path == toml
    assert cfg.resolve_files() == [tmp_path / ".env", tmp_path / "conf" / ".env.local"]


def test_load_config_single_file_string(tmp_path):
    toml = tmp_path / ".dotenvmap.toml"
    toml.write_text('[dotenvmap]\nfiles = "settings.env"\n')
    assert load_config(toml).files == ["settings.env"]


def test_load_config_absolute_files_not_rebased(tmp_path):
    cfg = DotenvmapConfig(files=[str(tmp_path / "abs.env")], config_path=Path("/elsewhere/.dotenvmap.toml"))
    assert cfg.resolve_files() == [tmp_path / "abs.env"]


def test_load_config_invalid_toml_syntax(tmp_path):
    """Invalid TOML syntax raises when loading config."""
    toml = tmp_path / ".dotenvmap.toml"
    toml.write_text("[dotenvmap\nfiles = \"x\"")  # unclosed bracket
    with pytest.raises(ValueError):  # TOMLDecodeError subclasses ValueError
        load_config(toml)


def test_load_config_bad_files_type(tmp_path):
    toml = tmp_path / ".dotenvmap.toml"
    toml.write_text("[dotenvmap]\nfiles = 3\n")
    with pytest.raises(ValueError, match="dotenvmap.files"):
        load_config(toml)


def test_find_config_file_walks_upward(tmp_path):
    toml = tmp_path / ".dotenvmap.toml"
    toml.write_text("[dotenvmap]\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    assert find_config_file(nested) == toml.resolve()


def test_load_config_without_section(tmp_path):
    toml = tmp_path / ".dotenvmap.toml"
    toml.write_text("[other]\nx = 1\n")
    cfg = load_config(toml)
    assert cfg.files == [".env"]
    assert cfg.expand is True
