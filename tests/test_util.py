"""Tests for dotenvmap.util."""

from __future__ import annotations

import os
from pathlib import Path

from dotenvmap.util import filenames_or_default, mask, split_path_list


def test_filenames_or_default_empty():
    assert filenames_or_default(()) == [Path(".env")]


def test_filenames_or_default_given():
    assert filenames_or_default(["a.env", Path("b.env")]) == [Path("a.env"), Path("b.env")]


def test_split_path_list():
    assert split_path_list(None) == []
    assert split_path_list("") == []
    assert split_path_list(f"a.env{os.pathsep}{os.pathsep}b.env") == ["a.env", "b.env"]


def test_mask():
    assert mask("short") == "****"
    assert mask("supersecretvalue") == "sup****lue"
