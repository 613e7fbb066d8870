#!/usr/bin/env python3
import json
from pathlib import Path

import pytest

from proseschema.core.utils import (
    is_empty_mapping,
    is_valid_attribute_name,
    is_valid_extension_name,
    load_json_file,
    merge_dicts,
    parse_bool,
)


# --- Name validation --- #

@pytest.mark.parametrize("name", ["doc", "paragraph", "hardBreak", "_private", "h1"])
def test_valid_extension_names(name):
    assert is_valid_extension_name(name)


@pytest.mark.parametrize("name", ["", "1abc", "with space", "data-id", "a.b"])
def test_invalid_extension_names(name):
    assert not is_valid_extension_name(name)


def test_attribute_names_allow_hyphens():
    assert is_valid_attribute_name("data-id")
    assert not is_valid_attribute_name("-leading")


# --- Mapping helpers --- #

def test_is_empty_mapping():
    assert is_empty_mapping({})
    assert not is_empty_mapping({"a": 1})
    assert not is_empty_mapping([])
    assert not is_empty_mapping(None)


def test_merge_dicts_recurses_and_overrides():
    base = {"logging": {"level": "INFO", "fmt": "x"}, "keep": 1}
    override = {"logging": {"level": "DEBUG"}, "new": 2}
    result = merge_dicts(base, override)
    assert result == {"logging": {"level": "DEBUG", "fmt": "x"}, "keep": 1, "new": 2}
    assert base["logging"]["level"] == "INFO"  # input untouched


@pytest.mark.parametrize("raw,expected", [("1", True), ("TRUE", True), (" yes ", True), ("on", True),
                                          ("0", False), ("false", False), ("No", False), ("off", False)])
def test_parse_bool(raw, expected):
    assert parse_bool(raw) is expected


def test_parse_bool_rejects_garbage():
    with pytest.raises(ValueError, match=r"Invalid boolean"):
        parse_bool("maybe")


# --- File I/O --- #

def test_load_json_file_missing_returns_empty(tmp_path: Path):
    assert load_json_file(tmp_path / "nope.json") == {}


def test_load_json_file_reads_payload(tmp_path: Path):
    p = tmp_path / "cfg.json"
    p.write_text(json.dumps({"a": 1}), encoding="utf-8")
    assert load_json_file(p) == {"a": 1}


def test_load_json_file_invalid_raises(tmp_path: Path):
    p = tmp_path / "bad.json"
    p.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError, match=r"Invalid JSON"):
        load_json_file(p)
