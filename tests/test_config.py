from __future__ import annotations

from pathlib import Path

import pytest

from lexdist.config import (
    DistanceSettings,
    PairSetNotFoundError,
    SettingsNotFoundError,
    TextPair,
    list_available_pair_sets,
    list_available_settings,
    load_pairs,
    load_settings,
)


def test_bundled_settings_load() -> None:
    assert {"default", "bytes"} <= set(list_available_settings())
    default = load_settings()
    assert default.fast_mode is False
    assert default.max_length is None
    assert load_settings("bytes").fast_mode is True


def test_settings_from_path(tmp_path: Path) -> None:
    path = tmp_path / "custom.yaml"
    path.write_text("fast_mode: true\nmax_length: 8\n", encoding="utf-8")
    settings = load_settings(path)
    assert settings == DistanceSettings(fast_mode=True, max_length=8)


def test_empty_settings_file_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_settings(path) == DistanceSettings()


def test_invalid_settings_raise_value_error(tmp_path: Path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("max_length: 0\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid settings"):
        load_settings(path)


def test_missing_settings() -> None:
    with pytest.raises(SettingsNotFoundError):
        load_settings("does-not-exist")


def test_bundled_pairs_load() -> None:
    assert "examples" in list_available_pair_sets()
    pairs = load_pairs("examples")
    assert pairs[0] == TextPair(pair_id="sitting-kitten", a="sitting", b="kitten", fast_mode=True)
    # rows without an id are numbered by position
    assert pairs[-1].pair_id == f"pair-{len(pairs) - 1}"
    assert pairs[-1].fast_mode is None


def test_invalid_pair_reports_line(tmp_path: Path) -> None:
    path = tmp_path / "pairs.jsonl"
    path.write_text('{"a": "x", "b": "y"}\n\n{"a": "x"}\n', encoding="utf-8")
    with pytest.raises(ValueError, match="line 3"):
        load_pairs(path)


def test_missing_pairs() -> None:
    with pytest.raises(PairSetNotFoundError):
        load_pairs("nope")


def test_truncated_json_line_names_file_and_line(tmp_path: Path) -> None:
    path = tmp_path / "broken.jsonl"
    path.write_text('{"a": "x", "b": "y"}\n{"a": "x", \n', encoding="utf-8")
    with pytest.raises(ValueError, match="line 2") as excinfo:
        load_pairs(path)
    assert str(path) in str(excinfo.value)


def test_yaml_syntax_error_raises_value_error(tmp_path: Path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("fast_mode: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid settings"):
        load_settings(path)
