# tests/test_general_utils.py
"""General utils (load_config, log) and run settings, with env overrides and cache behavior."""

from __future__ import annotations

import json
from importlib import import_module
from types import SimpleNamespace

import pytest

LC = import_module("palette_styler.general.utils.load_config")
LOG = import_module("palette_styler.general.utils.log")
SETTINGS = import_module("palette_styler.taxonomy.settings")

load_config = LC.load_config
clear_config_cache = LC.clear_config_cache


# ---------- Fixtures ----------
@pytest.fixture
def tmp_data_dir(tmp_path, monkeypatch):
    """Provide an isolated data/ dir and point the loader at it."""
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("PALETTE_STYLER_DATA_DIR", str(data))
    clear_config_cache()
    return data


# ---------- load_config ----------
def test_bundled_data_dir_is_found():
    data_dir = LC.resolve_data_dir()
    assert (data_dir / "hue_families.json").is_file()
    assert (data_dir / "palette.json").is_file()


def test_raw_mode_reloads_after_clear(tmp_data_dir):
    p = tmp_data_dir / "things.json"
    p.write_text(json.dumps(["a", "b"]), encoding="utf-8")
    assert load_config("things") == ["a", "b"]

    p.write_text(json.dumps(["changed"]), encoding="utf-8")
    clear_config_cache()
    assert load_config("things") == ["changed"]


def test_cache_returns_same_object_until_cleared(tmp_data_dir):
    (tmp_data_dir / "conf.json").write_text(json.dumps({"x": 1}), encoding="utf-8")
    first = load_config("conf", mode="validated_dict")
    assert load_config("conf.json", mode="validated_dict") is first
    clear_config_cache()
    assert load_config("conf", mode="validated_dict") is not first


def test_validated_dict_with_validator_and_errors(tmp_data_dir):
    (tmp_data_dir / "settings.json").write_text(json.dumps({"alpha": 1}), encoding="utf-8")

    def validator(d: dict) -> dict:
        return {**d, "beta": "ok"}

    assert load_config("settings", mode="validated_dict", validator=validator) == {
        "alpha": 1,
        "beta": "ok",
    }

    def failing(d: dict) -> dict:
        raise ValueError("nope")

    with pytest.raises(LC.ConfigParseError):
        load_config("settings", mode="validated_dict", validator=failing)

    (tmp_data_dir / "alist.json").write_text(json.dumps([1, 2]), encoding="utf-8")
    with pytest.raises(LC.ConfigTypeError):
        load_config("alist", mode="validated_dict")

    with pytest.raises(LC.ConfigFileNotFound):
        load_config("does_not_exist")

    with pytest.raises(ValueError):
        load_config("settings", mode="set")  # type: ignore[call-overload]


def test_invalid_json_raises_parse_error(tmp_data_dir):
    (tmp_data_dir / "broken.json").write_text("{oops", encoding="utf-8")
    with pytest.raises(LC.ConfigParseError):
        load_config("broken")


def test_allow_comments_uses_json5(tmp_data_dir, monkeypatch):
    (tmp_data_dir / "cmt.json").write_text('{"a":1, /*c*/ "b":2, }', encoding="utf-8")
    monkeypatch.setattr(LC, "_json5", SimpleNamespace(load=lambda f: {"a": 1, "b": 2}))
    assert load_config("cmt", allow_comments=True) == {"a": 1, "b": 2}

    monkeypatch.setattr(LC, "_json5", None)
    clear_config_cache()
    with pytest.raises(LC.ConfigParseError):
        load_config("cmt", allow_comments=True)


def test_refuses_escape_from_data_dir(tmp_data_dir):
    (tmp_data_dir.parent / "secret.json").write_text(json.dumps({"x": 1}), encoding="utf-8")
    with pytest.raises(LC.ConfigFileNotFound):
        load_config("../secret")


def test_temp_data_dir_restores_env(tmp_path, monkeypatch):
    (tmp_path / "only_here.json").write_text(json.dumps({"k": "v"}), encoding="utf-8")
    with LC.temp_data_dir(tmp_path):
        assert load_config("only_here") == {"k": "v"}
    with pytest.raises(LC.ConfigFileNotFound):
        load_config("only_here")


# ---------- log.debug ----------
def test_debug_respects_topics(monkeypatch, capsys):
    monkeypatch.setenv("PALETTE_DEBUG_TOPICS", "dedup")
    LOG.reload_topics()

    LOG.debug("collision traced", topic="dedup")
    LOG.debug("should be silent", topic="classify")

    err = capsys.readouterr().err
    assert "[dedup][DEBUG] collision traced" in err
    assert "should be silent" not in err


def test_debug_all_topics(monkeypatch, capsys):
    monkeypatch.setenv("PALETTE_DEBUG_TOPICS", "all")
    LOG.reload_topics()
    LOG.debug("m1", topic="level")
    LOG.debug("m2", topic="naming", level="info")
    err = capsys.readouterr().err
    assert "m1" in err and "[naming][INFO] m2" in err


def test_debug_silent_by_default(capsys):
    LOG.debug("nothing", topic="styles")
    assert capsys.readouterr().err == ""
    assert LOG.enabled("styles") is False


# ---------- settings ----------
def test_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("PALETTE_TRACK_OPACITY", "0")
    monkeypatch.setenv("PALETTE_HEX_CASE", "UPPER")
    assert SETTINGS.get_settings() == {
        "track_opacity": False,
        "level_step": 100,
        "hex_case": "upper",
    }


def test_settings_keyword_overrides_beat_env(monkeypatch):
    monkeypatch.setenv("PALETTE_TRACK_OPACITY", "no")
    out = SETTINGS.get_settings(track_opacity=True, hex_case=None)
    assert out["track_opacity"] is True
    assert out["hex_case"] == "lower"


@pytest.mark.parametrize(
    "raw",
    [{"level_step": 0}, {"hex_case": "mixed"}, {"track_opacity": "maybe"}],
)
def test_validate_settings_rejects_bad_values(raw):
    with pytest.raises(ValueError):
        SETTINGS.validate_settings(raw)
