# tests/test_demo.py
"""CLI smoke tests: scene file in, JSON palette (and styles) out."""

from __future__ import annotations

import json

import pytest

from palette_styler import demo

SCENE = [
    {
        "name": "frame",
        "fills": [{"type": "SOLID", "color": {"r": 1, "g": 0, "b": 0}}],
        "children": [
            {"name": "dark", "fills": [{"type": "SOLID", "color": {"r": 0.5, "g": 0, "b": 0}}]},
            {"name": "sky", "strokes": [{"type": "SOLID", "color": {"r": 0, "g": 0, "b": 1}}]},
            {"name": "hidden", "visible": False,
             "fills": [{"type": "SOLID", "color": {"r": 0, "g": 1, "b": 0}}]},
        ],
    }
]


@pytest.fixture
def scene_file(tmp_path):
    path = tmp_path / "scene.json"
    path.write_text(json.dumps(SCENE), encoding="utf-8")
    return path


def test_prints_sorted_palette(scene_file, capsys):
    assert demo.main([str(scene_file)]) == 0
    out = json.loads(capsys.readouterr().out)
    assert [s["name"] for s in out["swatches"]] == ["Blue / 100", "Red / 100", "Red / 200"]
    assert "styles" not in out


def test_all_creates_every_style(scene_file, capsys):
    assert demo.main([str(scene_file), "--all", "--no-alpha"]) == 0
    captured = capsys.readouterr()
    out = json.loads(captured.out)
    assert out["styles"] == [
        {"name": "Blue / 100", "description": "#0000FF"},
        {"name": "Red / 100", "description": "#FF0000"},
        {"name": "Red / 200", "description": "#800000"},
    ]
    assert out["unresolved"] == []
    assert "3 color styles created!" in captured.err


def test_select_reports_unresolved(scene_file, capsys):
    assert demo.main([str(scene_file), "--select", "800000ff", "123456ff", "--relevel"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["styles"] == [{"name": "Red / 100", "description": "#800000FF"}]
    assert out["unresolved"] == ["123456ff"]


def test_empty_scene_exits_with_message(tmp_path, capsys):
    path = tmp_path / "empty.json"
    path.write_text(json.dumps({"nodes": []}), encoding="utf-8")
    assert demo.main([str(path)]) == 1
    assert "Please select at least one frame or group." in capsys.readouterr().err


def test_missing_file_exits_nonzero(tmp_path, capsys):
    assert demo.main([str(tmp_path / "nope.json")]) == 1
    assert capsys.readouterr().err
