# tests/test_sources.py
"""
sources tests
=============

Does: Check the scene walk order (parents first, siblings in order), hidden
      and locked subtree skipping, fills-before-strokes, SOLID-only filtering,
      and mapping/attribute node support.
"""

from __future__ import annotations

import importlib
from types import SimpleNamespace

src = importlib.import_module("palette_styler.taxonomy.sources")


def _solid(r, g, b, opacity=None):
    paint = {"type": "SOLID", "color": {"r": r, "g": g, "b": b}}
    if opacity is not None:
        paint["opacity"] = opacity
    return paint


GRADIENT = {"type": "GRADIENT_LINEAR", "gradientStops": []}
IMAGE = {"type": "IMAGE", "imageHash": "abc"}


def _rgbs(samples):
    return [s.rgb for s in samples]


def test_depth_first_parent_before_children_in_sibling_order():
    scene = [
        {
            "name": "frame",
            "fills": [_solid(1, 0, 0)],
            "children": [
                {"name": "a", "fills": [_solid(0, 1, 0)], "children": [
                    {"name": "a1", "fills": [_solid(0, 0, 1)]},
                ]},
                {"name": "b", "fills": [_solid(1, 1, 0)]},
            ],
        },
        {"name": "second", "fills": [_solid(0, 1, 1)]},
    ]
    assert _rgbs(src.iter_scene_samples(scene)) == [
        (1.0, 0.0, 0.0),
        (0.0, 1.0, 0.0),
        (0.0, 0.0, 1.0),
        (1.0, 1.0, 0.0),
        (0.0, 1.0, 1.0),
    ]


def test_hidden_and_locked_subtrees_are_skipped():
    scene = [
        {
            "name": "root",
            "children": [
                {"name": "hidden", "visible": False, "fills": [_solid(1, 0, 0)],
                 "children": [{"name": "inside", "fills": [_solid(0, 1, 0)]}]},
                {"name": "locked", "locked": True, "fills": [_solid(0, 0, 1)]},
                {"name": "shown", "visible": True, "locked": False, "fills": [_solid(1, 1, 1)]},
            ],
        }
    ]
    assert _rgbs(src.iter_scene_samples(scene)) == [(1.0, 1.0, 1.0)]


def test_fills_then_strokes_and_non_solid_dropped():
    node = {
        "fills": [GRADIENT, _solid(1, 0, 0), IMAGE],
        "strokes": [_solid(0, 0, 1, opacity=0.25)],
    }
    samples = list(src.iter_scene_samples([node]))
    assert _rgbs(samples) == [(1.0, 0.0, 0.0), (0.0, 0.0, 1.0)]
    assert samples[0].opacity == 1.0
    assert samples[1].opacity == 0.25
    assert samples[0].paint is node["fills"][1]


def test_mixed_sentinel_paints_are_ignored():
    node = {"fills": "figma.mixed", "strokes": None, "children": "nope"}
    assert list(src.iter_scene_samples([node])) == []


def test_attribute_style_nodes():
    paint = SimpleNamespace(type="SOLID", color=SimpleNamespace(r=0.5, g=0.25, b=0.0), opacity=None)
    child = SimpleNamespace(visible=True, locked=False, fills=[paint], strokes=[], children=[])
    root = SimpleNamespace(fills=(), strokes=(), children=[child])
    samples = list(src.iter_scene_samples([root]))
    assert _rgbs(samples) == [(0.5, 0.25, 0.0)]
    assert samples[0].opacity == 1.0
    assert samples[0].paint is paint


def test_iter_solid_samples_flat():
    paints = [_solid(0, 0, 0), GRADIENT, {"type": "SOLID"}, _solid(1, 1, 1, 0.5)]
    samples = list(src.iter_solid_samples(paints))
    assert _rgbs(samples) == [(0.0, 0.0, 0.0), (1.0, 1.0, 1.0)]
    assert samples[1].opacity == 0.5


def test_deep_tree_does_not_recurse():
    node = {"fills": [_solid(0, 0, 0)]}
    for _ in range(5000):
        node = {"children": [node]}
    assert len(list(src.iter_scene_samples([node]))) == 1
