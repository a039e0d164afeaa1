import random

import pygame
import pytest

from ropesim.Vec2 import Vec2
from ropesim.layer import StringsLayer


def _count_updates(rope):
    calls = []
    real = rope.update_endpoints

    def wrapped(start, end):
        calls.append((start, end))
        real(start, end)

    rope.update_endpoints = wrapped
    return calls


def test_sync_creates_one_rope_per_connection():
    layer = StringsLayer(rng=random.Random(0))
    layer.sync([
        ("a", (0, 0), (100, 0), (255, 0, 0)),
        ("b", (50, 50), (50, 200), (0, 255, 0)),
    ])
    assert len(layer) == 2
    assert "a" in layer and "b" in layer
    assert layer.get("a").start == Vec2(0, 0)
    assert layer.get("b").end == Vec2(50, 200)
    assert layer.get("a").color == (255, 0, 0)


def test_sync_only_pushes_moved_anchors():
    layer = StringsLayer(rng=random.Random(0))
    layer.sync([("a", (0, 0), (100, 0), None)])
    calls = _count_updates(layer.get("a"))

    layer.sync([("a", (0, 0), (100, 0), None)])
    assert calls == []

    layer.sync([("a", (0, 0), (120, 10), None)])
    assert len(calls) == 1
    assert layer.get("a").end == Vec2(120, 10)

    layer.sync([("a", Vec2(0, 0), Vec2(120, 10), None)])
    assert len(calls) == 1


def test_sync_drops_missing_connections():
    layer = StringsLayer(rng=random.Random(0))
    layer.sync([("a", (0, 0), (100, 0), None), ("b", (0, 0), (0, 100), None)])
    rope_a = layer.get("a")
    layer.sync([("a", (0, 0), (100, 0), None)])
    assert len(layer) == 1
    assert layer.get("b") is None
    assert layer.get("a") is rope_a


def test_sync_updates_color_token():
    layer = StringsLayer()
    layer.sync([("a", (0, 0), (100, 0), 1)])
    layer.sync([("a", (0, 0), (100, 0), 4)])
    assert layer.get("a").color == 4


def test_ropes_do_not_share_random_sources():
    layer = StringsLayer(rng=random.Random(0))
    a = layer.add("a", (0, 0), (100, 0))
    b = layer.add("b", (0, 0), (100, 0))
    assert a.integrator.rng is not b.integrator.rng
    assert not set(map(id, a.particles)) & set(map(id, b.particles))


def test_step_and_paths():
    layer = StringsLayer(rng=random.Random(0))
    layer.sync([("a", (0, 0), (100, 0), None), ("b", (0, 0), (0, 100), None)])
    for _ in range(10):
        layer.step()
    assert all(rope.frame == 10 for rope in layer.ropes.values())
    paths = layer.paths()
    assert set(paths) == {"a", "b"}
    assert paths["a"][0] == Vec2(0, 0)
    assert paths["a"][-1] == Vec2(100, 0)


def test_apply_settings_reaches_existing_and_new_ropes():
    layer = StringsLayer(rng=random.Random(0))
    a = layer.add("a", (0, 0), (100, 0))
    layer.apply_settings(gravity=0.6, wind=0.0)
    assert a.gravity == 0.6
    assert a.wind == 0.0
    b = layer.add("b", (0, 0), (100, 0))
    assert b.gravity == 0.6
    assert b.wind == 0.0


def test_apply_settings_rejects_fixed_parameters():
    layer = StringsLayer()
    with pytest.raises(ValueError):
        layer.apply_settings(iterations=5)


def test_clear_and_remove():
    layer = StringsLayer()
    layer.add("a", (0, 0), (10, 0))
    layer.add("b", (0, 0), (10, 0))
    layer.remove("a")
    layer.remove("missing")
    assert len(layer) == 1
    layer.clear()
    assert len(layer) == 0


def test_draw_on_surface():
    surface = pygame.Surface((200, 200))
    surface.fill((255, 255, 255))
    layer = StringsLayer(rng=random.Random(0))
    layer.sync([("a", (20, 20), (180, 20), (0, 0, 255))])
    layer.step()
    layer.draw(surface)
    # pin at the start anchor
    assert tuple(surface.get_at((20, 20)))[:3] != (255, 255, 255)
