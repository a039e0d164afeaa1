import pygame
import pytest

from ropesim.PointMass import PointMass
from ropesim.Vec2 import Vec2
from ropesim.curve import CurveRenderer


def _chain(points):
    return [PointMass(p) for p in points]


def _catmull_rom(p0, p1, p2, p3, t):
    t2 = t * t
    t3 = t2 * t
    return 0.5 * ((2.0 * p1) +
                  (-p0 + p2) * t +
                  (2.0 * p0 - 5.0 * p1 + 4.0 * p2 - p3) * t2 +
                  (-p0 + 3.0 * p1 - 3.0 * p2 + p3) * t3)


@pytest.mark.parametrize("count", [0, 1])
def test_too_short_chain_gives_empty_path(count):
    assert CurveRenderer().render_path(_chain([(0, 0)] * count)) == []


def test_two_particles_give_straight_line():
    path = CurveRenderer().render_path(_chain([(3, 4), (90, -7)]))
    assert path == [Vec2(3, 4), Vec2(90, -7)]


def test_three_particles_have_no_spline_span():
    path = CurveRenderer().render_path(_chain([(0, 0), (50, 30), (100, 0)]))
    assert path == [Vec2(0, 0), Vec2(100, 0)]


def test_path_length_and_exact_ends():
    points = [(i * 10.0, (i % 3) * 4.0) for i in range(12)]
    path = CurveRenderer().render_path(_chain(points))
    # move-to, 9 interior spans x 10 samples, final line-to
    assert len(path) == 1 + 9 * 10 + 1
    assert path[0] == Vec2(*points[0])
    assert path[-1] == Vec2(*points[-1])


def test_each_span_starts_on_its_particle():
    points = [(0, 0), (10, 5), (20, -3), (30, 8), (40, 0), (50, 2)]
    path = CurveRenderer().render_path(_chain(points))
    for span in range(1, len(points) - 2):
        sample = path[1 + (span - 1) * 10]
        assert sample.x == pytest.approx(points[span][0])
        assert sample.y == pytest.approx(points[span][1])


def test_samples_match_catmull_rom_blend():
    points = [(0, 0), (10, 20), (30, 25), (45, 5), (60, 0)]
    path = CurveRenderer().render_path(_chain(points))
    span = 2
    for k in range(10):
        t = k / 10
        xs = [points[span + d][0] for d in (-1, 0, 1, 2)]
        ys = [points[span + d][1] for d in (-1, 0, 1, 2)]
        sample = path[1 + (span - 1) * 10 + k]
        assert sample.x == pytest.approx(_catmull_rom(*xs, t))
        assert sample.y == pytest.approx(_catmull_rom(*ys, t))


def test_collinear_chain_stays_on_its_line():
    path = CurveRenderer().render_path(_chain([(i * 10.0, 7.0) for i in range(8)]))
    assert all(p.y == pytest.approx(7.0) for p in path)
    xs = [p.x for p in path]
    assert xs == sorted(xs)


def test_sample_segment_single_span():
    r = CurveRenderer(samples=4)
    pts = [Vec2(0, 0), Vec2(1, 1), Vec2(2, 1), Vec2(3, 0)]
    samples = r.sample_segment(*pts)
    assert len(samples) == 4
    assert samples[0].to_tuple() == pytest.approx((1.0, 1.0))
    assert samples[2].x == pytest.approx(_catmull_rom(0, 1, 2, 3, 0.5))
    assert samples[2].y == pytest.approx(_catmull_rom(0, 1, 1, 0, 0.5))


def test_render_does_not_touch_particles():
    chain = _chain([(0, 0), (10, 5), (20, 5), (30, 0)])
    before = [p.pos.copy() for p in chain]
    CurveRenderer().render_path(chain)
    assert [p.pos for p in chain] == before


def test_draw_strokes_onto_surface():
    surface = pygame.Surface((100, 100))
    surface.fill((255, 255, 255))
    r = CurveRenderer()
    path = r.render_path(_chain([(10, 50), (90, 50)]))
    r.draw(surface, path, (255, 0, 0), width=3)
    assert tuple(surface.get_at((50, 50)))[:3] == (255, 0, 0)


def test_draw_ignores_degenerate_path():
    surface = pygame.Surface((10, 10))
    surface.fill((255, 255, 255))
    CurveRenderer().draw(surface, [], (255, 0, 0))
    assert tuple(surface.get_at((5, 5)))[:3] == (255, 255, 255)


def test_path_is_built_from_consecutive_spans():
    points = [(0, 0), (12, 9), (25, 14), (37, 11), (50, 3), (61, 0)]
    chain = _chain(points)
    r = CurveRenderer()
    pos = [Vec2(*p) for p in points]
    expected = [pos[0]]
    for i in range(1, len(points) - 2):
        expected.extend(r.sample_segment(pos[i - 1], pos[i], pos[i + 1], pos[i + 2]))
    expected.append(pos[-1])
    assert r.render_path(chain) == expected
