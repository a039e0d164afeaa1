"""
Smooth path reconstruction for drawing a rope.

The chain is tessellated with a uniform Catmull-Rom spline. The result is
purely visual and is never fed back into the simulation.
"""
import numpy as np
import pygame

from ropesim.Vec2 import Vec2

# p(t) = [1, t, t^2, t^3] @ CATMULL_ROM @ [p0, p1, p2, p3]
CATMULL_ROM = 0.5 * np.array([
    [0.0, 2.0, 0.0, 0.0],
    [-1.0, 0.0, 1.0, 0.0],
    [2.0, -5.0, 4.0, -1.0],
    [-1.0, 3.0, -3.0, 1.0],
])

SHADOW_COLOR = (90, 90, 90)
PIN_COLOR = (204, 51, 51)
PIN_HIGHLIGHT = (230, 140, 140)


class CurveRenderer:
    def __init__(self, samples=10):
        self.samples = max(1, int(samples))
        t = np.arange(self.samples) / self.samples
        powers = np.stack([np.ones_like(t), t, t * t, t * t * t], axis=1)
        self._basis = powers @ CATMULL_ROM

    def sample_segment(self, p0, p1, p2, p3):
        """Points of one spline span from p1 (t=0) toward p2, excluding t=1."""
        ctrl = np.array([tuple(p) for p in (p0, p1, p2, p3)], dtype=np.float64)
        return [Vec2(x, y) for x, y in self._basis @ ctrl]

    def render_path(self, particles):
        """
        Ordered polyline through the chain.

        Starts exactly at the first particle and ends exactly at the last.
        Chains shorter than four particles have no interior span and come out
        as a straight line between the ends; fewer than two gives [].
        """
        n = len(particles)
        if n < 2:
            return []

        pos = [p.pos for p in particles]
        path = [pos[0].copy()]

        # spans 1..n-3; neighbours clamp to the chain ends
        for i in range(1, n - 2):
            path.extend(self.sample_segment(pos[max(i - 1, 0)], pos[i], pos[i + 1], pos[min(i + 2, n - 1)]))

        path.append(particles[-1].pos.copy())
        return path

    def draw(self, screen, path, color, width=2, shadow=True):
        """Helper to stroke a rendered path."""
        if len(path) < 2:
            return
        points = [(p.x, p.y) for p in path]
        if shadow:
            offset = [(x + 1, y + 1) for x, y in points]
            pygame.draw.lines(screen, SHADOW_COLOR, False, offset, width)
        pygame.draw.lines(screen, color, False, points, width)
        # round caps
        if width > 1:
            for x, y in (points[0], points[-1]):
                pygame.draw.circle(screen, color, (int(x), int(y)), width // 2)

    def draw_pin(self, screen, pos, radius=6):
        x, y = int(pos.x), int(pos.y)
        pygame.draw.circle(screen, SHADOW_COLOR, (x + 1, y + 1), radius)
        pygame.draw.circle(screen, PIN_COLOR, (x, y), radius)
        pygame.draw.circle(screen, PIN_HIGHLIGHT, (x - 2, y - 2), max(1, radius // 2))
