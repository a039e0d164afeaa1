import logging
import random

from ropesim.Vec2 import Vec2
from ropesim.rope import RopeSimulation, SEGMENTS

logger = logging.getLogger(__name__)

LIVE_SETTINGS = ('gravity', 'damping', 'wind', 'tension')


class StringsLayer:
    """
    Keeps one rope per connection and drives them together.

    Connections are identified by an opaque id supplied by the caller. Ropes
    never share particles or random sources, so any of them could be stepped
    independently.
    """

    def __init__(self, segments=SEGMENTS, rng=None, **settings):
        self.segments = int(segments)
        self.settings = dict(settings)
        self.rng = rng if rng is not None else random.Random()
        self.ropes = {}
        self._anchors = {}

    def __len__(self):
        return len(self.ropes)

    def __contains__(self, conn_id):
        return conn_id in self.ropes

    def get(self, conn_id):
        return self.ropes.get(conn_id)

    def add(self, conn_id, start, end, color=None):
        start = Vec2.of(start)
        end = Vec2.of(end)
        rope = RopeSimulation(start, end, segments=self.segments,
                              rng=random.Random(self.rng.getrandbits(32)),
                              color=color, **self.settings)
        self.ropes[conn_id] = rope
        self._anchors[conn_id] = (start, end)
        logger.debug("Added rope %s", conn_id)
        return rope

    def remove(self, conn_id):
        self._anchors.pop(conn_id, None)
        if self.ropes.pop(conn_id, None) is not None:
            logger.debug("Removed rope %s", conn_id)

    def clear(self):
        self.ropes.clear()
        self._anchors.clear()

    def sync(self, connections):
        """
        Bring the layer in line with `connections`, an iterable of
        (conn_id, start, end, color). Anchors are only pushed to a rope when
        they actually moved; ropes whose ids are gone are dropped.
        """
        seen = set()
        for conn_id, start, end, color in connections:
            seen.add(conn_id)
            start = Vec2.of(start)
            end = Vec2.of(end)
            rope = self.ropes.get(conn_id)
            if rope is None:
                self.add(conn_id, start, end, color)
                continue
            rope.color = color
            if self._anchors[conn_id] != (start, end):
                rope.update_endpoints(start, end)
                self._anchors[conn_id] = (start, end)

        for conn_id in [cid for cid in self.ropes if cid not in seen]:
            self.remove(conn_id)

    def apply_settings(self, **kwargs):
        for name, value in kwargs.items():
            if name not in LIVE_SETTINGS:
                raise ValueError(f"{name!r} cannot be changed on a running rope")
            self.settings[name] = float(value)
            for rope in self.ropes.values():
                setattr(rope, name, value)

    def step(self):
        for rope in self.ropes.values():
            rope.step()

    def paths(self):
        return {conn_id: rope.render_path() for conn_id, rope in self.ropes.items()}

    def draw(self, screen, default_color=(0, 0, 0), pins=True):
        """Helper to draw every string, then the pins on top."""
        for rope in self.ropes.values():
            color = rope.color if rope.color is not None else default_color
            rope.renderer.draw(screen, rope.render_path(), color)
        if pins:
            for rope in self.ropes.values():
                rope.renderer.draw_pin(screen, rope.start)
                rope.renderer.draw_pin(screen, rope.end)
