import logging
import math

from ropesim.PointMass import PointMass
from ropesim.Vec2 import Vec2
from ropesim.curve import CurveRenderer
from ropesim.endpoints import EndpointTracker
from ropesim.integrator import Integrator
from ropesim.solvers.chain import ChainSolver

logger = logging.getLogger(__name__)

SEGMENTS = 12
ITERATIONS = 30
GRAVITY = 0.3
DAMPING = 0.95
WIND = 0.02
SPEED = 1.5
STIFFNESS = 1.2
TENSION = 0.15
FALLOFF = 0.8
MIN_SEGMENT_LENGTH = 10.0
MAX_SAG = 30.0
SLACK_RATIO = 0.2


def rope_geometry(distance, segments, min_segment_length=MIN_SEGMENT_LENGTH, max_sag=MAX_SAG):
    """
    Target segment length and sag for a rope spanning `distance`.

    Returns (segment_length, slack). The per-segment length never drops below
    `min_segment_length`, so coincident anchors still give a usable chain;
    the slack grows with the span but is capped at `max_sag`.
    """
    ideal = max(distance / (segments - 1), min_segment_length)
    slack = min(max_sag, distance * SLACK_RATIO)
    return ideal + slack / segments, slack


class RopeSimulation:
    def __init__(self, start, end, segments=SEGMENTS, gravity=GRAVITY, damping=DAMPING, wind=WIND,
                 speed=SPEED, iterations=ITERATIONS, stiffness=STIFFNESS, tension=TENSION,
                 falloff=FALLOFF, min_segment_length=MIN_SEGMENT_LENGTH, max_sag=MAX_SAG,
                 rng=None, color=None):
        """
        A sagging string between two anchors.

        :param start: First anchor, Vec2 or (x, y).
        :param end: Second anchor, Vec2 or (x, y).
        :param segments: Number of particles in the chain (clamped to >= 2).
        :param rng: random.Random used for wind; pass a seeded one for repeatable runs.
        :param color: Opaque token for the caller's drawing code, never read here.
        """
        segments = int(segments)
        if segments < 2:
            logger.warning("Rope needs at least 2 particles, got %d; using 2", segments)
            segments = 2
        self.segments = segments
        self.min_segment_length = float(min_segment_length)
        self.max_sag = float(max_sag)
        self.color = color

        self.integrator = Integrator(gravity=gravity, damping=damping, wind=wind, speed=speed, rng=rng)
        self.tracker = EndpointTracker(falloff=falloff)
        self.renderer = CurveRenderer()

        start = Vec2.of(start)
        end = Vec2.of(end)
        self.particles = [PointMass(start, fixed=(i == 0 or i == segments - 1)) for i in range(segments)]

        self.segment_length, slack = rope_geometry(start.distance_to(end), segments,
                                                   self.min_segment_length, self.max_sag)
        self.solver = ChainSolver(self.particles, self.segment_length, iterations=iterations,
                                  stiffness=stiffness, tension=tension)
        self.frame = 0
        self.diverged = False
        self._seed(start, end, slack)
        logger.debug("Created %r", self)

    @classmethod
    def create(cls, start, end, segments=SEGMENTS, **kwargs):
        return cls(start, end, segments=segments, **kwargs)

    # --- live-tunable parameters ---

    @property
    def gravity(self):
        return self.integrator.gravity

    @gravity.setter
    def gravity(self, value):
        self.integrator.gravity = float(value)

    @property
    def damping(self):
        return self.integrator.damping

    @damping.setter
    def damping(self, value):
        self.integrator.damping = float(value)

    @property
    def wind(self):
        return self.integrator.wind

    @wind.setter
    def wind(self, value):
        self.integrator.wind = float(value)

    @property
    def tension(self):
        return self.solver.tension

    @tension.setter
    def tension(self, value):
        self.solver.set_tension(value)

    @property
    def iterations(self):
        return self.solver.iterations

    @property
    def start(self):
        return self.particles[0].pos.copy()

    @property
    def end(self):
        return self.particles[-1].pos.copy()

    # --- simulation ---

    def _seed(self, start, end, slack):
        # seeded as a downward bow rather than a straight line
        n = len(self.particles)
        delta = (end - start) / (n - 1)
        for i, p in enumerate(self.particles):
            if i == 0:
                pos = start.copy()
            elif i == n - 1:
                pos = end.copy()
            else:
                progress = i / (n - 1)
                sag = math.sin(progress * math.pi) * slack
                pos = start + delta * i + Vec2(0.0, sag)
            p.pos = pos
            p.vel = Vec2(0.0, 0.0)

    def retarget(self, distance):
        """Recompute the target segment length for a new anchor distance. Returns the slack."""
        self.segment_length, slack = rope_geometry(distance, self.segments,
                                                   self.min_segment_length, self.max_sag)
        self.solver.set_segment_length(self.segment_length)
        return slack

    def reseed(self, start, end):
        """Throw away the current shape and lay a fresh bow between the anchors."""
        start = Vec2.of(start)
        end = Vec2.of(end)
        slack = self.retarget(start.distance_to(end))
        self._seed(start, end, slack)
        self.diverged = False
        logger.info("Rope reseeded between %s and %s", start, end)

    def step(self):
        """Advance one frame: forces and motion, then a fixed number of relaxation passes."""
        if self.diverged:
            return
        self.integrator.integrate(self.particles)
        self.solver.solve()
        self.frame += 1

        if not self.is_finite():
            self.diverged = True
            logger.error("Rope diverged at frame %d (segment length %.3f)", self.frame, self.segment_length)

    def update_endpoints(self, start, end):
        """Move the anchors. Safe to call any number of times between steps."""
        if self.diverged:
            self.reseed(start, end)
            return
        self.tracker.track(self, start, end)

    def render_path(self):
        return self.renderer.render_path(self.particles)

    # --- inspection ---

    def is_finite(self):
        return all(p.is_finite() for p in self.particles)

    def check_finite(self):
        for i, p in enumerate(self.particles):
            if not p.is_finite():
                raise FloatingPointError(f"particle {i} is not finite: {p!r}")

    def positions(self):
        return [p.pos.to_tuple() for p in self.particles]

    def to_dict(self):
        return {
            'segments': self.segments,
            'segment_length': self.segment_length,
            'frame': self.frame,
            'positions': self.positions(),
            'color': self.color
        }

    def __repr__(self):
        return f"<{self.__class__.__name__} segments={self.segments} segment_length={self.segment_length:.2f} start={self.start} end={self.end}>"
