from ropesim.DistanceConstraint import DistanceConstraint
from ropesim.TensionConstraint import TensionConstraint


class ChainSolver:
    def __init__(self, particles, segment_length, iterations=30, stiffness=1.2, tension=0.15):
        """
        Relaxes an open chain toward a fixed spacing.

        Every call to solve() runs exactly `iterations` passes; there is no
        tolerance-based early exit, so the cost per frame is constant.
        """
        self.particles = list(particles)
        self.iterations = max(1, int(iterations))
        self.segment_length = float(segment_length)
        self.stiffness = float(stiffness)
        self.tension = float(tension)
        self.distance_constraints: list[DistanceConstraint] = []
        self.tension_constraints: list[TensionConstraint] = []
        self.build_constraints()

    def build_constraints(self):
        ps = self.particles
        self.distance_constraints = [
            DistanceConstraint(ps[i], ps[i + 1], self.segment_length, stiffness=self.stiffness)
            for i in range(len(ps) - 1)
        ]
        self.tension_constraints = [
            TensionConstraint(ps[i - 1], ps[i], ps[i + 1], tension=self.tension)
            for i in range(1, len(ps) - 1)
        ]

    def set_segment_length(self, value):
        self.segment_length = float(value)
        for c in self.distance_constraints:
            c.distance = self.segment_length

    def set_tension(self, value):
        self.tension = float(value)
        for c in self.tension_constraints:
            c.tension = self.tension

    def solve(self):
        for _ in range(self.iterations):
            for c in self.distance_constraints:
                c.update()
            for c in self.tension_constraints:
                c.update()

    def max_error(self):
        """Largest absolute segment-length residual, for diagnostics."""
        return max((abs(c.error()) for c in self.distance_constraints), default=0.0)

    def __repr__(self):
        return f"<{self.__class__.__name__} particles={len(self.particles)} iterations={self.iterations} segment_length={self.segment_length:.2f}>"

    def draw(self, screen, color=(150, 0, 150)):
        """Helper to draw the raw chain segments."""
        for c in self.distance_constraints:
            c.draw(screen, color)
