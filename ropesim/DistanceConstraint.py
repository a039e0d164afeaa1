from ropesim.TwoPointConstraint import TwoPointConstraint
from ropesim.Vec2 import Vec2


class DistanceConstraint(TwoPointConstraint):
    def __init__(self, p1, p2, distance, stiffness=1.2):
        super().__init__(p1, p2)
        self.distance = float(distance)
        # stiffness > 1 over-relaxes: each pass moves past the exact half-correction
        self.stiffness = float(stiffness)

    def error(self):
        return (self.p2.pos - self.p1.pos).length() - self.distance

    def update(self):
        pi = self.p1.pos
        pj = self.p2.pos

        dx = pj.x - pi.x
        dy = pj.y - pi.y
        dist = (dx * dx + dy * dy) ** 0.5
        if dist == 0.0:
            return

        # half the relative error goes to each end, fixed ends simply keep their share
        percent = (self.distance - dist) / dist / 2
        ox = dx * percent * self.stiffness
        oy = dy * percent * self.stiffness

        if not self.p1.fixed:
            self.p1.pos = Vec2(pi.x - ox, pi.y - oy)
        if not self.p2.fixed:
            self.p2.pos = Vec2(pj.x + ox, pj.y + oy)
