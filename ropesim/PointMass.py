from ropesim.Vec2 import Vec2


class PointMass:
    """One particle of a rope chain. Fixed particles ignore forces and are only moved explicitly."""

    def __init__(self, pos, vel=None, fixed=False):
        self.pos = Vec2.of(pos)
        self.vel = Vec2.of(vel) if vel is not None else Vec2(0.0, 0.0)
        self.fixed = bool(fixed)

    def apply_force(self, force):
        # forces are impulses added straight to velocity (unit mass)
        if self.fixed:
            return
        self.vel = Vec2(self.vel.x + force.x, self.vel.y + force.y)

    def is_finite(self):
        return self.pos.is_finite() and self.vel.is_finite()

    def __repr__(self):
        return f"PointMass(pos=({self.pos.x:.2f}, {self.pos.y:.2f}), vel=({self.vel.x:.2f}, {self.vel.y:.2f}), fixed={self.fixed})"

    def to_dict(self):
        return {
            'pos': (self.pos.x, self.pos.y),
            'vel': (self.vel.x, self.vel.y),
            'fixed': self.fixed
        }
