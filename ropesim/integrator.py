import random

from ropesim.Vec2 import Vec2


class Integrator:
    """
    Advances free particles one frame.

    Per particle, in this exact order: lateral wind impulse, position update
    from the current velocity (scaled by ``speed``), gravity, damping. Position
    is advanced before gravity is added, so gravity reaches the position one
    frame late; the settled shape depends on it.
    """

    def __init__(self, gravity=0.3, damping=0.95, wind=0.02, speed=1.5, rng=None):
        self.gravity = float(gravity)
        self.damping = float(damping)
        self.wind = float(wind)
        self.speed = float(speed)
        self.rng = rng if rng is not None else random.Random()

    def wind_force(self):
        # zero-mean horizontal jitter in (-wind/2, wind/2]
        return Vec2(self.wind * (0.5 - self.rng.random()), 0.0)

    def integrate(self, particles):
        for p in particles:
            if p.fixed:
                continue
            if self.wind != 0.0:
                p.apply_force(self.wind_force())

            p.pos = Vec2(p.pos.x + p.vel.x * self.speed, p.pos.y + p.vel.y * self.speed)

            vx = p.vel.x
            vy = p.vel.y + self.gravity
            p.vel = Vec2(vx * self.damping, vy * self.damping)

    def __repr__(self):
        return f"<{self.__class__.__name__} gravity={self.gravity} damping={self.damping} wind={self.wind} speed={self.speed}>"
