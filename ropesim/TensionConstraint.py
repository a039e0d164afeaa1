from ropesim.Vec2 import Vec2


class TensionConstraint:
    """
    Pulls an interior particle toward the midpoint of its neighbours
    (discrete Laplacian smoothing), ironing out zig-zags left by the
    distance pass.
    """
    def __init__(self, prev, p, next, tension=0.15):
        self.prev = prev
        self.p = p
        self.next = next
        self.tension = float(tension)

    def update(self):
        if self.p.fixed:
            return
        a = self.prev.pos
        c = self.p.pos
        b = self.next.pos
        self.p.pos = Vec2(c.x + (a.x + b.x - 2 * c.x) * self.tension,
                          c.y + (a.y + b.y - 2 * c.y) * self.tension)

    def __repr__(self):
        return f"<{self.__class__.__name__} p={self.p} tension={self.tension}>"
