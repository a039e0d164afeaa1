import logging

from ropesim.Vec2 import Vec2

logger = logging.getLogger(__name__)


class EndpointTracker:
    """
    Follows anchor motion.

    The two fixed ends jump straight to their new anchors. Interior particles
    receive a one-off velocity impulse blended from both end deltas, weighted
    linearly by how close they are to each end, so the chain catches up over
    the following frames instead of snapping.
    """

    def __init__(self, falloff=0.8):
        self.falloff = float(falloff)

    def influence(self, i, n):
        """(start weight, end weight) for particle i of an n-particle chain."""
        return (n - 1 - i) / (n - 1), i / (n - 1)

    def track(self, rope, start, end):
        ps = rope.particles
        if len(ps) < 2:
            return
        start = Vec2.of(start)
        end = Vec2.of(end)

        rope.retarget(start.distance_to(end))

        first = ps[0]
        last = ps[-1]
        start_delta = start - first.pos
        end_delta = end - last.pos

        first.pos = start.copy()
        last.pos = end.copy()

        n = len(ps)
        for i in range(1, n - 1):
            w_start, w_end = self.influence(i, n)
            ps[i].apply_force((start_delta * w_start + end_delta * w_end) * self.falloff)

        logger.debug("Endpoints moved by %s / %s", start_delta, end_delta)
