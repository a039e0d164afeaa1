import pygame


class TwoPointConstraint:
    """Base class for constraints between two neighbouring particles of a chain."""
    def __init__(self, p1, p2):
        self.p1 = p1
        self.p2 = p2

    def update(self):
        """Apply one relaxation pass. To be implemented by subclasses."""
        raise NotImplementedError("Subclasses should implement this method.")

    def error(self):
        """Signed residual of the constraint. To be implemented by subclasses."""
        raise NotImplementedError("Subclasses should implement this method.")

    def __repr__(self):
        return f"<{self.__class__.__name__} p1={self.p1} p2={self.p2}>"

    def draw(self, screen, color=(0, 0, 0)):
        """Debug overlay: the raw segment between the two particles."""
        pygame.draw.line(screen, color,
                         (int(self.p1.pos.x), int(self.p1.pos.y)),
                         (int(self.p2.pos.x), int(self.p2.pos.y)), 1)
