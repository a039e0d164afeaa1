import math


class Vec2:
    def __init__(self, x, y):
        self.x = float(x)
        self.y = float(y)

    @classmethod
    def of(cls, value):
        """Coerce a Vec2 or any (x, y) pair (e.g. a pygame mouse position) into a new Vec2."""
        if isinstance(value, Vec2):
            return value.copy()
        return cls(value[0], value[1])

    def __add__(self, other):
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar):
        return Vec2(self.x * scalar, self.y * scalar)

    def __truediv__(self, scalar):
        return Vec2(self.x / scalar, self.y / scalar)

    def __iter__(self):
        yield self.x
        yield self.y

    def length(self):
        return math.hypot(self.x, self.y)

    def distance_to(self, other):
        return math.hypot(other.x - self.x, other.y - self.y)

    def is_finite(self):
        return math.isfinite(self.x) and math.isfinite(self.y)

    def copy(self):
        return Vec2(self.x, self.y)

    def to_tuple(self):
        return (self.x, self.y)

    def __eq__(self, other):
        if other is None or not isinstance(other, Vec2):
            return False
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def __repr__(self):
        return f"Vec2({self.x:.3f}, {self.y:.3f})"
