from dataclasses import dataclass
from enum import Enum

from exact import ExactNumber


@dataclass(frozen=True, order=True)
class Point:
    """
    Immutable point with exact rational coordinates.
    Ordered lexicographically by (x, y).
    """
    x: ExactNumber
    y: ExactNumber

    def __post_init__(self):
        # frozen dataclass, so coordinates are normalized through object.__setattr__
        object.__setattr__(self, "x", ExactNumber(self.x))
        object.__setattr__(self, "y", ExactNumber(self.y))

    @classmethod
    def of(cls, value) -> "Point":
        """
        Build a point from a Point or an (x, y) pair.
        """
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(x, y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def dot(self, other: "Point") -> ExactNumber:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Point") -> ExactNumber:
        return self.x * other.y - self.y * other.x

    def squared_distance(self, other: "Point") -> ExactNumber:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def __repr__(self):
        return f"Point({self.x}, {self.y})"

    def __str__(self):
        return f"({self.x}, {self.y})"


class Turn(Enum):
    RIGHT = -1
    COLLINEAR = 0
    LEFT = 1


def cross(o: Point, a: Point, b: Point) -> ExactNumber:
    """
    Cross product of segments oa and ob.
    Positive when o -> a -> b turns counter-clockwise.
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def orientation(a: Point, b: Point, c: Point) -> Turn:
    """
    Classify the walk a -> b -> c as a left turn, right turn or no turn.
    """
    return Turn(cross(a, b, c).sign)


def collinear(p: Point, p0: Point | None, p1: Point | None) -> bool:
    """
    Collinearity check for segments [p, p0] and [p, p1].
    """
    if p0 is None or p1 is None:
        return False
    return orientation(p, p0, p1) is Turn.COLLINEAR


def on_segment(p: Point, a: Point, b: Point) -> bool:
    """
    True if p lies on the closed segment [a, b].
    """
    if not collinear(a, b, p):
        return False
    return min(a.x, b.x) <= p.x <= max(a.x, b.x) and min(a.y, b.y) <= p.y <= max(a.y, b.y)
