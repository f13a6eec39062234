from dataclasses import dataclass, field

from exact import ExactNumber
from geometry import Point, Turn, orientation


@dataclass(frozen=True)
class Rectangle:
    """
    Oriented rectangle with four corners in counter-clockwise order.

    The side corners[0] -> corners[1] lies on the hull edge the rectangle was
    built from. Width is measured along that side, height across it.
    Two rectangles are equal iff their ordered corners are equal.
    """
    corners: tuple[Point, Point, Point, Point]
    edge: tuple[Point, Point] | None = field(default=None, compare=False)

    def __post_init__(self):
        if len(self.corners) != 4:
            raise ValueError(f"Rectangle needs four corners, got {len(self.corners)}")

    def sides(self) -> list[tuple[Point, Point]]:
        c = self.corners
        return [(c[0], c[1]), (c[1], c[2]), (c[2], c[3]), (c[3], c[0])]

    @property
    def width_squared(self) -> ExactNumber:
        return self.corners[0].squared_distance(self.corners[1])

    @property
    def height_squared(self) -> ExactNumber:
        return self.corners[1].squared_distance(self.corners[2])

    @property
    def width(self) -> ExactNumber:
        """
        Exact side length along the generating edge.
        Raises IrrationalRootError when the length is not rational, which is
        the usual case for rotated rectangles; use width_squared there.
        """
        return self.width_squared.sqrt()

    @property
    def height(self) -> ExactNumber:
        """
        Exact side length across the generating edge.
        Raises IrrationalRootError when the length is not rational;
        height_squared is always exact.
        """
        return self.height_squared.sqrt()

    @property
    def area(self) -> ExactNumber:
        # |c0c1 x c0c3| equals width * height for a rectangle, and stays rational
        c0, c1, _, c3 = self.corners
        return abs((c1 - c0).cross(c3 - c0))

    @property
    def is_degenerate(self) -> bool:
        return self.area == 0

    def contains(self, point) -> bool:
        """
        True if the point lies inside the rectangle or on its boundary.
        """
        point = Point.of(point)
        if self.is_degenerate:
            c0, _, c2, _ = self.corners
            return (
                orientation(c0, c2, point) is Turn.COLLINEAR
                and min(c0.x, c2.x) <= point.x <= max(c0.x, c2.x)
                and min(c0.y, c2.y) <= point.y <= max(c0.y, c2.y)
            )
        return all(orientation(a, b, point) is not Turn.RIGHT for a, b in self.sides())

    def __str__(self):
        return "[" + ", ".join(str(c) for c in self.corners) + "]"
