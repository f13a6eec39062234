import functools

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from errors import InsufficientPointsError
from exact import ExactNumber
from geometry import Point, Turn, cross, on_segment, orientation


@dataclass(frozen=True)
class ConvexHull:
    """
    Convex hull vertices in strict counter-clockwise order,
    starting from the lowest point (lowest y, then lowest x).

    One or two vertices mean the input was a single point or a line segment.
    """
    vertices: tuple[Point, ...]

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.vertices)

    def __getitem__(self, index):
        return self.vertices[index]

    @property
    def is_degenerate(self) -> bool:
        return len(self.vertices) < 3

    def edges(self) -> Iterator[tuple[Point, Point]]:
        """
        Consecutive vertex pairs, closing edge included.
        A segment hull has a single edge, a point hull has none.
        """
        n = len(self.vertices)
        if n == 2:
            yield self.vertices[0], self.vertices[1]
        elif n > 2:
            for i in range(n):
                yield self.vertices[i], self.vertices[(i + 1) % n]

    def closed(self) -> list[Point]:
        """
        Vertex ring with the first vertex repeated at the end.
        """
        return list(self.vertices) + [self.vertices[0]]

    @property
    def area(self) -> ExactNumber:
        """
        Exact enclosed area (shoelace formula), zero for degenerate hulls.
        """
        if self.is_degenerate:
            return ExactNumber(0)
        pivot = self.vertices[0]
        doubled = ExactNumber(0)
        for a, b in zip(self.vertices[1:], self.vertices[2:]):
            doubled += cross(pivot, a, b)
        return doubled / 2

    def contains(self, point) -> bool:
        """
        True if the point lies inside the hull or on its boundary.
        """
        point = Point.of(point)
        if len(self.vertices) == 1:
            return point == self.vertices[0]
        if len(self.vertices) == 2:
            return on_segment(point, self.vertices[0], self.vertices[1])
        return all(orientation(a, b, point) is not Turn.RIGHT for a, b in self.edges())


def lowest_point(points: Iterable[Point]) -> Point:
    """
    Point with the lowest y, ties broken by the lowest x.
    """
    return min(points, key=lambda p: (p.y, p.x))


def sort_by_polar_angle(pivot: Point, points: Iterable[Point]) -> list[Point]:
    """
    Sort points by polar angle around the pivot, which must be the lowest point.
    Of the points sharing an angle only the farthest from the pivot is kept.

    Every point lies in the half-plane above the pivot (or to its right on the
    same row), so the sign of the cross product is a total order on angles.
    """
    def compare(a: Point, b: Point) -> int:
        turn = cross(pivot, a, b).sign
        if turn != 0:
            return -turn
        # same angle: farthest first, so it survives the filter below
        da = pivot.squared_distance(a)
        db = pivot.squared_distance(b)
        return (db > da) - (db < da)

    ordered = sorted(points, key=functools.cmp_to_key(compare))

    result = []
    for p in ordered:
        if result and orientation(pivot, result[-1], p) is Turn.COLLINEAR:
            continue
        result.append(p)
    return result


def compute_convex_hull(points: Iterable) -> ConvexHull:
    """
    Graham scan. Accepts Points or (x, y) pairs in any order, duplicates allowed.
    The input is not modified. Time complexity: O(n*log(n)).
    """
    distinct = list(dict.fromkeys(Point.of(p) for p in points))
    if not distinct:
        raise InsufficientPointsError("Convex hull of an empty point set is undefined")

    pivot = lowest_point(distinct)
    others = [p for p in distinct if p != pivot]
    if len(others) <= 1:
        return ConvexHull(tuple([pivot] + others))

    candidates = sort_by_polar_angle(pivot, others)
    if len(candidates) == 1:
        # all points on one ray from the pivot
        return ConvexHull((pivot, candidates[0]))

    stack = [pivot, candidates[0]]
    for p in candidates[1:]:
        while len(stack) >= 2 and orientation(stack[-2], stack[-1], p) is not Turn.LEFT:
            stack.pop()
        stack.append(p)
    return ConvexHull(tuple(stack))
