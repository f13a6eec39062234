from collections.abc import Iterable, Sequence

from errors import DegenerateHullError, NotConvexError
from geometry import Point
from graham_scan import ConvexHull, compute_convex_hull
from rectangle import Rectangle


def _check_vertex_sequence(vertices: tuple[Point, ...]):
    """
    A raw vertex sequence must be its own hull, listed counter-clockwise
    from any starting vertex.
    """
    hull = compute_convex_hull(vertices).vertices
    if len(hull) < 3:
        raise DegenerateHullError(
            f"Bounding rectangles need at least 3 non-collinear vertices, got {len(hull)} hull vertices"
        )
    start = vertices.index(hull[0])
    if vertices[start:] + vertices[:start] != hull:
        raise NotConvexError(
            f"Vertices are not a strictly convex counter-clockwise polygon: {', '.join(map(str, vertices))}"
        )


def hull_vertices(hull: ConvexHull | Sequence) -> tuple[Point, ...]:
    """
    Vertices of a hull given as ConvexHull or as a sequence in
    counter-clockwise order. Raises DegenerateHullError below three
    vertices and NotConvexError for a sequence that is not its own hull
    (repeated vertices, collinear runs, clockwise order).
    """
    if isinstance(hull, ConvexHull):
        vertices = hull.vertices
    else:
        vertices = tuple(Point.of(p) for p in hull)
    if len(vertices) < 3:
        raise DegenerateHullError(
            f"Bounding rectangles need a hull of at least 3 vertices, got {len(vertices)}"
        )
    if not isinstance(hull, ConvexHull):
        _check_vertex_sequence(vertices)
    return vertices


def edge_rectangle(
    vertices: Sequence[Point],
    i: int,
    right: int,
    top: int,
    left: int,
) -> Rectangle:
    """
    Rectangle with one side on the edge (vertices[i], vertices[i + 1]).

    `right`, `top` and `left` index the vertices with maximal projection
    along the edge, maximal distance from the edge line, and minimal
    projection along the edge. Indices wrap around the hull.

    Projections are taken on the unnormalized edge vector d and its normal
    n = (-d.y, d.x); a point with projections (u, v) is (u*d + v*n) / |d|^2.
    """
    n = len(vertices)
    p = vertices[i % n]
    d = vertices[(i + 1) % n] - p
    normal = Point(-d.y, d.x)
    length_sq = d.dot(d)

    u_min = vertices[left % n].dot(d)
    u_max = vertices[right % n].dot(d)
    v_min = p.dot(normal)
    v_max = vertices[top % n].dot(normal)

    def corner(u, v) -> Point:
        return Point(
            (u * d.x + v * normal.x) / length_sq,
            (u * d.y + v * normal.y) / length_sq,
        )

    return Rectangle(
        corners=(
            corner(u_min, v_min),
            corner(u_max, v_min),
            corner(u_max, v_max),
            corner(u_min, v_max),
        ),
        edge=(p, vertices[(i + 1) % n]),
    )


def compute_bounding_rectangles(hull: ConvexHull | Sequence) -> list[Rectangle]:
    """
    Rotating calipers: one minimal enclosing rectangle per hull edge, in edge order.

    Three calipers track the extreme vertices for the current edge direction d:
    farthest along d (right), farthest from the edge line (top) and
    farthest against d (left). The fourth caliper is the edge itself.
    As the edge index grows the extremes only move forward around the hull,
    so the sweep over all edges takes O(n) time.
    """
    vertices = hull_vertices(hull)
    n = len(vertices)

    def vertex(k: int) -> Point:
        return vertices[k % n]

    rectangles = []
    right = top = left = 0
    for i in range(n):
        d = vertex(i + 1) - vertex(i)

        right = max(right, i + 1)
        while d.dot(vertex(right + 1) - vertex(right)) > 0:
            right += 1

        top = max(top, i + 1)
        while d.cross(vertex(top + 1) - vertex(top)) > 0:
            top += 1

        # past `right` the projection on d decreases down to the minimum,
        # ties are skipped so the pointer never stops on the maximum side
        left = max(left, right)
        while d.dot(vertex(left + 1) - vertex(left)) <= 0:
            left += 1

        rectangles.append(edge_rectangle(vertices, i, right, top, left))
    return rectangles


def compute_minimum_bounding_rectangle(hull: ConvexHull | Sequence) -> Rectangle:
    """
    Rectangle of minimum area among the edge-aligned ones.
    Ties go to the first rectangle in edge order.
    """
    return min(compute_bounding_rectangles(hull), key=lambda r: r.area)


def minimum_bounding_rectangle(points: Iterable) -> Rectangle:
    """
    Minimum-area rectangle enclosing an arbitrary point set.
    """
    return compute_minimum_bounding_rectangle(compute_convex_hull(points))
