import itertools
import logging

from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Polygon

from geometry import Point
from graham_scan import ConvexHull
from rectangle import Rectangle

logger = logging.getLogger(__name__)


def _xy(points) -> tuple[list[float], list[float]]:
    # display boundary: exact coordinates become floats only here
    return [float(p.x) for p in points], [float(p.y) for p in points]


def plot_points(points: list[Point], ax: Axes):
    x, y = _xy(points)
    ax.scatter(x, y, alpha=0.6, s=20, c='gray')


def plot_hull(hull: ConvexHull, ax: Axes, color: str = 'b'):
    xs, ys = _xy(hull.closed())
    if len(hull) > 2:
        ax.add_patch(Polygon(list(zip(xs, ys)), alpha=0.15, facecolor=color, edgecolor=color))
    ax.plot(xs, ys, 'o-', color=color, markersize=4, label=f'Hull ({len(hull)} vertices)')


def plot_rectangle(rect: Rectangle, ax: Axes, color: str = 'r', label: str | None = None, linewidth: float = 2):
    xs, ys = _xy(list(rect.corners) + [rect.corners[0]])
    ax.plot(xs, ys, '-', color=color, linewidth=linewidth, label=label)


def plot_rectangles(rectangles: list[Rectangle], ax: Axes):
    clrs = ['g', 'm', 'c', 'y', 'k']
    color_cycle = itertools.cycle(clrs)
    for rect in rectangles:
        plot_rectangle(rect, ax, color=next(color_cycle), linewidth=0.5)


def render(
    points: list[Point],
    hull: ConvexHull,
    selected: Rectangle | None = None,
    rectangles: list[Rectangle] | None = None,
    title: str | None = None,
) -> Figure:
    """
    Draw points, hull, optionally all candidate rectangles, and the selected one.
    """
    fig = Figure(figsize=(8, 8))
    ax = fig.add_subplot(111)

    plot_points(points, ax=ax)
    if rectangles:
        plot_rectangles(rectangles, ax)
    plot_hull(hull, ax)
    if selected is not None:
        plot_rectangle(selected, ax, label=f'Area ~{float(selected.area):.2f}')

    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_title(title or f"Minimum bounding rectangle ({len(points)} points)")
    ax.grid(True, alpha=0.3)
    ax.axis('equal')
    ax.legend(loc='best', fontsize='small')
    return fig


def export_plot(filename, *args, **kwargs):
    fig = render(*args, **kwargs)
    fig.savefig(filename, dpi=150, bbox_inches='tight')
    logger.info("Plot saved to %s", filename)
    return fig
