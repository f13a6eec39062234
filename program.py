import argparse
import csv
import logging
import os
import sys
import time

from errors import DegenerateHullError, GeometryError
from geometry import Point
from graham_scan import ConvexHull, compute_convex_hull
from point_io import DISTRIBUTIONS, generate_points, load_points, parse_points
from rectangle import Rectangle
from rotating_calipers import compute_bounding_rectangles
from visualization import export_plot

logger = logging.getLogger(__name__)


class RectangleAnalyzer:
    """
    Holds the caller-side state around the kernel: the point list,
    the last hull and its rectangles, and the selected rectangle.
    """

    def __init__(self):
        self.points: list[Point] = []
        self.hull: ConvexHull | None = None
        self.rectangles: list[Rectangle] = []
        self.minimum: Rectangle | None = None
        self.selected: Rectangle | None = None
        self.source: str | None = None
        self.execution_time = 0.0

    def load_file(self, filename: str):
        self.points = load_points(filename)
        self.source = os.path.basename(filename)

    def load_text(self, text: str):
        self.points = parse_points(text)
        self.source = "command line"

    def generate_points(self, n: int, distribution: str, seed: int | None):
        self.points = generate_points(n, distribution, seed=seed)
        self.source = f"generated_{distribution}_{n}"

    def run_analysis(self):
        """
        Compute the hull, every edge-aligned rectangle and the minimum one.
        A degenerate hull leaves the rectangle list empty.
        """
        self.rectangles = []
        self.minimum = self.selected = None

        start = time.perf_counter()
        self.hull = compute_convex_hull(self.points)
        try:
            self.rectangles = compute_bounding_rectangles(self.hull)
            self.minimum = min(self.rectangles, key=lambda r: r.area)
        except DegenerateHullError as e:
            logger.warning("Not enough distinct points for rectangles: %s", e)
        self.execution_time = time.perf_counter() - start

        self.selected = self.minimum
        logger.info(
            "Hull of %d points has %d vertices, %d rectangles in %.6f s",
            len(self.points), len(self.hull), len(self.rectangles), self.execution_time,
        )

    def select(self, index: int):
        """
        Select the rectangle with the given 1-based index.
        """
        if not 1 <= index <= len(self.rectangles):
            raise IndexError(f"Rectangle {index} out of range 1..{len(self.rectangles)}")
        self.selected = self.rectangles[index - 1]

    def generate_report(self) -> str:
        sep = '=' * 60
        lines = [
            sep,
            "MINIMUM BOUNDING RECTANGLE REPORT",
            sep,
            f"Source: {self.source or '-'}",
            f"Points: {len(self.points)}",
            f"Hull vertices: {len(self.hull) if self.hull is not None else 0}",
        ]
        if self.hull is not None:
            lines.append("Hull: " + ", ".join(str(p) for p in self.hull))
            lines.append(f"Hull area: {self.hull.area}")
        lines.append(f"Execution time: {self.execution_time:.6f} s")
        lines.append("")

        if not self.rectangles:
            lines.append("Not enough distinct points for a bounding rectangle.")
        else:
            lines.append("Rectangles:")
            for i, rect in enumerate(self.rectangles, start=1):
                mark = "  <- minimum" if rect == self.minimum else ""
                lines.append(f"  rectangle {i}, area: ~{float(rect.area):.2f}{mark}")
            lines.append("")
            lines.append(f"Minimum area: {self.minimum.area}")
            lines.append("Minimum corners: " + str(self.minimum))
        lines.append(sep)
        return "\n".join(lines) + "\n"

    def save_results(self, filename: str):
        if filename.endswith('.csv'):
            self.save_results_csv(filename)
        else:
            with open(filename, 'w', encoding='utf-8') as f:
                f.write(self.generate_report())
        logger.info("Results saved to %s", filename)

    def save_results_csv(self, filename: str):
        with open(filename, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(["Rectangle", "Area", "Approximate area", "Corners", "Minimum"])
            for i, rect in enumerate(self.rectangles, start=1):
                writer.writerow([i, str(rect.area), f"{float(rect.area):.2f}", str(rect), rect == self.minimum])

    def export_plot(self, filename: str, show_all: bool = False):
        export_plot(
            filename,
            self.points,
            self.hull,
            selected=self.selected,
            rectangles=self.rectangles if show_all else None,
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convex hull and minimum bounding rectangle analyzer")

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--file", help="Point file: count on the first line, then 'x y' per line")
    source.add_argument("--points", help="Points as text, e.g. \"(60,10), (60,20), (70,10)\"")
    source.add_argument("--generate", type=int, metavar="N", help="Generate N random points")

    parser.add_argument("--distribution", choices=DISTRIBUTIONS, default="uniform")
    parser.add_argument(
        "--seed",
        type=int,
        default=os.getenv("HULL_SEED", "42"),
        help="Random seed for --generate (default: $HULL_SEED or 42)",
    )
    parser.add_argument("--report", help="Save the report (.csv for a table, text otherwise)")
    parser.add_argument("--plot", help="Save a plot of the hull and the selected rectangle")
    parser.add_argument("--all-rectangles", action="store_true", help="Draw every candidate rectangle on the plot")
    parser.add_argument("--rectangle", type=int, metavar="K", help="Select rectangle K (1-based) instead of the minimum")
    parser.add_argument(
        "--log-level",
        default=os.getenv("HULL_LOG_LEVEL", "WARNING"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    analyzer = RectangleAnalyzer()
    try:
        if args.file:
            analyzer.load_file(args.file)
        elif args.points is not None:
            analyzer.load_text(args.points)
        else:
            analyzer.generate_points(args.generate, args.distribution, args.seed)

        analyzer.run_analysis()
        if args.rectangle is not None:
            analyzer.select(args.rectangle)

        print(analyzer.generate_report(), end="")
        if args.report:
            analyzer.save_results(args.report)
        if args.plot:
            analyzer.export_plot(args.plot, show_all=args.all_rectangles)
    except (GeometryError, OSError, IndexError) as e:
        logger.error("%s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
