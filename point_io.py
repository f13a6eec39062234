import logging
import re

from collections.abc import Iterable
from pathlib import Path

import numpy as np

from errors import ConstructionError, InputError, PointFormatError
from exact import ExactNumber
from geometry import Point

logger = logging.getLogger(__name__)

DISTRIBUTIONS = ("uniform", "circle", "gaussian", "clusters")

_NUMBER = re.compile(r"[-+]?\d+(?:\.\d+|/\d+)?")


def parse_points(text: str) -> list[Point]:
    """
    Parse points from free text such as "(60,10), (60,20), (70,10)".
    Every number found is a coordinate, consecutive numbers pair up into points.
    """
    numbers = _NUMBER.findall(text)
    if len(numbers) % 2:
        raise PointFormatError(f"Odd number of coordinates ({len(numbers)}) in {text!r}")
    coords = [ExactNumber(num) for num in numbers]
    return [Point(x, y) for x, y in zip(coords[::2], coords[1::2])]


def _parse_line(line: str, lineno: int) -> Point:
    parts = line.replace(",", " ").split()
    if len(parts) != 2:
        raise PointFormatError(f"Line {lineno}: expected 'x y', got {line!r}")
    try:
        return Point(ExactNumber(parts[0]), ExactNumber(parts[1]))
    except (InputError, ConstructionError) as e:
        raise PointFormatError(f"Line {lineno}: {e}") from e


def load_points(path: str | Path) -> list[Point]:
    """
    Read points from a file: first line holds the count,
    then one 'x y' pair per line. Coordinates may be integers,
    fractions like 3/4 or decimals like 1.25; all are read exactly.
    """
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        lines = [line.strip() for line in f]
    lines = [line for line in lines if line and not line.startswith('#')]

    if not lines:
        raise PointFormatError(f"{path}: file is empty")
    try:
        n = int(lines[0])
    except ValueError as e:
        raise PointFormatError(f"{path}: first line must be the point count, got {lines[0]!r}") from e
    if n < 0 or len(lines) - 1 < n:
        raise PointFormatError(f"{path}: expected {n} points, found {len(lines) - 1}")
    if len(lines) - 1 > n:
        logger.warning("%s: ignoring %d lines after the declared %d points", path, len(lines) - 1 - n, n)

    points = [_parse_line(line, i + 2) for i, line in enumerate(lines[1:n + 1])]
    logger.info("Loaded %d points from %s", len(points), path)
    return points


def save_points(path: str | Path, points: Iterable[Point]):
    points = [Point.of(p) for p in points]
    with open(path, 'w', encoding='utf-8') as f:
        f.write(f"{len(points)}\n")
        for p in points:
            f.write(f"{p.x} {p.y}\n")
    logger.info("Saved %d points to %s", len(points), path)


def generate_points(n: int, distribution: str = "uniform", seed: int | None = 42, size: int = 1000) -> list[Point]:
    """
    Random points with integer coordinates in roughly [0, size] x [0, size].
    Samples are drawn as floats and rounded here, before entering the kernel.
    """
    if distribution not in DISTRIBUTIONS:
        raise InputError(f"Unknown distribution {distribution!r}, expected one of {', '.join(DISTRIBUTIONS)}")
    if n < 0:
        raise InputError(f"Point count must be non-negative, got {n}")

    if seed is not None:
        np.random.seed(seed)
    half = size / 2

    if distribution == "uniform":
        xs = np.random.uniform(0, size, n)
        ys = np.random.uniform(0, size, n)
    elif distribution == "circle":
        angle = np.random.uniform(0, 2 * np.pi, n)
        r = half * np.sqrt(np.random.uniform(0, 1, n))
        xs = half + r * np.cos(angle)
        ys = half + r * np.sin(angle)
    elif distribution == "gaussian":
        xs = np.random.normal(half, size * 0.15, n)
        ys = np.random.normal(half, size * 0.15, n)
    else:
        n_clusters = 5
        centers = np.random.uniform(size * 0.1, size * 0.9, (n_clusters, 2))
        labels = np.random.randint(0, n_clusters, n)
        xs = np.random.normal(centers[labels, 0], size * 0.05)
        ys = np.random.normal(centers[labels, 1], size * 0.05)

    xs = np.rint(xs).astype(np.int64)
    ys = np.rint(ys).astype(np.int64)
    logger.debug("Generated %d %s points (seed=%s)", n, distribution, seed)
    return [Point(int(x), int(y)) for x, y in zip(xs, ys)]
