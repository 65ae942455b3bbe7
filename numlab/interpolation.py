"""Nearest-neighbour and Lagrange interpolation of points read from a file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from numlab.helper import Writer, _default_write, fmt

MAX_POINTS = 4
POINTS_FILE = "points.txt"
INTERP_FILE = "interp.txt"
ORIGINAL_FILE = "original.txt"
PREVIEW_ROWS = 5


@dataclass(frozen=True)
class Point:
    """A data point (x, y)."""

    x: float
    y: float


def read_points(path: str | Path, limit: Optional[int] = MAX_POINTS) -> list[Point]:
    """Read whitespace-separated "x y" pairs, stopping at the first non-number.

    Raises ValueError when the file holds more than ``limit`` points.
    """
    with open(path, encoding="utf-8") as source:
        tokens = source.read().split()
    points: list[Point] = []
    for x_text, y_text in zip(tokens[0::2], tokens[1::2]):
        try:
            point = Point(float(x_text), float(y_text))
        except ValueError:
            break
        if limit is not None and len(points) >= limit:
            raise ValueError(f"at most {limit} points are supported")
        points.append(point)
    return points


def _require_points(points: Sequence[Point]) -> None:
    if not points:
        raise ValueError("at least one point is required")


def nearest_neighbor(points: Sequence[Point], x: float) -> float:
    """Return the y of the point closest to ``x``; the first one wins a tie."""
    _require_points(points)
    return min(points, key=lambda p: abs(x - p.x)).y


def lagrange(points: Sequence[Point], x: float) -> float:
    """Evaluate the Lagrange polynomial through ``points`` at ``x``."""
    _require_points(points)
    result = 0.0
    for i, pi in enumerate(points):
        term = pi.y
        for j, pj in enumerate(points):
            if i != j:
                term *= (x - pj.x) / (pi.x - pj.x)
        result += term
    return result


def interpolation_grid(points: Sequence[Point]) -> tuple[float, list[float]]:
    """Return the step and the sample positions spanning the points' x range."""
    if len(points) < 2:
        raise ValueError("at least two points are required")
    x_min = min(p.x for p in points)
    x_max = max(p.x for p in points)
    if x_min == x_max:
        raise ValueError("points must not all share the same x")
    dx = abs(x_max - x_min) / (10.0 * (len(points) - 1))
    steps = int((x_max - x_min) / dx) + 1
    return dx, [x_min + i * dx for i in range(steps)]


def interpolate(
    points_path: str | Path = POINTS_FILE,
    output_path: str | Path = INTERP_FILE,
    original_path: str | Path = ORIGINAL_FILE,
    write: Optional[Writer] = None,
) -> list[tuple[float, float, float]]:
    """Interpolate the points in ``points_path`` and save the samples.

    Each row is (x, nearest-neighbour value, Lagrange value).
    """
    write = write or _default_write
    points = read_points(points_path)
    dx, xs = interpolation_grid(points)

    write(f"Range: [{fmt(xs[0])}, {fmt(max(p.x for p in points))}]\n")
    write(f"Step: {fmt(dx)}\n")
    write("\nFirst 5 values:\n")
    write("x\tNearest\tLagrange\n")

    rows = [(x, nearest_neighbor(points, x), lagrange(points, x)) for x in xs]
    with open(output_path, "w", encoding="ascii") as out:
        for index, (x, y_nn, y_l) in enumerate(rows):
            out.write(f"{fmt(x)} {fmt(y_nn)} {fmt(y_l)}\n")
            if index < PREVIEW_ROWS:
                write(f"{fmt(x)}\t{fmt(y_nn)}\t{fmt(y_l)}\n")
    write(f"Saved to {output_path}\n")

    with open(original_path, "w", encoding="ascii") as orig:
        for p in points:
            orig.write(f"{fmt(p.x)} {fmt(p.y)}\n")
    return rows