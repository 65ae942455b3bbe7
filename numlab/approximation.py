"""Least-squares linear and exponential fits of points read from a file."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Optional, Sequence

from numlab.helper import Writer, _default_write, fmt
from numlab.interpolation import POINTS_FILE, Point, read_points

APPROX_FILE = "approx.txt"
SAMPLES = 100
MARGIN = 0.5
EXP_OFFSET = 10


def _solve_normal(
    n: int, sx: float, sx2: float, sy: float, sxy: float
) -> tuple[float, float]:
    det = n * sx2 - sx * sx
    if det == 0:
        raise ValueError("points need at least two distinct x values")
    intercept = (sy * sx2 - sx * sxy) / det
    slope = (n * sxy - sx * sy) / det
    return intercept, slope


def linear_ls(points: Sequence[Point]) -> tuple[float, float]:
    """Fit f(x) = a1*x + a0 and return (a0, a1)."""
    return _solve_normal(
        len(points),
        sum(p.x for p in points),
        sum(p.x * p.x for p in points),
        sum(p.y for p in points),
        sum(p.x * p.y for p in points),
    )


def exponential_ls(points: Sequence[Point]) -> tuple[float, float, float]:
    """Fit f(x) = a + b*exp(c*x) by linearising with a = min(y) - 10.

    Returns (a, b, c).
    """
    if not points:
        raise ValueError("at least one point is required")
    a = min(p.y for p in points) - EXP_OFFSET
    logs = [math.log(p.y - a) for p in points]
    ln_b, c = _solve_normal(
        len(points),
        sum(p.x for p in points),
        sum(p.x * p.x for p in points),
        sum(logs),
        sum(p.x * ly for p, ly in zip(points, logs)),
    )
    return a, math.exp(ln_b), c


def _standard_error(residuals: list[float], parameters: int) -> float:
    freedom = len(residuals) - parameters
    if freedom <= 0:
        raise ValueError(f"more than {parameters} points are required")
    return math.sqrt(sum(r * r for r in residuals) / freedom)


def linear_error(points: Sequence[Point], a0: float, a1: float) -> float:
    """Standard error of the linear fit (n - 2 degrees of freedom)."""
    return _standard_error([p.y - (a1 * p.x + a0) for p in points], 2)


def exponential_error(points: Sequence[Point], a: float, b: float, c: float) -> float:
    """Standard error of the exponential fit (n - 3 degrees of freedom)."""
    return _standard_error([p.y - (a + b * math.exp(c * p.x)) for p in points], 3)


def _error_text(compute) -> str:
    try:
        return fmt(compute())
    except ValueError:
        return fmt(math.nan)


def approximate(
    points_path: str | Path = POINTS_FILE,
    output_path: str | Path = APPROX_FILE,
    write: Optional[Writer] = None,
) -> tuple[tuple[float, float], tuple[float, float, float]]:
    """Fit both models, report them and save samples for plotting.

    Returns ((a0, a1), (a, b, c)).
    """
    write = write or _default_write
    points = read_points(points_path)
    if not points:
        raise ValueError("no points to approximate")

    a0, a1 = linear_ls(points)
    write(f"\nLinear: f(x) = {fmt(a1)}*x + {fmt(a0)}\n")
    write(f"Standard error: {_error_text(lambda: linear_error(points, a0, a1))}\n")

    a, b, c = exponential_ls(points)
    write(f"\nExponential: f(x) = {fmt(a)} + {fmt(b)}*exp({fmt(c)}*x)\n")
    write(
        "Standard error: "
        f"{_error_text(lambda: exponential_error(points, a, b, c))}\n"
    )

    x_min = points[0].x - MARGIN
    x_max = points[-1].x + MARGIN
    dx = (x_max - x_min) / SAMPLES
    with open(output_path, "w", encoding="ascii") as out:
        for i in range(SAMPLES + 1):
            x = x_min + i * dx
            y_lin = a1 * x + a0
            y_exp = a + b * math.exp(c * x)
            out.write(f"{fmt(x)} {fmt(y_lin)} {fmt(y_exp)}\n")
    return (a0, a1), (a, b, c)