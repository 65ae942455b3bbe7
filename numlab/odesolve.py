"""Solve y' = x + y with Euler, two-step Adams-Bashforth and the exact formula."""

from __future__ import annotations

import argparse
import math
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Sequence

from numlab.helper import (
    Reader,
    Writer,
    _default_write,
    check_bounds,
    fmt,
    get_double,
    is_out_bound,
    is_zero,
)

PRECISE_DIGITS = 4
GNUPLOT_SCRIPT = "problem3.plt"


def main_fn(x: float, y: float) -> float:
    """Right-hand side f(x, y) = x + y."""
    return x + y


def euler_step(y_k: float, fn_k: float, delta_x: float) -> float:
    """One explicit Euler step."""
    return y_k + fn_k * delta_x


@dataclass(frozen=True)
class OdePoint:
    """A solution sample: position, value and slope there."""

    x: float
    y: float
    f: float


@dataclass(frozen=True)
class OdeSetup:
    """Interval, step and initial condition of the problem."""

    a: float
    b: float
    dx: float
    x: float
    y: float
    f: float
    n: int

    @classmethod
    def from_bounds(
        cls, a: float, b: float, x0: float, y0: float, dx: float
    ) -> "OdeSetup":
        """Build a setup; the number of points covers [a, b] with step dx."""
        if dx == 0:
            raise ValueError("dx can't be zero")
        n = math.ceil((b - a) / dx) + 1
        if n < 2:
            raise ValueError("the interval must hold at least two points")
        return cls(a, b, dx, x0, y0, main_fn(x0, y0), n)

    def start(self) -> OdePoint:
        return OdePoint(self.x, self.y, self.f)


def _euler_next(point: OdePoint, dx: float) -> OdePoint:
    x = point.x + dx
    y = euler_step(point.y, point.f, dx)
    return OdePoint(x, y, main_fn(x, y))


def adams_bashforth(setup: OdeSetup) -> list[OdePoint]:
    """Two-step Adams-Bashforth, started with one Euler step."""
    first = setup.start()
    points = [first, _euler_next(first, setup.dx)]
    while len(points) < setup.n:
        prev, prev2 = points[-1], points[-2]
        y = prev.y + setup.dx / 2 * (3 * prev.f - prev2.f)
        x = prev.x + setup.dx
        points.append(OdePoint(x, y, main_fn(x, y)))
    return points


def euler(setup: OdeSetup) -> list[OdePoint]:
    """Explicit Euler method."""
    points = [setup.start()]
    while len(points) < setup.n:
        points.append(_euler_next(points[-1], setup.dx))
    return points


def precise(setup: OdeSetup) -> list[OdePoint]:
    """Samples of the analytical solution y = C*exp(x) - x - 1."""
    first = setup.start()
    constant = (first.x + first.y + 1) / math.exp(first.x)
    points = [first]
    while len(points) < setup.n:
        x = points[-1].x + setup.dx
        y = constant * math.exp(x) - x - 1
        points.append(OdePoint(x, y, main_fn(x, y)))
    return points


def write_points(points: Iterable[OdePoint], filename: str | Path) -> None:
    """Write "x y" lines with fixed four-digit precision."""
    with open(filename, "w", encoding="ascii") as out:
        for p in points:
            out.write(f"{p.x:.{PRECISE_DIGITS}f} {p.y:.{PRECISE_DIGITS}f}\n")


def get_dx(
    upper_bound: float,
    read: Optional[Reader] = None,
    write: Optional[Writer] = None,
) -> float:
    """Ask for a non-zero step that does not exceed ``upper_bound``."""
    write = write or _default_write
    dx = get_double("dx => ", read, write)
    while is_zero(dx) or is_out_bound(dx, upper_bound):
        write("Warning: ")
        if is_zero(dx):
            write("dx can't be zero.\n")
        else:
            write(f"{fmt(dx)} greater then {fmt(upper_bound)}\n")
        write("Please re-enter dx.\n")
        dx = get_double("dx => ", read, write)
    return dx


def run_gnuplot(script: str = GNUPLOT_SCRIPT) -> int:
    """Run gnuplot on ``script`` and return its exit status."""
    try:
        return subprocess.run(["gnuplot", script], check=False).returncode
    except FileNotFoundError:
        return 127


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Ask for the problem, write the three solutions and plot them."""
    parser = argparse.ArgumentParser(description="Solve y' = x + y three ways.")
    parser.parse_args(argv)

    a = get_double("a => ")
    b = get_double("b => ")
    a, b = check_bounds(a, b)

    x0 = get_double("x0 => ")
    while x0 < a or x0 > b:
        print(
            f"Warning: {fmt(x0)} not in range [{fmt(a)}, {fmt(b)}]. "
            "Please re-enter x0 which in correct range."
        )
        x0 = get_double("x0 => ")
    y0 = get_double("y0 => ")
    dx = get_dx(b)

    setup = OdeSetup.from_bounds(a, b, x0, y0, dx)
    outputs = {
        "adams_bashforth.plt": adams_bashforth(setup),
        "euler.plt": euler(setup),
        "presice.plt": precise(setup),
    }
    for filename, points in outputs.items():
        try:
            write_points(points, filename)
        except OSError:
            print("Error: can't open file.")

    run_gnuplot()
    return 0