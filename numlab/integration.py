"""Definite integral of x*sin(x)/sqrt(1+x^2) by Simpson and left rectangles."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass
from typing import Optional, Sequence

from numlab.helper import fmt, get_double

STARTING_POINT = 15
INCREMENT = 2
MAX_ITERATIONS = 1_000_000
PRECISION = 4


@dataclass(frozen=True)
class RefinementResult:
    """Outcome of refining the left rectangle sum until it settles."""

    value: float
    steps: int
    delta: float
    iterations: int


def f(x: float) -> float:
    """The integrand."""
    return x * math.sin(x) / math.sqrt(1 + x * x)


def left_rectangle(a: float, b: float, steps: int) -> float:
    """Left rectangle rule with ``steps`` equal subintervals."""
    if steps < 1:
        raise ValueError("steps must be a positive integer")
    h = (b - a) / steps
    return sum(f(a + i * h) for i in range(steps)) * h


def simpson(a: float, b: float) -> float:
    """Single-panel Simpson rule over [a, b]."""
    return (b - a) / 6 * (f(a) + 4 * f((a + b) / 2) + f(b))


def _relative_error(current: float, previous: float) -> float:
    if current == 0:
        return math.nan if current == previous else math.inf
    return abs((current - previous) / current * 100)


def refine_left_rectangle(
    a: float,
    b: float,
    starting_point: int = STARTING_POINT,
    increment: int = INCREMENT,
    max_iterations: int = MAX_ITERATIONS,
) -> RefinementResult:
    """Multiply the step count until the relative change drops to 1% or less."""
    if starting_point < 1:
        raise ValueError("starting_point must be a positive integer")
    if increment < 1:
        raise ValueError("increment must be a positive integer")
    steps = starting_point
    iteration = 0
    delta = 100.0
    current = 0.0
    while iteration < max_iterations and delta > 1.0:
        iteration += 1
        previous = current
        current = left_rectangle(a, b, steps)
        if iteration > 1:
            delta = _relative_error(current, previous)
        steps *= increment
    return RefinementResult(current, steps // increment, delta, iteration)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Ask for bounds and print both estimates of the integral."""
    parser = argparse.ArgumentParser(
        description="Integrate x*sin(x)/sqrt(1+x^2) over [a, b]."
    )
    parser.parse_args(argv)

    a = get_double("Enter bound a: ")
    b = get_double("Enter bound b: ")

    print(f"Simpson: {fmt(simpson(a, b))}")
    result = refine_left_rectangle(a, b)
    print(f"Left Rectangle: {fmt(result.value)}")
    print(f"Total steps for precise accuracy: {result.steps}")
    print(f"Accuracy: {result.delta:.{PRECISION}f}")
    return 0