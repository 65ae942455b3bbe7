"""Interpolate and approximate the points in points.txt, then plot them."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from numlab.approximation import approximate
from numlab.interpolation import interpolate
from numlab.odesolve import run_gnuplot

PLOT_SCRIPT = "plot.plt"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run interpolation and approximation in the current directory and plot."""
    parser = argparse.ArgumentParser(
        description="Interpolate and fit the points in points.txt."
    )
    parser.parse_args(argv)

    interpolate()
    approximate()
    run_gnuplot(PLOT_SCRIPT)
    return 0