# numlab

A small collection of classic numerical methods. Each one can be used as a
library function, and there is also an interactive command for each.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command            | What it does |
|--------------------|--------------|
| `numlab-integrate` | Asks for bounds `a` and `b` and integrates `x*sin(x)/sqrt(1+x^2)` two ways: with a single-panel Simpson formula, and with left rectangles. For the rectangles it starts at 15 steps and doubles the count until the relative change is 1 % or less. |
| `numlab-ode`       | Asks for bounds, an initial point `(x0, y0)` and a step `dx`. It solves `y' = x + y` with Euler's method, with the two-step Adams–Bashforth method and with the exact solution, and writes `adams_bashforth.plt`, `euler.plt` and `presice.plt`. Then it runs `gnuplot problem3.plt`. |
| `numlab-fit`       | Reads up to four points from `points.txt`. It writes nearest-neighbour and Lagrange interpolation to `interp.txt` and the points to `original.txt`. It fits a line and `a + b*exp(c*x)` by least squares and writes samples to `approx.txt`. Then it runs `gnuplot plot.plt`. |

The plotting commands expect `gnuplot` on the `PATH` and the matching
`.plt` script in the working directory. If `gnuplot` is missing, the data
files are still written.

## Library use

```python
from numlab.integration import simpson, refine_left_rectangle
from numlab.odesolve import OdeSetup, euler, adams_bashforth, precise
from numlab.interpolation import Point, lagrange, nearest_neighbor
from numlab.approximation import linear_ls, exponential_ls

print(simpson(0.0, 1.0))
result = refine_left_rectangle(0.0, 1.0)
print(result.value, result.steps, result.delta)

setup = OdeSetup.from_bounds(0.0, 1.0, 0.0, 1.0, 0.1)
for point in euler(setup):
    print(point.x, point.y)

points = [Point(0, 1), Point(1, 3), Point(2, 5), Point(3, 7)]
print(lagrange(points, 1.5))
print(linear_ls(points))
```

The input helpers in `numlab.helper` are `get_double`, `check_bounds` and
`odesolve.get_dx`. They take `read` and `write` callables, so the prompts can
be driven from code as well as from a terminal.

## What is not included

The package has no root-finding method and no command for one. It covers
quadrature, ODE solving, interpolation and least-squares fitting only.