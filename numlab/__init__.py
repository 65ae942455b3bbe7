"""Numerical methods: quadrature, ODE solvers, interpolation and least-squares fitting."""

__version__ = "0.1.0"

__all__ = [
    "helper",
    "integration",
    "odesolve",
    "interpolation",
    "approximation",
    "fitting",
]