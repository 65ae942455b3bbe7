"""Console input helpers and small numeric predicates shared by the tools."""

from __future__ import annotations

import math
import sys
from typing import Callable, Optional

Reader = Callable[[], str]
Writer = Callable[[str], object]


def _default_read() -> str:
    return input()


def _default_write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def fmt(value: float) -> str:
    """Format a number the way a default-precision stream would (six significant digits)."""
    return f"{value:g}"


def sign(val: float) -> int:
    """Return -1, 0 or 1 according to the sign of ``val``."""
    return int(0 < val) - int(val < 0)


def _parse_number(text: str) -> Optional[float]:
    token = text.split()[0]
    try:
        value = float(token)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def get_double(
    prompt: str = "",
    read: Optional[Reader] = None,
    write: Optional[Writer] = None,
) -> float:
    """Prompt for a number until a valid one is entered and return it."""
    read = read or _default_read
    write = write or _default_write
    if prompt:
        write(prompt)
    while True:
        line = read()
        if not line.strip():
            continue
        value = _parse_number(line)
        if value is not None:
            return value
        write("Invalid input. Please enter the number: ")


def check_bounds(
    a: float,
    b: float,
    read: Optional[Reader] = None,
    write: Optional[Writer] = None,
) -> tuple[float, float]:
    """Return the bounds ordered; equal bounds are asked for again."""
    write = write or _default_write
    if a > b:
        write("Warning: ")
        write(f"{fmt(a)} greater then {fmt(b)}\n")
        write("Bounds will be replaced.\n")
        return b, a
    while a == b:
        write("Warning: ")
        write(f"{fmt(a)} can't be equal {fmt(b)}\n")
        write("Please re-enter bounds.\n")
        a = get_double("a: ", read, write)
        b = get_double("b: ", read, write)
    return a, b


def is_zero(x: float) -> bool:
    """True when ``x`` is exactly zero."""
    return sign(x) == 0


def is_out_bound(dx: float, upper_bound: float) -> bool:
    """True when ``dx`` exceeds ``upper_bound``."""
    return dx > upper_bound