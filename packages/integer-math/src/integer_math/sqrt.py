from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .checks import as_nonnegative_int, fits_float_exactly


@dataclass(frozen=True, slots=True)
class SqrtResult:
    value: int
    iterations: int
    method: str


def _float_newton(x: int) -> tuple[int, int]:
    a = float(1 + x // 2)
    iterations = 0
    while a * a > x + 0.1:
        nxt = (a + x / a) / 2
        iterations += 1
        # Rounding can stall the iterate just above the root.
        if nxt >= a:
            break
        a = nxt

    r = int(a)
    while r * r > x:
        r -= 1
    while (r + 1) * (r + 1) <= x:
        r += 1
    return r, iterations


def _integer_newton(x: int) -> tuple[int, int]:
    # Seed is a power of two >= sqrt(x); iterates decrease monotonically to floor(sqrt(x)).
    a = 1 << ((x.bit_length() + 1) // 2)
    iterations = 0
    while True:
        b = (a + x // a) // 2
        iterations += 1
        if b >= a:
            return a, iterations
        a = b


def integer_sqrt_trace(x: Any) -> SqrtResult:
    value = as_nonnegative_int(x, "x")
    if value < 2:
        return SqrtResult(value=value, iterations=0, method="trivial")
    if fits_float_exactly(value):
        root, iterations = _float_newton(value)
        return SqrtResult(value=root, iterations=iterations, method="float")
    root, iterations = _integer_newton(value)
    return SqrtResult(value=root, iterations=iterations, method="integer")


def integer_sqrt(x: Any) -> int:
    """Return floor(sqrt(x)) exactly for any non-negative integer."""
    return integer_sqrt_trace(x).value
