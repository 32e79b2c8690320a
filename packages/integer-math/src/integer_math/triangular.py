from __future__ import annotations

import math
from typing import Any

from .checks import as_nonnegative_int, fits_float_exactly
from .sqrt import integer_sqrt


def triangular_number(k: Any) -> int:
    value = as_nonnegative_int(k, "k")
    return value * (value + 1) // 2


def _closed_form_estimate(n: int) -> int:
    disc = 8 * n + 1
    if fits_float_exactly(disc):
        return int((math.sqrt(disc) - 1) / 2) + 1
    return (integer_sqrt(disc) - 1) // 2 + 1


def triangular_inverse(n: Any) -> int:
    """Largest k >= 0 with k(k+1)/2 <= n.

    The closed-form estimate overshoots by at most a couple of steps, so both
    correction loops run a bounded number of times.
    """
    value = as_nonnegative_int(n, "n")
    if value == 0:
        return 0

    k = _closed_form_estimate(value)
    while k * (k + 1) // 2 > value:
        k -= 1
    while (k + 1) * (k + 2) // 2 <= value:
        k += 1
    return k
