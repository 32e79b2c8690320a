from __future__ import annotations

import operator
from typing import Any

from .errors import InvalidArgumentError

# Largest magnitude below which every integer is exactly representable as a float.
FLOAT_EXACT_LIMIT = 2**52
INT32_MAX = 2**31 - 1


def as_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be an integer, got bool")
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidArgumentError(f"{name} must be an integer, got {type(value).__name__}") from None


def as_nonnegative_int(value: Any, name: str) -> int:
    out = as_int(value, name)
    if out < 0:
        raise InvalidArgumentError(f"{name} must be >= 0, got {out}")
    return out


def as_positive_int(value: Any, name: str) -> int:
    out = as_int(value, name)
    if out < 1:
        raise InvalidArgumentError(f"{name} must be >= 1, got {out}")
    return out


def fits_float_exactly(value: int) -> bool:
    return -FLOAT_EXACT_LIMIT <= value <= FLOAT_EXACT_LIMIT
