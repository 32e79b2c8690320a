from __future__ import annotations

import numpy as np
import pytest

from integer_math import FLOAT_EXACT_LIMIT, InvalidArgumentError, integer_sqrt, integer_sqrt_trace


def test_integer_sqrt_known_values() -> None:
    assert integer_sqrt(0) == 0
    assert integer_sqrt(1) == 1
    assert integer_sqrt(8) == 2
    assert integer_sqrt(9) == 3
    assert integer_sqrt(2147395599) == 46339
    assert integer_sqrt(2147395600) == 46340


def test_integer_sqrt_brackets_every_small_input() -> None:
    for x in range(0, 5000):
        r = integer_sqrt(x)
        assert r * r <= x < (r + 1) * (r + 1)


def test_integer_sqrt_exact_on_perfect_squares_near_float_limit() -> None:
    for k in (2**26 - 1, 2**26, 2**26 + 1, 94906265, 94906266, 3037000499, 2**32 - 1, 2**32):
        assert integer_sqrt(k * k) == k
        assert integer_sqrt(k * k - 1) == k - 1
        assert integer_sqrt(k * k + 1) == k


def test_integer_sqrt_switches_to_integer_newton_above_float_limit() -> None:
    assert integer_sqrt_trace(8).method == "float"
    assert integer_sqrt_trace(FLOAT_EXACT_LIMIT).method == "float"
    assert integer_sqrt_trace(FLOAT_EXACT_LIMIT + 1).method == "integer"
    assert integer_sqrt_trace(1).method == "trivial"

    big = (10**100 + 7) ** 2
    res = integer_sqrt_trace(big)
    assert res.value == 10**100 + 7
    assert res.iterations < 2 * big.bit_length()


def test_integer_sqrt_random_wide_inputs() -> None:
    rng = np.random.default_rng(123)
    for _ in range(300):
        bits = int(rng.integers(1, 400))
        x = int(rng.integers(0, 2**62)) << max(0, bits - 62)
        r = integer_sqrt(x)
        assert r * r <= x < (r + 1) * (r + 1)


def test_integer_sqrt_accepts_numpy_integers() -> None:
    assert integer_sqrt(np.int64(49)) == 7


def test_integer_sqrt_rejects_negative_and_non_integer_input() -> None:
    with pytest.raises(InvalidArgumentError, match=">= 0"):
        integer_sqrt(-1)
    with pytest.raises(InvalidArgumentError, match="must be an integer"):
        integer_sqrt(4.0)
    with pytest.raises(InvalidArgumentError, match="bool"):
        integer_sqrt(True)
    with pytest.raises(ValueError):
        integer_sqrt("16")
