from __future__ import annotations

import pytest

from integer_math import INT32_MAX, InvalidArgumentError, triangular_inverse, triangular_number


def test_triangular_inverse_known_values() -> None:
    assert triangular_inverse(0) == 0
    assert triangular_inverse(1) == 1
    assert triangular_inverse(5) == 2
    assert triangular_inverse(6) == 3
    assert triangular_inverse(8) == 3
    assert triangular_inverse(INT32_MAX) == 65535


def test_triangular_inverse_brackets_every_small_input() -> None:
    for n in range(0, 10000):
        k = triangular_inverse(n)
        assert triangular_number(k) <= n < triangular_number(k + 1)


def test_triangular_inverse_exact_on_huge_triangular_numbers() -> None:
    for k in (2**26, 2**31, 2**32 + 3, 10**30):
        t = triangular_number(k)
        assert triangular_inverse(t) == k
        assert triangular_inverse(t - 1) == k - 1
        assert triangular_inverse(t + k) == k


def test_triangular_inverse_rejects_negative_input() -> None:
    with pytest.raises(InvalidArgumentError, match=">= 0"):
        triangular_inverse(-3)
    with pytest.raises(InvalidArgumentError):
        triangular_number(-1)
