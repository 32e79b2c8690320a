from __future__ import annotations

import numpy as np

from integer_math import FLOAT_EXACT_LIMIT, INT32_MAX, triangular_number

_LIMB_BITS = 32


def make_rng(seed: int) -> np.random.Generator:
    return np.random.default_rng(int(seed))


def _assemble(limbs: np.ndarray) -> int:
    out = 0
    for i, limb in enumerate(limbs.tolist()):
        out |= int(limb) << (_LIMB_BITS * i)
    return out


# Draws integers of mixed widths so that small and huge magnitudes are both exercised.
def sample_integers(rng: np.random.Generator, count: int, max_bits: int) -> list[int]:
    if count <= 0:
        return []
    max_bits = max(1, int(max_bits))
    num_limbs = (max_bits + _LIMB_BITS - 1) // _LIMB_BITS
    widths = rng.integers(1, max_bits + 1, size=count)
    limbs = rng.integers(0, 2**_LIMB_BITS, size=(count, num_limbs), dtype=np.uint64)
    return [_assemble(row) & ((1 << int(w)) - 1) for row, w in zip(limbs, widths)]


def uniform_below(rng: np.random.Generator, bound: int) -> int:
    """Uniform-ish integer in [0, bound); the modulo bias is below 2**-16."""
    if bound <= 1:
        return 0
    limbs_needed = (bound.bit_length() + 16 + _LIMB_BITS - 1) // _LIMB_BITS
    row = rng.integers(0, 2**_LIMB_BITS, size=limbs_needed, dtype=np.uint64)
    return _assemble(row) % bound


def boundary_values(max_bits: int) -> list[int]:
    limit = 1 << int(max_bits)
    values: set[int] = {0, 1, 2, 3, 4, 5, 8, 15, 16, 2147395599, INT32_MAX, 2**63 - 1}
    values.update({FLOAT_EXACT_LIMIT - 1, FLOAT_EXACT_LIMIT, FLOAT_EXACT_LIMIT + 1})

    step = 1 if max_bits <= 128 else max_bits // 128
    for p in range(1, int(max_bits) + 1, step):
        values.update({(1 << p) - 1, 1 << p, (1 << p) + 1})

    for k in perfect_square_roots(max_bits):
        values.update({k * k - 1, k * k, k * k + 1})

    for k in (1, 2, 3, 65535, 65536, 2**26, 2**31, 2**32):
        t = triangular_number(k)
        values.update({t - 1, t, t + 1})

    return sorted(v for v in values if 0 <= v < limit)


def perfect_square_roots(max_bits: int) -> list[int]:
    limit = 1 << int(max_bits)
    roots = {
        0, 1, 2, 3,
        46339, 46340,
        2**26 - 1, 2**26, 2**26 + 1,
        94906265, 94906266,
        3037000499, 3037000500,
        2**32 - 1, 2**32,
        2**64 - 1,
    }
    return sorted(k for k in roots if k * k < limit)


def boundary_search_cases(max_n: int) -> list[tuple[int, int]]:
    cases = [
        (1, 1),
        (2, 1),
        (2, 2),
        (3, 2),
        (10, 6),
        (INT32_MAX, 1),
        (INT32_MAX, INT32_MAX),
        (INT32_MAX, 2**30),
        (2**63 - 1, 2**62),
        (2**63 - 1, 2**63 - 1),
    ]
    return [(n, t) for n, t in cases if n <= max_n]


def sample_search_cases(rng: np.random.Generator, count: int, max_n: int) -> list[tuple[int, int]]:
    out: list[tuple[int, int]] = []
    for _ in range(max(0, int(count))):
        n = 1 + uniform_below(rng, max_n)
        target = 1 + uniform_below(rng, n)
        out.append((n, target))
    return out
