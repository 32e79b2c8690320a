from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from integer_math import (
    HiddenTargetOracle,
    IntegerMathError,
    binary_search_max_feasible,
    integer_sqrt,
    integer_sqrt_trace,
    max_search_attempts,
    monotonic_search_trace,
    triangular_inverse,
    triangular_number,
)


@dataclass(slots=True)
class CaseResult:
    operation: str
    inputs: dict[str, int]
    output: int | None
    passed: bool
    detail: str | None = None
    attempts: int | None = None

    def to_row(self) -> dict[str, Any]:
        return asdict(self)


def _root_upper_bound(x: int) -> int:
    return 1 << ((x.bit_length() + 1) // 2)


def check_sqrt(x: int) -> CaseResult:
    res = integer_sqrt_trace(x)
    r = res.value
    if not (r * r <= x < (r + 1) * (r + 1)):
        return CaseResult("sqrt", {"x": x}, r, False, "r^2 <= x < (r+1)^2 violated", res.iterations)

    ref = binary_search_max_feasible(low=0, high=_root_upper_bound(x), is_feasible=lambda c: c * c <= x)
    if ref.best_value != r:
        return CaseResult("sqrt", {"x": x}, r, False, f"reference search gave {ref.best_value}", res.iterations)
    return CaseResult("sqrt", {"x": x}, r, True, res.method, res.iterations)


def check_perfect_square(k: int) -> CaseResult:
    r = integer_sqrt(k * k)
    detail = None if r == k else f"expected {k}"
    return CaseResult("perfect_square", {"k": k}, r, r == k, detail)


def check_triangular(n: int) -> CaseResult:
    k = triangular_inverse(n)
    if not (triangular_number(k) <= n < triangular_number(k + 1)):
        return CaseResult("triangular", {"n": n}, k, False, "T(k) <= n < T(k+1) violated")

    # k <= sqrt(2n), so the power of two above sqrt(2n) bounds the reference search.
    high = 1 << ((n.bit_length() + 2) // 2)
    ref = binary_search_max_feasible(low=0, high=high, is_feasible=lambda c: triangular_number(c) <= n)
    if ref.best_value != k:
        return CaseResult("triangular", {"n": n}, k, False, f"reference search gave {ref.best_value}")
    return CaseResult("triangular", {"n": n}, k, True)


def check_search(n: int, target: int) -> CaseResult:
    oracle = HiddenTargetOracle(target=target)
    try:
        res = monotonic_search_trace(n, oracle)
    except IntegerMathError as exc:
        return CaseResult("search", {"n": n, "target": target}, None, False, str(exc), len(oracle.calls))

    bound = max_search_attempts(n)
    if res.value != target:
        return CaseResult("search", {"n": n, "target": target}, res.value, False, "wrong target", len(res.attempts))
    if len(res.attempts) > bound:
        return CaseResult(
            "search",
            {"n": n, "target": target},
            res.value,
            False,
            f"{len(res.attempts)} oracle calls exceeds bound {bound}",
            len(res.attempts),
        )
    return CaseResult("search", {"n": n, "target": target}, res.value, True, None, len(res.attempts))
