from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .checks import as_int, as_positive_int
from .errors import NotFoundError
from .oracle import Comparison, Oracle, as_oracle, coerce_comparison


@dataclass(slots=True)
class SearchResult:
    value: int
    attempts: list[int]


@dataclass(slots=True)
class FeasibleSearchResult:
    best_value: int | None
    attempts: list[int]


# Locates the target in [1, n] from three-way oracle answers; the target never leaves [left, right].
def monotonic_search_trace(
    n: Any,
    oracle: Oracle | Callable[[int], Comparison | int],
    *,
    max_attempts: int | None = None,
) -> SearchResult:
    upper = as_positive_int(n, "n")
    probe = as_oracle(oracle)

    left = 1
    right = upper
    attempts: list[int] = []

    while left <= right:
        if max_attempts is not None and len(attempts) >= int(max_attempts):
            raise NotFoundError(f"no exact answer within {max_attempts} oracle calls in [1, {upper}]")
        c = (left + right + 1) // 2
        attempts.append(c)
        answer = coerce_comparison(probe.compare(c))
        if answer is Comparison.EXACT:
            return SearchResult(value=c, attempts=attempts)
        if answer is Comparison.HIGHER:
            left = c + 1
        else:
            right = c - 1

    raise NotFoundError(f"oracle never answered exact in [1, {upper}] after {len(attempts)} calls")


def monotonic_search(
    n: Any,
    oracle: Oracle | Callable[[int], Comparison | int],
    *,
    max_attempts: int | None = None,
) -> int:
    return monotonic_search_trace(n, oracle, max_attempts=max_attempts).value


def max_search_attempts(n: Any) -> int:
    return as_positive_int(n, "n").bit_length() + 1


# Finds the maximum feasible integer in [low, high] using a monotonic feasibility predicate.
def binary_search_max_feasible(
    *,
    low: Any,
    high: Any,
    is_feasible: Callable[[int], bool],
    max_attempts: int | None = None,
) -> FeasibleSearchResult:
    lo = as_int(low, "low")
    hi = as_int(high, "high")
    if lo > hi:
        return FeasibleSearchResult(best_value=None, attempts=[])

    best: int | None = None
    attempts: list[int] = []

    while lo <= hi:
        if max_attempts is not None and len(attempts) >= int(max_attempts):
            break
        mid = (lo + hi) // 2
        attempts.append(mid)
        if is_feasible(mid):
            best = mid
            lo = mid + 1
        else:
            hi = mid - 1

    return FeasibleSearchResult(best_value=best, attempts=attempts)
