from __future__ import annotations

from typing import Any, Callable

import numpy as np

from integer_math import HiddenTargetOracle, IntegerMathError, integer_sqrt, monotonic_search_trace, triangular_inverse
from intmath_config import IntMathConfig

from .properties import CaseResult, check_perfect_square, check_search, check_sqrt, check_triangular
from .sampling import (
    boundary_search_cases,
    boundary_values,
    make_rng,
    perfect_square_roots,
    sample_integers,
    sample_search_cases,
)

OPERATIONS = ("sqrt", "perfect_square", "triangular", "search")


def _answer(operation: str, inputs: dict[str, int], fn: Callable[[], int]) -> dict[str, Any]:
    try:
        return {"operation": operation, "inputs": inputs, "output": fn(), "error": None}
    except IntegerMathError as exc:
        return {"operation": operation, "inputs": inputs, "output": None, "error": str(exc)}


def answer_queries(queries: dict[str, Any]) -> list[dict[str, Any]]:
    rows: list[dict[str, Any]] = []
    for x in queries.get("sqrt", []):
        rows.append(_answer("sqrt", {"x": x}, lambda x=x: integer_sqrt(x)))
    for n in queries.get("triangular", []):
        rows.append(_answer("triangular", {"n": n}, lambda n=n: triangular_inverse(n)))
    for q in queries.get("search", []):
        n, target = int(q["n"]), int(q["target"])
        rows.append(
            _answer(
                "search",
                {"n": n, "target": target},
                lambda n=n, target=target: monotonic_search_trace(n, HiddenTargetOracle(target=target)).value,
            )
        )
    return rows


def build_cases(verify: dict[str, Any], seed: int) -> list[CaseResult]:
    rng = make_rng(seed)
    samples = int(verify["samples"])
    max_bits = int(verify["max_bits"])
    search_max_n = int(verify["search_max_n"])

    values: list[int] = []
    roots: list[int] = []
    searches: list[tuple[int, int]] = []
    if verify.get("include_boundaries", True):
        values.extend(boundary_values(max_bits))
        roots.extend(perfect_square_roots(max_bits))
        searches.extend(boundary_search_cases(search_max_n))
    values.extend(sample_integers(rng, samples, max_bits))
    roots.extend(sample_integers(rng, samples, max(1, max_bits // 2)))
    searches.extend(sample_search_cases(rng, samples, search_max_n))

    cases: list[CaseResult] = []
    cases.extend(check_sqrt(x) for x in values)
    cases.extend(check_perfect_square(k) for k in roots)
    cases.extend(check_triangular(n) for n in values)
    cases.extend(check_search(n, t) for n, t in searches)
    return cases


def aggregate_cases(cases: list[CaseResult]) -> dict[str, Any]:
    by_op: list[dict[str, Any]] = []
    for op in OPERATIONS:
        rows = [c for c in cases if c.operation == op]
        attempts = np.asarray([c.attempts for c in rows if c.attempts is not None], dtype=np.float64)
        by_op.append(
            {
                "operation": op,
                "num_cases": len(rows),
                "num_failed": sum(1 for c in rows if not c.passed),
                "attempts_mean": float(attempts.mean()) if attempts.size else None,
                "attempts_max": int(attempts.max()) if attempts.size else None,
            }
        )
    failed = [c.to_row() for c in cases if not c.passed]
    return {
        "num_cases": len(cases),
        "num_failed": len(failed),
        "operations": by_op,
        "failures": failed[:50],
    }


def run_verification(config: IntMathConfig) -> dict[str, Any]:
    queries = answer_queries(config.queries)
    cases: list[CaseResult] = []
    if config.verify["enabled"]:
        cases = build_cases(config.verify, seed=int(config.run["seed"]))
    return {
        "run_id": config.run["run_id"],
        "queries": queries,
        "cases": [c.to_row() for c in cases],
        "aggregate": aggregate_cases(cases),
    }
