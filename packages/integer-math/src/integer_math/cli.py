from __future__ import annotations

import argparse

from .errors import IntegerMathError
from .oracle import HiddenTargetOracle
from .search import monotonic_search_trace
from .sqrt import integer_sqrt_trace
from .triangular import triangular_inverse, triangular_number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Evaluate exact integer root and search operations")
    sub = parser.add_subparsers(dest="command", required=True)

    p_sqrt = sub.add_parser("sqrt", help="floor of the square root of X")
    p_sqrt.add_argument("x", type=int)

    p_tri = sub.add_parser("triangular", help="largest k with k(k+1)/2 <= N")
    p_tri.add_argument("n", type=int)

    p_search = sub.add_parser("search", help="locate a hidden target in [1, N] by three-way probing")
    p_search.add_argument("n", type=int)
    p_search.add_argument("--target", type=int, required=True)
    p_search.add_argument("--max-attempts", type=int, default=None)
    return parser


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)

    try:
        if args.command == "sqrt":
            res = integer_sqrt_trace(args.x)
            print(f"integer_sqrt({args.x}) = {res.value}")
            print(f"- method: {res.method}")
            print(f"- iterations: {res.iterations}")
        elif args.command == "triangular":
            k = triangular_inverse(args.n)
            print(f"triangular_inverse({args.n}) = {k}")
            print(f"- T(k) = {triangular_number(k)}")
            print(f"- T(k+1) = {triangular_number(k + 1)}")
        else:
            oracle = HiddenTargetOracle(target=args.target)
            res = monotonic_search_trace(args.n, oracle, max_attempts=args.max_attempts)
            print(f"monotonic_search({args.n}) = {res.value}")
            print(f"- oracle_calls: {len(res.attempts)}")
            print(f"- probes: {res.attempts}")
    except IntegerMathError as exc:
        print(f"error: {exc}")
        raise SystemExit(2) from exc


if __name__ == "__main__":
    main()
