"""Property verification and batch query runs for integer_math."""

from .pipeline import aggregate_cases, answer_queries, build_cases, run_verification
from .properties import CaseResult, check_perfect_square, check_search, check_sqrt, check_triangular
from .reporting import write_reports
from .sampling import boundary_values, make_rng, sample_integers, sample_search_cases

__all__ = [
    "CaseResult",
    "check_sqrt",
    "check_perfect_square",
    "check_triangular",
    "check_search",
    "answer_queries",
    "build_cases",
    "aggregate_cases",
    "run_verification",
    "write_reports",
    "boundary_values",
    "make_rng",
    "sample_integers",
    "sample_search_cases",
]
