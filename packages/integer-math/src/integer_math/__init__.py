"""Exact integer square roots, monotonic oracle search and triangular inversion."""

from .checks import FLOAT_EXACT_LIMIT, INT32_MAX
from .errors import IntegerMathError, InvalidArgumentError, NotFoundError
from .oracle import Comparison, FunctionOracle, HiddenTargetOracle, Oracle
from .search import (
    FeasibleSearchResult,
    SearchResult,
    binary_search_max_feasible,
    max_search_attempts,
    monotonic_search,
    monotonic_search_trace,
)
from .sqrt import SqrtResult, integer_sqrt, integer_sqrt_trace
from .triangular import triangular_inverse, triangular_number

__all__ = [
    "FLOAT_EXACT_LIMIT",
    "INT32_MAX",
    "IntegerMathError",
    "InvalidArgumentError",
    "NotFoundError",
    "Comparison",
    "Oracle",
    "FunctionOracle",
    "HiddenTargetOracle",
    "SearchResult",
    "FeasibleSearchResult",
    "monotonic_search",
    "monotonic_search_trace",
    "max_search_attempts",
    "binary_search_max_feasible",
    "SqrtResult",
    "integer_sqrt",
    "integer_sqrt_trace",
    "triangular_number",
    "triangular_inverse",
]
