from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Protocol, runtime_checkable

from .checks import as_int
from .errors import InvalidArgumentError


class Comparison(IntEnum):
    """Where the hidden target lies relative to a probed candidate."""

    LOWER = -1
    EXACT = 0
    HIGHER = 1


@runtime_checkable
class Oracle(Protocol):
    def compare(self, candidate: int) -> Comparison | int: ...


def coerce_comparison(raw: object) -> Comparison:
    try:
        return Comparison(as_int(raw, "oracle response"))
    except ValueError:
        raise InvalidArgumentError(f"oracle response must be -1, 0 or 1, got {raw!r}") from None


@dataclass(slots=True)
class FunctionOracle:
    fn: Callable[[int], Comparison | int]

    def compare(self, candidate: int) -> Comparison:
        return coerce_comparison(self.fn(candidate))


@dataclass(slots=True)
class HiddenTargetOracle:
    target: int
    calls: list[int] = field(default_factory=list)

    def compare(self, candidate: int) -> Comparison:
        self.calls.append(int(candidate))
        if self.target < candidate:
            return Comparison.LOWER
        if self.target > candidate:
            return Comparison.HIGHER
        return Comparison.EXACT


def as_oracle(oracle: Oracle | Callable[[int], Comparison | int]) -> Oracle:
    if isinstance(oracle, Oracle):
        return oracle
    if callable(oracle):
        return FunctionOracle(oracle)
    raise InvalidArgumentError(f"oracle must provide compare() or be callable, got {type(oracle).__name__}")
