from __future__ import annotations


class IntegerMathError(Exception):
    pass


class InvalidArgumentError(IntegerMathError, ValueError):
    pass


class NotFoundError(IntegerMathError, LookupError):
    pass
