# aad/core/errors.py
"""
Exception hierarchy for the scalar AD engine and the networks built on it.

    AutodiffError
    ├── NumericDomainError   (also an ArithmeticError)
    │   └── DivisionByZero   (also a ZeroDivisionError)
    └── DimensionMismatch    (also a ValueError)
"""


class AutodiffError(Exception):
    """Base class for every error raised by this package."""


class NumericDomainError(AutodiffError, ArithmeticError):
    """An operator was applied outside its mathematically valid domain."""

    def __init__(self, message: str, *, op: str = None):
        super().__init__(message)
        self.op = op


class DivisionByZero(NumericDomainError, ZeroDivisionError):
    """Division by (or negative power of) a zero-valued Node."""


class DimensionMismatch(AutodiffError, ValueError):
    """Input width disagrees with the width a Neuron/Layer/MLP expects."""

    def __init__(self, expected: int, actual: int, *, where: str = "input"):
        super().__init__(f"{where}: expected {expected} values, got {actual}")
        self.expected = expected
        self.actual = actual
        self.where = where
