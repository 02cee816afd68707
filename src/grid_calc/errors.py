"""
Error types for the GridCalc engine.

Per-cell failures are raised as CellEvaluationError subclasses and caught at the
cell boundary, where they become Error values in the grid. InvalidAddressError
is a run-level failure and propagates to the caller.
"""

from enum import Enum


class ErrorKind(Enum):
    UNDEFINED_REFERENCE = "undefined reference"
    NON_INTEGER_REFERENCE = "non-integer reference"
    CYCLIC_REFERENCE = "cyclic reference"
    MALFORMED_EXPRESSION = "malformed expression"
    INSUFFICIENT_OPERANDS = "insufficient operands"
    DIVISION_BY_ZERO = "division by zero"
    INTEGER_OVERFLOW = "integer overflow"


class InvalidAddressError(ValueError):
    def __init__(self, address):
        self.address = address
        super().__init__(f"Invalid cell address: '{address}'")


class CellEvaluationError(Exception):
    """Base class for failures that turn a single cell into an error."""

    kind = ErrorKind.MALFORMED_EXPRESSION


class UndefinedReferenceError(CellEvaluationError):
    kind = ErrorKind.UNDEFINED_REFERENCE

    def __init__(self, address):
        self.address = address
        super().__init__(f"Reference to undefined cell {address}")


class NonIntegerReferenceError(CellEvaluationError):
    kind = ErrorKind.NON_INTEGER_REFERENCE

    def __init__(self, address, value):
        self.address = address
        self.value = value
        super().__init__(f"Cell {address} does not hold an integer ({value!r})")


class MalformedExpressionError(CellEvaluationError):
    kind = ErrorKind.MALFORMED_EXPRESSION


class InsufficientOperandsError(CellEvaluationError):
    kind = ErrorKind.INSUFFICIENT_OPERANDS

    def __init__(self, operator, column):
        self.operator = operator
        super().__init__(f"Operator '{operator}' at token {column} needs two operands")


class DivisionByZeroError(CellEvaluationError):
    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, column):
        super().__init__(f"Division by zero at token {column}")


class IntegerOverflowError(CellEvaluationError):
    kind = ErrorKind.INTEGER_OVERFLOW

    def __init__(self, value):
        self.value = value
        super().__init__(f"Value {value} is outside the 64-bit integer range")
