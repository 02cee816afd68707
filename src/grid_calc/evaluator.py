# evaluator.py
# Stack-based evaluation of postfix (reverse Polish) integer expressions.
# Tokens are integers and the binary operators + - * /. Division truncates
# toward zero and every value is kept inside the signed 64-bit range.

import logging

from .cells import INT64_MAX, INT64_MIN, Error, Integer
from .errors import (
    CellEvaluationError,
    DivisionByZeroError,
    InsufficientOperandsError,
    IntegerOverflowError,
    MalformedExpressionError,
)
from .lexer import Lexer

logger = logging.getLogger(__name__)


def truncating_divide(left, right):
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


class PostfixEvaluator:
    """
    Evaluator for a whitespace-delimited postfix token stream.
    Operands are popped right first, so "a b op" computes a op b.
    """

    operations = {
        '+': lambda left, right: left + right,
        '-': lambda left, right: left - right,
        '*': lambda left, right: left * right,
        '/': truncating_divide,
    }

    def evaluate(self, expression):
        """
        Evaluate an expression to an int.
        :param expression: Postfix text with references already substituted.
        :return: The single value left on the operand stack.
        :raises CellEvaluationError: On any malformed input or arithmetic failure.
        """
        operands = []
        for token in Lexer(expression).tokenize():
            if token.type == 'OPERATOR':
                if len(operands) < 2:
                    raise InsufficientOperandsError(token.value, token.column)
                right = operands.pop()
                left = operands.pop()
                if token.value == '/' and right == 0:
                    raise DivisionByZeroError(token.column)
                operands.append(self._checked(self.operations[token.value](left, right)))
            elif token.type == 'NUMBER':
                operands.append(self._checked(token.value))
            else:
                raise MalformedExpressionError(
                    f"Unexpected token '{token.value}' at position {token.column}")
        if len(operands) != 1:
            raise MalformedExpressionError(
                f"Expression leaves {len(operands)} values on the stack, expected 1")
        return operands[0]

    def evaluate_cell(self, expression):
        """Evaluate to a CellValue, turning any failure into Error."""
        try:
            return Integer(self.evaluate(expression))
        except CellEvaluationError as e:
            logger.debug("Evaluation of %r failed: %s", expression, e)
            return Error(e.kind)

    @staticmethod
    def _checked(value):
        if value < INT64_MIN or value > INT64_MAX:
            raise IntegerOverflowError(value)
        return value
