from .address import Address
from .cells import ERROR_MARKER, Integer
from .errors import NonIntegerReferenceError, UndefinedReferenceError
from .lexer import Lexer

ERROR_SENTINEL = ERROR_MARKER


class ReferenceSubstitutor:
    """Replaces cell addresses in a formula with the values they resolved to.

    Only text is rewritten here; arithmetic is left to PostfixEvaluator.
    """

    def __init__(self, grid):
        self.grid = grid

    def substitute(self, formula):
        """Substitute every address token of a formula.

        Args:
            formula (str): Raw formula text, e.g. "A0 2 *"

        Returns:
            str: The formula with each address replaced by its integer value

        Raises:
            UndefinedReferenceError: A referenced cell was never resolved
            NonIntegerReferenceError: A referenced cell is empty or an error
        """
        parts = []
        for token in Lexer(formula).tokenize():
            if token.type != 'CELL_ADDRESS':
                parts.append(token.text)
                continue
            value = self.grid.lookup(Address.parse(token.value))
            if value is None:
                raise UndefinedReferenceError(token.value)
            if not isinstance(value, Integer):
                raise NonIntegerReferenceError(token.value, value)
            parts.append(str(value.value))
        return " ".join(parts)
