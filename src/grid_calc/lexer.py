import re

from .address import is_address

OPERATORS = ('+', '-', '*', '/')
INTEGER_PATTERN = re.compile(r'^[+-]?\d+$')


# Token class represents a single whitespace-delimited token of a cell
class Token:
    def __init__(self, type, value, column=1, text=None):
        self.type = type      # Token type (NUMBER, OPERATOR, CELL_ADDRESS or UNKNOWN)
        self.value = value    # Actual value of the token
        self.column = column  # 1-based position of the token within the cell
        self.text = text if text is not None else str(value)  # Token as written

    def __str__(self):
        return f"Token({self.type}, {self.value}, col={self.column})"

    def __repr__(self):
        return str(self)


# Lexer breaks the contents of one cell into tokens
class Lexer:
    def __init__(self, text):
        self.text = text
        self.tokens = []

    def tokenize(self):
        self.tokens = [self._classify(word, i + 1)
                       for i, word in enumerate(self.text.split())]
        return self.tokens

    def _classify(self, word, column):
        if word in OPERATORS:
            return Token('OPERATOR', word, column)
        if INTEGER_PATTERN.match(word):
            return Token('NUMBER', int(word), column, word)
        if is_address(word):
            return Token('CELL_ADDRESS', word, column)
        return Token('UNKNOWN', word, column)


def contains_letter(text):
    return any(c.isalpha() for c in text)


def referenced_addresses(text):
    """Address-shaped tokens of a formula, in order of first appearance."""
    seen = {}
    for token in Lexer(text).tokenize():
        if token.type == 'CELL_ADDRESS':
            seen.setdefault(token.value, None)
    return list(seen)
