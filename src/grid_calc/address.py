"""
Cell address conversion.

Columns use bijective base-26 letters (A..Z, AA, AB, ...) and rows are plain
decimal numbers; both are zero-based, so "A0" is the top-left cell.
"""

import re
from collections import namedtuple

from .errors import InvalidAddressError

ADDRESS_PATTERN = re.compile(r'^([A-Z]+)(\d+)$')


def is_address(token):
    return ADDRESS_PATTERN.match(token) is not None


def col_to_num(col):
    """Converts column letters (e.g., 'A', 'AB') to a zero-based column number."""
    num = 0
    for c in col:
        num = num * 26 + (ord(c) - ord('A') + 1)
    return num - 1


def num_to_col(num):
    """Converts a zero-based column number to column letters (e.g., 0->'A', 27->'AB')."""
    if num < 0:
        raise ValueError(f"Column number must be non-negative: {num}")
    col = ""
    num += 1
    while num > 0:
        num, rem = divmod(num - 1, 26)
        col = chr(65 + rem) + col
    return col


def split_cell(cell_ref):
    m = ADDRESS_PATTERN.match(cell_ref)
    if not m:
        raise InvalidAddressError(cell_ref)
    return m.group(1), int(m.group(2))


def address_to_coords(cell_ref):
    col, row = split_cell(cell_ref)
    return col_to_num(col), row


def coords_to_address(col, row):
    if row < 0:
        raise ValueError(f"Row number must be non-negative: {row}")
    return f"{num_to_col(col)}{row}"


class Address(namedtuple('Address', ['col', 'row'])):
    """Zero-based (column, row) pair used as the grid key."""

    __slots__ = ()

    @classmethod
    def parse(cls, cell_ref):
        return cls(*address_to_coords(cell_ref))

    def __str__(self):
        return coords_to_address(self.col, self.row)
