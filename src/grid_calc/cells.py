"""
Resolved cell values and the sparse grid that stores them.
"""

import pyarrow as pa

from .address import Address, num_to_col

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

ERROR_MARKER = "#ERR"


# Base class for the three states a resolved cell can be in
class CellValue:
    def render(self, error_marker=ERROR_MARKER):
        raise NotImplementedError


# A cell holding a 64-bit integer
class Integer(CellValue):
    __slots__ = ('value',)

    def __init__(self, value):
        self.value = value

    def render(self, error_marker=ERROR_MARKER):
        return str(self.value)

    def __eq__(self, other):
        return isinstance(other, Integer) and other.value == self.value

    def __hash__(self):
        return hash(('Integer', self.value))

    def __repr__(self):
        return f"Integer({self.value})"


# A cell nothing was ever written to
class Empty(CellValue):
    __slots__ = ()

    def render(self, error_marker=ERROR_MARKER):
        return ""

    def __eq__(self, other):
        return isinstance(other, Empty)

    def __hash__(self):
        return hash('Empty')

    def __repr__(self):
        return "Empty()"


# A cell whose evaluation failed; kind is kept for diagnostics only
class Error(CellValue):
    __slots__ = ('kind',)

    def __init__(self, kind=None):
        self.kind = kind

    def render(self, error_marker=ERROR_MARKER):
        return error_marker

    def __eq__(self, other):
        # All errors render the same and compare equal regardless of kind
        return isinstance(other, Error)

    def __hash__(self):
        return hash('Error')

    def __repr__(self):
        if self.kind is None:
            return "Error()"
        return f"Error({self.kind.name})"


EMPTY = Empty()


class CellGrid:
    """Sparse mapping of Address to CellValue. Missing cells read as Empty."""

    def __init__(self):
        self._cells = {}

    def __contains__(self, address):
        return address in self._cells

    def get(self, address):
        return self._cells.get(address, EMPTY)

    def lookup(self, address):
        """Returns the stored value, or None when the cell was never written."""
        return self._cells.get(address)

    def set(self, address, value):
        self._cells[address] = value

    def to_table(self, max_col, max_row, error_marker=ERROR_MARKER):
        """Builds a pyarrow Table with one string column per grid column.

        Args:
            max_col (int): Highest zero-based column index to include
            max_row (int): Highest zero-based row index to include
            error_marker (str): Text used for cells holding an error

        Returns:
            pyarrow.Table: Rendered cell values, blank for empty cells
        """
        columns = {}
        for col in range(max_col + 1):
            values = [self.get(Address(col, row)).render(error_marker)
                      for row in range(max_row + 1)]
            columns[num_to_col(col)] = pa.array(values, type=pa.string())
        return pa.table(columns)
