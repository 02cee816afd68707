"""
Row loader: splits input text into rows of comma-separated cells.
"""

import csv
import io


class RowLoader:
    """Yields (column, row, raw_text) for every cell in row-major order.

    Cells are split on the delimiter only; quote characters are ordinary
    cell text. A single trailing delimiter does not start an extra cell.
    The largest column and row index seen are tracked for the output
    formatter; -1 means no column or row was read.
    """

    def __init__(self, text, delimiter=","):
        self.text = text
        self.delimiter = delimiter
        self.max_col = -1
        self.max_row = -1

    def cells(self):
        reader = csv.reader(io.StringIO(self.text), delimiter=self.delimiter,
                            quoting=csv.QUOTE_NONE)
        for row, fields in enumerate(reader):
            if fields and fields[-1] == "":
                fields.pop()
            self.max_row = row
            self.max_col = max(self.max_col, len(fields) - 1)
            for col, raw_text in enumerate(fields):
                yield col, row, raw_text

    @classmethod
    def from_file(cls, filename, delimiter=","):
        with open(filename, 'r', newline='') as file:
            return cls(file.read(), delimiter)
