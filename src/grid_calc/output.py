import pyarrow.csv as pv

from .address import Address, num_to_col
from .cells import ERROR_MARKER


def format_table(grid, max_col, max_row, error_marker=ERROR_MARKER):
    """Renders the grid as a tab-separated table.

    The header holds an empty corner field followed by the column letters;
    each following line starts with its row number. Empty cells are blank and
    errors print as error_marker.

    Args:
        grid (CellGrid): Resolved grid
        max_col (int): Highest zero-based column index to print
        max_row (int): Highest zero-based row index to print
        error_marker (str): Text printed for error cells

    Returns:
        str: The table, one line per row
    """
    columns = range(max_col + 1)
    lines = ["\t".join([""] + [num_to_col(col) for col in columns])]
    for row in range(max_row + 1):
        fields = [grid.get(Address(col, row)).render(error_marker) for col in columns]
        lines.append("\t".join([str(row)] + fields))
    return "\n".join(lines) + "\n"


def write_csv(sheet, filename):
    """Exports the rendered grid of a Spreadsheet to a CSV file through pyarrow."""
    table = sheet.grid.to_table(sheet.max_col, sheet.max_row, sheet.config.error_marker)
    pv.write_csv(table, filename)
    return table
