import logging

from .sheet import Spreadsheet

logger = logging.getLogger(__name__)


def run_sheet(code, config=None):
    """Evaluate a grid given as comma-separated text.

    Args:
        code (str): Rows of comma-separated cells
        config (SheetConfig): Optional settings; defaults match the CLI

    Returns:
        Spreadsheet: The evaluated session
    """
    logger.debug("Input:\n%s", code)
    sheet = Spreadsheet.from_text(code, config)
    logger.debug("Resolved %d formula entries over %d rows",
                 len(sheet.registry), sheet.max_row + 1)
    return sheet


if __name__ == "__main__":
    test_code = """5,A0 2 *,3 4 +
A2 1 +,A1 B1 +,7 +
5 0 /,B5 1 +,C0 C0 *
"""

    print(run_sheet(test_code).render())
