"""
GridCalc

Evaluates a grid of postfix integer expressions and cell-referencing formulas,
resolving references in dependency order and detecting reference cycles.
"""

from .cells import EMPTY, CellGrid, CellValue, Empty, Error, Integer
from .config import SheetConfig
from .errors import ErrorKind, InvalidAddressError
from .main import run_sheet
from .resolver import CyclePolicy
from .sheet import Spreadsheet

__version__ = "0.1.0"
__all__ = [
    "run_sheet",
    "Spreadsheet",
    "SheetConfig",
    "CyclePolicy",
    "CellGrid",
    "CellValue",
    "Integer",
    "Empty",
    "Error",
    "EMPTY",
    "ErrorKind",
    "InvalidAddressError",
]
