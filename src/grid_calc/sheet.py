"""
Evaluation session for one input grid.

A Spreadsheet owns its CellGrid and FormulaRegistry. Loading classifies every
cell: text containing a letter is a formula and is registered for later,
anything else is a plain postfix expression evaluated on the spot. Once all
rows are in, formulas are resolved in dependency order. A new input needs a
new Spreadsheet.
"""

import logging

from .address import Address
from .cells import CellGrid, Error
from .config import SheetConfig
from .errors import CellEvaluationError
from .evaluator import PostfixEvaluator
from .lexer import contains_letter
from .loader import RowLoader
from .output import format_table
from .registry import FormulaRegistry
from .resolver import DependencyResolver
from .substitution import ERROR_SENTINEL, ReferenceSubstitutor

logger = logging.getLogger(__name__)


class Spreadsheet:
    def __init__(self, config=None):
        self.config = config or SheetConfig()
        self.grid = CellGrid()
        self.registry = FormulaRegistry()
        self.evaluator = PostfixEvaluator()
        self.max_col = -1
        self.max_row = -1
        self.resolution = None

    @classmethod
    def from_text(cls, text, config=None):
        sheet = cls(config)
        sheet.load(RowLoader(text, sheet.config.delimiter))
        return sheet

    @classmethod
    def from_file(cls, filename, config=None):
        sheet = cls(config)
        sheet.load(RowLoader.from_file(filename, sheet.config.delimiter))
        return sheet

    def load(self, loader):
        """Reads every cell from the loader, then resolves all formulas."""
        if self.resolution is not None:
            raise RuntimeError("Spreadsheet has already been evaluated; create a new one")
        for col, row, raw_text in loader.cells():
            self._classify(Address(col, row), raw_text)
        self.max_col = loader.max_col
        self.max_row = loader.max_row
        self._resolve()

    def value(self, cell_ref):
        """Returns the CellValue at an address such as "B3"."""
        return self.grid.get(Address.parse(cell_ref))

    def render(self):
        return format_table(self.grid, self.max_col, self.max_row, self.config.error_marker)

    def describe_dependencies(self):
        return "\n".join(self.registry.describe())

    def _classify(self, address, raw_text):
        if self.config.skip_blank_cells and not raw_text.strip():
            return
        if contains_letter(raw_text):
            self.registry.register(address, raw_text)
        else:
            self.grid.set(address, self._evaluate(address, raw_text))

    def _resolve(self):
        self.resolution = DependencyResolver(self.registry, self.config.cycle_policy).resolve(self.grid)
        substitutor = ReferenceSubstitutor(self.grid)
        for address in self.resolution.order:
            entry = self.registry[address]
            # Referenced-only cells have nothing to evaluate; cycle members are already Error
            if not entry.is_formula or self.resolution.is_tainted(address):
                continue
            try:
                entry.raw_text = substitutor.substitute(entry.raw_text)
            except CellEvaluationError as e:
                logger.debug("Cell %s: %s", address, e)
                entry.raw_text = ERROR_SENTINEL
                self.grid.set(address, Error(e.kind))
                continue
            self.grid.set(address, self._evaluate(address, entry.raw_text))

    def _evaluate(self, address, expression):
        value = self.evaluator.evaluate_cell(expression)
        if isinstance(value, Error):
            logger.debug("Cell %s: %s", address, value.kind.value)
        return value
