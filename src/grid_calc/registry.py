"""
Formula bookkeeping for one evaluation session.

Each entry is keyed by the address it belongs to and records the raw formula
together with its downstream dependents: if A1's formula contains A0, then A1
is a dependent of A0 and A0 must be resolved first.
"""

from .address import Address
from .lexer import referenced_addresses


class FormulaEntry:
    def __init__(self, raw_text=None):
        self.raw_text = raw_text  # None for cells that are only referenced
        self.references = []     # Addresses this formula reads from
        self.dependents = {}     # Insertion-ordered set of dependent addresses

    @property
    def is_formula(self):
        return self.raw_text is not None

    def add_dependent(self, address):
        self.dependents[address] = None


class FormulaRegistry:
    def __init__(self):
        self._entries = {}

    def __contains__(self, address):
        return address in self._entries

    def __iter__(self):
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def __getitem__(self, address):
        return self._entries[address]

    def items(self):
        return self._entries.items()

    def register(self, address, formula):
        """Records a formula and a reverse edge for every address it references."""
        entry = self._entry(address)
        entry.raw_text = formula
        entry.references = [Address.parse(ref) for ref in referenced_addresses(formula)]
        for ref in entry.references:
            self._entry(ref).add_dependent(address)
        return entry

    def dependents_of(self, address):
        entry = self._entries.get(address)
        return list(entry.dependents) if entry else []

    def describe(self):
        """One formula line and one dependents line per entry."""
        lines = []
        for address, entry in self._entries.items():
            formula = entry.raw_text if entry.is_formula else ""
            lines.append(f"{address} formula: {formula}")
            downstream = ", ".join(str(dep) for dep in entry.dependents)
            lines.append(f"Downstream dependencies -> {downstream}")
        return lines

    def _entry(self, address):
        if address not in self._entries:
            self._entries[address] = FormulaEntry()
        return self._entries[address]
