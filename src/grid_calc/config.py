"""Run-time settings shared by the loader, the session and the formatter."""

from dataclasses import dataclass

from .cells import ERROR_MARKER
from .resolver import CyclePolicy


@dataclass(frozen=True)
class SheetConfig:
    cycle_policy: CyclePolicy = CyclePolicy.MEMBERS
    error_marker: str = ERROR_MARKER
    delimiter: str = ","
    skip_blank_cells: bool = False  # leave whitespace-only cells Empty instead of evaluating them

    def __post_init__(self):
        if len(self.delimiter) != 1:
            raise ValueError(f"Delimiter must be a single character: {self.delimiter!r}")

    @classmethod
    def from_args(cls, args):
        """Builds a config from parsed command line arguments."""
        return cls(
            cycle_policy=CyclePolicy(args.cycle_policy),
            error_marker=args.error_marker,
            delimiter=args.delimiter,
            skip_blank_cells=args.skip_blank_cells,
        )
