import argparse
import logging
import os
import sys

from .config import SheetConfig
from .cells import ERROR_MARKER
from .output import write_csv
from .resolver import CyclePolicy
from .sheet import Spreadsheet


def single_character(value):
    if len(value) != 1:
        raise argparse.ArgumentTypeError(f"must be a single character, got {value!r}")
    return value


def build_parser():
    parser = argparse.ArgumentParser(description='Evaluate a grid of postfix expressions and cell formulas')
    parser.add_argument('filenames', nargs='+', help='Comma-separated input files, one grid row per line')
    parser.add_argument('--debug', action='store_true', help='Log each cell failure to stderr')
    parser.add_argument('--export', action='store_true',
                        help='Also write the evaluated grid as <input>_values.csv')
    parser.add_argument('--show-dependencies', action='store_true',
                        help='Print every formula and its downstream dependents')
    parser.add_argument('--cycle-policy', choices=[p.value for p in CyclePolicy],
                        default=CyclePolicy.MEMBERS.value,
                        help='Mark only cycle members, or the whole traversal path, as errors')
    parser.add_argument('--error-marker', default=ERROR_MARKER, help='Text printed for error cells')
    parser.add_argument('--delimiter', type=single_character, default=',',
                        help='Cell separator in the input files')
    parser.add_argument('--skip-blank-cells', action='store_true',
                        help='Leave whitespace-only cells empty instead of evaluating them')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s', stream=sys.stderr)
    config = SheetConfig.from_args(args)

    try:
        for i, filename in enumerate(args.filenames, start=1):
            if len(args.filenames) > 1:
                print(f"TEST {i}: ---------------------------")
            sheet = Spreadsheet.from_file(filename, config)
            print(sheet.render(), end='')
            if args.show_dependencies:
                print(sheet.describe_dependencies())
            if args.export:
                csv_filename = os.path.splitext(filename)[0] + '_values.csv'
                write_csv(sheet, csv_filename)
                print(f"\nGrid values saved to: {csv_filename}")
    except FileNotFoundError as e:
        print(f"Error: File '{e.filename}' not found")
        sys.exit(1)
    except (OSError, ValueError) as e:
        print(f"Error: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
