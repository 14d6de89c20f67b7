#!/usr/bin/env python3
"""
Parse report harness for path corpora.

Parses every path in an input file with the chosen dialect and checks that
formatting the parsed components gives back the original string.

Outputs:
- Excel workbook with one row per path (round-trip failures highlighted)
- JSON summary for automation
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

# Add parent directory to path to import the package from a checkout
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from pathparts import get_dialect  # noqa: E402
from pathparts.report import build_report, read_paths, write_report  # noqa: E402


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Parse a corpus of paths and report round-trip results'
    )
    parser.add_argument(
        '--input',
        required=True,
        help='Input file containing paths (one per line) or an Excel file with an "input" column'
    )
    parser.add_argument(
        '--dialect',
        choices=['default', 'posix', 'win32'],
        default='default',
        help='Path dialect used to parse the corpus (default: host platform)'
    )
    parser.add_argument(
        '--sheet',
        help='Worksheet to read when the input is an Excel file'
    )
    parser.add_argument(
        '--output-excel',
        help='Output Excel file path (default: reports/DIALECT-YYYYMMDD-HHMMSS.xlsx)'
    )
    parser.add_argument(
        '--output-json',
        help='Output JSON summary path (default: reports/DIALECT-YYYYMMDD-HHMMSS.json)'
    )
    parser.add_argument(
        '--limit',
        type=int,
        help='Limit number of paths to process'
    )
    parser.add_argument(
        '--skip-excel',
        action='store_true',
        help='Skip Excel output'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_arguments(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    dialect = get_dialect(args.dialect)

    input_path = Path(args.input)
    if not input_path.exists():
        raise SystemExit(f"Input file not found: {input_path}")

    try:
        paths = read_paths(input_path, limit=args.limit, sheet_name=args.sheet)
    except ValueError as exc:
        raise SystemExit(str(exc))

    report = build_report(paths, dialect)

    timestamp = datetime.now().strftime('%Y%m%d-%H%M%S')
    default_stem = ROOT / 'reports' / f"{dialect.name}-{timestamp}"
    output_excel = None if args.skip_excel else (args.output_excel or default_stem.with_suffix('.xlsx'))
    output_json = args.output_json or default_stem.with_suffix('.json')

    written = write_report(report, output_excel=output_excel, output_json=output_json)

    summary = report.summary()
    print(f"Dialect: {summary['dialect']}")
    print(f"Paths parsed: {summary['total']}")
    print(f"Absolute: {summary['absolute']}  With extension: {summary['with_extension']}")
    print(f"Round-trip failures: {summary['round_trip_failures']}")
    for kind, path in written.items():
        print(f"{kind}: {path}")

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
