#!/usr/bin/env python3
"""
Command-line interface for the OTRS workbook importer.
Usage:
  python app.py --xls import.xlsx [--agent] [--customer] [--customer_user] [--ci] [--cmd-only]
"""

import argparse
import sys

from loaders.config import DEFAULT_ENGINE, ENGINES
from models import ExternalCommandFailure, ImporterError, ImportOptions
from services import ConsoleExecutor, run_import


def build_parser():
    parser = argparse.ArgumentParser(
        description='Create OTRS agents, customers, customer users and config items from an XLSX workbook'
    )
    parser.add_argument('--xls', help='Path to the XLSX workbook')
    parser.add_argument('--cmd-only', '--dry-run', dest='cmd_only', action='store_true',
                        help='Print the console commands without running them')
    parser.add_argument('--agent', action='store_true', help='Import agents')
    parser.add_argument('--customer', action='store_true', help='Import customer companies')
    parser.add_argument('--customer_user', '--customer-user', dest='customer_user',
                        action='store_true', help='Import customer users')
    parser.add_argument('--ci', action='store_true', help='Import configuration items')
    parser.add_argument('--engine', choices=ENGINES, default=DEFAULT_ENGINE,
                        help=f'Workbook decoder (default: {DEFAULT_ENGINE})')
    parser.add_argument('--console', help='Path to otrs.Console.pl (run through perl)')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    options = ImportOptions.from_flags(
        args.xls,
        dry_run=args.cmd_only,
        engine=args.engine,
        agent=args.agent,
        customer=args.customer,
        customer_user=args.customer_user,
        ci=args.ci,
    )
    executor = ConsoleExecutor(['perl', args.console] if args.console else None)

    try:
        summary = run_import(options, executor=executor)
    except ImporterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # Failed console calls are reported but do not change the exit status
    for result in summary.failures:
        print(f"Warning: {ExternalCommandFailure(result)}: {' '.join(result.args)}", file=sys.stderr)
    if summary.failures:
        print(f"{len(summary.failures)} command(s) failed", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
