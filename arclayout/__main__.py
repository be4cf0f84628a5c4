"""
arclayout CLI

Command-line interface with subcommands for batch layout of item tables.
"""

import argparse
import sys
from .cli import arrange, measure


def main():
    parser = argparse.ArgumentParser(
        prog='arclayout',
        description='arclayout: radial and elliptical layout of rectangular items'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Add subcommand parsers
    measure.add_parser(subparsers)
    arrange.add_parser(subparsers)

    # Parse arguments
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Execute the appropriate subcommand
    if args.command == 'measure':
        measure.run(args)
    elif args.command == 'arrange':
        arrange.run(args)


if __name__ == "__main__":
    main()
