"""Arrange subcommand - measure, arrange and write placements"""

from __future__ import annotations
from pathlib import Path
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction

from ..io import read_items, write_placements
from ..layout import create_engine
from .measure import table_measure_fn
from .options import (
    add_layout_arguments,
    available_size,
    build_config,
    configure_logging,
    parse_final_dimension,
)

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add arrange subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for arrange subcommand
    """
    parser = subparsers.add_parser(
        'arrange',
        help='Lay out items and write their final rectangles'
    )
    add_layout_arguments(parser)
    parser.add_argument('-o', '--output', required=True,
                        help='Output placement TSV file')
    parser.add_argument('--final-size', nargs=2, type=parse_final_dimension, default=None,
                        metavar=('WIDTH', 'HEIGHT'),
                        help='Final size granted at arrange time (default: desired size)')
    return parser  # type: ignore[no-any-return]


def run(args: Namespace) -> Path:
    """
    Execute arrange subcommand

    Args:
        args: Parsed command-line arguments from argparse

    Returns:
        Path of the written placement file
    """
    configure_logging(args)

    items_file = Path(args.items)
    if not items_file.exists():
        raise FileNotFoundError(f"Item table not found: {items_file}")

    config = build_config(args)
    available = available_size(args)

    logger.info(f"Items: {items_file}")
    logger.info(f"Output: {args.output}")
    logger.info(f"Variant: {args.variant}")

    items = read_items(items_file)
    logger.info(f"Loaded {len(items)} items")

    engine = create_engine(config)
    final_size = tuple(args.final_size) if args.final_size is not None else None
    measured, arranged = engine.layout(
        available,
        list(range(len(items))),
        table_measure_fn(items),
        final_size=final_size,
    )

    logger.info(f"Radius: {measured.state.radius_x:.3f} x {measured.state.radius_y:.3f}")
    logger.info(f"Final size: {arranged.final_size.width:.3f} x {arranged.final_size.height:.3f}")

    output = write_placements(measured, arranged, args.output, ids=items['id'].tolist())
    logger.info(f"✓ Placements saved: {output}")
    return output
