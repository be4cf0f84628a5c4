"""Measure subcommand - solve radius and desired size"""

from __future__ import annotations
from typing import Any
from pathlib import Path
import logging
from argparse import ArgumentParser, Namespace, _SubParsersAction
import pandas as pd

from ..io import read_items
from ..layout import create_engine
from ..layout.types import MeasureResult, Size
from .options import add_layout_arguments, available_size, build_config, configure_logging

logger = logging.getLogger(__name__)


def add_parser(subparsers: _SubParsersAction) -> ArgumentParser:
    """
    Add measure subcommand parser

    Args:
        subparsers: Subparser action from main argument parser

    Returns:
        Configured ArgumentParser for measure subcommand
    """
    parser = subparsers.add_parser(
        'measure',
        help='Solve layout radius and desired size for a set of items'
    )
    add_layout_arguments(parser)
    return parser  # type: ignore[no-any-return]


def table_measure_fn(items: pd.DataFrame):
    """Measure callback reading sizes from an item table by row position"""
    def measure(index: Any, available: Size) -> Size:
        return Size(float(items.at[index, 'width']), float(items.at[index, 'height']))
    return measure


def run(args: Namespace) -> MeasureResult:
    """
    Execute measure subcommand

    Args:
        args: Parsed command-line arguments from argparse

    Returns:
        MeasureResult for the item table
    """
    configure_logging(args)

    items_file = Path(args.items)
    if not items_file.exists():
        raise FileNotFoundError(f"Item table not found: {items_file}")

    config = build_config(args)
    available = available_size(args)

    logger.info(f"Items: {items_file}")
    logger.info(f"Variant: {args.variant}")
    logger.info(f"Available: {available.width} x {available.height}")

    items = read_items(items_file)
    logger.info(f"Loaded {len(items)} items")

    engine = create_engine(config)
    measured = engine.measure(available, list(range(len(items))), table_measure_fn(items))

    state = measured.state
    logger.info(f"Solving mode: {state.mode}")
    logger.info(f"Radius: {state.radius_x:.3f} x {state.radius_y:.3f}")
    logger.info(f"Desired size: {measured.desired_size.width:.3f} x {measured.desired_size.height:.3f}")

    print(f"desired_width\t{measured.desired_size.width!r}")
    print(f"desired_height\t{measured.desired_size.height!r}")
    print(f"radius_x\t{state.radius_x!r}")
    print(f"radius_y\t{state.radius_y!r}")
    return measured
