"""Shared options for the layout subcommands"""

from __future__ import annotations
from typing import List, Tuple, Union
import logging
import math
from argparse import ArgumentParser, ArgumentTypeError, Namespace

from ..config import Alignment, CircularLayoutConfig, EllipticalLayoutConfig
from ..layout.types import Size

ALIGNMENT_CHOICES: List[str] = [a.value for a in Alignment]


def parse_dimension(value: str) -> float:
    """
    Parse one size component; 'inf' (or 'auto') means unbounded

    Raises:
        ArgumentTypeError: not a non-negative number
    """
    text = value.strip().lower()
    if text in ('inf', 'infinity', 'auto'):
        return math.inf
    try:
        dim = float(text)
    except ValueError:
        raise ArgumentTypeError(f"Invalid dimension: {value!r}")
    if math.isnan(dim) or dim < 0:
        raise ArgumentTypeError(f"Dimension must be >= 0: {value!r}")
    return dim


def parse_final_dimension(value: str) -> float:
    """
    Parse one final size component; must be a finite number >= 0

    Raises:
        ArgumentTypeError: unbounded or not a non-negative number
    """
    dim = parse_dimension(value)
    if math.isinf(dim):
        raise ArgumentTypeError(f"Final size must be finite: {value!r}")
    return dim


def add_layout_arguments(parser: ArgumentParser) -> None:
    """
    Add item, size and arc options to a subcommand parser

    Args:
        parser: Subcommand parser
    """
    # Input
    parser.add_argument('-i', '--items', required=True,
                        help='Item table (TSV, or CSV by extension) with width and height columns')

    # Variant
    parser.add_argument('--variant', choices=['circular', 'elliptical'], default='circular',
                        help='Layout variant (default: circular)')
    parser.add_argument('--available', nargs=2, type=parse_dimension, default=[math.inf, math.inf],
                        metavar=('WIDTH', 'HEIGHT'),
                        help="Available size; 'inf' for unbounded (default: inf inf)")

    # Arc span
    parser.add_argument('--arc-start', type=float, default=None,
                        help='First angle (default: -pi/2, bottom of the circle)')
    parser.add_argument('--arc-end', type=float, default=None,
                        help='Last angle (default: 3pi/2, one full turn)')
    parser.add_argument('--degrees', action='store_true',
                        help='Interpret --arc-start/--arc-end as degrees instead of radians')
    parser.add_argument('--exclude-start', action='store_true',
                        help='Leave arc start empty; first item one step after it')
    parser.add_argument('--include-end', action='store_true',
                        help='Place the last item exactly at arc end')

    # Variant specific
    parser.add_argument('--uncentred', action='store_true',
                        help='Circular: pack content instead of centring the circle origin')
    parser.add_argument('--partial-ellipse', action='store_true',
                        help='Elliptical: measure only the items, not the full ellipse')
    parser.add_argument('--halign', choices=ALIGNMENT_CHOICES, default='center',
                        help='Elliptical: horizontal content alignment (default: center)')
    parser.add_argument('--valign', choices=ALIGNMENT_CHOICES, default='center',
                        help='Elliptical: vertical content alignment (default: center)')

    # Debug flag
    parser.add_argument('--debug', action='store_true', help='Enable debug logging for troubleshooting')


def arc_angles(args: Namespace) -> Tuple[float, float]:
    """Resolve arc start/end in radians from parsed arguments"""
    defaults = CircularLayoutConfig()
    arc_start = defaults.arc_start if args.arc_start is None else args.arc_start
    arc_end = defaults.arc_end if args.arc_end is None else args.arc_end
    if args.degrees:
        if args.arc_start is not None:
            arc_start = math.radians(arc_start)
        if args.arc_end is not None:
            arc_end = math.radians(arc_end)
    return arc_start, arc_end


def build_config(args: Namespace) -> Union[CircularLayoutConfig, EllipticalLayoutConfig]:
    """
    Build a layout config from parsed arguments

    Raises:
        LayoutConfigError: invalid combination of values
    """
    arc_start, arc_end = arc_angles(args)
    common = dict(
        arc_start=arc_start,
        arc_end=arc_end,
        arc_start_included=not args.exclude_start,
        arc_end_included=args.include_end,
    )
    if args.variant == 'elliptical':
        return EllipticalLayoutConfig(
            include_full_ellipse=not args.partial_ellipse,
            horizontal_alignment=args.halign,
            vertical_alignment=args.valign,
            **common,
        )
    return CircularLayoutConfig(origin_at_centre=not args.uncentred, **common)


def available_size(args: Namespace) -> Size:
    width, height = args.available
    return Size(width, height)


def configure_logging(args: Namespace) -> None:
    """Configure logging as early as possible for a subcommand"""
    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "debug", False) else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )
    logging.getLogger("arclayout").setLevel(logging.DEBUG if getattr(args, "debug", False) else logging.INFO)
