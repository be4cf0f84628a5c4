"""
Type definitions for arclayout

Common types used throughout the package for type checking and documentation.
"""

from __future__ import annotations
from typing import TypedDict, Literal, Callable, Any, Union, Tuple, TYPE_CHECKING
from pathlib import Path

if TYPE_CHECKING:
    from .layout.types import Size, Rect

# Type aliases
PathLike = Union[str, Path]
"""File path as string or Path object"""

Item = Any
"""Opaque item handle owned by the caller"""

SizeLike = Union['Size', Tuple[float, float]]
"""A Size or a (width, height) tuple"""

Vector = Tuple[float, float]
"""Translation vector (dx, dy)"""

SolveMode = Literal[
    'empty',
    'single',
    'collapsed',
    'centred_unbounded',
    'uncentred_unbounded',
    'centred_bounded',
    'uncentred_bounded',
]
"""Solving branch taken during measure"""

# Callbacks supplied by the host

MeasureFn = Callable[[Item, 'Size'], SizeLike]
"""Measure an item against the available size, return its desired size"""

PlaceFn = Callable[[Item, 'Rect'], None]
"""Place an item at its final rectangle"""

SizeFn = Callable[[Item], SizeLike]
"""Report an item's already-measured desired size at arrange time"""


# Structured records for tabular I/O

class ItemRecord(TypedDict):
    """One row of an item table"""
    id: str
    width: float
    height: float


class PlacementRecord(TypedDict):
    """One row of a placement table"""
    id: str
    index: int
    angle: float
    x: float
    y: float
    width: float
    height: float
