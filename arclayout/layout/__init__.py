"""
Layout Module for arclayout
Radial and elliptical layout solving

Public API:
    - CircularLayoutEngine: Single-radius layout engine
    - EllipticalLayoutEngine: Dual-radius layout engine
    - LayoutState: State carried from measure to arrange
    - MeasureResult / ArrangeResult: Phase outputs
    - RadialLocation: Angle + size with the pairwise radius formulas
    - RadiusSolver: Radius solving for every constraint mode
"""

from .engine import LayoutEngine, CircularLayoutEngine, EllipticalLayoutEngine, create_engine
from .angles import AngleAllocator
from .alignment import Alignment, AlignmentResolver
from .geometry import RadialLocation, BoundaryAggregator, COANGULAR_EPSILON
from .solver import RadiusSolver
from .types import (
    Size,
    Rect,
    RadiusPair,
    LayoutState,
    MeasureResult,
    Placement,
    ArrangeResult,
)

__all__ = [
    'LayoutEngine',
    'CircularLayoutEngine',
    'EllipticalLayoutEngine',
    'create_engine',
    'AngleAllocator',
    'Alignment',
    'AlignmentResolver',
    'RadialLocation',
    'BoundaryAggregator',
    'COANGULAR_EPSILON',
    'RadiusSolver',
    'Size',
    'Rect',
    'RadiusPair',
    'LayoutState',
    'MeasureResult',
    'Placement',
    'ArrangeResult',
]
