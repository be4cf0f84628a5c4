"""arclayout: radial and elliptical layout solving for rectangular items"""

from .config import Alignment, CircularLayoutConfig, EllipticalLayoutConfig
from .exceptions import ArcLayoutError, LayoutConfigError, AlignmentError, StaleLayoutStateError
from .layout import (
    CircularLayoutEngine,
    EllipticalLayoutEngine,
    create_engine,
    LayoutState,
    MeasureResult,
    ArrangeResult,
    Placement,
    Rect,
    Size,
)
from . import utils

__version__ = "0.1.0"
__all__ = ["Alignment", "CircularLayoutConfig", "EllipticalLayoutConfig",
           "ArcLayoutError", "LayoutConfigError", "AlignmentError", "StaleLayoutStateError",
           "CircularLayoutEngine", "EllipticalLayoutEngine", "create_engine",
           "LayoutState", "MeasureResult", "ArrangeResult", "Placement", "Rect", "Size", "utils"]
