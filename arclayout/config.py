"""
arclayout Configuration
Arc span, endpoint and alignment settings for the layout engines

Configs are frozen and validated on construction, so an invalid alignment or
a non-finite arc angle fails where it is written rather than in the middle of
a layout pass.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict
import math

from .exceptions import AlignmentError, LayoutConfigError

DEFAULT_ARC_START: float = -math.pi / 2
"""Default first angle: straight down on screen (y grows downwards)"""

DEFAULT_ARC_END: float = 2 * math.pi + DEFAULT_ARC_START
"""Default last angle: one full turn after DEFAULT_ARC_START"""


class Alignment(Enum):
    """Per-axis content alignment"""
    START = 'start'
    CENTER = 'center'
    END = 'end'
    STRETCH = 'stretch'

    @classmethod
    def coerce(cls, value: Any) -> 'Alignment':
        """
        Accept an Alignment or one of its names/aliases

        Raises:
            AlignmentError: value is not a recognised alignment
        """
        if isinstance(value, Alignment):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            if key in _ALIGNMENT_ALIASES:
                return _ALIGNMENT_ALIASES[key]
        raise AlignmentError(
            f"Invalid alignment {value!r}; expected one of "
            f"{', '.join(a.value for a in cls)}"
        )


_ALIGNMENT_ALIASES: Dict[str, Alignment] = {
    'start': Alignment.START,
    'left': Alignment.START,
    'top': Alignment.START,
    'center': Alignment.CENTER,
    'centre': Alignment.CENTER,
    'middle': Alignment.CENTER,
    'end': Alignment.END,
    'right': Alignment.END,
    'bottom': Alignment.END,
    'stretch': Alignment.STRETCH,
}


def _check_angle(name: str, value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LayoutConfigError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise LayoutConfigError(f"{name} must be finite, got {value!r}")
    return float(value)


def _check_flag(name: str, value: bool) -> bool:
    if not isinstance(value, bool):
        raise LayoutConfigError(f"{name} must be a bool, got {value!r}")
    return value


@dataclass(frozen=True)
class ArcConfig:
    """
    Angular span shared by both layout variants

    Angles are radians, reference direction to the right, increasing
    counter-clockwise.
    """

    arc_start: float = DEFAULT_ARC_START
    """Angle from which items are laid out"""

    arc_end: float = DEFAULT_ARC_END
    """Angle up to which items are laid out (may be less than arc_start)"""

    arc_start_included: bool = True
    """First item sits at arc_start; otherwise one step after it"""

    arc_end_included: bool = False
    """Last item sits at arc_end; otherwise one step before it"""

    def __post_init__(self) -> None:
        object.__setattr__(self, 'arc_start', _check_angle('arc_start', self.arc_start))
        object.__setattr__(self, 'arc_end', _check_angle('arc_end', self.arc_end))
        _check_flag('arc_start_included', self.arc_start_included)
        _check_flag('arc_end_included', self.arc_end_included)

    @property
    def is_collapsed(self) -> bool:
        """All items share one angle"""
        return self.arc_start == self.arc_end


@dataclass(frozen=True)
class CircularLayoutConfig(ArcConfig):
    """
    Circular layout: one radius shared by both axes
    """

    origin_at_centre: bool = True
    """Keep the circle's centre at the centre of the final size"""

    def __post_init__(self) -> None:
        super().__post_init__()
        _check_flag('origin_at_centre', self.origin_at_centre)

    # ============================================================
    # PRESET CONFIGURATIONS
    # ============================================================

    @classmethod
    def full_circle(cls) -> 'CircularLayoutConfig':
        """
        One full turn starting at the bottom, running counter-clockwise

        Example:
            >>> engine = CircularLayoutEngine(CircularLayoutConfig.full_circle())
        """
        return cls()

    @classmethod
    def half_circle(cls) -> 'CircularLayoutConfig':
        """
        Upper half circle from the right (0) to the left (pi), both ends used

        Content is not centred, so the empty lower half takes no space.
        """
        return cls(
            arc_start=0.0,
            arc_end=math.pi,
            arc_start_included=True,
            arc_end_included=True,
            origin_at_centre=False,
        )

    @classmethod
    def top_arc(cls, spread: float = math.pi / 2) -> 'CircularLayoutConfig':
        """
        Arc of the given spread centred on the top, both ends used
        """
        return cls(
            arc_start=math.pi / 2 + spread / 2,
            arc_end=math.pi / 2 - spread / 2,
            arc_start_included=True,
            arc_end_included=True,
            origin_at_centre=False,
        )


@dataclass(frozen=True)
class EllipticalLayoutConfig(ArcConfig):
    """
    Elliptical layout: independent horizontal and vertical radii

    Only an axis with STRETCH alignment may take a radius different from the
    other axis; every other alignment keeps the layout circular.
    """

    include_full_ellipse: bool = True
    """Measure the whole ellipse symmetric about its centre, not just the items"""

    horizontal_alignment: Alignment = Alignment.CENTER
    """Horizontal placement of the content within the final size"""

    vertical_alignment: Alignment = Alignment.CENTER
    """Vertical placement of the content within the final size"""

    def __post_init__(self) -> None:
        super().__post_init__()
        _check_flag('include_full_ellipse', self.include_full_ellipse)
        object.__setattr__(self, 'horizontal_alignment',
                           Alignment.coerce(self.horizontal_alignment))
        object.__setattr__(self, 'vertical_alignment',
                           Alignment.coerce(self.vertical_alignment))

    @property
    def stretch_x(self) -> bool:
        return self.horizontal_alignment is Alignment.STRETCH

    @property
    def stretch_y(self) -> bool:
        return self.vertical_alignment is Alignment.STRETCH

    # ============================================================
    # PRESET CONFIGURATIONS
    # ============================================================

    @classmethod
    def stretched(cls) -> 'EllipticalLayoutConfig':
        """
        Full ellipse filling the available size on both axes

        Example:
            >>> config = EllipticalLayoutConfig.stretched()
            >>> engine = EllipticalLayoutEngine(config)
        """
        return cls(
            horizontal_alignment=Alignment.STRETCH,
            vertical_alignment=Alignment.STRETCH,
        )
