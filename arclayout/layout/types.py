"""
Layout types for arclayout
Geometric values and the results of the measure and arrange phases

All types are immutable (frozen) so a measured state can be handed to any
later arrange call without being disturbed in between.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional, Tuple
import math

from ..types import SolveMode, Vector


@dataclass(frozen=True)
class Size:
    """
    Width/height pair

    Either component may be math.inf to mean "unbounded" when the size
    describes available space. Item sizes are always finite.
    """
    width: float
    height: float

    @classmethod
    def unbounded(cls) -> 'Size':
        """Size that is unbounded in both axes"""
        return cls(math.inf, math.inf)

    @classmethod
    def coerce(cls, value: Any) -> 'Size':
        """Accept a Size or a (width, height) pair"""
        if isinstance(value, Size):
            return value
        width, height = value
        return cls(float(width), float(height))

    @property
    def is_unbounded(self) -> bool:
        """Both axes unbounded"""
        return math.isinf(self.width) and math.isinf(self.height)

    def fits_within(self, other: 'Size') -> bool:
        """Whether this size is no larger than other in both axes"""
        return self.width <= other.width and self.height <= other.height


@dataclass(frozen=True)
class Rect:
    """
    Axis-aligned rectangle in screen convention (y grows downwards)

    Attributes:
        x: Left edge
        y: Top edge
        width: Extent along x (>= 0)
        height: Extent along y (>= 0)
    """
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def centred_on_origin(cls, size: Size) -> 'Rect':
        """Rectangle of the given size centred on (0, 0)"""
        return cls(-size.width / 2, -size.height / 2, size.width, size.height)

    @classmethod
    def from_edges(cls, left: float, top: float, right: float, bottom: float) -> 'Rect':
        return cls(left, top, right - left, bottom - top)

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def centre(self) -> Vector:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def union(self, other: 'Rect') -> 'Rect':
        """Smallest rectangle containing both rectangles"""
        return Rect.from_edges(
            min(self.left, other.left),
            min(self.top, other.top),
            max(self.right, other.right),
            max(self.bottom, other.bottom),
        )

    def translate(self, dx: float, dy: float) -> 'Rect':
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def symmetric_about_origin(self) -> 'Rect':
        """
        Smallest rectangle centred on (0, 0) that contains this one

        Half-extents are max(|left|, |right|) and max(|top|, |bottom|), so the
        origin rather than the centroid becomes the centre.
        """
        half_width = max(abs(self.left), abs(self.right))
        half_height = max(abs(self.top), abs(self.bottom))
        return Rect(-half_width, -half_height, half_width * 2, half_height * 2)

    def intersects(self, other: 'Rect', tolerance: float = 0.0) -> bool:
        """
        Whether the interiors overlap by more than tolerance on both axes

        Rectangles that merely touch along an edge do not intersect.
        """
        return (
            self.left < other.right - tolerance
            and other.left < self.right - tolerance
            and self.top < other.bottom - tolerance
            and other.top < self.bottom - tolerance
        )

    def contains(self, other: 'Rect', tolerance: float = 0.0) -> bool:
        """Whether other lies inside this rectangle (edges may touch)"""
        return (
            other.left >= self.left - tolerance
            and other.top >= self.top - tolerance
            and other.right <= self.right + tolerance
            and other.bottom <= self.bottom + tolerance
        )


ZERO_RECT = Rect(0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class RadiusPair:
    """
    Horizontal and vertical layout radii

    For the circular variant x == y.
    """
    x: float
    y: float

    @classmethod
    def zero(cls) -> 'RadiusPair':
        return cls(0.0, 0.0)

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def clamped(self) -> 'RadiusPair':
        """Radii are never negative in output"""
        return RadiusPair(max(self.x, 0.0), max(self.y, 0.0))


@dataclass(frozen=True)
class LayoutState:
    """
    Everything arrange needs from measure

    Attributes:
        radius_x: Horizontal radius (equal to radius_y for the circular variant)
        radius_y: Vertical radius
        item_count: Number of items the state was measured for
        item_sizes: Item sizes seen during measure, in input order
        mode: Solving branch taken during measure
        translation: Offset from solver space to the final frame, or None to
            put the origin at the centre of the final size
        content_boundary: Content extent in solver space, used by the
            elliptical variant to resolve alignment at arrange time
        angles: Item angles (radians) the state was measured with
    """
    radius_x: float
    radius_y: float
    item_count: int
    item_sizes: Tuple[Size, ...]
    mode: SolveMode
    translation: Optional[Vector] = None
    content_boundary: Optional[Rect] = None
    angles: Tuple[float, ...] = ()

    @property
    def radius(self) -> float:
        """Shared radius of the circular variant"""
        return self.radius_x

    @property
    def radii(self) -> RadiusPair:
        return RadiusPair(self.radius_x, self.radius_y)

    @property
    def centres_in_final_size(self) -> bool:
        """True when the translation is deferred to arrange time"""
        return self.translation is None


@dataclass(frozen=True)
class MeasureResult:
    """Desired size plus the state to pass to arrange"""
    desired_size: Size
    state: LayoutState


@dataclass(frozen=True)
class Placement:
    """
    Final rectangle for one item

    Attributes:
        index: Position of the item in the input list
        item: The caller's item handle
        angle: Angle the item was placed at (radians)
        rect: Final rectangle in the arrange frame
    """
    index: int
    item: Any
    angle: float
    rect: Rect


@dataclass(frozen=True)
class ArrangeResult:
    """Outcome of the arrange phase"""
    final_size: Size
    placements: Tuple[Placement, ...]

    @property
    def rects(self) -> Tuple[Rect, ...]:
        return tuple(p.rect for p in self.placements)

    def __len__(self) -> int:
        return len(self.placements)
