"""
Radial geometry

RadialLocation pairs an item's angle with its measured size and carries the
pairwise radius formulas. BoundaryAggregator unions placement rectangles.

Placement rectangle of an item at angle θ with size (w, h), radii (rX, rY):

    left   = rX * cos(θ) - w/2        right  = rX * cos(θ) + w/2
    top    = rY * -sin(θ) - h/2       bottom = rY * -sin(θ) + h/2

The sine is negated to turn the counter-clockwise mathematical convention
into screen coordinates, where y grows downwards.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional
import math

from ..utils import equals_within_error, safe_divide
from .types import RadiusPair, Rect, Size, ZERO_RECT

COANGULAR_EPSILON = 1e-5
"""Cosines closer than this mark two locations as sharing an angle"""


def _bound(dividend: float, divisor: float) -> float:
    """
    Radius bound dividend / |divisor|, or inf when the divisor is below
    COANGULAR_EPSILON

    Angles from the allocator put items on an axis with a trig value of about
    1e-16 rather than 0. Such a term would give a finite but meaningless bound
    around 1e17, so it is reported as unconstrained instead.
    """
    if abs(divisor) < COANGULAR_EPSILON:
        return math.inf
    return safe_divide(dividend, abs(divisor))


@dataclass(frozen=True)
class RadialLocation:
    """
    Cached sine/cosine of an item's angle together with its size

    Attributes:
        sin_theta: sin(θ)
        cos_theta: cos(θ)
        size: Item's measured size
    """
    sin_theta: float
    cos_theta: float
    size: Size

    @classmethod
    def from_angle(cls, theta: float, size: Size) -> 'RadialLocation':
        return cls(math.sin(theta), math.cos(theta), size)

    def boundary(self, radius_x: float, radius_y: Optional[float] = None) -> Rect:
        """Placement rectangle at the given radius (or radii) in solver space"""
        if radius_y is None:
            radius_y = radius_x
        return Rect(
            radius_x * self.cos_theta - self.size.width / 2,
            radius_y * -self.sin_theta - self.size.height / 2,
            self.size.width,
            self.size.height,
        )

    def is_coangular(self, other: 'RadialLocation') -> bool:
        """
        Whether the pair is treated as sharing an angle

        Only the cosines are compared. Two locations mirrored across the
        horizontal axis (same cosine, opposite sine) count as co-angular too.
        """
        return equals_within_error(self.cos_theta, other.cos_theta, COANGULAR_EPSILON)

    def min_radii_no_overlap(self, other: 'RadialLocation') -> RadiusPair:
        """
        Smallest radii at which this item and other stop overlapping

        The rectangles are disjoint once one of them clears the other along
        either axis:

            self.left > other.right
            r*cos(θ1) - w1/2 > r*cos(θ2) + w2/2
            r > (w1 + w2) / (2 * (cos(θ1) - cos(θ2)))

        The mirrored condition only flips the sign, giving

            rX = (w1 + w2) / (2 * |cos(θ1) - cos(θ2)|)
            rY = (h1 + h2) / (2 * |sin(θ1) - sin(θ2)|)

        A co-angular pair places no constraint and returns (0, 0).
        """
        if self.is_coangular(other):
            return RadiusPair.zero()

        radius_x = safe_divide(
            self.size.width + other.size.width,
            2 * abs(self.cos_theta - other.cos_theta)
        )
        radius_y = safe_divide(
            self.size.height + other.size.height,
            2 * abs(self.sin_theta - other.sin_theta)
        )
        return RadiusPair(radius_x, radius_y)

    def max_radii_within(self, other: 'RadialLocation', available: Size) -> RadiusPair:
        """
        Largest radii at which this item and other both fit inside available

        The union of the two rectangles must not exceed the available extent:

            other.right - self.left <= W
            r * |cos(θ1) - cos(θ2)| + (w1 + w2)/2 <= W
            rX = (W - (w1 + w2)/2) / |cos(θ1) - cos(θ2)|

        and likewise rY against H with the sines.
        An axis along which the two items do not separate places no bound.
        """
        width_dividend = available.width - (self.size.width + other.size.width) / 2.0
        height_dividend = available.height - (self.size.height + other.size.height) / 2.0

        radius_x = _bound(width_dividend, self.cos_theta - other.cos_theta)
        radius_y = _bound(height_dividend, self.sin_theta - other.sin_theta)
        return RadiusPair(radius_x, radius_y)

    def max_radii_centred(self, available: Size) -> RadiusPair:
        """
        Largest radii keeping this item inside available when the origin sits
        at its centre

        With a centred origin each item only has to stay within half the
        available extent on its own side:

            rX = |(W/2 - w/2) / cos(θ)|     rY = |(H/2 - h/2) / sin(θ)|

        An item sitting on an axis is unconstrained along the other one.
        """
        half_width = available.width / 2 - self.size.width / 2
        half_height = available.height / 2 - self.size.height / 2
        return RadiusPair(
            abs(_bound(half_width, self.cos_theta)),
            abs(_bound(half_height, self.sin_theta)),
        )


def min_radius_no_overlap(rl1: RadialLocation, rl2: RadialLocation) -> float:
    """
    Circular form of RadialLocation.min_radii_no_overlap

    Clearing either axis is enough, so the easier of the two bounds wins.
    """
    radii = rl1.min_radii_no_overlap(rl2)
    return min(radii.x, radii.y)


def max_radius_within_bounds(rl1: RadialLocation, rl2: RadialLocation, available: Size) -> float:
    """Circular form of RadialLocation.max_radii_within"""
    radii = rl1.max_radii_within(rl2, available)
    return min(radii.x, radii.y)


class BoundaryAggregator:
    """
    Running union of placement rectangles

    Starts empty; an empty aggregator reports a zero-size rectangle at the
    origin.
    """

    def __init__(self) -> None:
        self._boundary: Optional[Rect] = None

    @classmethod
    def of(cls, locations: Iterable[RadialLocation], radii: RadiusPair) -> Rect:
        """Union of every location's boundary at radii"""
        aggregator = cls()
        for location in locations:
            aggregator.add(location.boundary(radii.x, radii.y))
        return aggregator.boundary

    @property
    def is_empty(self) -> bool:
        return self._boundary is None

    @property
    def boundary(self) -> Rect:
        return self._boundary if self._boundary is not None else ZERO_RECT

    def preview(self, rect: Rect) -> Rect:
        """Union with rect, without committing it"""
        if self._boundary is None:
            return rect
        return self._boundary.union(rect)

    def add(self, rect: Rect) -> Rect:
        self._boundary = self.preview(rect)
        return self._boundary

    def reset(self, rect: Optional[Rect] = None) -> None:
        self._boundary = rect
