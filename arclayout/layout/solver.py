"""
Radius solving

Finds the radius (circular) or radius pair (elliptical) for a list of
RadialLocations under one of three constraint modes:

- unbounded: no two items overlap; the largest pairwise minimum wins
- bounded, centred: every item stays inside the available box with the
  origin at its centre; the smallest per-item maximum wins
- bounded, uncentred: the union of all items fits the available box;
  solved incrementally, shrinking the radius as items are added

Every pairwise and per-item result passes through an alignment lock: an axis
that may not stretch is pulled down to min(rX, rY). The circular variant is
the solver with neither axis allowed to stretch.

Pair scans are O(n^2), which is fine for the tens of items an arc holds.
"""
from __future__ import annotations
from typing import Sequence
import logging
import math

from .geometry import BoundaryAggregator, RadialLocation
from .types import RadiusPair, Size

logger = logging.getLogger(__name__)


class RadiusSolver:
    """
    Radius solver shared by the circular and elliptical engines

    Attributes:
        stretch_x: Horizontal radius may exceed the vertical one
        stretch_y: Vertical radius may exceed the horizontal one
    """

    def __init__(self, stretch_x: bool = False, stretch_y: bool = False) -> None:
        self.stretch_x = stretch_x
        self.stretch_y = stretch_y

    @classmethod
    def circular(cls) -> 'RadiusSolver':
        """Solver producing one shared radius"""
        return cls(stretch_x=False, stretch_y=False)

    def lock(self, radii: RadiusPair) -> RadiusPair:
        """Force non-stretching axes to the smaller of the two radii"""
        r = min(radii.x, radii.y)
        return RadiusPair(
            radii.x if self.stretch_x else r,
            radii.y if self.stretch_y else r,
        )

    # ------------------------------------------------------------------
    # Modes
    # ------------------------------------------------------------------

    def solve_unbounded(self, locations: Sequence[RadialLocation]) -> RadiusPair:
        """
        Smallest radii at which no pair of items overlaps

        Every pair is checked, not just neighbours: on a wide arc items far
        apart in order can still be close on screen.
        """
        radius_x = 0.0
        radius_y = 0.0
        for i in range(1, len(locations)):
            for j in range(i):
                pair = self.lock(locations[i].min_radii_no_overlap(locations[j]))
                radius_x = max(radius_x, pair.x)
                radius_y = max(radius_y, pair.y)
        return RadiusPair(radius_x, radius_y)

    def solve_bounded_centred(
        self,
        locations: Sequence[RadialLocation],
        available: Size
    ) -> RadiusPair:
        """
        Largest radii keeping every item inside available, origin at centre

        With the origin fixed at the centre each item only competes with the
        box edges, so per-item bounds suffice.
        """
        radius_x = math.inf
        radius_y = math.inf
        for location in locations:
            pair = self.lock(location.max_radii_centred(available))
            radius_x = min(radius_x, pair.x)
            radius_y = min(radius_y, pair.y)
        return RadiusPair(radius_x, radius_y)

    def solve_bounded_uncentred(
        self,
        locations: Sequence[RadialLocation],
        available: Size
    ) -> RadiusPair:
        """
        Largest radii keeping the union of all items inside available

        Seeds from the first two items, then adds items one at a time. When
        an item pushes the running union past the available size, the radii
        shrink to the tightest pairwise fit between that item and each item
        before it, and the union is rebuilt. Pairs among earlier items are
        not re-checked after a shrink.
        """
        if len(locations) < 2:
            return RadiusPair.zero()

        radii = self.lock(locations[0].max_radii_within(locations[1], available))

        aggregator = BoundaryAggregator()
        aggregator.add(locations[0].boundary(radii.x, radii.y))
        aggregator.add(locations[1].boundary(radii.x, radii.y))

        for i in range(2, len(locations)):
            location = locations[i]
            requested = aggregator.preview(location.boundary(radii.x, radii.y))

            if requested.width > available.width or requested.height > available.height:
                radius_x, radius_y = radii.x, radii.y
                for j in range(i):
                    pair = self.lock(location.max_radii_within(locations[j], available))
                    radius_x = min(radius_x, pair.x)
                    radius_y = min(radius_y, pair.y)
                radii = RadiusPair(radius_x, radius_y)
                logger.debug(f"Item {i} overflowed {available}; radii shrunk to "
                             f"({radii.x:.3f}, {radii.y:.3f})")

                aggregator.reset()
                for j in range(i + 1):
                    aggregator.add(locations[j].boundary(radii.x, radii.y))
            else:
                aggregator.add(location.boundary(radii.x, radii.y))

        return radii

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    def solve(
        self,
        locations: Sequence[RadialLocation],
        available: Size,
        centred: bool
    ) -> RadiusPair:
        """
        Solve for the mode implied by available and centred

        Output radii are finite and non-negative. A bounded solve that leaves
        an axis unconstrained (infinite) takes that axis from the unbounded
        no-overlap solution instead.
        """
        if available.is_unbounded:
            return self.solve_unbounded(locations).clamped()

        if centred:
            radii = self.solve_bounded_centred(locations, available)
        else:
            radii = self.solve_bounded_uncentred(locations, available)

        if not radii.is_finite:
            fallback = self.solve_unbounded(locations)
            logger.debug(f"Bounded solve left radii ({radii.x}, {radii.y}) "
                         f"unconstrained; using no-overlap radii for that axis")
            radii = self.lock(RadiusPair(
                radii.x if math.isfinite(radii.x) else fallback.x,
                radii.y if math.isfinite(radii.y) else fallback.y,
            ))

        return radii.clamped()
