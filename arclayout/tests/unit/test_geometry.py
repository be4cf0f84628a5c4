"""
Unit tests for RadialLocation, the pairwise radius formulas and
BoundaryAggregator
"""
import math

import pytest

from arclayout.layout.geometry import (
    BoundaryAggregator,
    RadialLocation,
    max_radius_within_bounds,
    min_radius_no_overlap,
)
from arclayout.layout.types import RadiusPair, Rect, Size
from arclayout.utils import equals_within_error, safe_divide

pytestmark = pytest.mark.unit


def loc(theta, width=24.0, height=24.0):
    return RadialLocation.from_angle(theta, Size(width, height))


class TestUtils:
    """Tests for numeric helpers"""

    def test_equals_within_error_is_strict(self):
        assert equals_within_error(1.0, 1.0 + 5e-6, 1e-5)
        assert not equals_within_error(1.0, 1.5, 0.5)

    def test_equals_within_error_ignores_bound_sign(self):
        assert equals_within_error(0.0, 1e-6, -1e-5)

    def test_safe_divide_by_zero(self):
        assert safe_divide(1.0, 0.0) == math.inf
        assert safe_divide(-1.0, 0.0) == -math.inf

    def test_safe_divide_indeterminate_is_unconstrained(self):
        assert safe_divide(0.0, 0.0) == math.inf

    def test_safe_divide_regular(self):
        assert safe_divide(3.0, 4.0) == pytest.approx(0.75)


class TestBoundary:
    """Tests for RadialLocation.boundary"""

    def test_right_of_centre(self):
        rect = loc(0.0).boundary(100.0)
        assert rect.x == pytest.approx(88.0)
        assert rect.y == pytest.approx(-12.0)
        assert (rect.width, rect.height) == (24.0, 24.0)

    def test_positive_angle_is_above_centre(self):
        """Counter-clockwise angles map to negative y on screen"""
        rect = loc(math.pi / 2).boundary(100.0)
        assert rect.x == pytest.approx(-12.0)
        assert rect.y == pytest.approx(-112.0)

    def test_independent_radii(self):
        rect = loc(math.pi / 4).boundary(100.0, 50.0)
        assert rect.x == pytest.approx(100.0 * math.cos(math.pi / 4) - 12.0)
        assert rect.y == pytest.approx(-50.0 * math.sin(math.pi / 4) - 12.0)

    def test_zero_radius_centres_on_origin(self):
        assert loc(1.234, 10.0, 6.0).boundary(0.0) == Rect(-5.0, -3.0, 10.0, 6.0)


class TestMinRadiusNoOverlap:
    """Tests for the unbounded pairwise formula"""

    def test_quarter_turn_neighbours(self):
        """Items at 0 and -pi/2 clear each other at r = (24+24)/2"""
        assert min_radius_no_overlap(loc(0.0), loc(-math.pi / 2)) == pytest.approx(24.0)

    def test_opposite_items_use_easier_axis(self):
        """Items at 0 and pi differ by 2 in cosine: r = 48 / 4"""
        assert min_radius_no_overlap(loc(0.0), loc(math.pi)) == pytest.approx(12.0)

    def test_coangular_pair_contributes_nothing(self):
        assert min_radius_no_overlap(loc(0.5), loc(0.5)) == 0.0

    def test_mirrored_pair_is_coangular(self):
        """Same cosine, opposite sine: treated as co-angular"""
        first, second = loc(math.pi / 2), loc(-math.pi / 2)
        assert first.is_coangular(second)
        assert first.min_radii_no_overlap(second) == RadiusPair(0.0, 0.0)

    def test_pair_form_keeps_both_axes(self):
        radii = loc(0.0, 20.0, 10.0).min_radii_no_overlap(loc(math.pi / 2, 20.0, 10.0))
        assert radii.x == pytest.approx(20.0)
        assert radii.y == pytest.approx(10.0)

    def test_symmetric_in_arguments(self):
        a, b = loc(0.3, 10.0, 30.0), loc(2.1, 40.0, 5.0)
        assert min_radius_no_overlap(a, b) == pytest.approx(min_radius_no_overlap(b, a))

    def test_rectangles_touch_at_the_minimum(self):
        a, b = loc(0.0), loc(math.pi / 2)
        r = min_radius_no_overlap(a, b)
        assert not a.boundary(r).intersects(b.boundary(r), tolerance=1e-9)
        assert a.boundary(r * 0.9).intersects(b.boundary(r * 0.9))


class TestMaxRadiusWithinBounds:
    """Tests for the bounded pairwise formula"""

    def test_opposite_items_fill_width(self):
        """(W - 24) / 2 for items at 0 and pi"""
        r = max_radius_within_bounds(loc(0.0), loc(math.pi), Size(200.0, 200.0))
        assert r == pytest.approx(88.0)

    def test_union_fits_at_the_maximum(self):
        a, b = loc(0.0, 30.0, 20.0), loc(2.0, 10.0, 40.0)
        available = Size(150.0, 120.0)
        r = max_radius_within_bounds(a, b, available)
        union = a.boundary(r).union(b.boundary(r))
        assert union.width <= available.width + 1e-9
        assert union.height <= available.height + 1e-9

    def test_unbounded_axis_gives_infinite_component(self):
        radii = loc(0.0).max_radii_within(loc(math.pi / 2), Size(math.inf, 100.0))
        assert radii.x == math.inf
        assert radii.y == pytest.approx(76.0)


class TestMaxRadiiCentred:
    """Tests for the per-item centred bound"""

    def test_item_on_horizontal_axis(self):
        radii = loc(0.0).max_radii_centred(Size(200.0, 100.0))
        assert radii.x == pytest.approx(88.0)
        assert radii.y == math.inf

    def test_item_on_vertical_axis_is_width_unconstrained(self):
        radii = loc(math.pi / 2).max_radii_centred(Size(200.0, 100.0))
        assert radii.y == pytest.approx(38.0)
        assert radii.x > 1e10


class TestBoundaryAggregator:
    """Tests for BoundaryAggregator"""

    def test_empty_is_zero_rect(self):
        aggregator = BoundaryAggregator()
        assert aggregator.is_empty
        assert aggregator.boundary == Rect(0.0, 0.0, 0.0, 0.0)

    def test_union_does_not_include_origin(self):
        aggregator = BoundaryAggregator()
        aggregator.add(Rect(10.0, 10.0, 5.0, 5.0))
        aggregator.add(Rect(20.0, 12.0, 5.0, 5.0))
        assert aggregator.boundary == Rect(10.0, 10.0, 15.0, 7.0)

    def test_preview_does_not_commit(self):
        aggregator = BoundaryAggregator()
        aggregator.add(Rect(0.0, 0.0, 1.0, 1.0))
        preview = aggregator.preview(Rect(5.0, 5.0, 1.0, 1.0))
        assert preview == Rect(0.0, 0.0, 6.0, 6.0)
        assert aggregator.boundary == Rect(0.0, 0.0, 1.0, 1.0)

    def test_of_locations(self):
        boundary = BoundaryAggregator.of([loc(0.0), loc(math.pi)], RadiusPair(50.0, 50.0))
        assert boundary.left == pytest.approx(-62.0)
        assert boundary.right == pytest.approx(62.0)
        assert boundary.height == pytest.approx(24.0)
