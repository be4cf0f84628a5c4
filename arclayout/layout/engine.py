"""
Layout Engine for arclayout
Two-phase radial layout: measure, then arrange

Measure computes the radius (or radii) and the desired size and returns them
in an immutable LayoutState. Arrange takes that state back, recomputes the
same angle sequence and emits one rectangle per item in input order. Nothing
is kept on the engine between calls, so repeated or speculative measures are
safe.

Two variants:
- CircularLayoutEngine: one radius; origin either fixed at the centre of the
  final size or the content packed tightly
- EllipticalLayoutEngine: independent radii for axes with STRETCH alignment;
  placement within the final size follows the configured alignment
"""
from __future__ import annotations
from dataclasses import replace
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union
import logging
import math

import numpy as np

from ..config import ArcConfig, CircularLayoutConfig, EllipticalLayoutConfig
from ..exceptions import StaleLayoutStateError
from ..types import MeasureFn, PlaceFn, SizeFn, SizeLike, SolveMode, Vector
from .alignment import AlignmentResolver
from .angles import AngleAllocator
from .geometry import BoundaryAggregator, RadialLocation
from .solver import RadiusSolver
from .types import (
    ArrangeResult,
    LayoutState,
    MeasureResult,
    Placement,
    RadiusPair,
    Rect,
    Size,
    ZERO_RECT,
)

logger = logging.getLogger(__name__)


def _available_size(value: SizeLike) -> Size:
    size = Size.coerce(value)
    for name, dim in (('width', size.width), ('height', size.height)):
        if math.isnan(dim) or dim < 0:
            raise ValueError(f"Available {name} must be >= 0 or inf, got {dim}")
    return size


def _final_size(value: SizeLike) -> Size:
    size = Size.coerce(value)
    for name, dim in (('width', size.width), ('height', size.height)):
        if not math.isfinite(dim) or dim < 0:
            raise ValueError(f"Final {name} must be a finite value >= 0, got {dim}")
    return size


def _item_size(value: SizeLike, index: int) -> Size:
    size = Size.coerce(value)
    for name, dim in (('width', size.width), ('height', size.height)):
        if not math.isfinite(dim) or dim < 0:
            raise ValueError(f"Item {index} has invalid {name} {dim}; "
                             f"sizes must be finite and >= 0")
    return size


class LayoutEngine:
    """
    Shared measure/arrange protocol

    Subclasses supply the solver and the variant-specific measure branches.
    """

    def __init__(self, config: ArcConfig, solver: RadiusSolver) -> None:
        self.config = config
        self.solver = solver
        self.allocator = AngleAllocator(
            config.arc_start,
            config.arc_end,
            config.arc_start_included,
            config.arc_end_included,
        )

    # ------------------------------------------------------------------
    # Measure
    # ------------------------------------------------------------------

    def measure(
        self,
        available_size: SizeLike,
        items: Iterable[Any],
        measure_fn: MeasureFn
    ) -> MeasureResult:
        """
        Measure items and solve the layout

        Args:
            available_size: Space offered by the host; either axis may be inf
            items: Item handles, in layout order
            measure_fn: Called as measure_fn(item, available) for each item,
                returns the item's desired Size or (width, height)

        Returns:
            MeasureResult with the desired size and the state for arrange
        """
        available = _available_size(available_size)
        sizes = tuple(
            _item_size(measure_fn(item, available), index)
            for index, item in enumerate(items)
        )
        n_items = len(sizes)
        angles = self.allocator.allocate(n_items)

        if n_items == 0:
            result = self._measure_empty()
        elif n_items == 1:
            result = self._measure_single(sizes[0])
        elif self.allocator.is_collapsed:
            result = self._measure_collapsed(available, sizes)
        else:
            result = self._measure_arc(available, angles, sizes)

        state = replace(result.state, angles=tuple(float(theta) for theta in angles))
        logger.debug(f"Measured {n_items} items [{state.mode}]: "
                     f"radii=({state.radius_x:.3f}, {state.radius_y:.3f}), "
                     f"desired={result.desired_size.width:.3f}x{result.desired_size.height:.3f}")
        return MeasureResult(result.desired_size, state)

    def _measure_empty(self) -> MeasureResult:
        raise NotImplementedError

    def _measure_single(self, size: Size) -> MeasureResult:
        raise NotImplementedError

    def _measure_collapsed(self, available: Size, sizes: Tuple[Size, ...]) -> MeasureResult:
        raise NotImplementedError

    def _measure_arc(
        self,
        available: Size,
        angles: np.ndarray,
        sizes: Tuple[Size, ...]
    ) -> MeasureResult:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Arrange
    # ------------------------------------------------------------------

    def arrange(
        self,
        final_size: SizeLike,
        items: Sequence[Any],
        state: LayoutState,
        place_fn: Optional[PlaceFn] = None,
        size_fn: Optional[SizeFn] = None
    ) -> ArrangeResult:
        """
        Commit final rectangles for items

        Args:
            final_size: Size granted by the host (finite)
            items: The same items, in the same order, as passed to measure
            state: State returned by the matching measure call
            place_fn: Called as place_fn(item, rect) for each item, in order
            size_fn: Reports each item's desired size; defaults to the sizes
                recorded during measure

        Returns:
            ArrangeResult with the final size and one Placement per item

        Raises:
            StaleLayoutStateError: state was measured for a different item count
                or a different arc
        """
        final = _final_size(final_size)
        items = list(items)
        if len(items) != state.item_count:
            raise StaleLayoutStateError(
                f"Layout state was measured for {state.item_count} items, "
                f"arrange received {len(items)}; measure again first"
            )

        dx, dy = self._translation(final, state)
        angles = self.allocator.allocate(len(items))
        if not np.array_equal(angles, state.angles):
            raise StaleLayoutStateError(
                "Layout state was measured with a different arc; measure again first"
            )

        placements: List[Placement] = []
        for index, (item, theta) in enumerate(zip(items, angles)):
            if size_fn is not None:
                size = _item_size(size_fn(item), index)
            else:
                size = state.item_sizes[index]
            location = RadialLocation.from_angle(float(theta), size)
            rect = location.boundary(state.radius_x, state.radius_y).translate(dx, dy)
            if place_fn is not None:
                place_fn(item, rect)
            placements.append(Placement(index=index, item=item, angle=float(theta), rect=rect))

        return ArrangeResult(final_size=final, placements=tuple(placements))

    def _translation(self, final: Size, state: LayoutState) -> Vector:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Convenience
    # ------------------------------------------------------------------

    def layout(
        self,
        available_size: SizeLike,
        items: Sequence[Any],
        measure_fn: MeasureFn,
        final_size: Optional[SizeLike] = None,
        place_fn: Optional[PlaceFn] = None
    ) -> Tuple[MeasureResult, ArrangeResult]:
        """
        Run measure then arrange

        final_size defaults to the desired size from measure.
        """
        items = list(items)
        measured = self.measure(available_size, items, measure_fn)
        final = measured.desired_size if final_size is None else final_size
        arranged = self.arrange(final, items, measured.state, place_fn=place_fn)
        return measured, arranged

    @staticmethod
    def _state(
        radii: RadiusPair,
        sizes: Tuple[Size, ...],
        mode: SolveMode,
        translation: Optional[Vector] = None,
        content_boundary: Optional[Rect] = None
    ) -> LayoutState:
        return LayoutState(
            radius_x=radii.x,
            radius_y=radii.y,
            item_count=len(sizes),
            item_sizes=sizes,
            mode=mode,
            translation=translation,
            content_boundary=content_boundary,
        )

    @staticmethod
    def _largest(sizes: Tuple[Size, ...]) -> Size:
        return Size(
            max(size.width for size in sizes),
            max(size.height for size in sizes),
        )


class CircularLayoutEngine(LayoutEngine):
    """
    Items on a circle sharing one radius

    With origin_at_centre the circle's centre is pinned to the centre of the
    final size; otherwise the content is packed against its own bounding box.
    """

    def __init__(self, config: Optional[CircularLayoutConfig] = None) -> None:
        config = config or CircularLayoutConfig()
        super().__init__(config, RadiusSolver.circular())
        self.config: CircularLayoutConfig = config

    def _measure_empty(self) -> MeasureResult:
        return MeasureResult(Size(0.0, 0.0), self._state(RadiusPair.zero(), (), 'empty'))

    def _measure_single(self, size: Size) -> MeasureResult:
        return MeasureResult(size, self._state(RadiusPair.zero(), (size,), 'single'))

    def _measure_collapsed(self, available: Size, sizes: Tuple[Size, ...]) -> MeasureResult:
        largest = self._largest(sizes)
        translation: Optional[Vector] = None
        if available.is_unbounded:
            translation = (largest.width / 2, largest.height / 2)
        state = self._state(RadiusPair.zero(), sizes, 'collapsed', translation=translation)
        return MeasureResult(largest, state)

    def _measure_arc(
        self,
        available: Size,
        angles: np.ndarray,
        sizes: Tuple[Size, ...]
    ) -> MeasureResult:
        centred = self.config.origin_at_centre
        locations = [RadialLocation.from_angle(float(theta), size)
                     for theta, size in zip(angles, sizes)]

        radii = self.solver.solve(locations, available, centred=centred)
        boundary = BoundaryAggregator.of(locations, radii)

        if available.is_unbounded:
            if centred:
                content = boundary.symmetric_about_origin()
                state = self._state(radii, sizes, 'centred_unbounded', content_boundary=content)
                return MeasureResult(content.size, state)

            translation = (-boundary.left, -boundary.top)
            state = self._state(radii, sizes, 'uncentred_unbounded',
                                translation=translation, content_boundary=boundary)
            return MeasureResult(boundary.size, state)

        if centred:
            desired = Size(
                boundary.width if math.isinf(available.width) else available.width,
                boundary.height if math.isinf(available.height) else available.height,
            )
            state = self._state(radii, sizes, 'centred_bounded', content_boundary=boundary)
            return MeasureResult(desired, state)

        translate_x = -boundary.left
        if not math.isinf(available.width):
            translate_x += (available.width - boundary.width) / 2
        translate_y = -boundary.top
        if not math.isinf(available.height):
            translate_y += (available.height - boundary.height) / 2

        state = self._state(radii, sizes, 'uncentred_bounded',
                            translation=(translate_x, translate_y), content_boundary=boundary)
        return MeasureResult(boundary.size, state)

    def _translation(self, final: Size, state: LayoutState) -> Vector:
        if state.translation is not None:
            return state.translation
        return (final.width / 2, final.height / 2)


class EllipticalLayoutEngine(LayoutEngine):
    """
    Items on an ellipse

    Axes with STRETCH alignment get their own radius; the content is placed
    within the final size by the configured alignments at arrange time.
    Items larger than the available size are left out of the radius solve
    (they are still placed).
    """

    def __init__(self, config: Optional[EllipticalLayoutConfig] = None) -> None:
        config = config or EllipticalLayoutConfig()
        super().__init__(config, RadiusSolver(config.stretch_x, config.stretch_y))
        self.config: EllipticalLayoutConfig = config
        self.resolver = AlignmentResolver(config.horizontal_alignment, config.vertical_alignment)

    def _measure_empty(self) -> MeasureResult:
        state = self._state(RadiusPair.zero(), (), 'empty', content_boundary=ZERO_RECT)
        return MeasureResult(Size(0.0, 0.0), state)

    def _measure_single(self, size: Size) -> MeasureResult:
        state = self._state(RadiusPair.zero(), (size,), 'single',
                            content_boundary=Rect.centred_on_origin(size))
        return MeasureResult(size, state)

    def _measure_collapsed(self, available: Size, sizes: Tuple[Size, ...]) -> MeasureResult:
        largest = self._largest(sizes)
        state = self._state(RadiusPair.zero(), sizes, 'collapsed',
                            content_boundary=Rect.centred_on_origin(largest))
        return MeasureResult(largest, state)

    def _measure_arc(
        self,
        available: Size,
        angles: np.ndarray,
        sizes: Tuple[Size, ...]
    ) -> MeasureResult:
        full = self.config.include_full_ellipse

        locations: List[RadialLocation] = []
        for index, (theta, size) in enumerate(zip(angles, sizes)):
            if size.fits_within(available):
                locations.append(RadialLocation.from_angle(float(theta), size))
            else:
                logger.debug(f"Item {index} ({size.width}x{size.height}) exceeds "
                             f"available size; left out of radius solve")

        radii = self.solver.solve(locations, available, centred=full)
        boundary = BoundaryAggregator.of(locations, radii)
        content = boundary.symmetric_about_origin() if full else boundary
        mode: SolveMode

        if available.is_unbounded:
            mode = 'centred_unbounded' if full else 'uncentred_unbounded'
            desired = content.size
        elif full:
            mode = 'centred_bounded'
            desired = Size(
                boundary.width if math.isinf(available.width) else available.width,
                boundary.height if math.isinf(available.height) else available.height,
            )
        else:
            mode = 'uncentred_bounded'
            desired = boundary.size

        return MeasureResult(desired, self._state(radii, sizes, mode, content_boundary=content))

    def _translation(self, final: Size, state: LayoutState) -> Vector:
        content = state.content_boundary if state.content_boundary is not None else ZERO_RECT
        return self.resolver.translation(final, content)


def create_engine(
    config: Union[CircularLayoutConfig, EllipticalLayoutConfig]
) -> LayoutEngine:
    """Build the engine matching a config record"""
    if isinstance(config, EllipticalLayoutConfig):
        return EllipticalLayoutEngine(config)
    if isinstance(config, CircularLayoutConfig):
        return CircularLayoutEngine(config)
    raise TypeError(f"Unsupported layout config {type(config).__name__}")
