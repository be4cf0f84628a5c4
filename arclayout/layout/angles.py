"""
Angle allocation

Spreads n items evenly over an arc. An excluded endpoint counts as one extra
segment, so items never cluster against a boundary they are not allowed to
occupy.
"""
from __future__ import annotations
import numpy as np


class AngleAllocator:
    """
    Per-item angle sequence for an arc span

    Angles are in radians with the reference direction to the right and
    increasing angles turning counter-clockwise. Neither endpoint is
    normalised, and arc_end may be smaller than arc_start (items then run
    clockwise).
    """

    def __init__(
        self,
        arc_start: float,
        arc_end: float,
        start_included: bool = True,
        end_included: bool = False
    ) -> None:
        self.arc_start = arc_start
        self.arc_end = arc_end
        self.start_included = start_included
        self.end_included = end_included

    @property
    def is_collapsed(self) -> bool:
        """The arc degenerates to a single angle"""
        return self.arc_start == self.arc_end

    def segment_count(self, n_items: int) -> int:
        """Number of angular steps the arc is divided into"""
        if n_items == 0:
            return 0
        return (
            (n_items - 1)
            + (0 if self.start_included else 1)
            + (0 if self.end_included else 1)
        )

    def segment_arc(self, n_items: int) -> float:
        """
        Angular step between consecutive items

        Zero when there is nothing to divide (a single item with both
        endpoints included, or a collapsed arc).
        """
        segments = self.segment_count(n_items)
        if segments == 0:
            return 0.0
        return (self.arc_end - self.arc_start) / segments

    def allocate(self, n_items: int) -> np.ndarray:
        """
        Angles for n_items, in item order

        Returns:
            Float array of length n_items
        """
        if n_items <= 0:
            return np.zeros(0, dtype=float)
        step = self.segment_arc(n_items)
        first = self.arc_start + (0.0 if self.start_included else step)
        return first + step * np.arange(n_items, dtype=float)
