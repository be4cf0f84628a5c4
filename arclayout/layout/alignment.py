"""
Content alignment

Maps solver-space content (centred on the origin) into the final frame.
"""
from __future__ import annotations
from ..config import Alignment
from ..exceptions import AlignmentError
from ..types import Vector
from .types import Rect, Size

__all__ = ['Alignment', 'AlignmentResolver', 'axis_offset']


def axis_offset(alignment: Alignment, extent: float, near: float, far: float) -> float:
    """
    Offset along one axis that aligns [near, far] within [0, extent]

    Args:
        alignment: How to align on this axis
        extent: Final extent of the axis
        near: Content's near edge (left or top) in solver space
        far: Content's far edge (right or bottom) in solver space

    Raises:
        AlignmentError: alignment is not an Alignment member
    """
    if alignment is Alignment.START:
        return -near
    if alignment is Alignment.END:
        return extent - far
    if alignment is Alignment.CENTER or alignment is Alignment.STRETCH:
        return extent / 2 - (near + (far - near) / 2)
    raise AlignmentError(f"Invalid alignment {alignment!r}")


class AlignmentResolver:
    """Translation from solver space into the final frame"""

    def __init__(self, horizontal: Alignment, vertical: Alignment) -> None:
        self.horizontal = horizontal
        self.vertical = vertical

    def translation(self, final_size: Size, content_boundary: Rect) -> Vector:
        """
        Translation vector for content_boundary within final_size

        Args:
            final_size: Size granted at arrange time
            content_boundary: Content extent recorded during measure

        Returns:
            (dx, dy) to add to every solver-space rectangle
        """
        dx = axis_offset(self.horizontal, final_size.width,
                         content_boundary.left, content_boundary.right)
        dy = axis_offset(self.vertical, final_size.height,
                         content_boundary.top, content_boundary.bottom)
        return (dx, dy)
