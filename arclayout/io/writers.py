"""
I/O Writers

Handles writing of layout results.
"""

from __future__ import annotations
from typing import List, Optional, Sequence
from pathlib import Path
import logging
import pandas as pd

from ..layout.types import ArrangeResult, MeasureResult
from ..types import PathLike, PlacementRecord

logger = logging.getLogger(__name__)

PLACEMENT_COLUMNS = ['id', 'index', 'angle', 'x', 'y', 'width', 'height']


class PlacementWriter:
    """Writes arranged placements in TSV format with a metadata header"""

    def __init__(self, float_precision: int = 6):
        """
        Initialize placement writer

        Args:
            float_precision: Decimal places for coordinates
        """
        self.float_precision = float_precision

    def to_frame(self, arranged: ArrangeResult, ids: Optional[Sequence[str]] = None) -> pd.DataFrame:
        """
        Build a placement table

        Args:
            arranged: Result of the arrange phase
            ids: Item ids in input order (defaults to str(item))

        Returns:
            DataFrame with PLACEMENT_COLUMNS
        """
        records: List[PlacementRecord] = []
        for placement in arranged.placements:
            item_id = ids[placement.index] if ids is not None else str(placement.item)
            rect = placement.rect
            records.append({
                'id': str(item_id),
                'index': placement.index,
                'angle': placement.angle,
                'x': rect.x,
                'y': rect.y,
                'width': rect.width,
                'height': rect.height,
            })
        frame = pd.DataFrame.from_records(records, columns=PLACEMENT_COLUMNS)
        float_cols = ['angle', 'x', 'y', 'width', 'height']
        frame[float_cols] = frame[float_cols].astype(float).round(self.float_precision)
        return frame

    def write(
        self,
        measured: MeasureResult,
        arranged: ArrangeResult,
        output_file: PathLike,
        ids: Optional[Sequence[str]] = None
    ) -> Path:
        """
        Write placements to a TSV file

        Metadata lines ('# key=value') precede the table: desired size, final
        size and radii.

        Args:
            measured: Result of the measure phase
            arranged: Result of the arrange phase
            output_file: Path to output TSV file
            ids: Item ids in input order

        Returns:
            Path written
        """
        path = Path(output_file)
        path.parent.mkdir(parents=True, exist_ok=True)

        if len(arranged) == 0:
            logger.warning("No items to write")

        state = measured.state
        metadata = {
            'desired_width': measured.desired_size.width,
            'desired_height': measured.desired_size.height,
            'final_width': arranged.final_size.width,
            'final_height': arranged.final_size.height,
            'radius_x': state.radius_x,
            'radius_y': state.radius_y,
        }

        frame = self.to_frame(arranged, ids)
        with open(path, 'w') as f:
            for key, value in metadata.items():
                f.write(f"# {key}={float(value)!r}\n")
            frame.to_csv(f, sep='\t', index=False)

        logger.info(f"Wrote {len(frame)} placements to {path}")
        return path


def write_placements(
    measured: MeasureResult,
    arranged: ArrangeResult,
    output_file: PathLike,
    ids: Optional[Sequence[str]] = None
) -> Path:
    """Convenience function to write placements"""
    return PlacementWriter().write(measured, arranged, output_file, ids)
