"""
I/O Readers

Handles reading of item tables and placement files.
"""

from __future__ import annotations
from typing import Dict, List, Tuple
from pathlib import Path
import logging
import pandas as pd

from ..types import ItemRecord, PathLike

logger = logging.getLogger(__name__)

REQUIRED_ITEM_COLUMNS = ('width', 'height')


class ItemTableReader:
    """Reads item sizes from a TSV or CSV table"""

    @staticmethod
    def read(filepath: PathLike) -> pd.DataFrame:
        """
        Read an item table

        Expected columns: width, height, and optionally id. Lines starting
        with '#' are ignored. Files ending in .csv are comma separated,
        anything else is tab separated.

        Args:
            filepath: Path to the item table

        Returns:
            DataFrame with columns id, width, height in file order

        Raises:
            FileNotFoundError: filepath does not exist
            ValueError: required columns missing or sizes invalid
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Item table not found: {path}")

        sep = ',' if path.suffix.lower() == '.csv' else '\t'
        items: pd.DataFrame = pd.read_csv(path, sep=sep, comment='#')
        items.columns = [str(col).strip().lower() for col in items.columns]

        missing = [col for col in REQUIRED_ITEM_COLUMNS if col not in items.columns]
        if missing:
            raise ValueError(f"Item table {path} is missing columns: {', '.join(missing)}")

        for col in REQUIRED_ITEM_COLUMNS:
            items[col] = pd.to_numeric(items[col], errors='coerce')

        invalid = items[items['width'].isna() | items['height'].isna()
                        | (items['width'] < 0) | (items['height'] < 0)]
        if not invalid.empty:
            rows = ', '.join(str(i) for i in invalid.index.tolist())
            raise ValueError(f"Item table {path} has invalid sizes in rows: {rows}")

        if 'id' not in items.columns:
            items['id'] = [f"item{i}" for i in range(len(items))]
        items['id'] = items['id'].astype(str)

        logger.debug(f"Read {len(items)} items from {path}")
        return items[['id', 'width', 'height']].reset_index(drop=True)

    @staticmethod
    def to_records(items: pd.DataFrame) -> List[ItemRecord]:
        """Convert an item table to a list of ItemRecord dicts"""
        return [
            {'id': str(row.id), 'width': float(row.width), 'height': float(row.height)}
            for row in items.itertuples(index=False)
        ]


def read_items(filepath: PathLike) -> pd.DataFrame:
    """
    Convenience function to read an item table

    Args:
        filepath: Path to TSV/CSV item table

    Returns:
        DataFrame with columns id, width, height
    """
    return ItemTableReader.read(filepath)


class PlacementReader:
    """Reads placement files written by PlacementWriter"""

    @staticmethod
    def read(filepath: PathLike) -> Tuple[pd.DataFrame, Dict[str, float]]:
        """
        Read placements with metadata

        Args:
            filepath: Path to placement TSV file

        Returns:
            Tuple of (placements_df, metadata)
        """
        metadata: Dict[str, float] = {}

        with open(filepath, 'r') as f:
            for line in f:
                if not line.startswith('# '):
                    break
                key, _, value = line[2:].strip().partition('=')
                if key and value:
                    metadata[key] = float(value)

        placements: pd.DataFrame = pd.read_csv(filepath, sep='\t', comment='#')
        placements['id'] = placements['id'].astype(str)
        return placements, metadata


def read_placements(filepath: PathLike) -> Tuple[pd.DataFrame, Dict[str, float]]:
    """
    Convenience function to read a placement file

    Returns:
        Tuple of (placements_df, metadata)
    """
    return PlacementReader.read(filepath)
