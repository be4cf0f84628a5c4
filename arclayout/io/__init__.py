"""I/O utilities for arclayout"""

from .readers import ItemTableReader, PlacementReader, read_items, read_placements
from .writers import PLACEMENT_COLUMNS, PlacementWriter, write_placements

__all__ = [
    'ItemTableReader', 'read_items',
    'PlacementReader', 'read_placements',
    'PlacementWriter', 'write_placements',
    'PLACEMENT_COLUMNS']
