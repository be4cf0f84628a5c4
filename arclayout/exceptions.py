"""
Exceptions raised by arclayout

Configuration problems fail fast when a config record is built; the layout
arithmetic itself never raises for ordinary input data.
"""


class ArcLayoutError(Exception):
    """Base class for all arclayout errors"""


class LayoutConfigError(ArcLayoutError, ValueError):
    """Invalid configuration value (bad arc angle, flag or alignment)"""


class AlignmentError(LayoutConfigError):
    """Alignment value outside {start, center, end, stretch}"""


class StaleLayoutStateError(ArcLayoutError, RuntimeError):
    """Arrange was handed a LayoutState measured for a different item set"""
