"""
Utility functions

Small numeric helpers shared by the layout modules.
"""

from __future__ import annotations
from typing import Union
import math
import numpy as np

Number = Union[int, float]


def equals_within_error(value1: Number, value2: Number, error_bound: Number) -> bool:
    """
    Check whether two values lie strictly within error_bound of each other

    Args:
        value1: First value
        value2: Second value
        error_bound: Tolerance (sign is ignored)

    Returns:
        True if |value1 - value2| < |error_bound|
    """
    return abs(value1 - value2) < abs(error_bound)


def safe_divide(dividend: Number, divisor: Number) -> float:
    """
    Divide with IEEE semantics instead of raising ZeroDivisionError

    x/0 gives +/-inf. An indeterminate result (0/0, inf/inf) places no
    constraint on a radius and is returned as +inf.

    Args:
        dividend: Numerator
        divisor: Denominator

    Returns:
        Quotient as a Python float
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        result = float(np.divide(float(dividend), float(divisor)))
    if math.isnan(result):
        return math.inf
    return result
