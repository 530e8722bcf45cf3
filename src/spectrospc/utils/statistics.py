"""Statistical functions for I-MR control chart calculations.

This module provides functions for:
- Moving range calculation over consecutive individual values
- Sigma estimation from the average moving range (MR-bar/d2)
"""

from typing import Sequence

import numpy as np

from .constants import D2


def moving_ranges(values: Sequence[float]) -> np.ndarray:
    """Calculate the moving ranges of consecutive values.

    Args:
        values: Individual measurements in insertion order

    Returns:
        Array of ``|values[i] - values[i-1]|`` for i = 1..n-1. Empty when
        fewer than 2 values are given.

    Examples:
        >>> moving_ranges([10, 12, 11]).tolist()
        [2.0, 1.0]
    """
    arr = np.asarray(values, dtype=np.float64)
    if arr.size < 2:
        return np.empty(0, dtype=np.float64)
    return np.abs(np.diff(arr))


def estimate_sigma_moving_range(mr_bar: float) -> float:
    """Estimate process sigma for individuals from the average moving range.

    Args:
        mr_bar: Mean of the moving ranges

    Returns:
        Estimated process standard deviation (MR-bar / d2). Zero when every
        moving range is zero.

    Examples:
        >>> round(estimate_sigma_moving_range(2.0), 4)
        1.773
    """
    return mr_bar / D2
