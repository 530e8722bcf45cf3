"""Control limit calculation for Individuals and Moving Range charts.

Limits are recomputed in full from the ordered reading sequence on every
call. The moving range method is used throughout:

- I chart:  X-bar +/- 3 * (MR-bar / d2)
- MR chart: UCL = D4 * MR-bar, LCL = D3 * MR-bar
"""

from typing import Sequence

import numpy as np

from spectrospc.core.models import ControlLimits, Reading
from spectrospc.utils.constants import D3, D4, SIGMA_MULTIPLIER
from spectrospc.utils.statistics import estimate_sigma_moving_range, moving_ranges

# Fewer readings than this give no moving range to estimate dispersion from
MIN_READINGS = 2


def calculate_limits(readings: Sequence[Reading]) -> ControlLimits:
    """Calculate I-MR control limits from readings in insertion order.

    Reordering the readings changes the moving ranges and therefore the
    limits, so callers must keep the original order.

    Args:
        readings: Ordered readings, possibly empty

    Returns:
        ControlLimits with every field set, or with every field None when
        fewer than 2 readings are available. Identical values produce a
        zero-width band (ucl_x == lcl_x == mean_x).

    Example:
        Values [5.0, 7.0] give MR-bar = 2.0, X-bar = 6.0,
        ucl_x ~= 11.319, lcl_x ~= 0.681, ucl_mr = 6.534, lcl_mr = 0.0.
    """
    if len(readings) < MIN_READINGS:
        return ControlLimits()

    values = np.fromiter((r.value for r in readings), dtype=np.float64, count=len(readings))
    ranges = moving_ranges(values)

    # Averaging offsets from the first value keeps identical readings exact
    mean_x = float(values[0] + np.mean(values - values[0]))
    mean_mr = float(np.mean(ranges))
    sigma = estimate_sigma_moving_range(mean_mr)

    return ControlLimits(
        mean_x=mean_x,
        ucl_x=mean_x + SIGMA_MULTIPLIER * sigma,
        lcl_x=mean_x - SIGMA_MULTIPLIER * sigma,
        mean_mr=mean_mr,
        ucl_mr=D4 * mean_mr,
        lcl_mr=D3 * mean_mr,
    )
