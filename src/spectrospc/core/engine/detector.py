"""Out-of-control point detection for I-MR charts.

Points are checked against the limits produced by
:func:`spectrospc.core.engine.control_limits.calculate_limits`. Only the
"beyond the control limits" test is applied; there are no run or trend
rules.
"""

from typing import Sequence

from spectrospc.core.models import (
    ChartType,
    ControlLimits,
    LimitType,
    OutOfControlPoint,
    Reading,
)
from spectrospc.utils.statistics import moving_ranges


def detect_out_of_control(
    readings: Sequence[Reading],
    limits: ControlLimits,
) -> list[OutOfControlPoint]:
    """Find readings and moving ranges that fall outside the control limits.

    The result lists every I-Chart violation in index order, followed by
    every MR-Chart violation in index order. A reading can appear more than
    once, e.g. as both an I-Chart and an MR-Chart UCL breach.

    Args:
        readings: Ordered readings the limits were calculated from
        limits: Control limits for the readings

    Returns:
        Out-of-control points. Empty when there are no readings or when
        ucl_x, lcl_x or ucl_mr is missing.
    """
    points: list[OutOfControlPoint] = []
    if not readings or limits.ucl_x is None or limits.lcl_x is None or limits.ucl_mr is None:
        return points

    for index, reading in enumerate(readings):
        if reading.value > limits.ucl_x:
            points.append(_point(index, reading.value, readings, ChartType.I_CHART, LimitType.UCL, limits.ucl_x))
        if reading.value < limits.lcl_x:
            points.append(_point(index, reading.value, readings, ChartType.I_CHART, LimitType.LCL, limits.lcl_x))

    if len(readings) < 2 or limits.mean_mr is None:
        return points

    ranges = moving_ranges([r.value for r in readings])
    # ranges[k] pairs readings k and k+1; the later reading owns the point
    for index, mr in enumerate(ranges.tolist(), start=1):
        if mr > limits.ucl_mr:
            points.append(_point(index, mr, readings, ChartType.MR_CHART, LimitType.UCL, limits.ucl_mr))
        if limits.lcl_mr is not None and limits.lcl_mr > 0 and mr < limits.lcl_mr:
            points.append(_point(index, mr, readings, ChartType.MR_CHART, LimitType.LCL, limits.lcl_mr))

    return points


def _point(
    index: int,
    value: float,
    readings: Sequence[Reading],
    chart: ChartType,
    limit: LimitType,
    limit_value: float,
) -> OutOfControlPoint:
    return OutOfControlPoint(
        index=index,
        value=value,
        chart=chart,
        limit=limit,
        limit_value=limit_value,
        timestamp=readings[index].timestamp,
    )
