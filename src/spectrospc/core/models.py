"""Domain value objects for I-MR monitoring.

Readings are produced by the input side of the system, control limits and
out-of-control points are derived from them on demand. All three are
immutable.
"""

from dataclasses import asdict, dataclass, fields
from datetime import datetime
from enum import Enum


class ChartType(str, Enum):
    """Chart on which a point is plotted."""
    I_CHART = "I-Chart"
    MR_CHART = "MR-Chart"


class LimitType(str, Enum):
    """Control limit that a point breached."""
    UCL = "UCL"
    LCL = "LCL"


@dataclass(frozen=True)
class Reading:
    """A single instrument measurement.

    Attributes:
        id: Opaque unique identifier
        value: Measured value
        timestamp: When the measurement was taken (timezone-aware)
        operator_name: Operator who entered the measurement
    """
    id: str
    value: float
    timestamp: datetime
    operator_name: str


@dataclass(frozen=True)
class ControlLimits:
    """Center lines and control limits for the I and MR charts.

    A field is None when there is not enough data to compute it, which is
    distinct from a computed value of 0.0.

    Attributes:
        mean_x: Individuals chart center line
        ucl_x: Individuals chart Upper Control Limit
        lcl_x: Individuals chart Lower Control Limit
        mean_mr: Moving range chart center line (MR-bar)
        ucl_mr: Moving range chart Upper Control Limit
        lcl_mr: Moving range chart Lower Control Limit (0 for n=2)
    """
    mean_x: float | None = None
    ucl_x: float | None = None
    lcl_x: float | None = None
    mean_mr: float | None = None
    ucl_mr: float | None = None
    lcl_mr: float | None = None

    @property
    def is_empty(self) -> bool:
        """True when no limit could be computed."""
        return all(getattr(self, f.name) is None for f in fields(self))

    def as_dict(self) -> dict[str, float | None]:
        return asdict(self)


@dataclass(frozen=True)
class OutOfControlPoint:
    """A charted value that falls outside a control limit.

    Attributes:
        index: 0-based position of the offending reading. For the MR chart
            this is the later reading of the pair.
        value: Charted value (raw reading for I-Chart, moving range for MR-Chart)
        chart: Chart on which the violation occurred
        limit: Which limit was breached
        limit_value: Numeric value of the breached limit
        timestamp: Timestamp of the offending reading
    """
    index: int
    value: float
    chart: ChartType
    limit: LimitType
    limit_value: float
    timestamp: datetime
