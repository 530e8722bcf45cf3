"""Pydantic schemas for control chart data.

Limits are nullable: null means not enough readings to compute the value.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from spectrospc.api.schemas.reading import ReadingResponse
from spectrospc.core.models import ChartType, LimitType


class ControlLimitsResponse(BaseModel):
    """Schema for I-MR control limits."""

    mean_x: float | None = None
    ucl_x: float | None = None
    lcl_x: float | None = None
    mean_mr: float | None = None
    ucl_mr: float | None = None
    lcl_mr: float | None = None

    model_config = ConfigDict(from_attributes=True)


class OutOfControlPointResponse(BaseModel):
    """Schema for an out-of-control point.

    Attributes:
        index: 0-based position of the reading
        value: Charted value (reading or moving range)
        chart: "I-Chart" or "MR-Chart"
        limit: "UCL" or "LCL"
        limit_value: Breached limit
        timestamp: Timestamp of the reading
    """

    index: int
    value: float
    chart: ChartType
    limit: LimitType
    limit_value: float
    timestamp: datetime

    model_config = ConfigDict(from_attributes=True)


class ChartResponse(BaseModel):
    """Schema for a full monitoring snapshot."""

    readings: list[ReadingResponse]
    limits: ControlLimitsResponse
    violations: list[OutOfControlPointResponse]
    target_value: float | None
    in_control: bool

    model_config = ConfigDict(from_attributes=True)


class TargetUpdate(BaseModel):
    """Schema for setting or clearing the target value."""

    target_value: float | None = Field(
        default=None,
        ge=-10000,
        le=10000,
        description="Target value, null to clear",
    )
