"""Control chart REST API endpoints.

Every request recomputes limits and violations from the current readings.
"""

from fastapi import APIRouter, Depends

from spectrospc.api.deps import get_session
from spectrospc.api.schemas.chart import (
    ChartResponse,
    ControlLimitsResponse,
    OutOfControlPointResponse,
    TargetUpdate,
)
from spectrospc.core.session import MonitoringSession

router = APIRouter(prefix="/api/v1/chart", tags=["chart"])


@router.get("/", response_model=ChartResponse)
async def get_chart(
    session: MonitoringSession = Depends(get_session),
) -> ChartResponse:
    """Get readings, limits, violations and target in one response."""
    return ChartResponse.model_validate(session.snapshot())


@router.get("/limits", response_model=ControlLimitsResponse)
async def get_limits(
    session: MonitoringSession = Depends(get_session),
) -> ControlLimitsResponse:
    """Get I-MR control limits.

    Example Response (fewer than 2 readings):
        ```json
        {"mean_x": null, "ucl_x": null, "lcl_x": null,
         "mean_mr": null, "ucl_mr": null, "lcl_mr": null}
        ```
    """
    return ControlLimitsResponse.model_validate(session.snapshot().limits)


@router.get("/violations", response_model=list[OutOfControlPointResponse])
async def get_violations(
    session: MonitoringSession = Depends(get_session),
) -> list[OutOfControlPointResponse]:
    """Get out-of-control points, I-Chart first, then MR-Chart."""
    return [
        OutOfControlPointResponse.model_validate(p)
        for p in session.snapshot().violations
    ]


@router.put("/target", response_model=TargetUpdate)
async def set_target(
    data: TargetUpdate,
    session: MonitoringSession = Depends(get_session),
) -> TargetUpdate:
    """Set or clear the target value."""
    session.set_target(data.target_value)
    return TargetUpdate(target_value=session.target_value)
