"""Reading REST API endpoints.

Readings are append-only: there is no update or delete endpoint.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from spectrospc.api.deps import get_session
from spectrospc.api.schemas.reading import ReadingCreate, ReadingResponse
from spectrospc.core.session import MonitoringSession

router = APIRouter(prefix="/api/v1/readings", tags=["readings"])


@router.get("/", response_model=list[ReadingResponse])
async def list_readings(
    session: MonitoringSession = Depends(get_session),
) -> list[ReadingResponse]:
    """List readings in insertion order."""
    return [ReadingResponse.model_validate(r) for r in session.log.snapshot()]


@router.post("/", response_model=ReadingResponse, status_code=status.HTTP_201_CREATED)
async def create_reading(
    data: ReadingCreate,
    session: MonitoringSession = Depends(get_session),
) -> ReadingResponse:
    """Record a new reading.

    Example Request:
        ```json
        {"value": 0.4512, "operator_name": "Alice"}
        ```
    """
    try:
        reading = session.record(data.value, data.operator_name, data.timestamp)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e
    return ReadingResponse.model_validate(reading)
