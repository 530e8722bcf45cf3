"""Possible-causes suggestion endpoint."""

from fastapi import APIRouter, Depends, HTTPException, status
import structlog

from spectrospc.api.deps import get_app_settings, get_session, get_suggestion_client
from spectrospc.api.schemas.suggestion import SuggestionResponse
from spectrospc.core.config import Settings
from spectrospc.core.session import MonitoringSession
from spectrospc.suggestions.client import SuggestionClient, SuggestionError
from spectrospc.suggestions.formatting import build_suggestion_request

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/v1/suggestions", tags=["suggestions"])


@router.post("/", response_model=SuggestionResponse)
async def suggest_causes(
    session: MonitoringSession = Depends(get_session),
    client: SuggestionClient = Depends(get_suggestion_client),
    settings: Settings = Depends(get_app_settings),
) -> SuggestionResponse:
    """Ask the suggestion service for possible causes of current violations.

    Returns null causes without calling the service when the process is in
    control.

    Raises:
        HTTPException: 503 if the service is not configured, 502 if it fails
    """
    snapshot = session.snapshot()
    request = build_suggestion_request(snapshot, settings.time_format)
    if request is None:
        return SuggestionResponse(possible_causes=None, violation_count=0)

    if not client.enabled:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Suggestion service is not configured",
        )

    try:
        result = await client.suggest(request)
    except SuggestionError as e:
        logger.warning("suggestion_unavailable", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Unable to retrieve suggestions. Please try again.",
        ) from e

    return SuggestionResponse(
        possible_causes=result.possible_causes,
        violation_count=len(snapshot.violations),
    )
