"""FastAPI dependency injection functions.

Provides the monitoring session, settings and suggestion client for API
endpoints. The session and client live on ``app.state`` and are created in
the application lifespan.
"""

from fastapi import Depends, HTTPException, Request, status

from spectrospc.core.config import Settings, get_settings
from spectrospc.core.session import MonitoringSession
from spectrospc.suggestions.client import SuggestionClient


def get_session(request: Request) -> MonitoringSession:
    """Get the process-wide monitoring session.

    Raises:
        HTTPException: 503 if the application has not initialised a session
    """
    session = getattr(request.app.state, "session", None)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Monitoring session not initialised",
        )
    return session


def get_app_settings() -> Settings:
    """Get application settings."""
    return get_settings()


def get_suggestion_client(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> SuggestionClient:
    """Get the suggestion client, creating it on first use."""
    client = getattr(request.app.state, "suggestion_client", None)
    if client is None:
        client = SuggestionClient.from_settings(settings)
        request.app.state.suggestion_client = client
    return client
