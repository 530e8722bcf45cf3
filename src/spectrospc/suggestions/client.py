"""HTTP client for the possible-causes suggestion service.

The service takes a text summary of the readings and out-of-control points
and answers with a list of possible causes in free text. It is the only
network-bound, fallible call in the system; every failure is raised as
SuggestionError from this module.
"""

from typing import Any

import httpx
import structlog
from pydantic import ValidationError

from spectrospc.core.config import Settings
from spectrospc.suggestions.models import SuggestionRequest, SuggestionResult

logger = structlog.get_logger(__name__)


class SuggestionError(Exception):
    """Raised when possible causes could not be obtained."""


class SuggestionClient:
    """Async client for the suggestion service.

    Example:
        >>> async with SuggestionClient("https://llm.example.com/suggest") as client:
        ...     result = await client.suggest(request)
        >>> print(result.possible_causes)

    Args:
        url: Endpoint the request is POSTed to. Empty disables the client.
        api_key: Optional bearer token
        timeout: Request timeout in seconds
        transport: Optional httpx transport (used by tests)
    """

    def __init__(
        self,
        url: str,
        api_key: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._url = url
        headers = {"Accept": "application/json"}
        if api_key:
            headers["Authorization"] = f"Bearer {api_key}"
        self._client = httpx.AsyncClient(
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "SuggestionClient":
        return cls(
            url=settings.suggestion_url,
            api_key=settings.suggestion_api_key or None,
            timeout=settings.suggestion_timeout,
            transport=transport,
        )

    @property
    def enabled(self) -> bool:
        return bool(self._url)

    async def suggest(self, request: SuggestionRequest) -> SuggestionResult:
        """Ask the service for possible causes of the out-of-control points.

        Raises:
            SuggestionError: If the service is disabled, unreachable, answers
                with an error status, or returns a malformed body
        """
        if not self.enabled:
            raise SuggestionError("Suggestion service is not configured")

        try:
            response = await self._client.post(self._url, json=request.to_payload())
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "suggestion_request_rejected",
                status_code=e.response.status_code,
                url=self._url,
            )
            raise SuggestionError(
                f"Suggestion service returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.error("suggestion_request_failed", url=self._url, error=str(e))
            raise SuggestionError(f"Suggestion service unreachable: {e}") from e

        try:
            body: Any = response.json()
            result = SuggestionResult.model_validate(body)
        except (ValueError, ValidationError) as e:
            logger.error("suggestion_response_invalid", url=self._url, error=str(e))
            raise SuggestionError("Suggestion service returned an invalid response") from e

        logger.info("suggestion_received", length=len(result.possible_causes))
        return result

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "SuggestionClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
