"""SpectroSPC API v1 endpoints."""

from spectrospc.api.v1.chart import router as chart_router
from spectrospc.api.v1.readings import router as readings_router
from spectrospc.api.v1.suggestions import router as suggestions_router

__all__ = [
    "chart_router",
    "readings_router",
    "suggestions_router",
]
