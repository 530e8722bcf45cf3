"""Possible-causes suggestion boundary.

Formats monitoring snapshots for the external suggestion service and calls
it. Nothing in spectrospc.core depends on this package.
"""

from .client import SuggestionClient, SuggestionError
from .formatting import (
    build_suggestion_request,
    describe_point,
    describe_points,
    format_chart_data,
)
from .models import SuggestionRequest, SuggestionResult

__all__ = [
    "SuggestionClient",
    "SuggestionError",
    "SuggestionRequest",
    "SuggestionResult",
    "build_suggestion_request",
    "describe_point",
    "describe_points",
    "format_chart_data",
]
