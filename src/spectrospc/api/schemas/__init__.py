"""Pydantic schemas for the SpectroSPC API."""

from .chart import (
    ChartResponse,
    ControlLimitsResponse,
    OutOfControlPointResponse,
    TargetUpdate,
)
from .reading import ReadingCreate, ReadingResponse
from .suggestion import SuggestionResponse

__all__ = [
    "ChartResponse",
    "ControlLimitsResponse",
    "OutOfControlPointResponse",
    "ReadingCreate",
    "ReadingResponse",
    "SuggestionResponse",
    "TargetUpdate",
]
