"""Pydantic schemas for possible-causes suggestions."""

from pydantic import BaseModel


class SuggestionResponse(BaseModel):
    """Schema for suggestion response.

    Attributes:
        possible_causes: Suggested causes, null when the process is in control
        violation_count: Number of out-of-control points that were explained
    """

    possible_causes: str | None
    violation_count: int
