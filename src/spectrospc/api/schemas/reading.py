"""Pydantic schemas for Reading operations."""

from datetime import datetime

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field


class ReadingCreate(BaseModel):
    """Schema for recording a new reading.

    Attributes:
        value: Measured value
        operator_name: Operator entering the reading
        timestamp: Measurement time with UTC offset (server time if omitted)
    """

    value: float = Field(..., ge=-10000, le=10000, description="Measured value")
    operator_name: str = Field(..., min_length=1, max_length=50)
    timestamp: AwareDatetime | None = None


class ReadingResponse(BaseModel):
    """Schema for reading response."""

    id: str
    value: float
    timestamp: datetime
    operator_name: str

    model_config = ConfigDict(from_attributes=True)
