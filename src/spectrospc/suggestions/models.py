"""Payloads exchanged with the possible-causes suggestion service."""

from pydantic import BaseModel, ConfigDict, Field


class SuggestionRequest(BaseModel):
    """Input for the possible-causes suggestion service.

    Attributes:
        control_chart_data: JSON text of the readings (value and ISO timestamp)
        out_of_control_points: One human-readable line per out-of-control point
        target_value: Desired target value, if the operator has set one
    """

    model_config = ConfigDict(populate_by_name=True)

    control_chart_data: str = Field(..., alias="controlChartData")
    out_of_control_points: str = Field(..., alias="outOfControlPoints")
    target_value: float | None = Field(default=None, alias="targetValue")

    def to_payload(self) -> dict:
        """Serialize with the service's camelCase names, omitting an unset target."""
        return self.model_dump(by_alias=True, exclude_none=True)


class SuggestionResult(BaseModel):
    """Output of the possible-causes suggestion service."""

    model_config = ConfigDict(populate_by_name=True)

    possible_causes: str = Field(..., alias="possibleCauses")
