"""Text summaries of a monitoring snapshot for the suggestion service.

The service receives the readings as JSON text and one sentence per
out-of-control point.
"""

import json
from typing import Iterable, Sequence

from spectrospc.core.models import OutOfControlPoint, Reading
from spectrospc.core.session import MonitoringSnapshot
from spectrospc.suggestions.models import SuggestionRequest

DEFAULT_TIME_FORMAT = "%H:%M:%S"


def format_chart_data(readings: Sequence[Reading]) -> str:
    """Serialize readings as a JSON array of value/ISO-timestamp objects."""
    return json.dumps(
        [{"value": r.value, "timestamp": r.timestamp.isoformat()} for r in readings]
    )


def describe_point(point: OutOfControlPoint, time_format: str = DEFAULT_TIME_FORMAT) -> str:
    """Describe one out-of-control point.

    The index is 1-based, values are rounded to 4 decimal places and the
    time is rendered in the local timezone.

    Example:
        "Point at index 5 (value: 100.0000) on I-Chart violated UCL (84.9402) at 14:03:27"
    """
    local_time = point.timestamp.astimezone().strftime(time_format)
    return (
        f"Point at index {point.index + 1} (value: {point.value:.4f}) "
        f"on {point.chart.value} violated {point.limit.value} "
        f"({point.limit_value:.4f}) at {local_time}"
    )


def describe_points(
    points: Iterable[OutOfControlPoint],
    time_format: str = DEFAULT_TIME_FORMAT,
) -> str:
    return "\n".join(describe_point(p, time_format) for p in points)


def build_suggestion_request(
    snapshot: MonitoringSnapshot,
    time_format: str = DEFAULT_TIME_FORMAT,
) -> SuggestionRequest | None:
    """Build the suggestion service input for a snapshot.

    Returns:
        The request, or None when the snapshot is in control and there is
        nothing to explain.
    """
    if snapshot.in_control:
        return None

    return SuggestionRequest(
        control_chart_data=format_chart_data(snapshot.readings),
        out_of_control_points=describe_points(snapshot.violations, time_format),
        target_value=snapshot.target_value,
    )
