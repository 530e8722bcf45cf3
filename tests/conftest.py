"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime, timedelta, timezone

import pytest

from spectrospc.core.models import Reading

BASE_TIME = datetime(2024, 3, 1, 8, 0, 0, tzinfo=timezone.utc)


def make_readings(
    values: Sequence[float],
    start: datetime = BASE_TIME,
    step: timedelta = timedelta(minutes=1),
    operator_name: str = "operator1",
) -> list[Reading]:
    """Build readings with sequential ids and evenly spaced timestamps."""
    return [
        Reading(
            id=f"r{i}",
            value=float(v),
            timestamp=start + i * step,
            operator_name=operator_name,
        )
        for i, v in enumerate(values)
    ]


@pytest.fixture
def readings_factory() -> Callable[..., list[Reading]]:
    """Factory fixture for ordered readings."""
    return make_readings
