"""Utilities for SpectroSPC statistical process control calculations."""

from .constants import (
    D2,
    D3,
    D4,
    IMR_CONSTANTS,
    SIGMA_MULTIPLIER,
    SpcConstants,
)

from .statistics import (
    estimate_sigma_moving_range,
    moving_ranges,
)

__all__ = [
    # Constants
    "SpcConstants",
    "IMR_CONSTANTS",
    "D2",
    "D3",
    "D4",
    "SIGMA_MULTIPLIER",
    # Statistics
    "moving_ranges",
    "estimate_sigma_moving_range",
]
