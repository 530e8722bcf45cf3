"""SPC Engine - I-MR control limits and out-of-control detection."""

from .control_limits import MIN_READINGS, calculate_limits
from .detector import detect_out_of_control

__all__ = [
    # Control Limits
    "calculate_limits",
    "MIN_READINGS",
    # Detection
    "detect_out_of_control",
]
