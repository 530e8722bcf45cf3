"""Monitoring session tying a reading log to the I-MR engine.

A session owns one reading log and an optional target value. Every call to
:meth:`MonitoringSession.snapshot` recomputes limits and violations from the
current readings; nothing is cached between calls.
"""

from dataclasses import dataclass, field
from datetime import datetime

import structlog

from spectrospc.core.engine import calculate_limits, detect_out_of_control
from spectrospc.core.models import ControlLimits, OutOfControlPoint, Reading
from spectrospc.core.readings import ReadingLog

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class MonitoringSnapshot:
    """Point-in-time view of a monitoring session.

    Attributes:
        readings: Readings in insertion order
        limits: Control limits computed from the readings
        violations: Out-of-control points for the readings and limits
        target_value: Operator-defined target, if any
    """

    readings: tuple[Reading, ...]
    limits: ControlLimits
    violations: tuple[OutOfControlPoint, ...] = field(default_factory=tuple)
    target_value: float | None = None

    @property
    def in_control(self) -> bool:
        """True if no point breaches a control limit."""
        return not self.violations


class MonitoringSession:
    """In-memory I-MR monitoring of one instrument.

    Args:
        log: Reading log to monitor (a new empty log if None)
        target_value: Optional target value for the measured characteristic
    """

    def __init__(self, log: ReadingLog | None = None, target_value: float | None = None):
        self._log = log if log is not None else ReadingLog()
        self._target_value = target_value

    @property
    def log(self) -> ReadingLog:
        return self._log

    @property
    def target_value(self) -> float | None:
        return self._target_value

    def set_target(self, value: float | None) -> None:
        """Set or clear the target value."""
        self._target_value = value
        logger.info("target_value_set", target_value=value)

    def record(
        self,
        value: float,
        operator_name: str,
        timestamp: datetime | None = None,
    ) -> Reading:
        """Append a new reading to the session log.

        Raises:
            ValueError: If operator_name is blank
        """
        reading = self._log.append(value, operator_name, timestamp)
        logger.info(
            "reading_recorded",
            reading_id=reading.id,
            value=reading.value,
            operator=reading.operator_name,
            count=len(self._log),
        )
        return reading

    def snapshot(self) -> MonitoringSnapshot:
        """Recompute limits and violations for the current readings."""
        readings = self._log.snapshot()
        limits = calculate_limits(readings)
        violations = tuple(detect_out_of_control(readings, limits))

        if violations:
            logger.warning(
                "out_of_control",
                reading_count=len(readings),
                violation_count=len(violations),
            )
        else:
            logger.debug("in_control", reading_count=len(readings))

        return MonitoringSnapshot(
            readings=readings,
            limits=limits,
            violations=violations,
            target_value=self._target_value,
        )
