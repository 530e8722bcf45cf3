"""Append-only reading log for a monitoring session.

The log is owned by the caller and passed into the engine functions; the
engine never keeps readings of its own. Readings can only be added, never
edited or removed, and keep their insertion order.
"""

import threading
import uuid
from datetime import datetime, timezone
from typing import Iterator

from spectrospc.core.models import Reading


class ReadingLog:
    """Ordered, append-only collection of readings.

    Appends are serialized with a lock so that concurrent producers agree
    on a single insertion order. Reads return immutable snapshots.

    Example:
        >>> log = ReadingLog()
        >>> reading = log.append(0.4512, "Alice")
        >>> len(log)
        1
    """

    def __init__(self) -> None:
        self._readings: list[Reading] = []
        self._ids: set[str] = set()
        self._lock = threading.Lock()

    def append(
        self,
        value: float,
        operator_name: str,
        timestamp: datetime | None = None,
    ) -> Reading:
        """Create a reading and add it to the end of the log.

        Args:
            value: Measured value
            operator_name: Operator who took the measurement
            timestamp: Measurement time (defaults to now, UTC)

        Returns:
            The newly created Reading

        Raises:
            ValueError: If operator_name is blank
        """
        if not operator_name or not operator_name.strip():
            raise ValueError("Operator name is required")

        reading = Reading(
            id=uuid.uuid4().hex,
            value=float(value),
            timestamp=timestamp or datetime.now(timezone.utc),
            operator_name=operator_name.strip(),
        )
        return self.add(reading)

    def add(self, reading: Reading) -> Reading:
        """Add an existing reading to the end of the log.

        Raises:
            ValueError: If a reading with the same id is already logged
        """
        with self._lock:
            if reading.id in self._ids:
                raise ValueError(f"Reading {reading.id} is already in the log")
            self._readings.append(reading)
            self._ids.add(reading.id)
        return reading

    def snapshot(self) -> tuple[Reading, ...]:
        """Return the readings in insertion order."""
        with self._lock:
            return tuple(self._readings)

    def __len__(self) -> int:
        return len(self._readings)

    def __iter__(self) -> Iterator[Reading]:
        return iter(self.snapshot())

    def __getitem__(self, index: int) -> Reading:
        return self._readings[index]
