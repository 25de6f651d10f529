"""Point and batch helpers.

Points are plain dicts in the shape ``InfluxDBClient.write_points`` expects::

    {"measurement": "cpu", "tags": {...}, "fields": {...}, "time": ...}

A ``BatchPoints`` groups points with the database, retention policy and
consistency level they are written with.
"""

from enum import Enum
from typing import Any, Iterator, Optional


class ConsistencyLevel(str, Enum):
    """Write consistency levels understood by InfluxDB clusters."""

    ALL = "all"
    ANY = "any"
    ONE = "one"
    QUORUM = "quorum"


def make_point(
    measurement: str,
    fields: dict[str, Any],
    tags: Optional[dict[str, str]] = None,
    time: Any = None,
) -> dict[str, Any]:
    """Build a point dict, omitting tags and time when not given.

    Raises:
        ValueError: If measurement is empty or no fields are provided.
    """
    if not measurement:
        raise ValueError("Point measurement must not be empty")
    if not fields:
        raise ValueError(f"Point '{measurement}' must have at least one field")

    point: dict[str, Any] = {"measurement": measurement, "fields": dict(fields)}
    if tags:
        point["tags"] = dict(tags)
    if time is not None:
        point["time"] = time
    return point


class BatchPoints:
    """Ordered collection of points sharing one write request."""

    def __init__(
        self,
        database: str,
        retention_policy: Optional[str] = None,
        consistency: ConsistencyLevel = ConsistencyLevel.ALL,
    ) -> None:
        if not database:
            raise ValueError("Batch database must not be empty")
        self.database = database
        self.retention_policy = retention_policy
        self.consistency = ConsistencyLevel(consistency)
        self._points: list[dict[str, Any]] = []

    def point(self, point: dict[str, Any]) -> "BatchPoints":
        """Append a point, keeping insertion order."""
        self._points.append(point)
        return self

    @property
    def points(self) -> list[dict[str, Any]]:
        return list(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[dict[str, Any]]:
        return iter(self._points)

    def __repr__(self) -> str:
        return (
            f"BatchPoints(database={self.database!r}, retention_policy={self.retention_policy!r}, "
            f"consistency={self.consistency.value!r}, points={len(self._points)})"
        )
