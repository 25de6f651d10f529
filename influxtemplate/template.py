"""InfluxDB template: writes arbitrary application objects as points.

Payloads are turned into points by a :class:`PointConverterRegistry`, so the
template itself knows nothing about payload types. Every write call produces
exactly one batch and one ``write_points`` request with consistency ``all``.
"""

import logging
from typing import Any, Optional, Sequence

from .accessor import InfluxDBAccessor
from .batch import BatchPoints, ConsistencyLevel
from .connection import InfluxDBConnectionFactory
from .converters import POINT_LIST, PointConverterRegistry
from .exceptions import ConfigurationError, ConversionError
from .operations import InfluxDBOperations


class InfluxDBTemplate(InfluxDBAccessor, InfluxDBOperations):
    """Default implementation of :class:`InfluxDBOperations`."""

    def __init__(
        self,
        connection_factory: Optional[InfluxDBConnectionFactory],
        conversion_service: Optional[PointConverterRegistry],
    ) -> None:
        super().__init__(connection_factory)
        if conversion_service is None:
            raise ConfigurationError("A point conversion service is required")
        self._conversion_service = conversion_service

    @property
    def conversion_service(self) -> PointConverterRegistry:
        return self._conversion_service

    def create_database(self) -> None:
        database = self.get_database()
        self.get_connection().create_database(database)
        logging.info(f"Created InfluxDB database: {database}")

    def write(self, payload: Any) -> None:
        if payload is None:
            raise ValueError("Parameter 'payload' must not be None")
        batch = self._new_batch()
        for point in self._convert(payload):
            batch.point(point)
        self._submit(batch)

    def write_all(self, payloads: Sequence[Any]) -> None:
        if payloads is None:
            raise ValueError("Parameter 'payloads' must not be None")
        batch = self._new_batch()
        for payload in payloads:
            for point in self._convert(payload):
                batch.point(point)
        self._submit(batch)

    def query(self, query: str, time_unit: Optional[str] = None) -> Any:
        connection = self.get_connection()
        if time_unit is None:
            return connection.query(query, database=self.get_database())
        return connection.query(query, epoch=time_unit, database=self.get_database())

    def ping(self) -> Any:
        return self.get_connection().ping()

    def version(self) -> str:
        # InfluxDBClient.ping() returns the X-Influxdb-Version response header
        return self.get_connection().ping()

    def _new_batch(self) -> BatchPoints:
        return BatchPoints(
            self.get_database(),
            retention_policy=self.get_retention_policy(),
            consistency=ConsistencyLevel.ALL,
        )

    def _submit(self, batch: BatchPoints) -> None:
        logging.debug(f"Writing {len(batch)} points: {batch!r}")
        self.get_connection().write_points(
            batch.points,
            database=batch.database,
            retention_policy=batch.retention_policy,
            consistency=batch.consistency.value,
        )

    def _convert(self, payload: Any) -> list[dict[str, Any]]:
        source_type = type(payload)
        if not self._conversion_service.can_convert(source_type, POINT_LIST):
            raise ConversionError(source_type, POINT_LIST)
        return self._conversion_service.convert(payload, source_type, POINT_LIST)
