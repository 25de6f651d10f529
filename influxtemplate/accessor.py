"""Base class giving access to the connection and its configured database."""

from typing import Optional

from influxdb import InfluxDBClient

from .connection import InfluxDBConnectionFactory
from .exceptions import ConfigurationError


class InfluxDBAccessor:
    """Holds the connection factory and resolves database settings from it.

    Database name and retention policy are always read from the factory's
    properties, so every operation sees the same configuration.
    """

    def __init__(self, connection_factory: Optional[InfluxDBConnectionFactory]) -> None:
        if connection_factory is None:
            raise ConfigurationError("InfluxDBConnectionFactory is required")
        self._connection_factory = connection_factory

    @property
    def connection_factory(self) -> InfluxDBConnectionFactory:
        return self._connection_factory

    def get_connection(self) -> InfluxDBClient:
        return self._connection_factory.get_connection()

    def get_database(self) -> str:
        return self._connection_factory.properties.database

    def get_retention_policy(self) -> str:
        return self._connection_factory.properties.retention_policy
