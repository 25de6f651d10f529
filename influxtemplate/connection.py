"""Connection factory producing a shared InfluxDB 1.x client."""

import logging
from typing import Optional
from urllib.parse import urlparse

from influxdb import InfluxDBClient

from .config import InfluxDBProperties
from .exceptions import ConfigurationError


class InfluxDBConnectionFactory:
    """Creates the ``InfluxDBClient`` for a set of properties on first use."""

    def __init__(self, properties: Optional[InfluxDBProperties] = None) -> None:
        if properties is None:
            raise ConfigurationError("InfluxDBProperties are required")
        properties.validate()
        self._properties = properties
        self._connection: Optional[InfluxDBClient] = None

    @property
    def properties(self) -> InfluxDBProperties:
        return self._properties

    def get_connection(self) -> InfluxDBClient:
        """Return the client, creating it on first call."""
        if self._connection is None:
            props = self._properties
            parsed = urlparse(props.url)
            ssl = parsed.scheme == "https"
            self._connection = InfluxDBClient(
                host=parsed.hostname,
                port=parsed.port or 8086,
                username=props.username,
                password=props.password,
                database=props.database,
                ssl=ssl,
                verify_ssl=props.verify_ssl,
                timeout=props.timeout,
                path=parsed.path.strip("/"),
                gzip=props.gzip,
            )
            logging.info(
                f"Created InfluxDB connection: {parsed.hostname}:{parsed.port or 8086}/{props.database}"
            )
        return self._connection

    def close(self) -> None:
        """Close the client connection if one was created."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
            logging.debug("InfluxDB connection closed")
