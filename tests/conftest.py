"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add parent directory to path before any other imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from influxtemplate.config import InfluxDBProperties  # noqa: E402
from influxtemplate.connection import InfluxDBConnectionFactory  # noqa: E402


@pytest.fixture
def properties() -> InfluxDBProperties:
    """Properties for a local test database."""
    return InfluxDBProperties(
        url="http://localhost:8086",
        username="admin",
        password="secret",
        database="metrics",
        retention_policy="one_week",
    )


@pytest.fixture
def connection() -> MagicMock:
    """Stand-in for influxdb.InfluxDBClient."""
    client = MagicMock(name="InfluxDBClient")
    client.ping.return_value = "1.8.10"
    return client


@pytest.fixture
def connection_factory(properties: InfluxDBProperties, connection: MagicMock) -> MagicMock:
    """Connection factory returning the mocked client."""
    factory = MagicMock(spec=InfluxDBConnectionFactory)
    factory.properties = properties
    factory.get_connection.return_value = connection
    return factory
