"""Interface of the operations offered by :class:`~influxtemplate.template.InfluxDBTemplate`.

Kept separate so callers can depend on the contract and substitute a fake in tests.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence


class InfluxDBOperations(ABC):
    """Writes application objects as points and passes queries through to InfluxDB."""

    @abstractmethod
    def create_database(self) -> None:
        """Create the configured database."""
        pass

    @abstractmethod
    def write(self, payload: Any) -> None:
        """Convert one payload to points and write them in a single batch.

        Raises:
            ValueError: If payload is None.
            ConversionError: If no converter handles the payload's type.
        """
        pass

    @abstractmethod
    def write_all(self, payloads: Sequence[Any]) -> None:
        """Convert each payload in order and write all points in a single batch.

        Raises:
            ValueError: If payloads is None.
            ConversionError: If no converter handles an element's type.
        """
        pass

    @abstractmethod
    def query(self, query: str, time_unit: Optional[str] = None) -> Any:
        """Execute a query against the configured database.

        Args:
            query: InfluxQL statement.
            time_unit: Optional epoch precision for returned timestamps
                ('h', 'm', 's', 'ms', 'u' or 'ns').
        """
        pass

    @abstractmethod
    def ping(self) -> Any:
        """Check the server is reachable."""
        pass

    @abstractmethod
    def version(self) -> str:
        """Return the server version."""
        pass
