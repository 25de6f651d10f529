"""InfluxDB template.

Persists arbitrary application objects into InfluxDB 1.x through a pluggable
type-to-point converter registry, with query, ping and version passthroughs.
"""

from .accessor import InfluxDBAccessor
from .batch import BatchPoints, ConsistencyLevel, make_point
from .config import InfluxDBProperties, get, load_config
from .connection import InfluxDBConnectionFactory
from .converters import POINT_LIST, PointConverterRegistry
from .exceptions import ConfigurationError, ConversionError, InfluxTemplateError
from .logging_config import configure_logging, parse_level
from .operations import InfluxDBOperations
from .template import InfluxDBTemplate

__all__ = [
    "BatchPoints",
    "ConfigurationError",
    "ConsistencyLevel",
    "ConversionError",
    "InfluxDBAccessor",
    "InfluxDBConnectionFactory",
    "InfluxDBOperations",
    "InfluxDBProperties",
    "InfluxDBTemplate",
    "InfluxTemplateError",
    "POINT_LIST",
    "PointConverterRegistry",
    "configure_logging",
    "parse_level",
    "get",
    "load_config",
    "make_point",
]
