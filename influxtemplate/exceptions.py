"""Exceptions raised by the template layer.

Errors coming from the influxdb client (InfluxDBClientError, InfluxDBServerError,
requests exceptions) are never wrapped; they reach the caller unchanged.
"""


class InfluxTemplateError(Exception):
    """Base class for errors raised locally by influxtemplate."""


class ConfigurationError(InfluxTemplateError):
    """A required collaborator or setting is missing or invalid."""


class ConversionError(InfluxTemplateError):
    """No converter can turn a payload into a list of points."""

    def __init__(self, source_type: type, target_type: str) -> None:
        self.source_type = source_type
        self.target_type = target_type
        super().__init__(
            f"Object of type [{source_type.__module__}.{source_type.__qualname__}] "
            f"cannot be converted to [{target_type}]"
        )
