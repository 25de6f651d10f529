"""Type-directed conversion of payloads into lists of points.

The registry maps a payload type to a function returning the points for one
payload. Lookup follows the payload type's MRO, so a converter registered for
a base class also handles its subclasses unless a subclass has its own.
"""

import logging
from collections.abc import Mapping
from typing import Any, Callable, Iterable, Optional, Union

from .exceptions import ConversionError

# Target shape of every conversion
POINT_LIST = "list[Point]"

Converter = Callable[[Any], Union[dict[str, Any], Iterable[dict[str, Any]]]]


class PointConverterRegistry:
    """Registry of converters producing InfluxDB points from application objects."""

    def __init__(self) -> None:
        self._converters: dict[type, Converter] = {}

    def register(self, source_type: type, converter: Converter) -> None:
        """Register ``converter`` for payloads of ``source_type``.

        Registering the same type twice replaces the previous converter.
        """
        if not isinstance(source_type, type):
            raise TypeError(f"source_type must be a type, got {source_type!r}")
        if not callable(converter):
            raise TypeError(f"Converter for {source_type.__qualname__} must be callable")
        if source_type in self._converters:
            logging.debug(f"Replacing point converter for {source_type.__qualname__}")
        self._converters[source_type] = converter

    def converter(self, source_type: type) -> Callable[[Converter], Converter]:
        """Decorator form of :meth:`register`."""

        def decorator(fn: Converter) -> Converter:
            self.register(source_type, fn)
            return fn

        return decorator

    def _lookup(self, source_type: type) -> Optional[Converter]:
        for klass in source_type.__mro__:
            converter = self._converters.get(klass)
            if converter is not None:
                return converter
        return None

    def can_convert(self, source_type: type, target_type: str = POINT_LIST) -> bool:
        """Return True if values of ``source_type`` can become ``target_type``."""
        return target_type == POINT_LIST and self._lookup(source_type) is not None

    def convert(
        self, value: Any, source_type: Optional[type] = None, target_type: str = POINT_LIST
    ) -> list[dict[str, Any]]:
        """Convert ``value`` into a list of points, preserving converter order.

        Raises:
            ConversionError: If no converter handles ``source_type``.
            TypeError: If the converter returns None or something other than points.
        """
        if source_type is None:
            source_type = type(value)
        converter = self._lookup(source_type) if target_type == POINT_LIST else None
        if converter is None:
            raise ConversionError(source_type, target_type)
        result = converter(value)
        if result is None:
            raise TypeError(f"Point converter for {source_type.__qualname__} returned None")
        # A single point may be returned bare
        if isinstance(result, Mapping):
            return [result]
        points = list(result)
        for point in points:
            if not isinstance(point, Mapping):
                raise TypeError(
                    f"Point converter for {source_type.__qualname__} produced "
                    f"{type(point).__qualname__}, expected a point dict"
                )
        return points
