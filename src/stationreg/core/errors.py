"""Error hierarchy for the station registry.

Every failure raised by the registry derives from :class:`StationRegistryError`
and also from the closest builtin (``ValueError`` / ``LookupError``), so callers
can catch either. Errors are raised before any mutation, so a failed call
leaves the registry unchanged.
"""

from __future__ import annotations


class StationRegistryError(Exception):
    """Base exception for all stationreg errors."""


class InvalidConfiguration(StationRegistryError, ValueError):
    """A constructor argument or settings value is malformed."""


class InvalidArgument(StationRegistryError, ValueError):
    """A call argument is malformed (negative id, duplicate id, negative cost)."""


class CapacityExceeded(InvalidArgument):
    def __init__(self, capacity: int) -> None:
        super().__init__(f"Registry is full (capacity {int(capacity)})")
        self.capacity = int(capacity)


class NotFound(StationRegistryError, LookupError):
    def __init__(self, station_id: int) -> None:
        super().__init__(f"Unknown station: {station_id}")
        self.station_id = station_id


class ScriptError(StationRegistryError, ValueError):
    def __init__(self, message: str, line_number: int) -> None:
        super().__init__(f"line {int(line_number)}: {message}")
        self.line_number = int(line_number)
