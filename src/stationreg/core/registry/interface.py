from __future__ import annotations

from abc import ABC, abstractmethod


class AssemblyLine(ABC):
    """Operation set of a station registry.

    A registry owns a fixed number of slots and a set of stations keyed by id.
    Each station carries a processing cost and an active flag; the registry
    answers aggregate questions about the active ones.

    Notes:
    - Operations on an unregistered id raise ``NotFound``.
    - Malformed arguments raise ``InvalidArgument``.
    """

    @abstractmethod
    def add_station(self, station_id: int, processing_time: int):
        """Register a new, inactive station."""

    @abstractmethod
    def remove_station(self, station_id: int):
        """Deactivate and unregister a station."""

    @abstractmethod
    def start_assembly(self, station_id: int):
        """Mark a station active."""

    @abstractmethod
    def stop_assembly(self, station_id: int):
        """Mark a station inactive."""

    @abstractmethod
    def get_processing_time(self, station_id: int) -> int:
        """Return the cost of a station regardless of its active state."""

    @abstractmethod
    def get_total_processing_time(self) -> int:
        """Return the summed cost of all active stations."""

    @abstractmethod
    def get_num_stations(self) -> int:
        """Return the configured slot count."""

    @abstractmethod
    def get_num_active_stations(self) -> int:
        ...

    @abstractmethod
    def get_num_inactive_stations(self) -> int:
        """Return the number of slots not taken by a registered station."""

    @abstractmethod
    def is_station_active(self, station_id: int) -> bool:
        ...
