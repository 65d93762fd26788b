from __future__ import annotations

import logging
import threading
from dataclasses import replace

import numpy as np

from ..errors import CapacityExceeded, InvalidArgument, InvalidConfiguration, NotFound
from ..policy import CapacityPolicy
from ..snapshot import RegistrySnapshot
from ..station import Station
from .interface import AssemblyLine


class InMemoryStationRegistry(AssemblyLine):
    def __init__(
        self,
        capacity: int,
        *,
        policy: CapacityPolicy | str = CapacityPolicy.REJECT,
        logger: logging.Logger | None = None,
    ) -> None:
        if not self._is_integer(capacity):
            raise InvalidConfiguration(f"capacity must be an integer, got {type(capacity).__name__}")
        if int(capacity) < 0:
            raise InvalidConfiguration("capacity cannot be negative")

        self._lock = threading.RLock()
        self._capacity = int(capacity)
        self._policy = CapacityPolicy.from_any(policy)
        self._log = logger if logger is not None else logging.getLogger(__name__)
        self._stations: dict[int, Station] = {}
        # Running aggregates over active stations, kept in step with _stations.
        self._num_active = 0
        self._active_total = 0
        self._revision = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def policy(self) -> CapacityPolicy:
        return self._policy

    @staticmethod
    def _is_integer(value: object) -> bool:
        return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))

    @classmethod
    def _validate_non_negative(cls, value: object, *, name: str) -> int:
        if not cls._is_integer(value):
            raise InvalidArgument(f"{name} must be an integer, got {type(value).__name__}")
        v = int(value)  # type: ignore[arg-type]
        if v < 0:
            raise InvalidArgument(f"{name} must be >= 0, got {v}")
        return v

    def _require_station_locked(self, station_id: int) -> Station:
        station = self._stations.get(int(station_id)) if self._is_integer(station_id) else None
        if station is None:
            self._log.debug("Station lookup failed: %r", station_id)
            raise NotFound(station_id)
        return station

    def _set_active_locked(self, station: Station, active: bool) -> Station:
        if station.active == active:
            return station
        updated = replace(station, active=active)
        self._stations[station.id] = updated
        delta = 1 if active else -1
        self._num_active += delta
        self._active_total += delta * station.processing_time
        self._revision += 1
        return updated

    def add_station(self, station_id: int, processing_time: int) -> Station:
        sid = self._validate_non_negative(station_id, name="station_id")
        cost = self._validate_non_negative(processing_time, name="processing_time")

        with self._lock:
            if sid in self._stations:
                self._log.debug("Rejected duplicate station %d", sid)
                raise InvalidArgument(f"Station {sid} already exists")
            if self._policy is CapacityPolicy.REJECT and len(self._stations) >= self._capacity:
                self._log.debug("Rejected station %d: registry full (capacity %d)", sid, self._capacity)
                raise CapacityExceeded(self._capacity)

            station = Station(id=sid, processing_time=cost, active=False)
            self._stations[sid] = station
            self._revision += 1
            self._log.debug("Added station %d (processing_time=%d)", sid, cost)
            return station

    def remove_station(self, station_id: int) -> Station:
        with self._lock:
            station = self._require_station_locked(station_id)
            if station.active:
                self._num_active -= 1
                self._active_total -= station.processing_time
                station = replace(station, active=False)
            del self._stations[station.id]
            self._revision += 1
            self._log.debug("Removed station %d", station.id)
            return station

    def start_assembly(self, station_id: int) -> Station:
        with self._lock:
            station = self._set_active_locked(self._require_station_locked(station_id), True)
            self._log.debug("Started station %d (active=%d)", station.id, self._num_active)
            return station

    def stop_assembly(self, station_id: int) -> Station:
        with self._lock:
            station = self._set_active_locked(self._require_station_locked(station_id), False)
            self._log.debug("Stopped station %d (active=%d)", station.id, self._num_active)
            return station

    def get_station(self, station_id: int) -> Station:
        with self._lock:
            return self._require_station_locked(station_id)

    def get_processing_time(self, station_id: int) -> int:
        return self.get_station(station_id).processing_time

    def is_station_active(self, station_id: int) -> bool:
        return self.get_station(station_id).active

    def get_total_processing_time(self) -> int:
        with self._lock:
            return self._active_total

    def get_num_stations(self) -> int:
        return self._capacity

    def get_num_active_stations(self) -> int:
        with self._lock:
            return self._num_active

    def get_num_inactive_stations(self) -> int:
        # Free slots: capacity minus every registered station, active or not.
        with self._lock:
            return self._capacity - len(self._stations)

    def get_num_registered_stations(self) -> int:
        with self._lock:
            return len(self._stations)

    def station_ids(self) -> list[int]:
        with self._lock:
            return sorted(self._stations)

    def revision(self) -> int:
        with self._lock:
            return self._revision

    def snapshot(self) -> RegistrySnapshot:
        with self._lock:
            return RegistrySnapshot.from_stations(
                list(self._stations.values()),
                capacity=self._capacity,
                revision=self._revision,
            )

    def __contains__(self, station_id: object) -> bool:
        if not self._is_integer(station_id):
            return False
        with self._lock:
            return int(station_id) in self._stations  # type: ignore[arg-type]

    def __len__(self) -> int:
        return self.get_num_registered_stations()

    def __repr__(self) -> str:
        with self._lock:
            return (
                f"{type(self).__name__}(capacity={self._capacity}, policy={self._policy.value!r}, "
                f"registered={len(self._stations)}, active={self._num_active})"
            )
