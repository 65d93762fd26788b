from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .station import Station


@dataclass(frozen=True)
class RegistrySnapshot:
    """Point-in-time view of a registry, detached from its lock.

    Arrays are aligned and sorted by station id:
    - ``ids``: int64 station ids
    - ``processing_times``: int64 costs
    - ``active``: bool mask
    """

    capacity: int
    revision: int
    ids: np.ndarray = field(default_factory=lambda: np.zeros((0,), dtype=np.int64))
    processing_times: np.ndarray = field(default_factory=lambda: np.zeros((0,), dtype=np.int64))
    active: np.ndarray = field(default_factory=lambda: np.zeros((0,), dtype=bool))

    @classmethod
    def from_stations(cls, stations: list[Station], *, capacity: int, revision: int) -> "RegistrySnapshot":
        ordered = sorted(stations, key=lambda s: s.id)
        ids = np.asarray([s.id for s in ordered], dtype=np.int64)
        times = np.asarray([s.processing_time for s in ordered], dtype=np.int64)
        mask = np.asarray([s.active for s in ordered], dtype=bool)
        for arr in (ids, times, mask):
            arr.setflags(write=False)
        return cls(capacity=int(capacity), revision=int(revision), ids=ids, processing_times=times, active=mask)

    @property
    def num_registered(self) -> int:
        return int(self.ids.shape[0])

    @property
    def num_active(self) -> int:
        return int(np.count_nonzero(self.active))

    @property
    def num_inactive(self) -> int:
        return int(self.capacity) - self.num_registered

    @property
    def total_processing_time(self) -> int:
        if self.num_registered == 0:
            return 0
        return int(self.processing_times[self.active].sum())

    @property
    def active_ids(self) -> list[int]:
        return [int(i) for i in self.ids[self.active]]

    def to_dict(self) -> dict[str, object]:
        return {
            "capacity": int(self.capacity),
            "revision": int(self.revision),
            "numActive": self.num_active,
            "numInactive": self.num_inactive,
            "totalProcessingTime": self.total_processing_time,
            "stations": [
                {"id": int(i), "processingTime": int(t), "active": bool(a)}
                for i, t, a in zip(self.ids, self.processing_times, self.active)
            ],
        }
