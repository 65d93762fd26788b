from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Station:
    """A single registered station.

    Records are immutable; the registry swaps in a new record whenever the
    active flag changes.
    """

    id: int
    processing_time: int
    active: bool = False

    def to_dict(self) -> dict[str, object]:
        return {
            "id": int(self.id),
            "processingTime": int(self.processing_time),
            "active": bool(self.active),
        }
