from __future__ import annotations

from enum import Enum
from typing import Any

from .errors import InvalidConfiguration


class CapacityPolicy(str, Enum):
    """How the registry treats its configured capacity.

    Notes:
    - ``REJECT``: capacity is a hard limit; adding past it raises ``CapacityExceeded``.
    - ``SLOTS``: capacity is only the slot count reported by the station counters.
      Registrations are not limited and the inactive (free slot) count goes
      below zero once more stations are registered than slots exist.
    """

    REJECT = "reject"
    SLOTS = "slots"

    @classmethod
    def from_any(cls, value: Any) -> "CapacityPolicy":
        if isinstance(value, cls):
            return value

        v = str(value).strip().lower()
        aliases: dict[str, CapacityPolicy] = {
            # canonical
            "reject": cls.REJECT,
            "slots": cls.SLOTS,
            # short aliases
            "strict": cls.REJECT,
            "hard": cls.REJECT,
            "slot": cls.SLOTS,
            "soft": cls.SLOTS,
            "unbounded": cls.SLOTS,
        }
        if v in aliases:
            return aliases[v]

        raise InvalidConfiguration(
            f"Unsupported capacity policy {value!r}. Use CapacityPolicy.REJECT / SLOTS (or 'reject' / 'slots')."
        )
