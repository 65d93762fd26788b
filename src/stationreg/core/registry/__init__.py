from __future__ import annotations

from .interface import AssemblyLine
from .service import InMemoryStationRegistry

__all__ = ["AssemblyLine", "InMemoryStationRegistry"]
