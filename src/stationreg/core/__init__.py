from __future__ import annotations

from .errors import (
    CapacityExceeded,
    InvalidArgument,
    InvalidConfiguration,
    NotFound,
    ScriptError,
    StationRegistryError,
)
from .policy import CapacityPolicy
from .registry import AssemblyLine, InMemoryStationRegistry
from .settings import RegistrySettings, create_registry
from .snapshot import RegistrySnapshot
from .station import Station

__all__ = [
    "StationRegistryError",
    "InvalidConfiguration",
    "InvalidArgument",
    "CapacityExceeded",
    "NotFound",
    "ScriptError",
    "CapacityPolicy",
    "Station",
    "RegistrySnapshot",
    "AssemblyLine",
    "InMemoryStationRegistry",
    "RegistrySettings",
    "create_registry",
]
