from __future__ import annotations

from .core import (
    AssemblyLine,
    CapacityExceeded,
    CapacityPolicy,
    InMemoryStationRegistry,
    InvalidArgument,
    InvalidConfiguration,
    NotFound,
    RegistrySettings,
    RegistrySnapshot,
    ScriptError,
    Station,
    StationRegistryError,
    create_registry,
)

__version__ = "0.1.0"

__all__ = [
    "AssemblyLine",
    "InMemoryStationRegistry",
    "Station",
    "RegistrySnapshot",
    "CapacityPolicy",
    "RegistrySettings",
    "create_registry",
    "StationRegistryError",
    "InvalidConfiguration",
    "InvalidArgument",
    "CapacityExceeded",
    "NotFound",
    "ScriptError",
]
