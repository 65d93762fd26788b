"""Registry configuration read from the environment.

Variables:
- ``STATIONREG_CAPACITY``: slot count (non-negative integer, default 0)
- ``STATIONREG_CAPACITY_POLICY``: ``reject`` (default) or ``slots``
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

from .errors import InvalidConfiguration
from .policy import CapacityPolicy
from .registry import InMemoryStationRegistry

ENV_CAPACITY = "STATIONREG_CAPACITY"
ENV_POLICY = "STATIONREG_CAPACITY_POLICY"


@dataclass(frozen=True)
class RegistrySettings:
    capacity: int = 0
    policy: CapacityPolicy = CapacityPolicy.REJECT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "RegistrySettings":
        env = os.environ if environ is None else environ

        raw_capacity = str(env.get(ENV_CAPACITY, "")).strip()
        if raw_capacity:
            try:
                capacity = int(raw_capacity)
            except ValueError:
                raise InvalidConfiguration(f"{ENV_CAPACITY} must be an integer, got {raw_capacity!r}") from None
        else:
            capacity = 0
        if capacity < 0:
            raise InvalidConfiguration(f"{ENV_CAPACITY} cannot be negative")

        raw_policy = str(env.get(ENV_POLICY, "")).strip()
        policy = CapacityPolicy.from_any(raw_policy) if raw_policy else CapacityPolicy.REJECT
        return cls(capacity=capacity, policy=policy)


def create_registry(
    settings: RegistrySettings | None = None,
    *,
    logger: logging.Logger | None = None,
) -> InMemoryStationRegistry:
    """Build a registry from explicit settings, or from the environment when omitted."""
    s = settings if settings is not None else RegistrySettings.from_env()
    return InMemoryStationRegistry(s.capacity, policy=s.policy, logger=logger)
