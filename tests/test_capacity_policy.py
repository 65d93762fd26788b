from __future__ import annotations

import pytest

from stationreg import CapacityExceeded, CapacityPolicy, InMemoryStationRegistry, InvalidArgument, InvalidConfiguration


def test_reject_policy_is_default() -> None:
    reg = InMemoryStationRegistry(3)
    assert reg.policy is CapacityPolicy.REJECT


def test_reject_policy_refuses_adds_past_capacity() -> None:
    reg = InMemoryStationRegistry(2)
    reg.add_station(1, 10)
    reg.add_station(2, 20)

    with pytest.raises(CapacityExceeded, match="capacity 2") as info:
        reg.add_station(3, 30)

    assert isinstance(info.value, InvalidArgument)
    assert info.value.capacity == 2
    assert reg.station_ids() == [1, 2]
    assert reg.get_num_inactive_stations() == 0


def test_reject_policy_frees_slot_on_remove() -> None:
    reg = InMemoryStationRegistry(1)
    reg.add_station(1, 10)
    reg.remove_station(1)
    reg.add_station(2, 20)
    assert reg.station_ids() == [2]


def test_zero_capacity_rejects_every_add() -> None:
    reg = InMemoryStationRegistry(0)
    with pytest.raises(CapacityExceeded):
        reg.add_station(0, 1)


def test_slots_policy_allows_overflow() -> None:
    reg = InMemoryStationRegistry(1, policy="slots")
    reg.add_station(1, 10)
    reg.add_station(2, 20)
    reg.start_assembly(1)
    reg.start_assembly(2)

    assert reg.get_num_stations() == 1
    assert reg.get_num_registered_stations() == 2
    assert reg.get_num_active_stations() == 2
    assert reg.get_num_inactive_stations() == -1
    assert reg.get_total_processing_time() == 30


@pytest.mark.parametrize(
    "value, expected",
    [
        (CapacityPolicy.SLOTS, CapacityPolicy.SLOTS),
        ("reject", CapacityPolicy.REJECT),
        (" REJECT ", CapacityPolicy.REJECT),
        ("strict", CapacityPolicy.REJECT),
        ("slots", CapacityPolicy.SLOTS),
        ("soft", CapacityPolicy.SLOTS),
        ("Unbounded", CapacityPolicy.SLOTS),
        ("HARD", CapacityPolicy.REJECT),
    ],
)
def test_policy_from_any(value: object, expected: CapacityPolicy) -> None:
    assert CapacityPolicy.from_any(value) is expected


def test_unknown_policy_is_invalid_configuration() -> None:
    with pytest.raises(InvalidConfiguration, match="Unsupported capacity policy"):
        InMemoryStationRegistry(3, policy="elastic")
