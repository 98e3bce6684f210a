import pytest

from spacedomain.locations import (
    EntityPerSectorIndex,
    LocationDocked,
    LocationOrbit,
    LocationSpace,
    Moveable,
    get_location_space,
    is_docked_at,
    resolve_space_position,
    update_entity_per_sector_index,
)
from spacedomain.objects import World


def test_orbit_around_is_motionless():
    orbit = LocationOrbit.around(7)
    assert orbit.parent_id == 7
    assert orbit.distance == 0.0
    assert orbit.start_angle == 0.0
    assert orbit.speed == 0.0
    assert orbit.start_time == 0.0


def test_get_location_space_returns_copy():
    world = World()
    sector = world.spawn()
    obj = world.spawn(LocationSpace(pos=(1.0, 2.0), sector_id=sector))
    loc = get_location_space(world, obj)
    assert loc == LocationSpace(pos=(1.0, 2.0), sector_id=sector)
    loc.pos = (9.0, 9.0)
    assert world.get(obj, LocationSpace).pos == (1.0, 2.0)


def test_get_location_space_missing():
    world = World()
    obj = world.spawn(Moveable(speed=1.0))
    assert get_location_space(world, obj) is None


def test_resolve_space_position_direct():
    world = World()
    sector = world.spawn()
    obj = world.spawn(LocationSpace(pos=(3.0, 4.0), sector_id=sector))
    assert resolve_space_position(world, obj) == LocationSpace(pos=(3.0, 4.0), sector_id=sector)


def test_resolve_space_position_through_docks():
    world = World()
    sector = world.spawn()
    station = world.spawn(LocationSpace(pos=(5.0, 6.0), sector_id=sector))
    carrier = world.spawn(LocationDocked(parent_id=station))
    fighter = world.spawn(LocationDocked(parent_id=carrier))
    assert resolve_space_position(world, fighter) == world.get(station, LocationSpace)


def test_resolve_space_position_none_cases():
    world = World()
    lonely = world.spawn()
    assert resolve_space_position(world, lonely) is None
    assert resolve_space_position(world, 999) is None
    docked_to_missing = world.spawn(LocationDocked(parent_id=999))
    assert resolve_space_position(world, docked_to_missing) is None


def test_resolve_space_position_dock_cycle():
    world = World()
    a = world.spawn()
    b = world.spawn(LocationDocked(parent_id=a))
    world.insert(a, LocationDocked(parent_id=b))
    assert resolve_space_position(world, a) is None


def test_is_docked_at():
    world = World()
    station = world.spawn()
    other = world.spawn()
    ship = world.spawn(LocationDocked(parent_id=station))
    assert is_docked_at(world, ship, station)
    assert not is_docked_at(world, ship, other)
    assert not is_docked_at(world, station, ship)


def test_index_add_groups_by_sector():
    index = EntityPerSectorIndex()
    index.add(1, 10)
    index.add(1, 11)
    index.add(2, 12)
    assert index.index == {1: [10, 11], 2: [12]}


def test_search_nearest_extractable_distances():
    index = EntityPerSectorIndex()
    index.add_extractable(1, 10)
    index.add_extractable(2, 20)
    index.add_extractable(2, 21)
    found = sorted(index.search_nearest_extractable(2))
    assert found == [(1, 1, 10), (2, 0, 20), (2, 0, 21)]


def test_search_nearest_stations_distances():
    index = EntityPerSectorIndex()
    index.add_stations(5, 50)
    index.add_stations(6, 60)
    found = sorted(index.search_nearest_stations(5))
    assert found == [(5, 0, 50), (6, 1, 60)]


def test_clear_keeps_station_index():
    index = EntityPerSectorIndex()
    index.add(1, 10)
    index.add_extractable(1, 10)
    index.add_stations(1, 11)
    index.clear()
    assert index.index == {}
    assert index.index_extractables == {}
    assert index.index_stations == {1: [11]}


def test_update_entity_per_sector_index():
    index = EntityPerSectorIndex()
    index.add(99, 98)
    entries = [
        (10, LocationSpace(pos=(0.0, 0.0), sector_id=1), True, False),
        (11, LocationSpace(pos=(0.0, 0.0), sector_id=1), False, True),
        (12, LocationSpace(pos=(0.0, 0.0), sector_id=2), False, False),
    ]
    update_entity_per_sector_index(index, entries)
    assert index.index == {1: [10, 11], 2: [12]}
    assert index.index_extractables == {1: [10]}
    assert index.index_stations == {1: [11]}


@pytest.mark.parametrize("sector", [0, 3])
def test_search_empty_index_yields_nothing(sector):
    index = EntityPerSectorIndex()
    assert list(index.search_nearest_extractable(sector)) == []
    assert list(index.search_nearest_stations(sector)) == []