import pytest

from spacedomain.locations import LocationSpace
from spacedomain.objects import World
from spacedomain.sectors import (
    FindPathParams,
    Jump,
    Sector,
    find_path,
    find_path_from_world,
    get_sector_by_coords,
    list_sectors,
    setup_sector_scenery,
    system_update_sectors_index,
)


@pytest.fixture
def world():
    return World()


@pytest.fixture
def scenery(world):
    return setup_sector_scenery(world)


def _chain(world, length):
    sectors = [world.spawn(Sector((i, 0))) for i in range(length)]
    for a, b in zip(sectors, sectors[1:]):
        world.spawn(Jump(b, (0.0, 0.0)), LocationSpace((1.0, 0.0), a))
        world.spawn(Jump(a, (1.0, 0.0)), LocationSpace((0.0, 0.0), b))
    system_update_sectors_index(world)
    return sectors


def test_find_path_same_sector(world, scenery):
    path = find_path(world, FindPathParams(scenery.sector_0, scenery.sector_0))
    assert path == []


def test_find_path_one(world, scenery):
    path = find_path(world, FindPathParams(scenery.sector_0, scenery.sector_1))
    assert len(path) == 1
    assert path[0].jump_id == scenery.jump_0_to_1
    assert path[0].jump_pos == scenery.jump_0_to_1_pos
    assert path[0].sector_id == scenery.sector_0
    assert path[0].target_sector_id == scenery.sector_1
    assert path[0].target_pos == scenery.jump_1_to_0_pos


def test_find_path_two(world, scenery):
    path = find_path_from_world(world, scenery.sector_0, scenery.sector_2)
    assert len(path) == 2
    assert path[0].jump_id == scenery.jump_0_to_1
    assert path[0].jump_pos == scenery.jump_0_to_1_pos
    assert path[1].jump_id == scenery.jump_1_to_2
    assert path[1].jump_pos == scenery.jump_1_to_2_pos


@pytest.mark.parametrize("algorithm", [0, 1, 2, 3])
def test_find_path_two_every_algorithm(world, scenery, algorithm):
    path = find_path(world, FindPathParams(scenery.sector_0, scenery.sector_2, algorithm))
    assert [leg.jump_id for leg in path] == [scenery.jump_0_to_1, scenery.jump_1_to_2]


@pytest.mark.parametrize("algorithm", [0, 1, 2, 3])
def test_unreachable_sector_gives_none(world, scenery, algorithm):
    # the gate in sector 2 leads back into sector 2, so sector 0 cannot be reached
    path = find_path(world, FindPathParams(scenery.sector_2, scenery.sector_0, algorithm))
    assert path is None


@pytest.mark.parametrize("algorithm", [0, 1, 2, 3])
def test_chain_path_is_shortest(world, algorithm):
    sectors = _chain(world, 6)
    path = find_path(world, FindPathParams(sectors[0], sectors[5], algorithm))
    assert [leg.sector_id for leg in path] == sectors[:5]
    assert [leg.target_sector_id for leg in path] == sectors[1:]


def test_index_lists_jumps_per_sector(world, scenery):
    cache = world.get(scenery.sector_1, Sector).jumps_cache
    assert sorted((c.jump_id, c.to_sector) for c in cache) == sorted(
        [
            (scenery.jump_1_to_0, scenery.sector_0),
            (scenery.jump_1_to_2, scenery.sector_2),
        ]
    )


def test_reindex_does_not_duplicate(world, scenery):
    system_update_sectors_index(world)
    cache = world.get(scenery.sector_1, Sector).jumps_cache
    assert len(cache) == 2


def test_unindexed_sector_raises(world):
    a = world.spawn(Sector((0, 0)))
    b = world.spawn(Sector((1, 0)))
    with pytest.raises(ValueError):
        find_path(world, FindPathParams(a, b))


def test_target_that_is_not_a_sector_raises(world, scenery):
    with pytest.raises(KeyError):
        find_path(world, FindPathParams(scenery.sector_0, scenery.jump_0_to_1))


def test_get_sector_by_coords(world, scenery):
    assert get_sector_by_coords(world, (1, 0)) == scenery.sector_1
    assert get_sector_by_coords(world, (2, 0)) == scenery.sector_2
    assert get_sector_by_coords(world, (5, 5)) is None


def test_list_sectors(world, scenery):
    assert list_sectors(world) == [scenery.sector_0, scenery.sector_1, scenery.sector_2]