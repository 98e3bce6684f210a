"""Sectors, the jump gates between them, and path finding across sectors."""

from __future__ import annotations

import heapq
import itertools
import logging
import time
from collections import deque
from collections.abc import Callable, Hashable
from dataclasses import dataclass

from spacedomain.locations import P2, LocationSpace, SectorId
from spacedomain.objects import ObjId, World

logger = logging.getLogger(__name__)

P2I = tuple[int, int]
JumpId = ObjId

_SLOW_PLAN_SECONDS = 0.001


@dataclass
class Jump:
    """A jump gate leading to a position in another sector."""

    target_sector_id: SectorId
    target_pos: P2


@dataclass
class JumpCache:
    jump_id: JumpId
    to_sector: SectorId


@dataclass
class Sector:
    """A sector at grid coordinates, with a cache of the jumps leaving it."""

    coords: P2I
    jumps_cache: list[JumpCache] | None = None


@dataclass(frozen=True)
class PathLeg:
    """One jump of a path: go to jump_pos in sector_id, arrive at target_pos in target_sector_id."""

    sector_id: SectorId
    jump_id: JumpId
    jump_pos: P2
    target_sector_id: SectorId
    target_pos: P2


@dataclass(frozen=True)
class FindPathParams:
    """Path search between two sectors; algorithm 0, 1 and 3 use A*, any other value BFS."""

    from_sector: SectorId
    to_sector: SectorId
    algorithm: int = 0


def system_update_sectors_index(world: World) -> None:
    """Record every jump in the jump cache of the sector it stands in."""
    logger.debug("indexing sectors")
    start = time.perf_counter()

    for jump_id, jump, location in world.query(Jump, LocationSpace):
        sector = world.get(location.sector_id, Sector)
        if sector is None:
            raise KeyError("sector_id not found")
        if sector.jumps_cache is None:
            sector.jumps_cache = []
        sector.jumps_cache = [c for c in sector.jumps_cache if c.jump_id != jump_id]
        sector.jumps_cache.append(JumpCache(jump_id=jump_id, to_sector=jump.target_sector_id))

    logger.debug("indexing sector complete in %.6fs", time.perf_counter() - start)


def _sector(world: World, sector_id: SectorId) -> Sector:
    sector = world.get(sector_id, Sector)
    if sector is None:
        raise KeyError(f"sector {sector_id} not found")
    return sector


def _jumps_cache(world: World, sector_id: SectorId) -> list[JumpCache]:
    cache = _sector(world, sector_id).jumps_cache
    if cache is None:
        raise ValueError("sector jump cache is empty")
    return cache


def _reconstruct(parents: dict, goal: Hashable) -> list:
    path = [goal]
    while parents[path[-1]] is not None:
        path.append(parents[path[-1]])
    path.reverse()
    return path


def _astar(
    start: SectorId,
    successors: Callable[[SectorId], list[SectorId]],
    heuristic: Callable[[SectorId], int],
    is_goal: Callable[[SectorId], bool],
) -> list[SectorId] | None:
    tie = itertools.count()
    heap = [(heuristic(start), 0, next(tie), start)]
    costs = {start: 0}
    parents: dict[SectorId, SectorId | None] = {start: None}
    while heap:
        _, cost, _, node = heapq.heappop(heap)
        if cost > costs[node]:
            continue
        if is_goal(node):
            return _reconstruct(parents, node)
        for nxt in successors(node):
            new_cost = cost + 1
            if nxt not in costs or new_cost < costs[nxt]:
                costs[nxt] = new_cost
                parents[nxt] = node
                heapq.heappush(heap, (new_cost + heuristic(nxt), new_cost, next(tie), nxt))
    return None


def _bfs(
    start: SectorId,
    successors: Callable[[SectorId], list[SectorId]],
    is_goal: Callable[[SectorId], bool],
) -> list[SectorId] | None:
    if is_goal(start):
        return [start]
    parents: dict[SectorId, SectorId | None] = {start: None}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for nxt in successors(node):
            if nxt in parents:
                continue
            parents[nxt] = node
            if is_goal(nxt):
                return _reconstruct(parents, nxt)
            queue.append(nxt)
    return None


def find_path(world: World, params: FindPathParams) -> list[PathLeg] | None:
    """Jumps leading from params.from_sector to params.to_sector, or None if unreachable."""
    start = time.perf_counter()

    if params.from_sector == params.to_sector:
        return []

    visited_nodes = 0
    to_x, to_y = _sector(world, params.to_sector).coords

    def successors(current: SectorId) -> list[SectorId]:
        nonlocal visited_nodes
        visited_nodes += 1
        return [c.to_sector for c in _jumps_cache(world, current)]

    def squared_heuristic(current: SectorId) -> int:
        x, y = _sector(world, current).coords
        return int((to_x - x) ** 2 + (to_y - y) ** 2) // 1000

    def manhattan_heuristic(current: SectorId) -> int:
        x, y = _sector(world, current).coords
        return int(abs(float(x) - to_x) + abs(float(y) - to_y))

    def is_goal(current: SectorId) -> bool:
        return current == params.to_sector

    if params.algorithm == 0:
        path = _astar(params.from_sector, successors, squared_heuristic, is_goal)
    elif params.algorithm in (1, 3):
        path = _astar(params.from_sector, successors, manhattan_heuristic, is_goal)
    else:
        path = _bfs(params.from_sector, successors, is_goal)

    if path is None:
        return None

    legs = []
    for from_id, to_id in itertools.pairwise(path):
        cache = next(c for c in _jumps_cache(world, from_id) if c.to_sector == to_id)
        jump = world.get(cache.jump_id, Jump)
        location = world.get(cache.jump_id, LocationSpace)
        if jump is None or location is None:
            raise KeyError("jump_id not found")
        legs.append(
            PathLeg(
                sector_id=from_id,
                jump_id=cache.jump_id,
                jump_pos=location.pos,
                target_sector_id=to_id,
                target_pos=jump.target_pos,
            )
        )

    duration = time.perf_counter() - start
    if duration > _SLOW_PLAN_SECONDS:
        logger.warning(
            "create plan find_path %.6fs, number of edges %d, number of query nodes %d, "
            "from %r to %r",
            duration,
            len(legs),
            visited_nodes,
            _sector(world, params.from_sector).coords,
            (to_x, to_y),
        )

    return legs


def find_path_from_world(
    world: World, from_sector: SectorId, to_sector: SectorId
) -> list[PathLeg] | None:
    return find_path(world, FindPathParams(from_sector, to_sector))


def get_sector_by_coords(world: World, coords: P2I) -> SectorId | None:
    wanted = tuple(coords)
    return next(
        (sector_id for sector_id, sector in world.query(Sector) if tuple(sector.coords) == wanted),
        None,
    )


def list_sectors(world: World) -> list[SectorId]:
    return [sector_id for sector_id, _ in world.query(Sector)]


@dataclass(frozen=True)
class SectorScenery:
    sector_0: ObjId
    sector_1: ObjId
    sector_2: ObjId
    jump_0_to_1: ObjId
    jump_0_to_1_pos: P2
    jump_1_to_0: ObjId
    jump_1_to_0_pos: P2
    jump_1_to_2: ObjId
    jump_1_to_2_pos: P2
    jump_2_to_1: ObjId
    jump_2_to_1_pos: P2


def setup_sector_scenery(world: World) -> SectorScenery:
    """Three sectors in a row connected by jump gates, with the sector index built."""
    sector_0 = world.spawn(Sector((0, 0)))
    sector_1 = world.spawn(Sector((1, 0)))
    sector_2 = world.spawn(Sector((2, 0)))
    jump_0_to_1_pos = (0.0, 1.0)
    jump_1_to_0_pos = (1.0, 0.0)
    jump_1_to_2_pos = (1.0, 2.0)
    jump_2_to_1_pos = (2.0, 1.0)

    jump_0_to_1 = world.spawn(
        Jump(target_sector_id=sector_1, target_pos=jump_1_to_0_pos),
        LocationSpace(pos=jump_0_to_1_pos, sector_id=sector_0),
    )
    jump_1_to_0 = world.spawn(
        Jump(target_sector_id=sector_0, target_pos=jump_0_to_1_pos),
        LocationSpace(pos=jump_1_to_0_pos, sector_id=sector_1),
    )
    jump_1_to_2 = world.spawn(
        Jump(target_sector_id=sector_2, target_pos=jump_2_to_1_pos),
        LocationSpace(pos=jump_1_to_2_pos, sector_id=sector_1),
    )
    jump_2_to_1 = world.spawn(
        Jump(target_sector_id=sector_2, target_pos=jump_1_to_2_pos),
        LocationSpace(pos=jump_2_to_1_pos, sector_id=sector_2),
    )

    system_update_sectors_index(world)

    return SectorScenery(
        sector_0=sector_0,
        sector_1=sector_1,
        sector_2=sector_2,
        jump_0_to_1=jump_0_to_1,
        jump_0_to_1_pos=jump_0_to_1_pos,
        jump_1_to_0=jump_1_to_0,
        jump_1_to_0_pos=jump_1_to_0_pos,
        jump_1_to_2=jump_1_to_2,
        jump_1_to_2_pos=jump_1_to_2_pos,
        jump_2_to_1=jump_2_to_1,
        jump_2_to_1_pos=jump_2_to_1_pos,
    )