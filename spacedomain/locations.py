"""Where objects are: in space, orbiting, or docked, plus a per-sector index."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from spacedomain.objects import ObjId, World

logger = logging.getLogger(__name__)

P2 = tuple[float, float]
SectorId = int


@dataclass
class LocationSpace:
    """A position inside a sector."""

    pos: P2
    sector_id: SectorId


@dataclass
class LocationOrbit:
    """Circular orbit around a parent object."""

    parent_id: ObjId
    distance: float
    start_time: float
    start_angle: float
    speed: float

    @classmethod
    def around(cls, target_id: ObjId) -> LocationOrbit:
        """A zero-radius, motionless orbit around target_id."""
        return cls(
            parent_id=target_id,
            distance=0.0,
            start_time=0.0,
            start_angle=0.0,
            speed=0.0,
        )


@dataclass
class LocationDocked:
    parent_id: ObjId


@dataclass
class Moveable:
    speed: float


def _search_nearest(
    index: dict[SectorId, list[ObjId]], from_sector_id: SectorId
) -> Iterator[tuple[SectorId, int, ObjId]]:
    for sector_id, obj_ids in index.items():
        distance = 0 if sector_id == from_sector_id else 1
        for obj_id in obj_ids:
            yield sector_id, distance, obj_id


@dataclass
class EntityPerSectorIndex:
    """Objects per sector, rebuilt at the end of a tick, so it may be outdated during one."""

    index: dict[SectorId, list[ObjId]] = field(default_factory=dict)
    index_extractables: dict[SectorId, list[ObjId]] = field(default_factory=dict)
    index_stations: dict[SectorId, list[ObjId]] = field(default_factory=dict)

    def clear(self) -> None:
        """Empty the general and extractable indexes; the station index is kept."""
        self.index.clear()
        self.index_extractables.clear()

    def add(self, sector_id: SectorId, obj_id: ObjId) -> None:
        self.index.setdefault(sector_id, []).append(obj_id)

    def add_extractable(self, sector_id: SectorId, obj_id: ObjId) -> None:
        self.index_extractables.setdefault(sector_id, []).append(obj_id)

    def add_stations(self, sector_id: SectorId, obj_id: ObjId) -> None:
        self.index_stations.setdefault(sector_id, []).append(obj_id)

    def search_nearest_extractable(
        self, from_sector_id: SectorId
    ) -> Iterator[tuple[SectorId, int, ObjId]]:
        """Yield (sector_id, distance, obj_id); distance is 0 in the same sector, else 1."""
        return _search_nearest(self.index_extractables, from_sector_id)

    def search_nearest_stations(
        self, from_sector_id: SectorId
    ) -> Iterator[tuple[SectorId, int, ObjId]]:
        """Yield (sector_id, distance, obj_id); distance is 0 in the same sector, else 1."""
        return _search_nearest(self.index_stations, from_sector_id)


def get_location_space(world: World, obj_id: ObjId) -> LocationSpace | None:
    """A copy of the object's space location, or None."""
    location = world.get(obj_id, LocationSpace)
    return dataclasses.replace(location) if location is not None else None


def resolve_space_position(world: World, obj_id: ObjId) -> LocationSpace | None:
    """The object's space location, following docked parents; None if it has none."""
    seen: set[ObjId] = set()
    current = obj_id
    while world.contains(current) and current not in seen:
        seen.add(current)
        location = world.get(current, LocationSpace)
        if location is not None:
            return dataclasses.replace(location)
        docked = world.get(current, LocationDocked)
        if docked is None:
            return None
        current = docked.parent_id
    return None


def is_docked_at(world: World, obj_id: ObjId, target_id: ObjId) -> bool:
    docked = world.get(obj_id, LocationDocked)
    return docked is not None and docked.parent_id == target_id


def update_entity_per_sector_index(
    index: EntityPerSectorIndex,
    entries: Iterable[tuple[ObjId, LocationSpace, bool, bool]],
) -> None:
    """Rebuild the index from (obj_id, location, is_extractable, has_docking) entries."""
    logger.debug("running")
    index.clear()
    for obj_id, location, is_extractable, has_docking in entries:
        sector_id = location.sector_id
        index.add(sector_id, obj_id)
        if is_extractable:
            index.add_extractable(sector_id, obj_id)
        if has_docking:
            index.add_stations(sector_id, obj_id)