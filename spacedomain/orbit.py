"""Orbit motion: positions of orbiting objects resolved through their parents."""

from __future__ import annotations

import logging
import math

from spacedomain.locations import P2, LocationOrbit, LocationSpace
from spacedomain.objects import ObjId, World

logger = logging.getLogger(__name__)

TWO_PI = 2.0 * math.pi


class _OrbitError(Exception):
    pass


def deg_to_rads(degrees: float) -> float:
    return math.radians(degrees)


def rotate_vector(vector: P2, angle: float) -> P2:
    """Rotate a 2D vector counter-clockwise by angle radians."""
    x, y = vector
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return (x * cos_a - y * sin_a, x * sin_a + y * cos_a)


def compute_orbit_local_pos(
    radius: float,
    initial_angle: float,
    start_time: float,
    speed: float,
    current_time: float,
) -> P2:
    """Offset from the parent of an orbit at current_time."""
    base = TWO_PI / 10000.0
    angle = initial_angle + (current_time - start_time) * (base * speed)
    return rotate_vector((radius, 0.0), angle)


def _orbital_position(
    world: World,
    cache: dict[ObjId, LocationSpace],
    time: float,
    obj_id: ObjId,
    visiting: set[ObjId],
) -> LocationSpace:
    cached = cache.get(obj_id)
    if cached is not None:
        return cached

    location = world.get(obj_id, LocationSpace)
    if location is None:
        raise _OrbitError("obj_id not found")

    orbit = world.get(obj_id, LocationOrbit)
    if orbit is None:
        cache[obj_id] = location
        return location

    if obj_id in visiting:
        raise _OrbitError("orbit cycle")

    visiting.add(obj_id)
    try:
        parent = _orbital_position(world, cache, time, orbit.parent_id, visiting)
    except _OrbitError as err:
        logger.warning(
            "%r fail to compute parent position for orbit %r: %s",
            obj_id,
            orbit.parent_id,
            err,
        )
        raise _OrbitError("parent object is docked") from err
    finally:
        visiting.discard(obj_id)

    local_x, local_y = compute_orbit_local_pos(
        orbit.distance, orbit.start_angle, orbit.start_time, orbit.speed, time
    )
    result = LocationSpace(
        pos=(parent.pos[0] + local_x, parent.pos[1] + local_y),
        sector_id=parent.sector_id,
    )
    cache[obj_id] = result
    return result


def system_compute_orbits(world: World, total_time: float) -> None:
    """Move every orbiting object to its position at total_time."""
    logger.debug("running")
    cache: dict[ObjId, LocationSpace] = {}
    updates: list[tuple[ObjId, LocationSpace]] = []

    for obj_id, _orbit in world.query(LocationOrbit):
        try:
            location = _orbital_position(world, cache, total_time, obj_id, set())
        except _OrbitError as err:
            logger.warning("%r fail to generate orbiting by %s", obj_id, err)
            continue
        updates.append((obj_id, LocationSpace(pos=location.pos, sector_id=location.sector_id)))

    for obj_id, location in updates:
        logger.debug("%r updating orbit location to %r", obj_id, location)
        world.insert(obj_id, location)


def update_orbits(world: World, total_time: float) -> None:
    system_compute_orbits(world, total_time)