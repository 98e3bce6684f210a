"""Navigation requests and the plans of actions that carry them out."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Union

from spacedomain.locations import (
    P2,
    LocationDocked,
    LocationOrbit,
    LocationSpace,
    SectorId,
    resolve_space_position,
)
from spacedomain.objects import ObjId, World
from spacedomain.sectors import FindPathParams, JumpId, find_path

logger = logging.getLogger(__name__)


class NavigationError(Exception):
    """Raised when no navigation plan can be made for a request."""


@dataclass(frozen=True)
class Undock:
    pass


@dataclass(frozen=True)
class Deorbit:
    pass


@dataclass(frozen=True)
class MoveToTargetPos:
    target_id: ObjId
    last_position: P2 | None = None


@dataclass(frozen=True)
class JumpAction:
    jump_id: JumpId


@dataclass(frozen=True)
class MoveTo:
    pos: P2


@dataclass(frozen=True)
class Dock:
    target_id: ObjId


@dataclass(frozen=True)
class Orbit:
    target_id: ObjId


Action = Union[Undock, Deorbit, MoveToTargetPos, JumpAction, MoveTo, Dock, Orbit]


@dataclass
class ActionRequest:
    """An action an object asks to start."""

    action: Action


@dataclass
class ActionActive:
    """An action an object is currently performing."""

    action: Action


@dataclass(frozen=True)
class OrbitTarget:
    target_id: ObjId


@dataclass(frozen=True)
class MoveToTarget:
    target_id: ObjId


@dataclass(frozen=True)
class MoveAndDockAt:
    target_id: ObjId


@dataclass(frozen=True)
class MoveToPos:
    sector_id: SectorId
    pos: P2


NavRequest = Union[OrbitTarget, MoveToTarget, MoveAndDockAt, MoveToPos]
NAV_REQUEST_TYPES: tuple[type, ...] = (OrbitTarget, MoveToTarget, MoveAndDockAt, MoveToPos)


@dataclass
class NavigationPlan:
    """The actions still to perform, first one on the left."""

    path: deque[Action] = field(default_factory=deque)

    def append_dock(self, target_id: ObjId) -> None:
        self.path.append(Dock(target_id))


@dataclass
class Navigation:
    request: NavRequest
    plan: NavigationPlan

    def take_next(self) -> Action | None:
        """Remove and return the next action, or None when the plan is done."""
        return self.plan.path.popleft() if self.plan.path else None


def _target_location(world: World, target_id: ObjId) -> LocationSpace:
    location = resolve_space_position(world, target_id)
    if location is None:
        raise NavigationError("provided obj has no location")
    return location


def create_plan(world: World, obj_id: ObjId, request: NavRequest) -> NavigationPlan:
    """Build the actions that take obj_id where the request asks."""
    if not world.contains(obj_id):
        raise NavigationError("obj_id not found")

    path: deque[Action] = deque()
    if world.has(obj_id, LocationDocked):
        path.append(Undock())
    if world.has(obj_id, LocationOrbit):
        path.append(Deorbit())

    from_location = resolve_space_position(world, obj_id)
    if from_location is None:
        raise NavigationError("provided obj has no location")

    if isinstance(request, MoveToPos):
        to_location = LocationSpace(pos=request.pos, sector_id=request.sector_id)
    elif isinstance(request, (OrbitTarget, MoveToTarget, MoveAndDockAt)):
        to_location = _target_location(world, request.target_id)
    else:
        raise NavigationError(f"unknown navigation request {request!r}")

    legs = find_path(world, FindPathParams(from_location.sector_id, to_location.sector_id))
    if legs is None:
        raise NavigationError("fail to find jump path between sectors")

    for leg in legs:
        path.append(MoveToTargetPos(target_id=leg.jump_id, last_position=leg.jump_pos))
        path.append(JumpAction(jump_id=leg.jump_id))

    if isinstance(request, MoveToPos):
        path.append(MoveTo(pos=request.pos))
    else:
        path.append(MoveToTargetPos(target_id=request.target_id, last_position=to_location.pos))
        if isinstance(request, MoveAndDockAt):
            path.append(Dock(target_id=request.target_id))
        elif isinstance(request, OrbitTarget):
            path.append(Orbit(target_id=request.target_id))

    return NavigationPlan(path=path)