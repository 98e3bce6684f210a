"""Systems that turn navigation requests into plans and plans into action requests."""

from __future__ import annotations

import logging
import time

from spacedomain.navigations import (
    NAV_REQUEST_TYPES,
    ActionActive,
    ActionRequest,
    Navigation,
    NavigationError,
    NavRequest,
    create_plan,
)
from spacedomain.objects import ObjId, World

logger = logging.getLogger(__name__)


def _request_of(world: World, obj_id: ObjId) -> NavRequest | None:
    for request_type in NAV_REQUEST_TYPES:
        request = world.get(obj_id, request_type)
        if request is not None:
            return request
    return None


def system_navigation_request(world: World, timeout: float | None = None) -> None:
    """Give every object with a navigation request a Navigation and drop the request.

    Stops early once timeout seconds have passed; unhandled requests stay for later.
    """
    logger.debug("running")
    deadline = None if timeout is None else time.monotonic() + timeout

    pending = [
        (obj_id, request)
        for obj_id in world.entities()
        if (request := _request_of(world, obj_id)) is not None
    ]

    processed: list[ObjId] = []
    for obj_id, request in pending:
        processed.append(obj_id)
        try:
            plan = create_plan(world, obj_id, request)
        except NavigationError as err:
            logger.warning(
                "%r fail to generate navigation plan for %r: %s", obj_id, request, err
            )
            continue

        logger.debug("%r handle navigation to %r by the plan %r", obj_id, request, plan)
        world.insert(obj_id, Navigation(request=request, plan=plan))

        if deadline is not None and time.monotonic() >= deadline:
            logger.warning("navigation request timeout")
            break

    for obj_id in processed:
        for request_type in NAV_REQUEST_TYPES:
            world.remove(obj_id, request_type)


def system_navigation(world: World) -> None:
    """Request the next planned action of every idle navigating object."""
    logger.debug("running")
    for obj_id, navigation in world.query(Navigation):
        if world.has(obj_id, ActionActive) or world.has(obj_id, ActionRequest):
            continue
        action = navigation.take_next()
        if action is None:
            logger.debug("%r navigation complete", obj_id)
            world.remove(obj_id, Navigation)
        else:
            logger.debug("%r navigation requesting next action %r", obj_id, action)
            world.insert(obj_id, ActionRequest(action))