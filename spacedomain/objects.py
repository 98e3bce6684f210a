"""A small entity-component store that holds the game state."""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from typing import Any, TypeVar

ObjId = int
Entity = int

T = TypeVar("T")


class World:
    """Entities identified by integers, each carrying at most one component per type."""

    def __init__(self) -> None:
        self._ids = itertools.count()
        self._entities: dict[Entity, dict[type, Any]] = {}
        self._resources: dict[type, Any] = {}

    def _components(self, entity: Entity) -> dict[type, Any]:
        try:
            return self._entities[entity]
        except KeyError:
            raise KeyError(f"entity {entity} not found") from None

    def spawn(self, *args: Any) -> Entity:
        """Create a new entity holding the given components and return its id."""
        entity = next(self._ids)
        self._entities[entity] = {}
        self.insert(entity, *args)
        return entity

    def insert(self, entity: Entity, *args: Any) -> None:
        """Add components to an entity, replacing any of the same type."""
        store = self._components(entity)
        for component in args:
            store[type(component)] = component

    def get(self, entity: Entity, component_type: type[T]) -> T | None:
        """Return the entity's component of that type, or None."""
        return self._entities.get(entity, {}).get(component_type)

    def has(self, entity: Entity, component_type: type) -> bool:
        return component_type in self._entities.get(entity, {})

    def remove(self, entity: Entity, component_type: type[T]) -> T | None:
        """Remove a component from an entity and return it, or None if it had none."""
        return self._components(entity).pop(component_type, None)

    def contains(self, entity: Entity) -> bool:
        return entity in self._entities

    def despawn(self, entity: Entity) -> None:
        """Delete an entity with all its components."""
        self._components(entity)
        del self._entities[entity]

    def entities(self) -> list[Entity]:
        """All live entities in creation order."""
        return list(self._entities)

    def query(self, *args: type) -> Iterator[tuple[Any, ...]]:
        """Yield (entity, component, ...) for every entity holding all given types."""
        for entity, store in list(self._entities.items()):
            if all(component_type in store for component_type in args):
                yield (entity, *(store[component_type] for component_type in args))

    def insert_resource(self, resource: Any) -> None:
        """Store a world-wide value keyed by its type."""
        self._resources[type(resource)] = resource

    def resource(self, resource_type: type[T]) -> T:
        """Return the resource of that type; raise KeyError if absent."""
        try:
            return self._resources[resource_type]
        except KeyError:
            raise KeyError(f"resource {resource_type.__name__} not found") from None