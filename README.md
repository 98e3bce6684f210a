# spacedomain

This package is the core of a space trading simulation. It is a library and has no command-line entry point. It contains these modules:

- `spacedomain.objects.World` is a small entity/component store. Entities are integers. Each entity holds at most one component of each type. It has `spawn`, `insert`, `get`, `has`, `remove`, `despawn`, `query`, and resources through `insert_resource` and `resource`.
- `spacedomain.order.TradeOrders` records the wares an object requests and the wares it provides, as `(order id, ware id)` pairs.
- `spacedomain.locations` holds the position components:
  - `LocationSpace` is a position in space.
  - `LocationDocked` marks an object as docked.
  - `LocationOrbit` describes an orbit.
  - `Moveable` holds a speed.
  - `resolve_space_position` follows docked parents until it finds a position in space.
  - `EntityPerSectorIndex` is an index of objects per sector. `update_entity_per_sector_index` rebuilds it.
- `spacedomain.orbit` computes the positions of orbiting objects at a given time: `compute_orbit_local_pos`, `system_compute_orbits` and `update_orbits`. Orbits may nest, so a moon can orbit a planet that orbits a star.
- `spacedomain.sectors` covers sectors, the jump gates between them, and paths across sectors:
  - `system_update_sectors_index` fills the jump cache of each sector.
  - `find_path` and `find_path_from_world` find a path. They use A* when the algorithm is 0, 1 or 3, and BFS for any other value.
  - `get_sector_by_coords` and `list_sectors` look up sectors.
  - `setup_sector_scenery` builds three sectors in a row, joined by jump gates.
- `spacedomain.navigations` defines the navigation requests (`MoveToTarget`, `MoveAndDockAt`, `OrbitTarget`, `MoveToPos`) and the actions. `create_plan` turns a request into a `NavigationPlan`. It raises `NavigationError` when it cannot make a plan.
- `spacedomain.navigation_systems` has two systems:
  - `system_navigation_request` turns pending requests into `Navigation` components.
  - `system_navigation` gives each idle navigating object the next action, as an `ActionRequest`.
- `spacedomain.save_manager.SaveManager` lists, writes and reads save files in a directory.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Planning a trip

```python
from spacedomain.objects import World
from spacedomain.locations import LocationDocked, LocationSpace
from spacedomain.sectors import setup_sector_scenery
from spacedomain.navigations import MoveAndDockAt, create_plan

world = World()
scenery = setup_sector_scenery(world)

station = world.spawn(LocationSpace(pos=(0.0, 0.0), sector_id=scenery.sector_0))
target = world.spawn(LocationSpace(pos=(1.0, 0.0), sector_id=scenery.sector_1))
ship = world.spawn(LocationDocked(parent_id=station))

plan = create_plan(world, ship, MoveAndDockAt(target_id=target))
for action in plan.path:
    print(action)
```

The plan has five steps in this order:

1. Undock the ship.
2. Move to the jump gate.
3. Jump to the next sector.
4. Move to the target.
5. Dock.

## Running the navigation systems

A navigation request is a component of the ship:

```python
from spacedomain.navigation_systems import system_navigation, system_navigation_request
from spacedomain.navigations import ActionRequest

world.insert(ship, MoveAndDockAt(target_id=target))
system_navigation_request(world)   # stores a Navigation and removes the request
system_navigation(world)           # hands out the first action
print(world.get(ship, ActionRequest).action)   # Undock()
```

While a ship holds an `ActionRequest` or an `ActionActive`, `system_navigation` leaves it alone. When the plan is empty, `system_navigation` removes the `Navigation` component.

`system_navigation_request` takes an optional `timeout` in seconds. When the timeout passes, it stops early, and the requests it has not reached stay on their ships for a later run.

## Orbits

```python
from spacedomain.locations import LocationOrbit, LocationSpace
from spacedomain.orbit import system_compute_orbits

star = world.spawn(LocationSpace(pos=(0.0, 0.0), sector_id=scenery.sector_0))
planet = world.spawn(
    LocationSpace(pos=(0.0, 0.0), sector_id=scenery.sector_0),
    LocationOrbit(parent_id=star, distance=1.0, start_time=0.0, start_angle=0.0, speed=500.0),
)
system_compute_orbits(world, 0.0)
print(world.get(planet, LocationSpace).pos)   # (1.0, 0.0)
```

## Save files

The directory must already exist:

```python
from pathlib import Path
from spacedomain.save_manager import SaveManager

saves = SaveManager(Path("saves"))
saves.write("01.txt", "data")
print(saves.read("01.txt"))
print(saves.get_last())   # most recently modified SaveFile, or None
```

`SaveManager` raises `SaveError` in these cases:

- the directory does not exist;
- the path is not a directory;
- the directory or a file cannot be read or written.

## What the package does not do

- It does not perform actions. The navigation systems only produce `ActionRequest` components, and nothing in the package carries out undocking, movement, jumps, docking or orbiting.
- It does not turn a `World` into save data. `SaveManager` stores and returns text only.
- It has no game loop, no scenery generator beyond `setup_sector_scenery`, and no user interface.