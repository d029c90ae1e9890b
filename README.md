# factory_game

A small top-down factory game written with pygame. A miner character stands
in a window and can be moved around with the keyboard. The game runs on a
compact entity-component-system (ECS) engine, which can also be used on its
own.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
factory-game
```

This opens a 640×480 window titled "Test" and enters the main menu state,
which prints `Entering Main Menu`. The player's idle sprite sheet is loaded
from `assets/img/character/Miner_IdleAnimation.png`, relative to the current
working directory. If the image cannot be loaded, an error is printed to
standard error and the player is not drawn. The game still runs.

| Key     | Action                                                   |
|---------|----------------------------------------------------------|
| W / S   | move up / down while held                                |
| A / D   | move left / right while held                             |
| J       | press to start interacting, release to stop              |
| Escape  | quit                                                     |

Closing the window also quits.

Diagonal movement is normalised, so the player moves at the same speed in
every direction: 150 pixels per second. While J is held, a repeating
one-second timer on the player queues a `StartInteractEvent` each time it
fires. Releasing J removes the timer and queues a `StopInteractEvent`.

## What the game does not do yet

- Mining and refining are not implemented. `ResourceNodeSystem.update` and
  `RefinerySystem.update` do nothing each frame. Their systems only record
  which miner is connected to a node or refinery.
- Nothing subscribes to the interact events, so holding J has no visible
  effect.
- No resource nodes, refineries or other entities are placed in the world.
  The player is the only entity.
- The main menu and play states print a message when they are entered or
  left. They draw no screen of their own.
- Nothing is saved.

## The engine

The building blocks are these modules:

- `factory_game.registry.Registry` creates and destroys entities. By default
  it holds up to 5000 entities. It attaches components to entities and gives
  `view(*component_types)`, the entities that have all of the given
  component types.
- `factory_game.component_array.ComponentArray` is the packed storage for one
  component type. It supports `add`, `emplace`, `remove`, `get` and
  `for_each`.
- `factory_game.events.EventDispatcher` is a typed publish/subscribe
  dispatcher. It has `subscribe`, `unsubscribe` and `dispatch`, and works with
  events such as `XAxisEvent`, `YAxisEvent`, `StartInteractEvent` and
  `StopInteractEvent`.
- `factory_game.command_queue.CommandQueue` is a thread-safe queue of
  commands. It has `push`, `push_event`, a blocking `pop` and `pop_all`.
- `factory_game.items` holds the item catalogue: `ItemID`, `ItemCategory`,
  `OreType`, `ItemData`, `ItemDatabase` and `ore_to_item`.
- `factory_game.components` holds the component dataclasses, such as
  `TransformComponent`, `MovementComponent`, `SpriteComponent`,
  `AnimationComponent`, `TimerComponent` and `InventoryComponent`.
- The systems that run each frame are `TimerSystem`, `AnimationSystem`,
  `MovementSystem`, `RefinerySystem`, `ResourceNodeSystem` and
  `RenderSystem`. `InventorySystem` adds, consumes and counts items in an
  `InventoryComponent`.
- `factory_game.engine.Engine` wires all of these together, creates the
  player and runs one frame per `update(delta_time)`.
- `factory_game.app.game_loop` polls input, runs the queued commands and
  updates the engine while its `threading.Event` stays set.

Example:

```python
from factory_game.registry import Registry
from factory_game.components import MovementComponent, TransformComponent
from factory_game.movement import MovementSystem

registry = Registry(100)
registry.register_component(MovementComponent)
registry.register_component(TransformComponent)

entity = registry.create_entity()
registry.add_component(entity, TransformComponent())
registry.add_component(entity, MovementComponent(dx=1.0))

MovementSystem(registry).update(0.5)
print(registry.get_component(entity, TransformComponent).x_pos)  # 75.0
```