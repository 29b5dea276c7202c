# tinyfield

A small top-down field game. A player character stands on a green field next
to a creature, can walk around and can attack. The world lives in a fixed-size
entity store addressed by generational keys, and each frame runs through a few
simple systems: actions, movement, combat, animation and lifetimes.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Playing

```
tinyfield
```

The game opens an 800×600 window and aims for 60 frames per second. It loads
its images from `assets/images/` under the working directory
(`bigatlas.png`, `rapp_cooked.png`, `kuribo.png`). An image that cannot be
loaded is logged as a warning, and entities that use it are not drawn.

| Key     | Action                                  |
|---------|-----------------------------------------|
| W A S D | walk north, west, south, east           |
| J       | attack in the current walking direction |
| Esc     | quit                                    |

Releasing any of W, A, S or D stops the player. An attack places a hit box
100 pixels ahead of the player along its walking direction (on the player
itself when standing still). Every collider the hit box overlaps loses 10
health and is removed once its health reaches zero. Lifetimes are counted
down once a second, so a hit box disappears within about a second.

Each drawn entity also gets a red outline of its physical bounds.

## Using the pieces

The modules can be used on their own:

- `tinyfield.entities` — `EntityStore`, `Entity` and `EntityKey`.
  `EntityStore.create()` hands out keys; `get(key)` returns `None` for a stale
  key; `deactivate(key)` retires a slot. `Entity` has helpers such as
  `place`, `resize`, `steer` and `start_animation` that also set the matching
  bitmask flags.
- `tinyfield.collision_queue` — `CollisionQueue`, a bounded per-frame list of
  collisions; `add` raises `QueueFullError` when it is full.
- `tinyfield.actions` — `ActionQueue` and `Action.player_attack`.
- `tinyfield.ec_hash_list` — `ECHashList`, a bucketed map from entity keys to
  component indices (`register`, `change`, `index_of`, `get`, `describe`,
  and `in`).
- `tinyfield.physics.check_collisions`, `tinyfield.combat.process_attack` and
  `resolve_collisions`, `tinyfield.movement.move_players` — the systems.
- `tinyfield.console` — `Console.interpret` turns a comma-separated line whose
  first word is a bitmask into a numbered `Command`; `parse_int` and
  `split_command` are the helpers it uses.
- `tinyfield.scenes` — `load_scene` and the spawners for the field scene.
- `tinyfield.game_state.GameState` and `tinyfield.game_manager.GameManager`,
  whose `update` runs one frame of the simulation.
- `tinyfield.rendering` — `Renderer`, `sprite_rects` and `load_textures`.

```python
from tinyfield.animations import default_resources
from tinyfield.game_manager import GameManager
from tinyfield.game_state import GameState

state = GameState()
state.initialize()
manager = GameManager(state, default_resources())
manager.update(current_time=16, delta=0.016)
```

## What it does not do

- There is only the field scene; there are no menus, levels or saved games.
- The command console is not reachable from inside the game: there is no key
  that opens it and no text is drawn on screen.
- Mouse clicks are recognised but do nothing.