# spaceprojeckt

A small top-down space shooter. You fly a blue ship near the bottom of a
600×980 window. Rows of green Vanguard enemies come down from the top.
They alternate between the left and the right side, and they fire as they
move. A ship that takes damage flashes red. A ship whose health reaches
zero bursts into a shower of fading particles.

The game runs on a small engine made of worlds, actors, game stages, timers,
events and an overlap-only physics system. pygame provides the window, the
keyboard input and the drawing.

## Installation

```
pip install .
```

## Playing

```
spaceprojeckt
```

This runs `spaceprojeckt.game.main`. It opens the window and loads
`GameLevelOne`. The game loop runs until you close the window.

Controls:

- **W / A / S / D**: move. When the ship is already past a window edge, input that would push it further out is ignored.
- **Space**: fire. The player's gun fires at most once every 0.1 s.

The game logic ticks at a fixed 60 steps per second. Every 2 seconds the game does the following:

- drops cached textures that nothing still uses;
- removes destroyed actors and finished stages from the world.

## Assets

`spaceprojeckt.game.resource_dir()` returns `assets/`. Textures are loaded from that directory, relative to the current working directory. The game expects the sprite layout of the *Space Shooter Redux* art pack:

```
assets/SpaceShooterRedux/PNG/playerShip1_blue.png
assets/SpaceShooterRedux/PNG/Enemies/enemyGreen1.png
assets/SpaceShooterRedux/PNG/Lasers/laserBlue07.png
assets/SpaceShooterRedux/PNG/Effects/star1.png   (also star2, star3)
```

When a texture cannot be loaded, the actor still exists but draws nothing. Its bounds are then empty, so it never overlaps anything, and bullets and collisions have no effect on it.

## What the game does not do

The game has one level, made of a single stage of five rows with three Vanguards each. When that stage ends, nothing further happens. It has none of the following:

- score;
- lives;
- a game-over or victory screen;
- menus;
- sound.

If the player's ship is destroyed, the level keeps running without it.

## Building your own game

The engine modules can be used on their own:

- `spaceprojeckt.application.Application`
  - Owns the pygame window and the fixed-step loop (`run`).
  - `load_world(WorldType)` creates a world, makes it current and starts it.
  - `tick_internal` advances, in order: the world, the `TimerManager` and the `PhysicsSystem`.
- `spaceprojeckt.world.World`
  - `spawn_actor(ActorType, *args)` creates an actor. The actor joins play on the next tick.
  - Override `init_game_stage` to `add_stage` your `GameStage` objects. They run one after another, and `all_game_stage_finished` is called after the last one.
- `spaceprojeckt.stage.GameStage`
  - Override `start_stage`, `tick_stage` and `stage_finished`.
  - Call `finish_stage()` to move on to the next stage.
- `spaceprojeckt.actor.Actor`
  - Has a `Sprite`, a position, a rotation in degrees and a `team_id`. Team 255 is neutral and never hostile.
  - `set_physics_enabled(True)` gives the actor a box body. `on_actor_overlap` and `on_actor_end_overlap` are then called as bodies start and stop touching.
- `spaceprojeckt.timers.TimerManager.get().set_timer(obj, callback, duration, repeat)`
  - Runs `callback(obj)` after `duration` seconds, once or repeatedly.
  - The timer lapses when `obj` is destroyed or freed.
  - `clear_timer(handle)` cancels it.
- `spaceprojeckt.delegate.Delegate`
  - A multicast event. `bind_action(obj, callback)` registers a callback.
  - `broadcast(*args)` calls `callback(obj, *args)` for each target that still exists, and forgets the rest.
- `spaceprojeckt.assets.AssetManager`
  - Caches textures by path under a root directory.
  - `load_texture` returns `None` when a file cannot be loaded.
- `spaceprojeckt.mathutil` holds `Vector2D`, `Color` and helpers such as `lerp_float`, `lerp_color`, `lerp_vector`, `random_range` and `rotation_to_vector`.

The game itself is built from:

- `spaceship.SpaceShip` (health, blinking, exploding);
- `enemy.EnemySpaceShip` and `enemy.Vanguard`;
- `player.Player`;
- `weapons.BulletShooter` and `weapons.Bullet`;
- `explosion.Explosion` and `particle.Particle`;
- `health.HealthComponent`;
- `vanguard_stage.VanguardStage`;
- `level.GameLevelOne`.

## Running the tests

```
pip install .[test]
pytest
```