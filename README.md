# arenagame

This package holds the engine-independent logic of a small 3D action
role-playing game, written as plain Python. It does not draw anything,
play sounds or read devices. The host application supplies the input
state, the stage polygons and a drawing surface. The package decides what
happens from them.

## Modules

### `arenagame.geometry`

- `Vec3` is a frozen vector. It supports `+` and `-` and has the methods
  `scaled(factor)` and `length()`.
- `Box` is an axis-aligned box.
  - `set_center(x, y, z, width, height, depth)` places the box. The corner
    is at `(x, y, z)` and the box extends by the given sizes.
  - `corners()` returns the eight corners.
  - `edges()` returns the twelve edges as pairs of corners.
  - `collides(other)` is true when the boxes overlap or touch.

### `arenagame.pad`

`Pad` maps named commands to keyboard keys and pad buttons. The commands
are `"A"`, `"B"`, `"X"`, `"Y"`, `"RB"`, `"LB"`, `"up"`, `"down"`, `"left"`
and `"right"`. You can pass your own table to the constructor as a mapping
from command to `{InputType: code}`.

Call `update(keys, buttons)` once per frame:

- `keys` is an iterable of key names, such as `"return"`, `"up"` or `"b"`.
- `buttons` is an integer of `PadButton` bits.

After `update` you can ask:

- `is_press(command)`: the command is held.
- `is_trigger(command)`: the command was pressed this frame.
- `is_release(command)`: the command was let go this frame.

A command the pad does not know always reads as not pressed.

### `arenagame.font`

This module holds the font table: `FontId`, `FontSpec` and
`font_spec(font_id)`.

`FontRegistry` loads and unloads fonts through a backend that you supply.
The backend must provide `add_font_resource`, `remove_font_resource`,
`create_font` and `delete_font`.

- `load(backend)` registers the font file, then creates one handle per
  `FontId`.
- `unload(backend)` removes the file and deletes the handles.
- `handle(font_id)` returns a handle. It raises `KeyError` when that font
  is not loaded.

Both `load` and `unload` raise `FontLoadError` when the backend reports
that the file could not be added or removed.

### `arenagame.loadcsv`

`CsvLoader(data_dir="data/csv")` reads the game's comma-separated data
tables. It returns small records such as `Status`, `CollisionInfo`,
`AnimInfo`, `CharacterPos`, `StagePos`, `WarpPointPos`, `StatusUpValue`
and `EffectData`. The Methods section lists what each call does.

#### Methods

- **Rows looked up by name:** `load_status`, `load_collision_info`,
  `load_character_pos`, `load_enemy_pos`, `load_stage_info`,
  `load_warp_point_pos` and `load_effect_data`. They take the row name as
  the first field. A missing name raises `LookupError`. A row with too few
  fields raises `ValueError`.
- **Animation tables:** `load_player_anim_data`,
  `load_short_distance_enemy_anim_data`,
  `load_long_distance_enemy_anim_data` and `load_boss_anim_data`. Each
  returns a dict keyed by animation name. Rows that do not parse are
  skipped, which covers header lines.
- **Status upgrades:** `load_status_up` returns the last valid row of the
  status-up table.

`split_fields(line, delimiter)` splits one line of a table. It drops a
trailing empty field.

### `arenagame.stage`

`StageCollider` works on a list of `Polygon`s.

- `analyze(polygons, position)` sorts them into walls and floors.
- `push_out_of_walls(position)` slides a body along wall normals.
- `snap_to_floor(position)` puts the body on the highest floor hit just
  above or below it.
- `resolve(position, move, polygons)` does all three steps for one move.

Two triangle tests are available as functions:

- `capsule_hits_triangle` returns whether a capsule touches a triangle.
- `segment_hits_triangle` returns the crossing point or `None`.

`Stage(kind, loader)` reads the placement of a stage through a
`CsvLoader`. For `StageKind.STAGE1` it also reads eight warp points.
`warp_point(player, pad)` calls `player.warp(pad, target)` for every warp
entrance or exit the player stands on. The player object needs a `pos`
and a `sphere_radius`.

### `arenagame.apple`

`Apple(enemy_pos)` is a recovery item. `hit_player(player)` checks whether
the player touches the apple. If so, it calls `player.recover_hp(10)` and
sets `is_hit_player`.

### Scenes

Every scene derives from `SceneBase` in `arenagame.scene_base`. A scene
has `init()`, `update(pad)`, `draw(canvas)` and `end()`.

`update` returns the scene itself to stay on it, or another scene to
switch to.

These helpers live in the same module:

- `GameContext` holds the shared state. Sound requests go through
  `GameContext.play(SoundCue)`, which records each cue in `played` and
  passes it to `on_sound` when that is set.
- `Canvas` is a surface that records drawing commands in order.
- `step_fade` moves fade values up or down within 0 to 255.
- A scene raises `QuitGame` when the player chooses to leave the game.

The scene modules are:

- `arenagame.scene_title.SceneTitle` has the entries NewGame, LoadGame and
  ExitGame. The cursor starts on LoadGame. Choosing NewGame calls the
  optional `on_new_game` callback. Either game choice fades out, then
  moves to `SceneSelect`.
- `arenagame.scene_select.SceneSelect` is the menu with stage 1, stage 2,
  status, the controls sheet and quit. Outside debug mode
  (`GameContext.debug`), stage 2 is locked and shows a notice instead.
- `arenagame.scene_end.SceneClear` and `SceneResult` show the game-clear
  and game-over pictures. A returns to `SceneSelect`. B raises `QuitGame`.
- `arenagame.scene_manager.SceneManager` starts from `SceneTitle` unless
  another first scene is given. It ends the old scene and initialises the
  new one whenever `update` hands back a different scene.

## Example

```python
from arenagame.geometry import Box

a = Box()
a.set_center(0.0, 0.0, 0.0, 10.0, 10.0, 10.0)
b = Box()
b.set_center(5.0, 5.0, 5.0, 10.0, 10.0, 10.0)
assert a.collides(b)
```

A frame loop in the host application looks like this:

```python
from arenagame.pad import Pad
from arenagame.scene_base import Canvas, GameContext, QuitGame
from arenagame.scene_manager import SceneManager

pad = Pad()
manager = SceneManager(GameContext())
manager.init()
try:
    while True:
        pad.update(keys, buttons)   # supplied by the host each frame
        manager.update(pad)
        canvas = Canvas()
        manager.draw(canvas)        # render canvas.commands
except QuitGame:
    manager.end()
```

## What the package does not do

- It has no in-stage play scene and no status-upgrade scene. The player,
  enemies, boss, camera and on-screen gauges are not part of it.
- `SceneSelect` finds the scene for stage 1, stage 2 or the status screen
  in `GameContext.scene_factories`, keyed by `Destination`. If no factory
  is registered for the chosen destination, it raises `LookupError`.
- There is no window, renderer, audio output or device reading. Images
  and text appear only as recorded `Canvas` commands, and sounds only as
  `SoundCue` values.
- There is no command-line program.

## Tests

The test suite uses pytest, which is declared as the `test` extra:

```
pip install -e .[test]
pytest
```