# jumpknight

A small 2D platformer. You play a knight who runs and jumps across stone
platforms and avoids spikes. Levels are plain text files with `;`-separated fields, so
you can edit them by hand.

## Installing

```
pip install .
```

This needs `pygame`. To run the tests, install the `test` extra (`pip install .[test]`)
and run `pytest`.

## Playing

```
jumpknight
```

The window is 640×480. The game reads these files from an asset directory:
`map1.csv`, `bg.png`, `stone.png`, `idle.png` and `walk.png`. `idle.png` and `walk.png`
are horizontal strips of four frames each.

Options:

- `--assets DIR`: the asset directory. The default is `assets`.
- `--frames N`: stop after `N` frames. The default `0` keeps running until the window is closed.

Controls:

- Left / Right arrows: walk
- Left Shift while walking: run (1.5× speed)
- C: jump, but only while standing on a platform
- R: go back to the spawn point and reload the map
- Escape, or closing the window: quit

If you touch a spike, you go back to the spawn point.

## Level format

The loader reads a level file one line at a time. Fields are separated by `;`, and
empty fields are skipped. The first line may give the spawn point:

```
spawn;100;200
```

If the first line is not a spawn line, the loader treats it as a header and the spawn
is `(0, 0)`. Every line after it describes one object:

```
x;y;width;height;type
0;400;640;32;platform
200;384;16;16;spike
```

`type` is `platform` or `spike`. The loader skips these lines and logs a warning for
most of them:

- blank lines
- lines with fewer than five fields
- objects whose width or height is not positive
- types it does not know

A level holds at most 256 platforms and 1024 spikes. The loader drops any objects
beyond those limits.

## Using the pieces as a library

- `jumpknight.level.load_map(path)` reads a level file and returns a `Level` with
  `spawn`, `platforms` and `spikes`. `jumpknight.level.parse_map(lines)` builds a level
  from lines you already have.
- `Level.check_spike_collision(rect)` moves a rectangle to the spawn point if it
  touches a spike.
- `Level.platform_tiles(tile_width, tile_height)` yields the source and destination
  rectangles that tile every platform with a texture.
- `jumpknight.player.Player` holds the knight's position, vertical velocity and facing.
  `Player.update(dt, controls, level)` applies walking, gravity, jumping and platform
  collisions for one frame. It returns `True` if a spike sent the knight back to the
  spawn point. `Controls` describes the input for that frame.
- `jumpknight.camera.update_camera(camera, dt, player_pos, walking, screen_width,
  screen_height)` moves a `Camera` smoothly towards the player. The camera waits until
  the player leaves a dead zone before it moves, and it stays between the top of the
  world and the base floor.
- `jumpknight.animation.Animation.from_strip(...)` cuts a sprite strip into frames.
  `AnimPlayer.update(dt, velocity_y, walking)` picks the idle, walk, jump or fall
  animation and advances it.
- `jumpknight.scene.Scene` and `SceneManager` start, update, draw and unload scenes.
  `jumpknight.game.GameScene` is the level scene.
- `jumpknight.geometry` provides `Vector2`, `Rect`, `lerp` and `check_collision_recs`.
- `jumpknight.csvfile.read_csv(path)` and `CsvReader` read general delimited files.
  They handle quoting, doubled quotes, escape characters and newlines inside quotes.
  `split_columns(row)` splits a single row into columns.

## What it does not do

The game has no title menu. It opens straight into the level. It has one level, with
no level selection, no score and no saving. The jump and fall states use the idle
animation, because the game has no separate sprites for them.