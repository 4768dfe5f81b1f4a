# cubecaster

A compact raycasting engine in the classic grid style. It reads a `.cub`
scene file that names four wall textures, gives floor and ceiling colours
and draws a map made of `1` (wall), `0` (floor), spaces and a player spawn
(`N`, `S`, `E` or `W`). It validates the file and opens a 640×480 pygame
window with a textured first-person view, a mini-map of the walls and a
ring of collision probe dots around the player.

## Installing

```
pip install .
```

This pulls in pygame (window and input) and Pillow (texture decoding).

## Running

```
cubecaster path/to/scene.cub
```

Controls: `W`/`S` move forward and back, `A`/`D` strafe, the left and right
arrow keys turn, `Esc` or closing the window quits.

## The `.cub` format

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png

F 220,100,0
C 225,30,0

111111
100101
1010N1
111111
```

- `NO`, `SO`, `WE`, `EA` give the texture image for each wall face; each may
  appear only once. Any image format Pillow can open will do.
- `F` and `C` give the floor and ceiling colour as `r,g,b`, each a plain
  number from 0 to 255; each may appear only once.
- Blank lines are ignored. All textures and colours must come before the
  map, and no texture or colour line may follow it.
- The first and last map rows may hold only `1` and spaces. Every other row
  must start and end with `1`, may hold only `0`, `1`, `N`, `S`, `E`, `W`
  and spaces, may not put a `0` next to a space or at its start, and may not
  reach past a shorter neighbouring row with anything but `1` or a space.
  At most one spawn point is allowed.

A problem in the arguments or the scene file prints
`[cub3d] Fatal error: <message>` and the command exits with the
`ErrorCode` value as its status. A texture that cannot be loaded ends the
command with the `INVALID_PATH` status.

## Using it as a library

- `cubecaster.cubfile.parse_cub_file(path)` (or `parse_cub_lines(lines)`)
  returns a `SceneConfig` with the texture paths, colours and raw map lines.
  `check_args(argv)` checks a one-element argument list for an existing
  `.cub` file.
- `cubecaster.mapcheck.validate_map(lines)` checks the map and returns its
  width and the `PlayerSpawn`, if any; `store_map(lines, width)` freezes it
  into a `GameMap`, whose `cell(x, y)` returns `None` outside the grid.
- `cubecaster.raycast.cast_ray(...)` and `cast_all(...)` cast `Ray`s through
  a `GameMap` by grid traversal, giving up after `DRAW_DISTANCE` cells.
- `cubecaster.render` has a `FrameBuffer` of 0xRRGGBB pixels, `Texture`,
  `draw_column(...)` for a shaded wall slice with ceiling and floor, and
  `draw_map`, `draw_circle` and `draw_square` for the mini-map.
- `cubecaster.radar.Radar` samples points around a position and reports
  nearby walls; `cubecaster.player.Player` holds position, facing and held
  `Key`s, and `update(game_map, radar)` moves it, sliding along walls.
- `cubecaster.game.Game.from_file(path)` ties everything together;
  `load_textures(load_texture)` decodes the wall images, `step()` advances
  the player and `render_frame(frame)` draws a frame. `run(game)` opens the
  window.
- `cubecaster.fps.FpsCounter` counts frames per second against any clock.

Errors are raised as `cubecaster.errors.CubError`, whose `code` is an
`ErrorCode` and whose text comes from `error_message(code)`.

## What it does not do

There are no weapons, enemies, doors, sprites or sound: the only thing to do
in a scene is walk around it. Rendering is done pixel by pixel in pure
Python, so the frame rate is low, and the frame counter is not shown in the
window. A map without a spawn point is accepted and leaves the player at the
origin facing nowhere.

## Tests

```
pip install .[test]
pytest
```