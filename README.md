# cubraycaster

This is a small first-person raycaster. It reads a `.cub` scene file and checks
that the map is valid. It then opens a window in which you walk through the
maze. The walls are drawn with the textures that the scene names.

## Installing

```
pip install .
```

To also install the test requirements:

```
pip install .[test]
```

## Running

```
cubraycaster path/to/level.cub
```

To draw an overhead minimap at quarter scale on top of the view:

```
cubraycaster --minimap path/to/level.cub
```

The command takes exactly one scene file, and the file name must end in `.cub`.
If the arguments, the file, the scene or a texture is invalid, the program
prints a message and exits. Most problems end with status 1. A map with no
player start, or with more than one, ends with status 0.

### Controls

| Key          | Action            |
|--------------|-------------------|
| W            | move forward      |
| S            | move back         |
| A            | strafe left       |
| D            | strafe right      |
| Left arrow   | turn left (10°)   |
| Right arrow  | turn right (10°)  |
| Esc          | quit              |

Closing the window also quits. Each move covers 10 pixels. A move is refused
when it would bring the player within 5 pixels of a wall.

## The `.cub` format

The file starts with six header lines, in any order. Each header line starts
with its key. Blank lines may appear between the header lines:

```
NO ./textures/north.png
SO ./textures/south.png
WE ./textures/west.png
EA ./textures/east.png
F 220,100,0
C 225,30,0
```

- `NO`, `SO`, `WE` and `EA` give the wall textures. A texture can be any image
  file that Pillow can open. The `NO` path must start with `./`.
- `F` and `C` give the floor colour and the ceiling colour. Each is three
  comma-separated values from 0 to 255.

The map follows the header and must come last in the file. Only spaces or tabs
may follow it. It uses these characters:

- `1` for a wall
- `0` for an open floor cell
- a space for empty space outside the map
- exactly one of `N`, `S`, `E` or `W`, which marks the player's start cell and
  the direction the player faces

Every row must begin with a wall after any leading spaces. The first row may
hold only walls and spaces. Each floor cell and the player cell must touch only
walls, floor cells or the player cell. The map may not contain blank lines.
Rows shorter than the longest row are padded with spaces.

Each map cell is 50 pixels wide in the window. A map can therefore be at most
51 cells wide and 28 cells high. A larger map is rejected with
`Resolution is too big`.

## Using it as a library

```python
from cubraycaster.app import Game, check_resolution
from cubraycaster.render import load_texture
from cubraycaster.scene import load_scene

scene = load_scene("level.cub")
check_resolution(scene)
textures = {
    "NO": load_texture(scene.north),
    "SO": load_texture(scene.south),
    "WE": load_texture(scene.west),
    "EA": load_texture(scene.east),
}
game = Game(scene, textures, minimap=True)
frame = game.render()      # a Frame of packed 0xRRGGBB pixels
rgb = frame.to_bytes()     # raw RGB bytes, row by row
```

The modules are:

- `cubraycaster.scene`: `load_scene` and `parse_scene` return a `Scene`
  dataclass. It holds the texture paths, the colours, the padded `grid`, and
  the player's start cell and angle. Helpers such as `parse_color`,
  `check_walls` and `find_player` are public as well.
- `cubraycaster.errors`: every problem is reported as a subclass of
  `CubError`, for example `MapFormatError`, `ColorError`, `PathError`,
  `PlayerError` or `ResolutionError`. `CubError.report()` gives the text that
  the command prints.
- `cubraycaster.raycast`: `Caster` casts rays over the grid. `cast_fov`
  sweeps a 60° field of view. Each result is a `Ray` that records its hit
  point, angle, length and `HitSide`.
- `cubraycaster.player`: `Player` holds a position in pixels and a facing
  angle in degrees. It handles movement with collision checks, and `Key`
  lists the key codes it reacts to.
- `cubraycaster.render`: `Renderer` draws the ceiling, the floor, the
  textured walls and an optional minimap into a `Frame`.
- `cubraycaster.app`: `Game` ties these pieces together. `main` is the
  command described above.