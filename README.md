# cubscene

`cubscene` reads and checks `.cub` scene files. These are small text files that
describe a level for a grid-based raycasting game. A scene file holds four wall
texture paths, a floor colour, a ceiling colour and a tile map.

## Scene file format

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
111111
100001
10N001
111111
```

The file is read as UTF-8 and split on newlines. Empty lines are dropped. Leading
spaces and carriage returns are then removed from every remaining line. A line that
held only spaces therefore becomes an empty line and is kept.

- `NO`, `SO`, `WE`, `EA`: each identifier must start exactly one line. The rest of
  the line, after any whitespace, is the path. The path must end in `.xpm`, and
  trailing whitespace is ignored. It must not contain a space before its first `.`.
- `F` and `C`: each must be three comma-separated values of one to three digits,
  each from 0 to 255. Whitespace is allowed around the values. If the same
  identifier appears more than once, the last line counts.
- The map is every line after the first six. It may contain only `0`, `1`, spaces
  and the letters `N`, `S`, `E`, `W`, and a line may start with whitespace.
  Whitespace inside the map turns into walls (`1`). Short rows are padded on the
  right with walls to make a rectangle. Every row must be non-empty and must start
  and end with a wall. The map must contain exactly one starting position (`N`,
  `S`, `E` or `W`).

## Command line

```
cubscene path/to/level.cub
```

The file name must end in `.cub`. If it does not, the command prints
`Error, wrong file name` and exits with status 1.

When the scene is valid, the command prints the following and exits with status 0:

- the floor and ceiling colours, one component at a time as `F : <value>` and
  `C : <value>` lines,
- the four texture paths (`North`, `South`, `East`, `West`),
- the normalised map.

When the scene is not valid, it prints `Error: <reason>` for the first problem it
finds and exits with status 1.

## Library use

```python
from cubscene.cli import load_scene, format_scene
from cubscene.scene import SceneError

try:
    scene = load_scene("level.cub")
except SceneError as exc:
    print(f"Error: {exc}")
else:
    print(scene.floor_color, scene.ceiling_color)
    print(scene.textures())   # {"NO": ..., "SO": ..., "EA": ..., "WE": ...}
    print(format_scene(scene))
```

`cubscene.scene.Scene` is a dataclass with these fields: `lines`, `north`, `south`,
`east`, `west`, `floor_color`, `ceiling_color` and `grid`. Each colour is an
`(r, g, b)` tuple. Every validation failure raises `cubscene.scene.SceneError`.

The individual checks can also be used on their own:

- `cubscene.reader`: `check_extension`, `read_lines`, `split_lines`, `delete_space`
- `cubscene.colors`: `parse_color_value`, `parse_rgb`, `get_colors`
- `cubscene.textures`: `check_dup_texture`, `get_texture`, `check_xpm`,
  `check_texture`
- `cubscene.grid`: `check_map_format`, `copy_map`, `get_width`,
  `set_map_rectangle`, `get_map_grid`, `vertical_walls`, `horizontal_walls`,
  `check_map_content`
- `cubscene.cli`: `load_scene`, `format_scene`, `format_map`, `main`

## Helper modules

The package also includes small general-purpose helpers. Some of them are used by
the parser: `chars`, `numconv` and `strops`. The rest stand on their own.

- `cubscene.chars`: ASCII classification and case conversion (`is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `is_whitespace`, `to_upper`,
  `to_lower`). Each accepts a one-character string or an integer code.
- `cubscene.numconv`: `atoi`, which parses leading decimal text and wraps like a
  32-bit int, and `itoa`.
- `cubscene.strtools`: `strlen`, `strchr`, `strrchr`, `strncmp`, `strcmp`,
  `strnstr`, `strlcpy`, `strlcat`, `strncpy`, `strdup`, `strjoin`, `substr`.
- `cubscene.strops`: `split`, which drops empty pieces, `strtrim`, `strmapi` and
  `striteri`.
- `cubscene.memory`: byte-buffer helpers `memset`, `bzero`, `memcpy`, `memmove`,
  `memchr`, `memcmp`, `calloc`.
- `cubscene.putfd`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`. These
  write to a text stream.
- `cubscene.linkedlist`: `Node` and `LinkedList`. `LinkedList` provides
  `add_front`, `add_back`, `last`, `clear`, `for_each`, `map`, `len()` and
  iteration.
- `cubscene.lines`: `LineReader`, which reads a text or binary stream line by line
  through a fixed-size read buffer (42 by default).
- `cubscene.printf`: `sprintf` and `printf`. They support `%c`, `%s`, `%d`, `%i`,
  `%u`, `%x`, `%X`, `%p` and `%%`.

## What it does not do

`cubscene` only parses and validates scene files. It does not render anything, open
a window or run a game.

It does not open the texture files or check that they exist. It checks only the form
of their names.

Its wall check is limited. It only checks that each row starts and ends with `1`.
It does not run a flood fill. `load_scene` does not apply `horizontal_walls`, so the
first and last rows are not checked.

## Tests

```
pip install -e .[test]
pytest
```