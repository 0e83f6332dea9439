# solong

Map handling for a small tile-based puzzle game: a player walks a walled
map, picks up every collectible and then reaches the exit. This package
reads map files and checks that a map is playable. It also carries a set of
small helpers for strings, linked lists, line-by-line reading and
printf-style formatting.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Map files

A map is a plain text file with the `.ber` extension, made of these tiles:

| Tile | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | empty floor  |
| `P`  | player start |
| `C`  | collectible  |
| `E`  | exit         |

Example:

```
1111111
1P0C0E1
1111111
```

## Reading and checking a map

```python
from solong.mapfile import MapError, has_map_extension, read_map
from solong.validate import validate_map

path = "level.ber"
if not has_map_extension(path):
    raise SystemExit("not a .ber file")

try:
    grid = validate_map(read_map(path))
except MapError as err:
    print("Error:", err)
```

`solong.mapfile`:

- `has_map_extension(path)` – true when the path ends in `.ber`.
- `parse_map_text(text)` – splits map text into rows without newlines;
  raises `MapError` for an empty text or one ending with a newline.
- `read_map(path)` – reads a file and parses it as above. Errors opening
  the file come through as `OSError`.
- `MapError` – a `ValueError` subclass raised for unplayable maps.

`solong.validate`:

- `check_walls(grid)` – true for a rectangle of at least 3 by 3 whose
  border is all walls.
- `check_components(grid)` – true for exactly one `P`, exactly one `E` and
  at least one `C`.
- `find_player(grid)` – the `(x, y)` of the first `P`, or `None`.
- `flood_fill(grid, start, barrier="1")` – a copy of the grid with every
  tile reachable from `start` set to `F`.
- `all_reachable(grid)` – true when every collectible and the exit can be
  reached from the player; raises `ValueError` if there is no player.
- `validate_map(grid)` – runs all the checks and returns the rows, or
  raises `MapError` naming the first failed check.

## Helpers in `solong.libft`

- `charclass` – `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper`, `to_lower` on one-character strings or integers.
- `strings` – `atoi`, `itoa`, `split`, `strtrim`, `substr`, `strnstr`.
- `textops` – `strlen`, `strdup`, `strjoin`, `strncmp`, `strchr`,
  `strrchr`, `strlcpy`, `strlcat`, `strmapi`, `striteri`.
- `linkedlist` – `Node` and `LinkedList` with `push_front`, `push_back`,
  `last`, `clear`, `for_each`, `map`, `len()` and iteration.
- `output` – `put_char`, `put_str`, `put_endl`, `put_nbr` writing to a
  text stream (stdout by default).
- `gnl` – `LineReader(stream, buffer_size=42)` returning one line at a
  time from a text or binary stream through `next_line()` or iteration.
- `printf` – `format_printf(fmt, *args)` and
  `printf(fmt, *args, stream=None)` for the `%c %s %p %d %i %u %x %X %%`
  conversions, with integers wrapped to 32 bits.

## What this package does not do

There is no playable game here: no window or drawing of tiles, no
keyboard handling, no player movement or step counting, and no command to
start a game. The package stops at loading and validating maps.