"""Reading and validating ``.cub`` scene files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from .errors import (
    ArgumentError,
    ColorError,
    FileError,
    MapFormatError,
    PathError,
    PlayerError,
)
from .textutil import is_prefix_of, pad_line, parse_int, split_any

READ_LIMIT = 29999

_DIGITS = frozenset("0123456789")
_HEADER_STARTS = frozenset("NSWEFC")
_PLAYERS = frozenset("NSEW")
_WALKABLE = frozenset("0NSEW")
_ALLOWED_CONTACT = frozenset("10NSWE")
_TEXTURE_KEYS = ("NO", "SO", "WE", "EA")
_DIRECTION_ANGLES = {"S": 90, "W": 180, "N": 270}


@dataclass
class Scene:
    """A validated scene: wall textures, colours, map grid and player start."""

    north: str
    south: str
    west: str
    east: str
    floor_color: int
    ceiling_color: int
    grid: list[str] = field(default_factory=list)
    player_col: int = 0
    player_row: int = 0
    player_angle: int = 0

    @property
    def columns(self) -> int:
        """Length of the longest map row."""
        return max((len(row) for row in self.grid), default=0)

    @property
    def rows(self) -> int:
        """Number of map rows."""
        return len(self.grid)


def parse_color(line: str) -> int:
    """Parse an ``F`` or ``C`` line into a packed ``0xRRGGBB`` colour."""
    commas = 0
    for ch in line[1:]:
        if ch == " " or ch in _DIGITS:
            continue
        if ch != ",":
            raise ColorError()
        commas += 1
    if commas != 2:
        raise ColorError()
    parts = split_any(line, ",")
    if len(parts) < 3:
        raise ColorError()
    red, green, blue = (parse_int(part) for part in parts[:3])
    if any(not 0 <= value <= 255 for value in (red, green, blue)):
        raise ColorError()
    return (red << 16) | (green << 8) | blue


def validate_texture_path(path: str) -> str:
    """Check that ``path`` starts with ``./`` and holds no control whitespace."""
    if path[:2] != "./":
        raise PathError()
    if any(9 <= ord(ch) <= 13 for ch in path[2:]):
        raise PathError()
    return path


def parse_texture_path(line: str, key: str) -> str:
    """Return the texture path of a ``NO``/``SO``/``WE``/``EA`` line."""
    separators = " \n" if key == "NO" else " \t\n"
    parts = split_any(line, separators)
    if not parts or not is_prefix_of(parts[0], key) or len(parts) != 2:
        raise PathError()
    path = parts[1]
    if key == "NO":
        validate_texture_path(path)
    return path


def check_layout(text: str) -> None:
    """Check the raw file text: it ends on a wall and the map has no blank lines."""
    end = len(text) - 1
    while end > 0:
        ch = text[end]
        if ch in " \t":
            end -= 1
        elif ch == "1":
            break
        else:
            raise MapFormatError()
    found = text.find("\n1", 0, end + 1)
    start = found + 1 if found >= 0 else 0
    if "\n\n" in text[start:end + 2]:
        raise MapFormatError()


def check_header_lines(lines: list[str]) -> None:
    """Check that every line is a header or a map row and that six headers exist."""
    headers = 0
    for line in lines:
        first = line.lstrip(" \t")[:1]
        if first and first in _HEADER_STARTS:
            headers += 1
        elif first not in ("\n", "1"):
            raise MapFormatError()
    if headers != 6:
        raise MapFormatError()


def _cell(grid: list[str], row: int, col: int) -> str:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return ""


def _check_surroundings(grid: list[str], row: int, col: int) -> None:
    neighbours = [
        _cell(grid, row - 1, col),
        _cell(grid, row + 1, col),
        _cell(grid, row, col + 1),
    ]
    if col > 0:
        neighbours.append(_cell(grid, row, col - 1))
    if any(ch not in _ALLOWED_CONTACT or not ch for ch in neighbours):
        raise MapFormatError()


def check_walls(grid: list[str]) -> None:
    """Check that the map is closed by walls."""
    for row in grid:
        if row.lstrip(" ")[:1] != "1":
            raise MapFormatError()
    if grid and any(ch not in "1 " for ch in grid[0]):
        raise MapFormatError()
    for row_index, row in enumerate(grid[1:], start=1):
        indent = len(row) - len(row.lstrip(" \t"))
        for col, ch in enumerate(row[indent:], start=indent):
            if ch in _WALKABLE:
                _check_surroundings(grid, row_index, col)


def find_player(grid: list[str]) -> tuple[int, int, str]:
    """Return ``(column, row, symbol)`` of the single player start."""
    starts = [
        (col, row_index, ch)
        for row_index, row in enumerate(grid)
        for col, ch in enumerate(row)
        if ch in _PLAYERS
    ]
    if len(starts) != 1:
        raise PlayerError()
    return starts[0]


def direction_angle(symbol: str) -> int:
    """Return the facing angle in degrees for a player symbol."""
    return _DIRECTION_ANGLES.get(symbol, 0)


def _collect(line: str, found: dict[str, object]) -> None:
    if line.startswith("C"):
        found["C"] = parse_color(line)
    elif line.startswith("F"):
        found["F"] = parse_color(line)
    else:
        for key in _TEXTURE_KEYS:
            if line.startswith(key):
                found[key] = parse_texture_path(line, key)
                break


def parse_scene(text: str) -> Scene:
    """Parse and validate the text of a scene file."""
    if not text:
        raise FileError()
    check_layout(text)
    lines = split_any(text, "\n")
    check_header_lines(lines)
    found: dict[str, object] = {}
    map_start = len(lines)
    for index, line in enumerate(lines):
        _collect(line, found)
        if len(found) == 6:
            map_start = index + 1
            break
    rows = lines[map_start:]
    width = max((len(row) for row in rows), default=0)
    grid = [pad_line(row, width) for row in rows]
    col, row, symbol = find_player(grid)
    check_walls(grid)
    return Scene(
        north=str(found["NO"]),
        south=str(found["SO"]),
        west=str(found["WE"]),
        east=str(found["EA"]),
        floor_color=int(found["F"]),
        ceiling_color=int(found["C"]),
        grid=grid,
        player_col=col,
        player_row=row,
        player_angle=direction_angle(symbol),
    )


def validate_filename(name: str) -> str:
    """Check that ``name`` ends in ``.cub``."""
    if len(name) < 4 or not name.endswith(".cub"):
        raise ArgumentError("Please enter a .cub file")
    return name


def load_scene(path: str | os.PathLike[str]) -> Scene:
    """Read a scene file from disk and parse it."""
    try:
        with open(path, "rb") as handle:
            data = handle.read(READ_LIMIT)
    except OSError as err:
        raise FileError() from err
    return parse_scene(data.decode("latin-1"))