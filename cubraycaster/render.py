"""Drawing the 3D view and the optional minimap into a pixel frame."""

from __future__ import annotations

import math
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from .errors import TextureNotFoundError
from .player import Player
from .raycast import TILE, Caster, HitSide, Ray, make_rays
from .scene import Scene

BLACK = 0x000000
GRIS = 0x808080
GOLD = 0xFFD700
YELLOW = 0xFFFFFF

_MINIMAP_SCALE = 4
_PLAYER_SIZE = 10


def _c_mod(value: int, modulus: int) -> int:
    """Remainder with the sign of the dividend."""
    return int(math.fmod(value, modulus))


@dataclass
class Texture:
    """A wall texture stored row by row as packed ``0xRRGGBB`` colours."""

    width: int
    height: int
    pixels: list[int]

    def pixel(self, x: float, y: float) -> int:
        """Colour at column ``x``, row ``y``; coordinates are clamped to the image."""
        col = min(max(int(x), 0), self.width - 1)
        row = min(max(int(y), 0), self.height - 1)
        return self.pixels[row * self.width + col]


def load_texture(path: str | os.PathLike[str]) -> Texture:
    """Load an image file as a texture."""
    from PIL import Image

    try:
        with Image.open(path) as image:
            rgb = image.convert("RGB")
            data = rgb.tobytes()
            width, height = rgb.size
    except OSError as err:
        raise TextureNotFoundError() from err
    pixels = [int.from_bytes(data[i:i + 3], "big") for i in range(0, len(data), 3)]
    return Texture(width, height, pixels)


@dataclass
class Frame:
    """An RGB image the renderer draws into."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.pixels:
            self.pixels = [0] * (self.width * self.height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put(self, x: float, y: float, color: int) -> None:
        """Set one pixel; points outside the frame are ignored."""
        col, row = int(x), int(y)
        if self._inside(col, row):
            self.pixels[row * self.width + col] = color & 0xFFFFFF

    def get(self, x: int, y: int) -> int:
        """Return the colour of one pixel."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]

    def put_scaled(self, x: float, y: float, color: int) -> None:
        """Set a pixel at a quarter of the given coordinates, for the minimap."""
        col = int(int(x) / _MINIMAP_SCALE)
        row = int(int(y) / _MINIMAP_SCALE)
        self.put(col, row, color)

    def to_bytes(self) -> bytes:
        """Return the frame as packed RGB bytes, row by row."""
        out = bytearray()
        for color in self.pixels:
            out += (color & 0xFFFFFF).to_bytes(3, "big")
        return bytes(out)


class Renderer:
    """Draws textured walls, floor, ceiling and an optional minimap."""

    def __init__(
        self, scene: Scene, textures: Mapping[str, Texture], minimap: bool = False
    ) -> None:
        self.scene = scene
        self.textures = dict(textures)
        self.minimap = minimap
        self.width = scene.columns * TILE
        self.height = scene.rows * TILE
        self.caster = Caster(scene.grid, self.width, self.height)
        self.rays = make_rays(self.width)

    def clear(self, frame: Frame) -> None:
        """Paint the ceiling over the top half and the floor below it."""
        half = self.height / 2
        ceiling = self.scene.ceiling_color
        floor = self.scene.floor_color
        for x in range(self.width):
            for y in range(self.height):
                frame.put(x, y, ceiling if y <= half else floor)

    def texture_for(self, ray: Ray) -> Texture:
        """Pick the wall texture for the side a ray hit."""
        angle = ray.angle
        if ray.side is HitSide.HORIZONTAL:
            if 0 <= angle <= math.pi:
                return self.textures["NO"]
            return self.textures["SO"]
        if math.pi / 2 <= angle <= 3 * math.pi / 2:
            return self.textures["WE"]
        return self.textures["EA"]

    def _draw_column(
        self, frame: Frame, x: int, ray: Ray, top: float, bottom: float, start: float
    ) -> None:
        coord = ray.y if ray.side is HitSide.VERTICAL else ray.x
        col = _c_mod(int(coord), TILE)
        wall_height = bottom - top
        if wall_height <= 0 or not math.isfinite(wall_height):
            return
        inc = TILE / wall_height
        start = max(start, 0.0)
        row = inc * start
        texture = self.texture_for(ray)
        i = 0
        while i < wall_height and i < self.height:
            frame.put(x, int(top + i), texture.pixel(row, col))
            row += inc
            i += 1

    def draw_walls(self, frame: Frame, rays: Sequence[Ray], facing: float) -> None:
        """Project each ray's wall slice onto its screen column."""
        size = float(self.height)
        for x, ray in enumerate(rays):
            denominator = ray.length * math.cos(facing - ray.angle)
            if denominator <= 0 or not math.isfinite(denominator):
                continue
            wall_height = TILE * size / denominator
            top = size / 2 - wall_height / 2
            bottom = top + wall_height
            wall_height = bottom - top
            start = wall_height / 2 - size / 2
            if top > size or top < 0 or bottom > size or bottom < 0:
                top = 0.0
                bottom = size + start * 2
            self._draw_column(frame, x, ray, top, bottom, start)

    def _draw_tile(self, frame: Frame, start_y: float, start_x: float, color: int) -> None:
        for y in range(TILE):
            for x in range(TILE):
                frame.put_scaled(start_x + x, start_y + y, color)
                frame.put_scaled(start_x + x, start_y, GOLD)
            frame.put_scaled(start_x, start_y + y, GOLD)

    def _draw_player(self, frame: Frame, player: Player) -> None:
        x = player.x - _PLAYER_SIZE / 2
        y = player.y - _PLAYER_SIZE / 2
        for i in range(_PLAYER_SIZE):
            for j in range(_PLAYER_SIZE):
                frame.put_scaled(x + i, y + j, BLACK)

    def _draw_ray(self, frame: Frame, player: Player, x2: float, y2: float) -> None:
        dx = x2 - player.x
        dy = y2 - player.y
        if not (math.isfinite(dx) and math.isfinite(dy)):
            return
        steps = int(abs(dx)) if abs(dx) > abs(dy) else int(abs(dy))
        x, y = player.x, player.y
        for _ in range(steps + 1):
            if _c_mod(int(y), TILE) == 0 or _c_mod(int(x), TILE) == 0:
                frame.put_scaled(x, y, YELLOW)
            if steps:
                x += dx / steps
                y += dy / steps

    def draw_minimap(self, frame: Frame, player: Player, rays: Sequence[Ray]) -> None:
        """Draw the walls, the player and the ray crossings at quarter scale."""
        for row_index, row in enumerate(self.scene.grid):
            for col, ch in enumerate(row):
                if ch == "1":
                    self._draw_tile(frame, row_index * TILE, col * TILE, GRIS)
        self._draw_player(frame, player)
        for ray in rays:
            self._draw_ray(frame, player, ray.x, ray.y)

    def render(self, frame: Frame, player: Player) -> Frame:
        """Draw a whole view of the scene from the player's position."""
        facing = player.angle_rad
        self.clear(frame)
        self.caster.cast_fov(player.x, player.y, facing, self.rays)
        self.draw_walls(frame, self.rays, facing)
        if self.minimap:
            self.draw_minimap(frame, player, self.rays)
        return frame