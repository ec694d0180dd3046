"""Grid ray casting: finding where rays from the player meet the walls."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

TILE = 50
FIELD_OF_VIEW = (60.0 * math.pi) / 180.0

_HALF_PI = math.pi / 2
_THREE_HALF_PI = 3 * math.pi / 2
_TAU = 2 * math.pi


class HitSide(str, Enum):
    """Which kind of grid line a ray struck."""

    HORIZONTAL = "h"
    VERTICAL = "v"


@dataclass
class Ray:
    """One cast ray: where it hit, at which angle, how far, and on which side."""

    index: int
    x: float = -1.0
    y: float = -1.0
    angle: float = -1.0
    length: float = -1.0
    side: HitSide | None = None


def normalize_angle(angle: float) -> float:
    """Bring ``angle`` into the range ``[0, 2*pi)``."""
    angle = math.fmod(angle, _TAU)
    if angle < 0:
        angle += _TAU
    return angle


def ray_length(px: float, py: float, x: float, y: float) -> float:
    """Distance from the player at ``(px, py)`` to the point ``(x, y)``."""
    return math.hypot(x - px, y - py)


def make_rays(count: int) -> list[Ray]:
    """Create ``count`` fresh rays numbered from zero."""
    return [Ray(index) for index in range(count)]


def _divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        if numerator == 0:
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


class Caster:
    """Casts rays over a map grid whose cells are ``TILE`` pixels wide."""

    def __init__(self, grid: list[str], width: float, height: float) -> None:
        self.grid = list(grid)
        self.width = float(width)
        self.height = float(height)

    def _cell(self, row: int, col: int) -> str:
        if 0 <= row < len(self.grid) and 0 <= col < len(self.grid[row]):
            return self.grid[row][col]
        return ""

    def _wall_at(self, x: float, y: float) -> bool:
        return self._cell(int(y / TILE), int(x / TILE)) == "1"

    def _inside(self, x: float, y: float) -> bool:
        if not (math.isfinite(x) and math.isfinite(y)):
            return False
        return not (x > self.width or x < TILE or y > self.height or y < TILE)

    def _horizontal_status(self, x: float, y: float, angle: float) -> bool | None:
        """``None`` when out of the map, ``True`` on a wall, ``False`` otherwise."""
        if not self._inside(x, y):
            return None
        w, h = self.width, self.height
        if 0 <= angle < _HALF_PI:
            return y + 1 <= h and x + 1 <= w and self._wall_at(x, y + 1)
        if _HALF_PI <= angle < math.pi:
            return y + 1 <= h and x - 1 >= 0 and self._wall_at(x, y + 1)
        if math.pi <= angle < _THREE_HALF_PI:
            return y - 1 >= 0 and x - 1 >= 0 and self._wall_at(x, y - 1)
        if _THREE_HALF_PI <= angle <= _TAU:
            return (
                y - 1 >= 0 and y <= h - 1 and x + 1 <= w and self._wall_at(x, y - 1)
            )
        return False

    def _vertical_status(self, x: float, y: float, angle: float) -> bool | None:
        """``None`` when out of the map, ``True`` on a wall, ``False`` otherwise."""
        if not self._inside(x, y):
            return None
        w, h = self.width, self.height
        if 0 <= angle < _HALF_PI:
            return y + 1 <= h and x + 1 <= w and self._wall_at(x + 1, y)
        if _HALF_PI <= angle < math.pi:
            return y + 1 <= h and x - 1 >= 0 and self._wall_at(x - 1, y)
        if math.pi <= angle < _THREE_HALF_PI:
            return y - 1 >= 0 and x - 1 >= 0 and self._wall_at(x - 1, y)
        if _THREE_HALF_PI <= angle <= _TAU:
            return (
                y - 1 >= 0 and y <= h - 1 and x + 1 <= w and self._wall_at(x + 1, y)
            )
        return False

    def horizontal_hit(self, px: float, py: float, angle: float) -> tuple[float, float]:
        """Walk horizontal grid lines until a wall or the map edge is met."""
        tangent = math.tan(angle)
        step = 0
        while True:
            if 0 < angle < math.pi:
                y = float((int(py / TILE + 1) + step) * TILE)
            else:
                y = float((int(py / TILE) - step) * TILE)
            x = px - _divide(py - y, tangent)
            if self._horizontal_status(x, y, angle) is not False:
                return x, y
            step += 1

    def vertical_hit(self, px: float, py: float, angle: float) -> tuple[float, float]:
        """Walk vertical grid lines until a wall or the map edge is met."""
        tangent = math.tan(angle)
        step = 0
        while True:
            if angle < _HALF_PI or angle > _THREE_HALF_PI:
                x = float((int(px / TILE + 1) + step) * TILE)
            else:
                x = float((int(px / TILE) - step) * TILE)
            y = py + (x - px) * tangent
            if self._vertical_status(x, y, angle) is not False:
                return x, y
            step += 1

    def cast(self, px: float, py: float, angle: float, ray: Ray) -> float:
        """Cast one ray, store the nearer hit in ``ray`` and return its distance."""
        vx, vy = self.vertical_hit(px, py, angle)
        hx, hy = self.horizontal_hit(px, py, angle)
        distance_h = ray_length(px, py, hx, hy)
        distance_v = ray_length(px, py, vx, vy)
        if distance_h > distance_v:
            ray.x, ray.y, ray.side = vx, vy, HitSide.VERTICAL
            return distance_v
        ray.x, ray.y, ray.side = hx, hy, HitSide.HORIZONTAL
        return distance_h

    def cast_fov(
        self, px: float, py: float, facing: float, rays: list[Ray]
    ) -> list[Ray]:
        """Sweep the field of view centred on ``facing`` over all ``rays``."""
        angle = facing - FIELD_OF_VIEW / 2
        step = FIELD_OF_VIEW / self.width
        for ray in rays:
            angle = normalize_angle(angle)
            ray.length = self.cast(px, py, angle, ray)
            ray.angle = angle
            angle += step
        return rays