"""The player: position, facing and movement through the map."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

from .raycast import TILE

STEP = 10
TURN = 10
_HALF_BODY = 5


class Key(IntEnum):
    """Key codes the game reacts to."""

    LEFT = 0
    DOWN = 1
    RIGHT = 2
    UP = 13
    ESC = 53
    CAMERA_LEFT = 123
    CAMERA_RIGHT = 124


def _blocked(grid: list[str], x: float, y: float) -> bool:
    row, col = int(y / TILE), int(x / TILE)
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col] == "1"
    return True


@dataclass
class Player:
    """Player position in pixels and facing angle in degrees."""

    x: float
    y: float
    angle: int = 0

    @property
    def angle_rad(self) -> float:
        """Facing angle in radians."""
        return self.angle * (math.pi / 180.0)

    def _step(self, grid: list[str], dx: float, dy: float) -> bool:
        x, y = self.x, self.y
        probes = (
            (x + dx, y + _HALF_BODY + dy),
            (x + dx, y - _HALF_BODY + dy),
            (x + _HALF_BODY + dx, y + dy),
            (x - _HALF_BODY + dx, y + dy),
        )
        if any(_blocked(grid, px, py) for px, py in probes):
            return False
        self.x = x + dx
        self.y = y + dy
        return True

    def move_forward(self, grid: list[str]) -> bool:
        """Step along the facing direction unless a wall is in the way."""
        a = self.angle_rad
        return self._step(grid, STEP * math.cos(a), STEP * math.sin(a))

    def move_back(self, grid: list[str]) -> bool:
        """Step against the facing direction unless a wall is in the way."""
        a = self.angle_rad
        return self._step(grid, -STEP * math.cos(a), -STEP * math.sin(a))

    def move_left(self, grid: list[str]) -> bool:
        """Strafe to the left unless a wall is in the way."""
        b = math.pi / 2 - self.angle_rad
        return self._step(grid, STEP * math.cos(b), -STEP * math.sin(b))

    def move_right(self, grid: list[str]) -> bool:
        """Strafe to the right unless a wall is in the way."""
        b = math.pi / 2 - self.angle_rad
        return self._step(grid, -STEP * math.cos(b), STEP * math.sin(b))

    def turn(self, key: int) -> bool:
        """Rotate the view for a camera key; return whether it turned."""
        if key == Key.CAMERA_LEFT:
            self.angle -= TURN
            return True
        if key == Key.CAMERA_RIGHT:
            self.angle += TURN
            return True
        return False

    def handle_key(self, key: int, grid: list[str]) -> bool:
        """Apply a key press; return whether the view changed.

        The escape key is left to the caller, which ends the game.
        """
        if key in (Key.CAMERA_LEFT, Key.CAMERA_RIGHT):
            return self.turn(key)
        moves = {
            Key.LEFT: self.move_left,
            Key.RIGHT: self.move_right,
            Key.DOWN: self.move_back,
            Key.UP: self.move_forward,
        }
        for code, move in moves.items():
            if key == code:
                return move(grid)
        return False