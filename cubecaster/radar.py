"""Collision probe: a ring of sample points around the player tested against walls."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .mapcheck import GameMap
from .mathutils import convrad
from .render import FrameBuffer, draw_circle

PLAYER_MARKER = (0.25, 0xFF0000)
"""Radius and colour of the player dot on the mini-map."""

_WALL = "1"


def _usable(game_map: Optional[GameMap]) -> bool:
    return game_map is not None and game_map.height > 0


def _is_wall(game_map: GameMap, x: int, y: int) -> bool:
    return game_map.cell(x, y) == _WALL


@dataclass
class Radar:
    """Samples points on a circle around a position and reports wall contact."""

    color: int = 0xFF0000
    angle_step: float = 15.0
    radius: float = 0.15
    dot_size: float = 0.02
    collision_dist: float = 0.2
    scale: float = 16.0
    angle: float = 0.0
    theta: float = 0.0
    point_x: float = 0.0
    point_y: float = 0.0
    grid_x: int = 0
    grid_y: int = 0
    fraction_x: float = 0.0
    fraction_y: float = 0.0
    x_blocked: bool = False
    y_blocked: bool = False
    last_x: float = 0.0
    last_y: float = 0.0

    def locate(self, x: float, y: float) -> None:
        """Place the probe at (x, y) and derive its cell and offset within it."""
        self.point_x = x
        self.point_y = y
        self.grid_x = int(x)
        self.grid_y = int(y)
        self.fraction_x = x - self.grid_x
        self.fraction_y = y - self.grid_y

    def right_blocked(self, game_map: GameMap) -> bool:
        """True if the probe is close to a wall in the cell to its right."""
        return (
            self.fraction_x > 1.0 - self.collision_dist
            and self.grid_x + 1 <= game_map.width
            and _is_wall(game_map, self.grid_x + 1, self.grid_y)
        )

    def left_blocked(self, game_map: GameMap) -> bool:
        """True if the probe is close to a wall in the cell to its left."""
        return (
            self.fraction_x < self.collision_dist
            and self.grid_x > 0
            and _is_wall(game_map, self.grid_x - 1, self.grid_y)
        )

    def top_blocked(self, game_map: GameMap) -> bool:
        """True if the probe is close to a wall in the cell above."""
        return (
            self.fraction_y < self.collision_dist
            and self.grid_y > 0
            and _is_wall(game_map, self.grid_x, self.grid_y - 1)
        )

    def bottom_blocked(self, game_map: GameMap) -> bool:
        """True if the probe is close to a wall in the cell below."""
        return (
            self.fraction_y > 1.0 - self.collision_dist
            and self.grid_y + 1 <= game_map.height
            and _is_wall(game_map, self.grid_x, self.grid_y + 1)
        )

    def diagonal_blocked(self, game_map: GameMap) -> bool:
        """True if the probe is close to a wall in one of the four diagonal cells."""
        near = self.collision_dist
        far = 1.0 - self.collision_dist
        fx, fy = self.fraction_x, self.fraction_y
        gx, gy = self.grid_x, self.grid_y
        last_row = game_map.height - 1
        checks = (
            (fx > far and fy > far and gx + 1 < game_map.width and gy + 1 < last_row,
             gx + 1, gy + 1),
            (fx < near and fy > far and gx > 0 and gy + 1 < last_row,
             gx - 1, gy + 1),
            (fx > far and fy < near and gx + 1 < game_map.width and gy > 0,
             gx + 1, gy - 1),
            (fx < near and fy < near and gx > 0 and gy > 0,
             gx - 1, gy - 1),
        )
        return any(cond and _is_wall(game_map, x, y) for cond, x, y in checks)

    def near_wall(self, game_map: GameMap) -> bool:
        """True if any neighbouring wall lies within the collision distance."""
        return (
            self.right_blocked(game_map)
            or self.left_blocked(game_map)
            or self.bottom_blocked(game_map)
            or self.top_blocked(game_map)
            or self.diagonal_blocked(game_map)
        )

    def point_at(self, pos_x: float, pos_y: float) -> tuple[float, float]:
        """Compute the ring point at the current angle around (pos_x, pos_y)."""
        self.theta = convrad(self.angle)
        self.point_x = pos_x + self.radius * math.cos(self.theta)
        self.point_y = pos_y + self.radius * math.sin(self.theta)
        return self.point_x, self.point_y

    def process_point(self, game_map: Optional[GameMap], moved: bool) -> bool:
        """Test the current ring point; False means it touches or nears a wall."""
        if not moved:
            return True
        self.grid_x = int(self.point_x)
        self.grid_y = int(self.point_y)
        if not _usable(game_map):
            return False
        assert game_map is not None
        if not (0 <= self.grid_x < game_map.width and 0 <= self.grid_y <= game_map.height):
            return True
        if self.grid_y >= game_map.height:
            return False
        self.fraction_x = self.point_x - self.grid_x
        self.fraction_y = self.point_y - self.grid_y
        inside_wall = _is_wall(game_map, self.grid_x, self.grid_y)
        if inside_wall or self.near_wall(game_map):
            self.x_blocked = self.right_blocked(game_map) or self.left_blocked(game_map)
            self.y_blocked = self.top_blocked(game_map) or self.bottom_blocked(game_map)
            return False
        return True

    def sweep(
        self,
        pos_x: float,
        pos_y: float,
        game_map: Optional[GameMap],
        frame: Optional[FrameBuffer],
    ) -> list[bool]:
        """Walk the full ring, drawing each point and returning whether it is free."""
        if not _usable(game_map):
            return []
        moved = self.last_x != pos_x or self.last_y != pos_y
        if self.angle >= 360.0:
            self.angle = 0.0
        results: list[bool] = []
        while self.angle < 360.0:
            px, py = self.point_at(pos_x, pos_y)
            if frame is not None:
                draw_circle(frame, px, py, self.dot_size, self.color, self.scale)
            results.append(self.process_point(game_map, moved))
            self.angle += self.angle_step
        self.last_x = pos_x
        self.last_y = pos_y
        return results