"""The player: facing, key state, rotation and collision-checked movement."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto

from .mapcheck import GameMap
from .mathutils import fov_to_plane_factor
from .radar import Radar
from .vectors import Vec2

MOVE_SPEED = 0.05
TURN_SPEED = 0.04
PLAYER_SIZE = 0.25
FOV = 66.0

_FACINGS = {
    "N": (Vec2(0.0, -1.0), Vec2(1.0, 0.0)),
    "S": (Vec2(0.0, 1.0), Vec2(-1.0, 0.0)),
    "E": (Vec2(1.0, 0.0), Vec2(0.0, 1.0)),
    "W": (Vec2(-1.0, 0.0), Vec2(0.0, -1.0)),
}


class Key(Enum):
    """Logical controls the player reacts to."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    TURN_LEFT = auto()
    TURN_RIGHT = auto()
    ESCAPE = auto()


@dataclass
class Player:
    """Position, view direction and camera plane, plus the held keys."""

    pos: Vec2 = field(default_factory=Vec2)
    direction: Vec2 = field(default_factory=Vec2)
    plane: Vec2 = field(default_factory=Vec2)
    fov_factor: float = fov_to_plane_factor(FOV)
    move_speed: float = MOVE_SPEED
    turn_speed: float = TURN_SPEED
    size: float = PLAYER_SIZE
    pos_set: bool = False
    keys: set[Key] = field(default_factory=set)

    def face(self, direction: str) -> None:
        """Look north, south, east or west; other values change nothing."""
        facing = _FACINGS.get(direction)
        if facing is None:
            return
        view, plane_unit = facing
        self.direction = view
        self.plane = Vec2(plane_unit.x * self.fov_factor, plane_unit.y * self.fov_factor)

    def press(self, key: Key) -> bool:
        """Hold ``key`` down; return True when the key asks to quit."""
        if key is Key.ESCAPE:
            return True
        self.keys.add(key)
        return False

    def release(self, key: Key) -> None:
        """Let go of ``key``."""
        self.keys.discard(key)

    def rotate(self, angle: float) -> None:
        """Turn the view direction and camera plane by ``angle`` radians."""
        c, s = math.cos(angle), math.sin(angle)
        d, p = self.direction, self.plane
        self.direction = Vec2(d.x * c - d.y * s, d.x * s + d.y * c)
        self.plane = Vec2(p.x * c - p.y * s, p.x * s + p.y * c)

    def next_position(self) -> Vec2:
        """Where the held movement keys would take the player this frame."""
        x, y = self.pos.x, self.pos.y
        d, speed = self.direction, self.move_speed
        if Key.UP in self.keys:
            x += d.x * speed
            y += d.y * speed
        if Key.DOWN in self.keys:
            x -= d.x * speed
            y -= d.y * speed
        if Key.LEFT in self.keys:
            x += d.y * speed
            y += -d.x * speed
        if Key.RIGHT in self.keys:
            x += -d.y * speed
            y += d.x * speed
        return Vec2(x, y)

    def valid_move(self, x: float, y: float, game_map: GameMap, radar: Radar) -> bool:
        """True if (x, y) is inside the map, not in a wall and not too close to one."""
        radar.locate(x, y)
        gx, gy = radar.grid_x, radar.grid_y
        if gx < 0 or gy < 0 or gx >= game_map.width or gy >= game_map.height:
            return False
        if game_map.cell(gx, gy) == "1":
            return False
        return not radar.near_wall(game_map)

    def _advance_radar(self, radar: Radar, target: Vec2) -> None:
        if radar.angle_step > 0:
            while radar.angle < 360:
                radar.angle += radar.angle_step
        if self.pos.x == target.x or self.pos.y == target.y:
            radar.angle = 0.0

    def update(self, game_map: GameMap, radar: Radar) -> None:
        """Apply one frame of turning and movement, sliding along walls."""
        if Key.TURN_LEFT in self.keys:
            self.rotate(-self.turn_speed)
        elif Key.TURN_RIGHT in self.keys:
            self.rotate(self.turn_speed)
        target = self.next_position()
        if target != self.pos:
            self._advance_radar(radar, target)
        if self.valid_move(target.x, target.y, game_map, radar):
            radar.sweep(self.pos.x, self.pos.y, game_map, None)
            self.pos = target
            return
        if self.valid_move(target.x, self.pos.y, game_map, radar):
            self.pos = Vec2(target.x, self.pos.y)
        if self.valid_move(self.pos.x, target.y, game_map, radar):
            self.pos = Vec2(self.pos.x, target.y)